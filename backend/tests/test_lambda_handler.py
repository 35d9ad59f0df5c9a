from lambda_handler import strip_base_path


def test_strips_http_api_event_path():
    event = {
        "rawPath": "/default/agroflow-api/crops",
        "requestContext": {"http": {"path": "/default/agroflow-api/crops"}},
    }

    result = strip_base_path(event, "/default/agroflow-api")

    assert result["rawPath"] == "/crops"
    assert result["requestContext"]["http"]["path"] == "/crops"


def test_strips_rest_api_event_path_to_root():
    event = {"path": "/default/agroflow-api"}
    assert strip_base_path(event, "/default/agroflow-api")["path"] == "/"


def test_leaves_other_paths_alone():
    event = {"rawPath": "/crops"}
    assert strip_base_path(event, "/default/agroflow-api")["rawPath"] == "/crops"


def test_no_base_path_configured():
    event = {"rawPath": "/default/agroflow-api/crops"}
    assert strip_base_path(event, "")["rawPath"] == "/default/agroflow-api/crops"
