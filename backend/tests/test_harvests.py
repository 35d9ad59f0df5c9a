import uuid

from agroflow.models import Harvest, PropertyCropHarvest
from tests.conftest import count_rows


def _harvest_payload(**overrides):
    payload = {
        "harvest_year": 2024,
        "harvest_name": "Safra 2024/25",
        "start_date": "2024-09-01",
        "end_date": "2025-03-31",
        "total_area_ha": 80,
    }
    payload.update(overrides)
    return payload


def test_requires_token(client):
    assert client.get("/harvests").status_code == 401
    assert client.post("/harvests", json=_harvest_payload()).status_code == 401


def test_create_and_fetch(client, farmer, make_property):
    prop = make_property(farmer["headers"])
    response = client.post("/harvests", json=_harvest_payload(property_id=prop["id"]), headers=farmer["headers"])

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Harvest created successfully"
    harvest = client.get(f"/harvests/{body['data']['id']}", headers=farmer["headers"]).json()
    assert harvest["property_id"] == prop["id"]
    assert harvest["harvest_name"] == "Safra 2024/25"
    assert harvest["start_date"] == "2024-09-01"
    assert harvest["total_area_ha"] == 80


def test_create_without_property(client, farmer):
    response = client.post("/harvests", json=_harvest_payload(total_area_ha=None), headers=farmer["headers"])
    assert response.status_code == 201
    assert response.json()["data"]["property_id"] is None


def test_end_before_start_is_rejected(client, farmer):
    response = client.post(
        "/harvests",
        json=_harvest_payload(start_date="2025-01-01", end_date="2024-12-01"),
        headers=farmer["headers"],
    )
    assert response.status_code == 400
    assert "end date cannot be before" in response.json()["message"]


def test_unknown_property_is_rejected(client, farmer):
    response = client.post("/harvests", json=_harvest_payload(property_id=str(uuid.uuid4())), headers=farmer["headers"])
    assert response.status_code == 400
    assert response.json()["message"] == "Property not found"


def test_list(client, farmer):
    for year in (2022, 2023, 2024):
        client.post("/harvests", json=_harvest_payload(harvest_year=year), headers=farmer["headers"])

    body = client.get("/harvests", params={"limit": 2}, headers=farmer["headers"]).json()

    assert body["total"] == 3
    assert body["lastPage"] == 2
    assert [h["harvest_year"] for h in body["data"]] == [2024, 2023]


def test_update_checks_merged_dates(client, farmer):
    harvest_id = client.post("/harvests", json=_harvest_payload(), headers=farmer["headers"]).json()["data"]["id"]

    bad = client.patch(f"/harvests/{harvest_id}", json={"end_date": "2024-08-01"}, headers=farmer["headers"])
    assert bad.status_code == 400

    ok = client.patch(f"/harvests/{harvest_id}", json={"harvest_name": "Safra renomeada"}, headers=farmer["headers"])
    assert ok.status_code == 200
    assert ok.json()["data"]["id"] == harvest_id


def test_update_rejects_null_required_fields(client, farmer):
    harvest_id = client.post("/harvests", json=_harvest_payload(), headers=farmer["headers"]).json()["data"]["id"]

    for field in ("harvest_name", "harvest_year", "start_date", "end_date"):
        response = client.patch(f"/harvests/{harvest_id}", json={field: None}, headers=farmer["headers"])
        assert response.status_code == 400
        assert response.json()["message"] == f"{field} cannot be null"


def test_update_may_clear_total_area(client, farmer):
    harvest_id = client.post("/harvests", json=_harvest_payload(), headers=farmer["headers"]).json()["data"]["id"]

    response = client.patch(f"/harvests/{harvest_id}", json={"total_area_ha": None}, headers=farmer["headers"])

    assert response.status_code == 200
    assert client.get(f"/harvests/{harvest_id}", headers=farmer["headers"]).json()["total_area_ha"] is None


def test_total_area_cannot_drop_below_planted(client, farmer, make_property):
    prop = make_property(farmer["headers"])
    detail = client.post(
        f"/properties/{prop['id']}/harvest-crop",
        json={**_harvest_payload(total_area_ha=60), "crop_name": "Soja", "planted_area_ha": 50},
        headers=farmer["headers"],
    ).json()["data"]
    harvest_id = detail["harvests"][0]["id"]

    response = client.patch(f"/harvests/{harvest_id}", json={"total_area_ha": 40}, headers=farmer["headers"])
    assert response.status_code == 400


def test_delete_purges_plantings_first(client, farmer, make_property):
    prop = make_property(farmer["headers"])
    detail = client.post(
        f"/properties/{prop['id']}/harvest-crop",
        json={**_harvest_payload(), "crop_name": "Milho", "planted_area_ha": 30},
        headers=farmer["headers"],
    ).json()["data"]
    harvest_id = detail["harvests"][0]["id"]

    response = client.delete(f"/harvests/{harvest_id}", headers=farmer["headers"])

    assert response.status_code == 200
    assert count_rows(Harvest, id=harvest_id) == 0
    assert count_rows(PropertyCropHarvest, harvest_id=harvest_id) == 0


def test_delete_unknown_harvest(client, farmer):
    response = client.delete(f"/harvests/{uuid.uuid4()}", headers=farmer["headers"])
    assert response.status_code == 400
    assert response.json()["message"] == "Harvest not found"
