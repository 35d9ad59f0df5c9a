import uuid
from datetime import date, timedelta

import pytest

from agroflow.models import Crop, Harvest, Property, PropertyCropHarvest
from tests.conftest import count_rows

NEW_HARVEST = {
    "harvest_name": "Safra 2024/25",
    "harvest_year": 2024,
    "start_date": "2024-09-01",
    "end_date": "2025-03-31",
    "total_area_ha": 60,
}


def _add_crop(client, headers, property_id, **body):
    return client.post(f"/properties/{property_id}/harvest-crop", json=body, headers=headers)


def test_requires_token(client):
    assert client.get("/properties").status_code == 401


def test_create_returns_nested_view(client, farmer, make_property):
    prop = make_property(farmer["headers"])

    assert prop["farmer_id"] == farmer["id"]
    assert prop["farm_name"] == "Fazenda Boa Vista"
    assert prop["harvests"] == []
    assert "createdAt" in prop


def test_area_invariant_is_enforced_and_nothing_persisted(client, farmer):
    response = client.post(
        "/properties",
        json={
            "farm_name": "Fazenda Excesso",
            "city": "Sinop",
            "state": "MT",
            "total_area_ha": 100,
            "arable_area_ha": 70,
            "vegetable_area_ha": 40,
        },
        headers=farmer["headers"],
    )

    assert response.status_code == 400
    assert response.json()["message"] == (
        "The sum of arable area (70.0 ha) and vegetable area (40.0 ha) "
        "cannot be greater than the total area (100.0 ha)."
    )
    assert count_rows(Property) == 0


def test_farmer_cannot_create_for_someone_else(client, make_farmer, make_property):
    alice, bob = make_farmer(), make_farmer()
    prop = make_property(alice["headers"], farmer_id=bob["id"])
    assert prop["farmer_id"] == alice["id"]


def test_admin_creates_for_existing_farmer(client, farmer, admin, make_property):
    prop = make_property(admin["headers"], farmer_id=farmer["id"])
    assert prop["farmer_id"] == farmer["id"]

    response = client.post(
        "/properties",
        json={
            "farm_name": "Fantasma",
            "city": "Sinop",
            "state": "MT",
            "total_area_ha": 10,
            "arable_area_ha": 1,
            "vegetable_area_ha": 1,
            "farmer_id": str(uuid.uuid4()),
        },
        headers=admin["headers"],
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Farmer not found"


def test_ownership_on_find_one(client, make_farmer, make_property):
    alice, bob = make_farmer(), make_farmer()
    prop = make_property(alice["headers"])

    assert client.get(f"/properties/{prop['id']}", headers=alice["headers"]).status_code == 200
    forbidden = client.get(f"/properties/{prop['id']}", headers=bob["headers"])
    assert forbidden.status_code == 403
    assert forbidden.json()["statusCode"] == 403


def test_admin_reads_any_property(client, farmer, admin, make_property):
    prop = make_property(farmer["headers"])
    assert client.get(f"/properties/{prop['id']}", headers=admin["headers"]).status_code == 200


def test_list_is_scoped_by_role(client, make_farmer, admin, make_property):
    alice, bob = make_farmer(), make_farmer()
    make_property(alice["headers"], farm_name="Alfa")
    make_property(alice["headers"], farm_name="Beta")
    make_property(bob["headers"], farm_name="Gama")

    own = client.get("/properties", headers=alice["headers"]).json()
    assert own["total"] == 2
    assert {p["farm_name"] for p in own["data"]} == {"Alfa", "Beta"}

    everything = client.get("/properties", params={"limit": 2}, headers=admin["headers"]).json()
    assert everything["total"] == 3
    assert everything["lastPage"] == 2
    assert len(everything["data"]) == 2


def test_update_rechecks_area_with_merged_values(client, farmer, make_property):
    prop = make_property(farmer["headers"])

    bad = client.patch(f"/properties/{prop['id']}", json={"arable_area_ha": 80}, headers=farmer["headers"])
    assert bad.status_code == 400

    ok = client.patch(
        f"/properties/{prop['id']}",
        json={"arable_area_ha": 65, "farm_name": "Fazenda Nova"},
        headers=farmer["headers"],
    )
    assert ok.status_code == 200
    assert ok.json()["data"]["arable_area_ha"] == 65
    assert ok.json()["data"]["farm_name"] == "Fazenda Nova"


@pytest.mark.parametrize("field", ["total_area_ha", "arable_area_ha", "farm_name", "city", "state"])
def test_update_rejects_null_fields(client, farmer, make_property, field):
    prop = make_property(farmer["headers"])

    response = client.patch(f"/properties/{prop['id']}", json={field: None}, headers=farmer["headers"])

    assert response.status_code == 400
    assert response.json() == {"statusCode": 400, "message": f"{field} cannot be null"}
    unchanged = client.get(f"/properties/{prop['id']}", headers=farmer["headers"]).json()
    assert unchanged["farm_name"] == "Fazenda Boa Vista"
    assert unchanged["total_area_ha"] == 100


def test_update_and_delete_check_ownership(client, make_farmer, make_property):
    alice, bob = make_farmer(), make_farmer()
    prop = make_property(alice["headers"])

    assert client.patch(f"/properties/{prop['id']}", json={"city": "Lucas"}, headers=bob["headers"]).status_code == 403
    assert client.delete(f"/properties/{prop['id']}", headers=bob["headers"]).status_code == 403
    assert count_rows(Property) == 1


def test_delete_cascades_to_plantings_and_harvests(client, farmer, make_property):
    prop = make_property(farmer["headers"])
    _add_crop(client, farmer["headers"], prop["id"], **NEW_HARVEST, crop_name="Soja", planted_area_ha=30)

    response = client.delete(f"/properties/{prop['id']}", headers=farmer["headers"])

    assert response.status_code == 200
    assert count_rows(Property) == 0
    assert count_rows(PropertyCropHarvest, property_id=prop["id"]) == 0
    assert count_rows(Harvest) == 0
    # the crop catalogue is shared
    assert count_rows(Crop) == 1


def test_delete_unknown_property(client, farmer):
    response = client.delete(f"/properties/{uuid.uuid4()}", headers=farmer["headers"])
    assert response.status_code == 400
    assert response.json()["message"] == "Property not found"


def test_add_harvest_crop_with_new_harvest_and_crop(client, farmer, make_property):
    prop = make_property(farmer["headers"])

    response = _add_crop(
        client, farmer["headers"], prop["id"],
        **NEW_HARVEST, crop_name="Soja", planted_area_ha=40, planting_date="2024-09-20",
    )

    assert response.status_code == 201
    harvests = response.json()["data"]["harvests"]
    assert len(harvests) == 1
    assert harvests[0]["name"] == "Safra 2024/25"
    assert harvests[0]["total_area_ha"] == 60
    crop = harvests[0]["crops"][0]
    assert crop["name"] == "Soja"
    assert crop["planted_area_ha"] == 40
    assert crop["planting_date"] == "2024-09-20"
    assert crop["harvest_date"] == "2025-03-19"


def test_add_harvest_crop_reuses_harvest_and_crop_by_name(client, farmer, make_property):
    prop = make_property(farmer["headers"])
    first = _add_crop(client, farmer["headers"], prop["id"], **NEW_HARVEST, crop_name="Soja", planted_area_ha=30)
    harvest_id = first.json()["data"]["harvests"][0]["id"]

    second = _add_crop(client, farmer["headers"], prop["id"], harvest_id=harvest_id, crop_name="soja", planted_area_ha=20)

    assert second.status_code == 201
    assert count_rows(Crop) == 1
    crops = second.json()["data"]["harvests"][0]["crops"]
    assert sorted(c["planted_area_ha"] for c in crops) == [20, 30]


def test_add_harvest_crop_rejects_over_allocation(client, farmer, make_property):
    prop = make_property(farmer["headers"])
    response = _add_crop(client, farmer["headers"], prop["id"], **NEW_HARVEST, crop_name="Soja", planted_area_ha=61)

    assert response.status_code == 400
    assert count_rows(Harvest) == 0
    assert count_rows(Crop) == 0


def test_add_harvest_crop_requires_harvest_reference(client, farmer, make_property):
    prop = make_property(farmer["headers"])
    response = _add_crop(client, farmer["headers"], prop["id"], crop_name="Soja", planted_area_ha=10)
    assert response.status_code == 400
    assert "harvest_id" in response.json()["message"]


def test_harvest_of_another_property_is_rejected(client, farmer, make_property):
    first = make_property(farmer["headers"], farm_name="Primeira")
    second = make_property(farmer["headers"], farm_name="Segunda")
    harvest_id = _add_crop(
        client, farmer["headers"], first["id"], **NEW_HARVEST, crop_name="Soja", planted_area_ha=10
    ).json()["data"]["harvests"][0]["id"]

    response = _add_crop(client, farmer["headers"], second["id"], harvest_id=harvest_id, crop_name="Milho", planted_area_ha=5)

    assert response.status_code == 400
    assert response.json()["message"] == "Harvest does not belong to this property"


def test_create_harvest_then_crop_with_default_dates(client, farmer, make_property):
    prop = make_property(farmer["headers"])
    created = client.post(
        f"/properties/{prop['id']}/harvest",
        json={k: v for k, v in NEW_HARVEST.items()},
        headers=farmer["headers"],
    )
    assert created.status_code == 201
    harvest_id = created.json()["data"]["harvests"][0]["id"]

    response = client.post(
        f"/properties/{prop['id']}/harvest/{harvest_id}/crop",
        json={"crop_name": "Algodão", "planted_area_ha": 15},
        headers=farmer["headers"],
    )

    assert response.status_code == 201
    crop = response.json()["data"]["harvests"][0]["crops"][0]
    assert crop["name"] == "Algodão"
    assert crop["planting_date"] == date.today().isoformat()
    assert crop["harvest_date"] == (date.today() + timedelta(days=180)).isoformat()


def test_remove_harvest_purges_its_plantings(client, farmer, make_property):
    prop = make_property(farmer["headers"])
    harvest_id = _add_crop(
        client, farmer["headers"], prop["id"], **NEW_HARVEST, crop_name="Soja", planted_area_ha=10
    ).json()["data"]["harvests"][0]["id"]

    response = client.delete(f"/properties/{prop['id']}/harvest/{harvest_id}", headers=farmer["headers"])

    assert response.status_code == 200
    assert response.json()["data"]["harvests"] == []
    assert count_rows(PropertyCropHarvest) == 0
    assert count_rows(Harvest) == 0


def test_remove_crop_keeps_crop_still_planted_elsewhere(client, farmer, make_property):
    first = make_property(farmer["headers"], farm_name="Primeira")
    second = make_property(farmer["headers"], farm_name="Segunda")
    data = _add_crop(client, farmer["headers"], first["id"], **NEW_HARVEST, crop_name="Soja", planted_area_ha=10).json()["data"]
    harvest_id = data["harvests"][0]["id"]
    crop_id = data["harvests"][0]["crops"][0]["crop_id"]
    _add_crop(client, farmer["headers"], second["id"], **NEW_HARVEST, crop_name="Soja", planted_area_ha=10)

    response = client.delete(
        f"/properties/{first['id']}/harvest/{harvest_id}/crop/{crop_id}", headers=farmer["headers"]
    )

    assert response.status_code == 200
    assert response.json()["data"]["harvests"][0]["crops"] == []
    assert count_rows(Crop, id=crop_id) == 1
    assert count_rows(PropertyCropHarvest) == 1


def test_remove_last_planting_deletes_crop(client, farmer, make_property):
    prop = make_property(farmer["headers"])
    data = _add_crop(client, farmer["headers"], prop["id"], **NEW_HARVEST, crop_name="Sorgo", planted_area_ha=10).json()["data"]
    harvest_id = data["harvests"][0]["id"]
    crop_id = data["harvests"][0]["crops"][0]["crop_id"]

    response = client.delete(f"/properties/{prop['id']}/harvest/{harvest_id}/crop/{crop_id}", headers=farmer["headers"])

    assert response.status_code == 200
    assert count_rows(Crop) == 0

    again = client.delete(f"/properties/{prop['id']}/harvest/{harvest_id}/crop/{crop_id}", headers=farmer["headers"])
    assert again.status_code == 400


def test_compound_operations_check_ownership(client, make_farmer, make_property):
    alice, bob = make_farmer(), make_farmer()
    prop = make_property(alice["headers"])

    response = _add_crop(client, bob["headers"], prop["id"], **NEW_HARVEST, crop_name="Soja", planted_area_ha=10)

    assert response.status_code == 403
    assert count_rows(Harvest) == 0
