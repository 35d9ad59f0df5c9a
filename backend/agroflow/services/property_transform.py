"""
Nest a property's harvests and junction rows into the harvest -> crops tree
returned by the properties endpoints.

Works on any objects exposing the ORM attribute names, so it can be fed
plain namespaces in tests.
"""
from typing import Any, Dict, Optional

UNKNOWN_CROP = "Unknown crop"

PROPERTY_FIELDS = (
    "id",
    "farmer_id",
    "farm_name",
    "city",
    "state",
    "total_area_ha",
    "arable_area_ha",
    "vegetable_area_ha",
    "created_at",
    "updated_at",
    "is_active",
)


def _harvest_node(harvest) -> Dict[str, Any]:
    return {
        "id": harvest.id,
        "name": harvest.harvest_name,
        "harvest_year": harvest.harvest_year,
        "start_date": getattr(harvest, "start_date", None),
        "end_date": getattr(harvest, "end_date", None),
        "total_area_ha": getattr(harvest, "total_area_ha", None),
        "crops": [],
    }


def _crop_entry(link) -> Dict[str, Any]:
    crop = getattr(link, "crop", None)
    return {
        "id": link.id,
        "crop_id": link.crop_id,
        "name": crop.crop_name if crop is not None else UNKNOWN_CROP,
        "planted_area_ha": link.planted_area_ha or 0,
        "planting_date": getattr(link, "planting_date", None),
        "harvest_date": getattr(link, "harvest_date", None),
    }


def _adjusted_total(total: Optional[float], planted: float) -> Optional[float]:
    # raised to the planted sum, never lowered
    if planted > (total or 0):
        return planted
    return total


def transform_property(prop) -> Dict[str, Any]:
    result = {field: getattr(prop, field, None) for field in PROPERTY_FIELDS}

    harvests: Dict[Any, Dict[str, Any]] = {}
    for harvest in getattr(prop, "harvests", None) or []:
        harvests.setdefault(harvest.id, _harvest_node(harvest))

    for link in getattr(prop, "property_crop_harvests", None) or []:
        harvest = getattr(link, "harvest", None)
        if harvest is None:
            continue
        node = harvests.setdefault(harvest.id, _harvest_node(harvest))
        node["crops"].append(_crop_entry(link))

    for node in harvests.values():
        planted = sum(entry["planted_area_ha"] for entry in node["crops"])
        node["total_area_ha"] = _adjusted_total(node["total_area_ha"], planted)

    result["harvests"] = list(harvests.values())
    return result
