"""
Aggregation queries behind the dashboard charts.

Every function takes its own session so the service can run them in
parallel; filters narrow properties by state/city and, when a positive year
is given, by harvests of that year (through the junction or the harvest's
own property_id).
"""
from typing import Any, Dict, List
from uuid import UUID

from sqlalchemy import desc, distinct, func, or_, select
from sqlalchemy.orm import Session

from agroflow.models import ROLE_FARMER, Crop, Farmer, Harvest, Property, PropertyCropHarvest
from agroflow.schemas.dashboard import DashboardFilters


def _year_requested(filters: DashboardFilters) -> bool:
    return bool(filters.year and filters.year > 0)


def _property_in_year(year: int):
    via_links = (
        select(PropertyCropHarvest.property_id)
        .join(Harvest, Harvest.id == PropertyCropHarvest.harvest_id)
        .where(Harvest.harvest_year == year)
    )
    direct = select(Harvest.property_id).where(
        Harvest.harvest_year == year,
        Harvest.property_id.isnot(None),
    )
    return or_(Property.id.in_(via_links), Property.id.in_(direct))


def _property_conditions(filters: DashboardFilters, state=True, city=True, year=True) -> List[Any]:
    conditions = []
    if state and filters.state:
        conditions.append(Property.state == filters.state)
    if city and filters.city:
        conditions.append(Property.city == filters.city)
    if year and _year_requested(filters):
        conditions.append(_property_in_year(filters.year))
    return conditions


def _any_filter(filters: DashboardFilters) -> bool:
    return bool(filters.state or filters.city or _year_requested(filters))


def _land_use(arable, vegetation) -> List[Dict[str, Any]]:
    return [
        {"name": "Arable Area", "value": float(arable or 0)},
        {"name": "Vegetation", "value": float(vegetation or 0)},
    ]


# --- admin (global) ---

def total_farmers(db: Session, filters: DashboardFilters) -> int:
    query = db.query(func.count(distinct(Farmer.id))).select_from(Farmer).filter(Farmer.role == ROLE_FARMER)
    if _any_filter(filters):
        query = query.join(Property, Property.farmer_id == Farmer.id).filter(*_property_conditions(filters))
    return int(query.scalar() or 0)


def total_properties(db: Session, filters: DashboardFilters) -> int:
    return int(db.query(func.count(Property.id)).filter(*_property_conditions(filters)).scalar() or 0)


def total_hectares(db: Session, filters: DashboardFilters) -> float:
    total = db.query(func.sum(Property.total_area_ha)).filter(*_property_conditions(filters)).scalar()
    return float(total or 0)


def farmers_by_state(db: Session, filters: DashboardFilters) -> List[Dict[str, Any]]:
    count = func.count(distinct(Property.farmer_id)).label("count")
    rows = (
        db.query(Property.state, count)
        .filter(Property.state.isnot(None), *_property_conditions(filters, state=False))
        .group_by(Property.state)
        .order_by(desc("count"), Property.state)
        .all()
    )
    return [{"state": state, "count": int(n)} for state, n in rows]


def top_cities(db: Session, filters: DashboardFilters, limit: int = 10) -> List[Dict[str, Any]]:
    count = func.count(distinct(Property.farmer_id)).label("count")
    rows = (
        db.query(Property.city, count)
        .filter(Property.city.isnot(None), *_property_conditions(filters, city=False))
        .group_by(Property.city)
        .order_by(desc("count"), Property.city)
        .limit(limit)
        .all()
    )
    return [{"city": city, "count": int(n)} for city, n in rows]


def _crop_area_query(db: Session, filters: DashboardFilters):
    area = func.sum(PropertyCropHarvest.planted_area_ha).label("area")
    query = (
        db.query(Crop.crop_name, area)
        .select_from(PropertyCropHarvest)
        .join(Crop, Crop.id == PropertyCropHarvest.crop_id)
        .join(Property, Property.id == PropertyCropHarvest.property_id)
        .join(Harvest, Harvest.id == PropertyCropHarvest.harvest_id)
        .filter(*_property_conditions(filters, year=False))
    )
    if _year_requested(filters):
        query = query.filter(Harvest.harvest_year == filters.year)
    return query


def _crop_rows(query) -> List[Dict[str, Any]]:
    rows = query.group_by(Crop.crop_name).order_by(desc("area"), Crop.crop_name).all()
    return [{"name": name, "area": float(area or 0)} for name, area in rows]


def crop_distribution(db: Session, filters: DashboardFilters) -> List[Dict[str, Any]]:
    return _crop_rows(_crop_area_query(db, filters))


def land_use_distribution(db: Session, filters: DashboardFilters) -> List[Dict[str, Any]]:
    arable, vegetation = (
        db.query(func.sum(Property.arable_area_ha), func.sum(Property.vegetable_area_ha))
        .filter(*_property_conditions(filters))
        .one()
    )
    return _land_use(arable, vegetation)


# --- farmer (own data) ---

def farmer_properties(db: Session, farmer_id: UUID, filters: DashboardFilters) -> List[Dict[str, Any]]:
    rows = (
        db.query(Property.farm_name, Property.total_area_ha)
        .filter(Property.farmer_id == farmer_id, *_property_conditions(filters))
        .order_by(desc(Property.total_area_ha), Property.farm_name)
        .all()
    )
    return [{"name": name, "totalArea": float(area or 0)} for name, area in rows]


def farmer_total_hectares(db: Session, farmer_id: UUID, filters: DashboardFilters) -> float:
    total = (
        db.query(func.sum(Property.total_area_ha))
        .filter(Property.farmer_id == farmer_id, *_property_conditions(filters))
        .scalar()
    )
    return float(total or 0)


def farmer_active_harvests(db: Session, farmer_id: UUID, filters: DashboardFilters) -> int:
    property_ids = select(Property.id).where(
        Property.farmer_id == farmer_id, *_property_conditions(filters, year=False)
    )
    linked_harvests = select(PropertyCropHarvest.harvest_id).where(
        PropertyCropHarvest.property_id.in_(property_ids)
    )
    query = db.query(func.count(distinct(Harvest.id))).filter(
        Harvest.is_active.is_(True),
        or_(Harvest.property_id.in_(property_ids), Harvest.id.in_(linked_harvests)),
    )
    if _year_requested(filters):
        query = query.filter(Harvest.harvest_year == filters.year)
    return int(query.scalar() or 0)


def farmer_total_crops(db: Session, farmer_id: UUID, filters: DashboardFilters) -> int:
    query = (
        db.query(func.count(distinct(PropertyCropHarvest.crop_id)))
        .select_from(PropertyCropHarvest)
        .join(Property, Property.id == PropertyCropHarvest.property_id)
        .join(Harvest, Harvest.id == PropertyCropHarvest.harvest_id)
        .filter(Property.farmer_id == farmer_id, *_property_conditions(filters, year=False))
    )
    if _year_requested(filters):
        query = query.filter(Harvest.harvest_year == filters.year)
    return int(query.scalar() or 0)


def farmer_crops(db: Session, farmer_id: UUID, filters: DashboardFilters) -> List[Dict[str, Any]]:
    return _crop_rows(_crop_area_query(db, filters).filter(Property.farmer_id == farmer_id))


def farmer_land_use(db: Session, farmer_id: UUID, filters: DashboardFilters) -> List[Dict[str, Any]]:
    arable, vegetation = (
        db.query(func.sum(Property.arable_area_ha), func.sum(Property.vegetable_area_ha))
        .filter(Property.farmer_id == farmer_id, *_property_conditions(filters))
        .one()
    )
    return _land_use(arable, vegetation)
