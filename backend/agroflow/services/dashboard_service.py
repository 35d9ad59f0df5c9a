"""
Dashboard statistics.

Each entry point fans out independent read-only aggregation queries on a
thread pool (one session per query) and reshapes the results into the
chart-ready structures the frontend expects. Numbers are rounded to the
nearest integer, missing aggregates count as 0.
"""
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agroflow.core.config import settings
from agroflow.core.database import SessionLocal
from agroflow.core.exceptions import UnhandledError
from agroflow.repositories import dashboard as dashboard_repo
from agroflow.schemas.dashboard import DashboardFilters

logger = logging.getLogger(__name__)

Query = Callable[[Session], Any]


def round_half_up(value) -> int:
    return int(math.floor(float(value or 0) + 0.5))


def _run_query(query: Query):
    db = SessionLocal()
    try:
        return query(db)
    finally:
        db.close()


def _gather(queries: Dict[str, Query]) -> Dict[str, Any]:
    with ThreadPoolExecutor(max_workers=max(1, settings.DASHBOARD_MAX_WORKERS)) as pool:
        futures = {key: pool.submit(_run_query, query) for key, query in queries.items()}
        return {key: future.result() for key, future in futures.items()}


def _rounded(rows: List[Dict[str, Any]], key: str) -> List[Dict[str, Any]]:
    return [{**row, key: round_half_up(row[key])} for row in rows]


def get_admin_stats(filters: DashboardFilters):
    try:
        results = _gather(
            {
                "farmers": lambda db: dashboard_repo.total_farmers(db, filters),
                "properties": lambda db: dashboard_repo.total_properties(db, filters),
                "hectares": lambda db: dashboard_repo.total_hectares(db, filters),
                "states": lambda db: dashboard_repo.farmers_by_state(db, filters),
                "cities": lambda db: dashboard_repo.top_cities(db, filters),
                "crops": lambda db: dashboard_repo.crop_distribution(db, filters),
                "land_use": lambda db: dashboard_repo.land_use_distribution(db, filters),
            }
        )
    except SQLAlchemyError as exc:
        logger.error(f"Error fetching admin dashboard stats: {exc}")
        raise UnhandledError(f"Error fetching admin dashboard stats: {exc}") from exc

    return {
        "data": {
            "totalFarmers": results["farmers"],
            "totalProperties": results["properties"],
            "totalHectares": round_half_up(results["hectares"]),
            "totalCrops": round_half_up(sum(row["area"] for row in results["crops"])),
            "propertiesByState": results["states"],
            "topCities": results["cities"],
            "cropDistribution": _rounded(results["crops"], "area"),
            "landUseDistribution": _rounded(results["land_use"], "value"),
        }
    }


def get_farmer_stats(farmer_id: UUID, filters: DashboardFilters):
    try:
        results = _gather(
            {
                "properties": lambda db: dashboard_repo.farmer_properties(db, farmer_id, filters),
                "hectares": lambda db: dashboard_repo.farmer_total_hectares(db, farmer_id, filters),
                "harvests": lambda db: dashboard_repo.farmer_active_harvests(db, farmer_id, filters),
                "crop_count": lambda db: dashboard_repo.farmer_total_crops(db, farmer_id, filters),
                "crops": lambda db: dashboard_repo.farmer_crops(db, farmer_id, filters),
                "land_use": lambda db: dashboard_repo.farmer_land_use(db, farmer_id, filters),
            }
        )
    except SQLAlchemyError as exc:
        logger.error(f"Error fetching farmer dashboard stats: {exc}")
        raise UnhandledError(f"Error fetching farmer dashboard stats: {exc}") from exc

    return {
        "data": {
            "totalProperties": len(results["properties"]),
            "totalHectares": round_half_up(results["hectares"]),
            "activeHarvests": results["harvests"],
            "totalCrops": results["crop_count"],
            "myProperties": _rounded(results["properties"], "totalArea"),
            "myCrops": _rounded(results["crops"], "area"),
            "myLandUse": _rounded(results["land_use"], "value"),
        }
    }
