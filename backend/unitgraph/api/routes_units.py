"""Unit listing and lookup endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from unitgraph.core.logging import get_logger
from unitgraph.core.units.errors import UnitNotFoundError
from unitgraph.core.units.registry import UnitRegistry
from unitgraph.definitions.catalog import get_registry
from unitgraph.models.schemas import QuantityListResponse, UnitListResponse, UnitResponse

router = APIRouter(tags=["units"])
logger = get_logger(__name__)


@router.get("/quantities", response_model=QuantityListResponse)
async def list_quantities(registry: UnitRegistry = Depends(get_registry)):
    return {"quantities": [q.name for q in registry.quantities()]}


@router.get("/units", response_model=UnitListResponse)
async def list_units(
    quantity: Optional[str] = None,
    registry: UnitRegistry = Depends(get_registry),
):
    """List registered units ordered by quantity then name."""
    units = registry.all()
    if quantity is not None:
        units = [u for u in units if u.quantity.name == quantity]
    return {"units": [UnitResponse.from_unit(u) for u in units]}


@router.get("/units/find", response_model=UnitResponse)
async def find_unit(q: str, registry: UnitRegistry = Depends(get_registry)):
    """Resolve a name, symbol or alias to a unit."""
    try:
        unit = registry.find(q)
    except UnitNotFoundError as e:
        logger.info("unit_lookup_failed", query=q)
        raise HTTPException(404, detail=[{"message": str(e), "query": e.query}])
    return UnitResponse.from_unit(unit)
