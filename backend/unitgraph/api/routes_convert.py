"""Conversion endpoint."""

import math

from fastapi import APIRouter, Depends, HTTPException

from unitgraph.core.logging import get_logger
from unitgraph.core.units.errors import NoConversionPathError, UnitNotFoundError
from unitgraph.core.units.registry import UnitRegistry
from unitgraph.definitions.catalog import get_registry
from unitgraph.models.schemas import ConvertRequest, ConvertResponse, UnitResponse

router = APIRouter(tags=["convert"])
logger = get_logger(__name__)


@router.post("/convert", response_model=ConvertResponse)
async def convert_value(req: ConvertRequest, registry: UnitRegistry = Depends(get_registry)):
    """Convert a value between two units given by name, symbol or alias."""
    try:
        source = registry.find(req.from_unit)
        target = registry.find(req.to_unit)
    except UnitNotFoundError as e:
        raise HTTPException(404, detail=[{"message": str(e), "query": e.query}])

    try:
        path, result = registry.trace(req.value, source, target)
    except NoConversionPathError as e:
        logger.info("conversion_rejected", source=source.name, target=target.name)
        raise HTTPException(422, detail=[{"message": str(e)}])

    if not math.isfinite(result.magnitude):
        logger.info("conversion_overflow", source=source.name, target=target.name, value=req.value)
        raise HTTPException(422, detail=[{
            "message": f"result of converting {req.value} {source.name} to {target.name} "
                       f"is not a finite number",
        }])

    return {
        "value": result.magnitude,
        "unit": UnitResponse.from_unit(result.unit),
        "steps": [source.name] + [edge.target.name for edge in path],
    }
