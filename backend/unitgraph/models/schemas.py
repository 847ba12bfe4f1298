"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

import math
from pydantic import BaseModel, ConfigDict, Field, field_validator

from unitgraph.core.units.unit import Unit


class UnitResponse(BaseModel):
    name: str
    symbol: str
    quantity: str
    aliases: list[str] = []
    symbols: list[str] = []
    system: str | None = None

    @classmethod
    def from_unit(cls, unit: Unit) -> "UnitResponse":
        return cls(
            name=unit.name,
            symbol=unit.symbol,
            quantity=unit.quantity.name,
            aliases=list(unit.aliases),
            symbols=list(unit.symbols),
            system=unit.system,
        )


class UnitListResponse(BaseModel):
    units: list[UnitResponse]


class QuantityListResponse(BaseModel):
    quantities: list[str]


class ConvertRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    value: float
    from_unit: str = Field(alias="from")
    to_unit: str = Field(alias="to")

    @field_validator("value")
    @classmethod
    def must_be_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Value must be a finite number")
        return v

    @field_validator("from_unit", "to_unit")
    @classmethod
    def unit_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Unit cannot be empty")
        return v


class ConvertResponse(BaseModel):
    value: float
    unit: UnitResponse
    steps: list[str]
