"""Pydantic models for kitchenconv.

- Unit / Substance (static table rows)
- ParsedRequest (tokenized command line)
- ConversionResult (printed output)
"""

from typing import Optional, Literal

from pydantic import BaseModel, ConfigDict


UnitKind = Literal["weight", "volume", "temperature"]


# --- Tables ---

class Unit(BaseModel):
    model_config = ConfigDict(frozen=True)

    to_si: float  # kg for weight, L for volume; 1.0/0.0 sentinel for temperature
    kind: UnitKind


class Substance(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    density: float  # kg/L


# --- Request ---

class ParsedRequest(BaseModel):
    quantity: str
    unit_from: str
    substance_from: Optional[str] = None
    unit_to: str
    substance_to: Optional[str] = None

    @property
    def substance(self) -> Optional[str]:
        """Substance the conversion is about, whichever side names it."""
        return self.substance_from or self.substance_to


# --- Result ---

class ConversionResult(BaseModel):
    quantity: str
    value: float
    unit_from: str
    unit_to: str
    substance: Optional[str] = None
    result: float

    def format(self, precision: int = 6) -> str:
        of = f" of {self.substance}" if self.substance else ""
        return f"  {self.quantity} {self.unit_from}{of} is {self.result:.{precision}g} {self.unit_to}"
