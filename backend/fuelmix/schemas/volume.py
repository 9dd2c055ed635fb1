"""Volume Schemas — Pydantic contracts for the calculate_volume endpoint.

Invariants:
    - VolumeRequest: all three fields required, finite, numeric
    - Strict mode: numeric strings and booleans are rejected, ints accepted
    - No range bounds: [0, 1] is the intended share range, only the sum is enforced

Design Decisions:
    - Cross-field sum check NOT a model_validator: it is a domain rule with its
      own fixed error message, enforced by core.compute_volume
"""

from pydantic import BaseModel, ConfigDict, Field


class VolumeRequest(BaseModel):
    """Mixture specification — total mass in grams plus two mass fractions."""
    model_config = ConfigDict(strict=True, frozen=True)

    total_mass: float = Field(allow_inf_nan=False)
    percentage_nitro: float = Field(allow_inf_nan=False)
    percentage_m5: float = Field(allow_inf_nan=False)


class VolumeResponse(BaseModel):
    """Derived volumes in ml."""
    volume_nitro: float
    volume_m5: float
    total_volume: float
    lube_volume: float


class ErrorResponse(BaseModel):
    """Flat error body."""
    error: str
