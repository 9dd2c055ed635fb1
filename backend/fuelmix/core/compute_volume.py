"""Volume Computation — pure mass-to-volume conversion for a two-fuel mixture.

Invariants:
    - Percentage sum checked before any arithmetic (hard gate, not a warning)
    - total_volume is exactly volume_nitro + volume_m5
    - lube_volume is exactly total_volume * LUBE_RATIO
    - Same input always yields the same VolumeBreakdown

Design Decisions:
    - Frozen dataclass result: no mutation after construction
    - Tolerance is a parameter so the HTTP layer can pass the configured value
"""

from dataclasses import dataclass, asdict

from fuelmix.core.domain_types import (
    DENSITY_G_PER_ML, LUBE_RATIO, PERCENTAGE_TOLERANCE,
    FuelComponent, Grams, MassFraction, Milliliters,
)
from fuelmix.core.errors import PercentageSumError


@dataclass(frozen=True)
class VolumeBreakdown:
    """Derived volumes of one mixture, all in ml."""
    volume_nitro: Milliliters
    volume_m5: Milliliters
    total_volume: Milliliters
    lube_volume: Milliliters

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def validate_percentage_sum(
    percentage_nitro: MassFraction,
    percentage_m5: MassFraction,
    tolerance: float = PERCENTAGE_TOLERANCE,
) -> None:
    """Raise PercentageSumError unless the shares add up to 1.0."""
    total = percentage_nitro + percentage_m5
    if abs(total - 1.0) > tolerance:
        raise PercentageSumError(total)


def component_volume(mass: Grams, component: FuelComponent) -> Milliliters:
    return Milliliters(mass / DENSITY_G_PER_ML[component])


def compute_volumes(
    total_mass: Grams,
    percentage_nitro: MassFraction,
    percentage_m5: MassFraction,
    tolerance: float = PERCENTAGE_TOLERANCE,
) -> VolumeBreakdown:
    """Split total_mass by share and convert each part to ml."""
    validate_percentage_sum(percentage_nitro, percentage_m5, tolerance)

    mass_nitro = Grams(total_mass * percentage_nitro)
    mass_m5 = Grams(total_mass * percentage_m5)

    volume_nitro = component_volume(mass_nitro, FuelComponent.NITRO)
    volume_m5 = component_volume(mass_m5, FuelComponent.M5)
    total_volume = Milliliters(volume_nitro + volume_m5)

    return VolumeBreakdown(
        volume_nitro=volume_nitro,
        volume_m5=volume_m5,
        total_volume=total_volume,
        lube_volume=Milliliters(total_volume * LUBE_RATIO),
    )
