"""Calculate Volume — POST /calculate_volume, mixture spec in, ml volumes out.

Invariants:
    - Request body validated by Pydantic before the handler runs
    - PercentageSumError propagates to the global handler (400, fixed message)
    - No state kept between requests

Design Decisions:
    - Sync def: pure arithmetic, no suspension points; FastAPI runs it in the threadpool
    - Tolerance read from settings per request (cached object, read-only)
"""

import logging

from fastapi import APIRouter, Depends, status

from fuelmix.config import Settings, get_settings
from fuelmix.core.compute_volume import compute_volumes
from fuelmix.core.domain_types import Grams, MassFraction
from fuelmix.schemas.volume import ErrorResponse, VolumeRequest, VolumeResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["volume"])


@router.post(
    "/calculate_volume",
    response_model=VolumeResponse,
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def calculate_volume(
    body: VolumeRequest, settings: Settings = Depends(get_settings),
):
    """Convert total mass and Nitro+/M5 shares into component and lube volumes."""
    breakdown = compute_volumes(
        Grams(body.total_mass),
        MassFraction(body.percentage_nitro),
        MassFraction(body.percentage_m5),
        tolerance=settings.percentage_tolerance,
    )
    logger.debug(
        "Volume calculated",
        extra={
            "total_mass": body.total_mass,
            "total_volume": breakdown.total_volume,
        },
    )
    return VolumeResponse(**breakdown.to_dict())
