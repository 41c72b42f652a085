"""Generator options and environment-tuned defaults."""

from __future__ import annotations

import os

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from synthetic_transit.constants import SMALL_PLANET_LIMIT

_DEFAULT_MAX_WORKERS = 4
_DEFAULT_CHUNK_SIZE = 65536


class GeneratorOptions(BaseModel):
    """Behavioral switches for the lightcurve generator.

    Attributes:
        validate_geometry: Fail fast with InvalidGeometryError on impossible
            geometry. When False, such inputs propagate NaN/Inf into the flux.
        small_planet_limit: Rp/Rs above which an accuracy warning is logged.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    validate_geometry: bool = True
    small_planet_limit: float = Field(default=SMALL_PLANET_LIMIT, gt=0)


DEFAULT_OPTIONS = GeneratorOptions()


def default_max_workers() -> int:
    raw = os.getenv("SYNTHETIC_TRANSIT_MAX_WORKERS", str(_DEFAULT_MAX_WORKERS))
    try:
        value = float(raw)
    except ValueError:
        return _DEFAULT_MAX_WORKERS
    if not np.isfinite(value) or value < 1:
        return _DEFAULT_MAX_WORKERS
    return int(value)


def default_chunk_size() -> int:
    raw = os.getenv("SYNTHETIC_TRANSIT_CHUNK_SIZE", str(_DEFAULT_CHUNK_SIZE))
    try:
        value = float(raw)
    except ValueError:
        return _DEFAULT_CHUNK_SIZE
    if not np.isfinite(value) or value < 1:
        return _DEFAULT_CHUNK_SIZE
    return int(value)
