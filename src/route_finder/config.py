"""Runtime settings, overridable through ``ROUTE_FINDER_*`` environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .overpass import DEFAULT_HIGHWAY_FILTER
from .roads import DEFAULT_MAX_AREA_DEG2

ENV_PREFIX = "ROUTE_FINDER_"


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_area_deg2: float = Field(default=DEFAULT_MAX_AREA_DEG2, gt=0)
    unpaved_multiplier: float = Field(default=3.0, ge=1.0)
    grid_rows: int = Field(default=7, ge=1)
    grid_cols: int = Field(default=7, ge=1)
    grid_spacing_degrees: float = Field(default=0.0018, gt=0)
    highway_filter: tuple[str, ...] = DEFAULT_HIGHWAY_FILTER
    overpass_timeout_s: int = Field(default=25, gt=0)
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build ``Settings`` from defaults overlaid with prefixed environment variables.

    ``ROUTE_FINDER_HIGHWAY_FILTER`` is a comma-separated list.
    """
    environ = os.environ if environ is None else environ
    overrides: dict[str, object] = {}
    for name in Settings.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is None:
            continue
        if name == "highway_filter":
            overrides[name] = tuple(part.strip() for part in raw.split(",") if part.strip())
        else:
            overrides[name] = raw
    return Settings.model_validate(overrides)
