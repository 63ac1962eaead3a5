"""Top-level cargo-nav configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import DEFAULT_API_URL, DEFAULT_SITE_URL, DEFAULT_TIMEOUT
from .get_home_dir import get_home_dir

# Environment variable -> config field; environment wins over the config file
_ENV_OVERRIDES = {
    "CARGO_NAV_API_URL": "api_url",
    "CARGO_NAV_SITE_URL": "site_url",
    "CARGO_NAV_TIMEOUT": "timeout",
}


class NavConfig(BaseModel):
    """Registry endpoints and HTTP client settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    api_url: str = Field(DEFAULT_API_URL, min_length=1, description="Registry API root for crate lookups")
    site_url: str = Field(DEFAULT_SITE_URL, min_length=1, description="Registry web site root for crate pages")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Seconds before the registry request is abandoned")

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to the optional config file."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "NavConfig":
        """Load config from defaults, the optional config file and the environment.

        Raises:
            ValueError: If the config file holds invalid JSON or a value fails validation
        """
        path = cls.get_config_path()
        raw: dict[str, Any] = {}

        if path.exists():
            try:
                with path.open() as fh:
                    raw = json.load(fh)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
            except OSError as e:
                raise ValueError(f"Could not read config file {path}: {e}") from e
            if not isinstance(raw, dict):
                raise ValueError(f"Config file {path} must hold a JSON object")

        for env_name, field_name in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                raw[field_name] = value

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
