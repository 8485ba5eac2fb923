"""Top-level alts configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import DEFAULT_LINK_DIR, DEFAULT_REGISTRY_DIR
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig


class AltsConfig(BaseModel):
    """Where records and links live, and how to log."""

    model_config = ConfigDict(extra="forbid")

    registry_dir: str = Field(DEFAULT_REGISTRY_DIR, description="Directory holding <name>.json records")
    link_dir: str = Field(DEFAULT_LINK_DIR, description="Directory where <name> links are created by default")
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("registry_dir", "link_dir")
    @classmethod
    def _normalize_dirs(cls, v: str) -> str:
        from ...utils.normalize_path import normalize_path

        return str(normalize_path(v))

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on ALTS_HOME or default to ~/.alts."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "AltsConfig":
        """Load and validate config from file, or defaults if there is none.

        Raises:
            ValueError: If the config file has invalid JSON or fails validation
        """
        path = cls.get_config_path()
        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        return cls._validate(raw)

    @classmethod
    def _validate(cls, raw: Any) -> "AltsConfig":
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def with_overrides(self, registry_dir: str | None = None, link_dir: str | None = None) -> "AltsConfig":
        """Return a copy with command-line overrides applied."""
        raw = self.to_dict()
        if registry_dir is not None:
            raw["registry_dir"] = registry_dir
        if link_dir is not None:
            raw["link_dir"] = link_dir
        return self._validate(raw)

    def to_dict(self) -> dict[str, Any]:
        """Convert AltsConfig instance to a dictionary for serialization."""
        return {
            "registry_dir": self.registry_dir,
            "link_dir": self.link_dir,
            "log": self.log.model_dump(),
        }
