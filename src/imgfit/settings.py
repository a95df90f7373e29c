"""User-configurable settings loaded from imgfit.yaml."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any, ClassVar, Final

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from imgfit.errors import ConfigError
from imgfit.models import BoundingBox

# Load environment variables from .env file(s)
load_dotenv()

logger: Final = logging.getLogger(__name__)

CONFIG_ENV_VAR = "IMGFIT_CONFIG"


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class FitSettings(BaseModel):
    """Default bounding box and behaviour for fitting.

    Values can be overridden in imgfit.yaml and, for the CLI, by
    command-line options.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("imgfit.yaml"),
        Path("~/.config/imgfit/config.yaml").expanduser(),
        Path("/etc/imgfit/config.yaml"),
    ]

    max_width: float = Field(1920, gt=0, description="Maximum output width")
    max_height: float = Field(1080, gt=0, description="Maximum output height")
    strict: bool = Field(
        False, description="Reject zero, negative and non-finite dimensions"
    )
    pixels: bool = Field(False, description="Report whole-pixel dimensions")

    @property
    def bounding_box(self) -> BoundingBox:
        """Configured maximum size as a BoundingBox."""
        return BoundingBox(max_width=self.max_width, max_height=self.max_height)

    @classmethod
    def find_config(cls) -> Path | None:
        """Locate a configuration file.

        Returns:
            Path from IMGFIT_CONFIG, else the first existing default path,
            else None

        Raises:
            FileNotFoundError: If IMGFIT_CONFIG points to a missing file
        """
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(f"Config file from {CONFIG_ENV_VAR} not found: {path}")
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        return None

    @classmethod
    def load(cls, path: Path | None = None) -> FitSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated FitSettings; defaults when no file is found

        Raises:
            FileNotFoundError: If IMGFIT_CONFIG points to a missing file
            ConfigError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            path = cls.find_config()
            if path is None:
                logger.debug("No config file found, using defaults")
                return cls()

        logger.debug("Loading config from %s", path)
        try:
            raw = _interpolate_env(path.read_text(encoding="utf-8"))
            data: Any = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Unable to read config YAML: {exc}", exc) from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise ConfigError(f"Invalid configuration:\n{err}", err) from err
