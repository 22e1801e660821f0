"""Validation settings loaded from dictionaries, files or the environment.

Settings files are YAML or JSON::

    log_level: DEBUG
    max_concurrency: 8
    strict_documents: true

Environment variables override file values using the ``DOCPROP_`` prefix,
e.g. ``DOCPROP_MAX_CONCURRENCY=4`` or ``DOCPROP_STRICT_DOCUMENTS=yes``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .exceptions import SettingsError

logger = logging.getLogger(__name__)

ENV_PREFIX = "DOCPROP_"


@dataclass
class ValidationSettings:
    """Settings of document validation.

    Attributes:
        log_level: Level of the ``docprop`` logger
        max_concurrency: Maximum number of properties validated at once
        strict_documents: Reject document properties missing from the schema
        builtin_handlers: Register the built-in type handlers in new sessions
    """

    log_level: str = "WARNING"
    max_concurrency: int = 16
    strict_documents: bool = False
    builtin_handlers: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.max_concurrency, int) or self.max_concurrency < 1:
            raise SettingsError(
                f"max_concurrency must be a positive integer, got {self.max_concurrency!r}",
                context={"max_concurrency": self.max_concurrency},
            )
        if isinstance(self.log_level, int) and not isinstance(self.log_level, bool):
            # numeric levels, e.g. DOCPROP_LOG_LEVEL=10
            self.log_level = logging.getLevelName(self.log_level)
        level = logging.getLevelName(str(self.log_level).upper())
        if not isinstance(level, int):
            raise SettingsError(
                f"Unknown log level: {self.log_level}",
                context={"log_level": self.log_level},
            )
        self.log_level = str(self.log_level).upper()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidationSettings:
        """Create settings from a dictionary.

        Raises:
            SettingsError: If the dictionary holds unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise SettingsError(
                f"Unknown settings: {', '.join(sorted(unknown))}",
                context={"unknown": sorted(unknown), "known": sorted(known)},
            )
        return cls(**data)

    @classmethod
    def from_file(cls, path: str | Path, use_env: bool = True) -> ValidationSettings:
        """Load settings from a YAML or JSON file.

        Args:
            path: Path to the settings file
            use_env: Apply ``DOCPROP_`` environment overrides

        Returns:
            ValidationSettings instance
        """
        path = Path(path)
        if not path.exists():
            raise SettingsError(f"Settings file not found: {path}", context={"path": str(path)})

        suffix = path.suffix.lower()
        with open(path) as f:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise SettingsError(f"Unsupported file format: {suffix}", context={"path": str(path)})

        data = data or {}
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file must hold a mapping: {path}", context={"path": str(path)})

        if use_env:
            data.update(env_overrides())
        logger.debug(f"Loaded settings from {path}")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls) -> ValidationSettings:
        """Create default settings with environment overrides applied."""
        return cls.from_dict(env_overrides())

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def configure_logging(self) -> None:
        """Apply ``log_level`` to the ``docprop`` logger."""
        logging.getLogger("docprop").setLevel(self.log_level)


def env_overrides(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Collect ``DOCPROP_*`` variables as typed settings values.

    Args:
        environ: Environment mapping, ``os.environ`` by default

    Returns:
        Dictionary of lower-cased setting names to parsed values
    """
    environ = os.environ if environ is None else environ
    overrides = {}
    for key, value in environ.items():
        if key.startswith(ENV_PREFIX):
            overrides[key[len(ENV_PREFIX):].lower()] = _parse_value(value)
    return overrides


def _parse_value(value: str) -> Any:
    """Parse an environment variable value to bool, int, float or str."""
    if value.lower() in ["true", "yes"]:
        return True
    elif value.lower() in ["false", "no"]:
        return False

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value
