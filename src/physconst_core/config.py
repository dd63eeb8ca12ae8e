# src/physconst_core/config.py
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import cerberus
import yaml

from .catalog.formatting import DEFAULT_PRECISION

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class ConfigParsingError(ValueError):
    """Custom exception for errors during catalog configuration parsing."""
    pass


@dataclass(frozen=True)
class CatalogSettings:
    """Options used by ConstantCatalog.from_settings."""
    seed_file: Optional[Path] = None
    extra_tables: List[Path] = field(default_factory=list)
    unit_conversion: bool = True
    precision: int = DEFAULT_PRECISION
    log_level: str = "INFO"

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


_schema = {
    "seed_file": {"type": "string", "required": False, "empty": False, "nullable": True},
    "extra_tables": {"type": "list", "required": False, "schema": {"type": "string", "empty": False}},
    "unit_conversion": {"type": "boolean", "required": False},
    "precision": {"type": "integer", "required": False, "min": 1, "max": 17},
    "log_level": {"type": "string", "required": False, "allowed": LOG_LEVELS, "coerce": "upper_case"},
}


class _SettingsValidator(cerberus.Validator):
    def _normalize_coerce_upper_case(self, value):
        return value.upper() if isinstance(value, str) else value


def load_settings(source: Union[str, Path, Dict[str, Any], None] = None) -> CatalogSettings:
    """
    Parses catalog settings from a mapping or a YAML file.

    Relative table paths in a YAML file are resolved against the file's directory.
    """
    base_dir = Path.cwd()
    if source is None:
        raw: Dict[str, Any] = {}
    elif isinstance(source, dict):
        raw = source
    else:
        path = Path(source)
        base_dir = path.resolve().parent
        try:
            with path.open("r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigParsingError(f"Cannot read settings file '{path}': {e}") from e
        except yaml.YAMLError as e:
            raise ConfigParsingError(f"Invalid YAML in settings file '{path}': {e}") from e
        if not isinstance(raw, dict):
            raise ConfigParsingError(f"The root of settings file '{path}' must be a mapping.")

    validator = _SettingsValidator(_schema)
    validator.allow_unknown = False
    if not validator.validate(raw):
        raise ConfigParsingError(f"Failed to parse catalog settings: {validator.errors}")
    document = validator.document

    def resolve(p: str) -> Path:
        candidate = Path(p)
        return candidate if candidate.is_absolute() else (base_dir / candidate)

    settings = CatalogSettings(
        seed_file=resolve(document["seed_file"]) if document.get("seed_file") else None,
        extra_tables=[resolve(p) for p in document.get("extra_tables", [])],
        unit_conversion=document.get("unit_conversion", True),
        precision=document.get("precision", DEFAULT_PRECISION),
        log_level=document.get("log_level", "INFO"),
    )
    logger.debug(f"Loaded catalog settings: {settings}")
    return settings
