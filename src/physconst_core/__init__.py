# src/physconst_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.info("physconst_core package initialized.")

from .units import ureg, pint, Quantity, UnitConverter, PintUnitConverter, NullUnitConverter
from .catalog import (
    ConstantCatalog, ConstantEntry, DimensionExponents, UnitSystem, FindResult, FindStatus,
    CatalogError, NotFoundError, AmbiguousOrNotFoundError, AmbiguousDeleteError,
    DuplicateNameError, InvalidArgumentError,
)
from .config import CatalogSettings, load_settings, ConfigParsingError
from .errors import PhysConstError, DiagnosableError

__all__ = [
    # Units
    "ureg", "pint", "Quantity",
    # Unit conversion service
    "UnitConverter", "PintUnitConverter", "NullUnitConverter",
    # Catalog
    "ConstantCatalog", "ConstantEntry", "DimensionExponents", "UnitSystem", "FindResult", "FindStatus",
    # Configuration
    "CatalogSettings", "load_settings", "ConfigParsingError",
    # Errors
    "PhysConstError", "DiagnosableError", "CatalogError", "NotFoundError", "AmbiguousOrNotFoundError",
    "AmbiguousDeleteError", "DuplicateNameError", "InvalidArgumentError",
]
