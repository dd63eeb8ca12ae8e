# src/physconst_core/catalog/__init__.py
from .entry import ConstantEntry, DimensionExponents, UnitSystem
from .status import FindResult, FindStatus, MatchKind
from .matching import NameMatcher, SubstringMatcher, normalize_name, unit_matches
from .catalog import ConstantCatalog
from .loader import SeedTableLoader, load_builtin_entries
from .formatting import format_entry, format_full, format_summary
from .exceptions import (
    AmbiguousDeleteError,
    AmbiguousOrNotFoundError,
    CatalogDataError,
    CatalogError,
    DuplicateNameError,
    InvalidArgumentError,
    NotFoundError,
    SchemaValidationError,
)

__all__ = [
    # Data model
    "ConstantEntry", "DimensionExponents", "UnitSystem",
    # Search results
    "FindResult", "FindStatus", "MatchKind",
    # Matching
    "NameMatcher", "SubstringMatcher", "normalize_name", "unit_matches",
    # Catalog and seed data
    "ConstantCatalog", "SeedTableLoader", "load_builtin_entries",
    # Listings
    "format_entry", "format_full", "format_summary",
    # Exceptions
    "CatalogError", "NotFoundError", "AmbiguousOrNotFoundError", "AmbiguousDeleteError",
    "DuplicateNameError", "InvalidArgumentError", "CatalogDataError", "SchemaValidationError",
]
