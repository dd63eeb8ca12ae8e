# src/physconst_core/catalog/exceptions.py
"""
Diagnosable exceptions raised by the constant catalog.

`ConstantCatalog.find` never raises for a search outcome; it reports a
FindStatus instead. The exceptions below belong to the programmatic
contracts: unique lookup, mutation (`add`, `remove`) and seed-table loading.
Every one of them leaves the catalog unmodified.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

from ..errors import DiagnosableError, format_diagnostic_report
from .status import FindStatus


class CatalogError(DiagnosableError):
    """
    Concrete base class for all catalog errors, so callers can catch the whole
    family with a single `except CatalogError:`.
    """
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Catalog Error",
            details=str(self),
            suggestion="Check the constant name and unit, or list the catalog to see what is available.",
            context={}
        )


@dataclass(frozen=True)
class NotFoundError(CatalogError):
    """No catalog entry carries the given name."""
    name: str

    def __str__(self):
        return f"No constant named '{self.name}' in the catalog."

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Constant Not Found",
            details=str(self),
            suggestion="Names are matched exactly here; use the display name or one of its aliases verbatim.",
            context={'query': self.name}
        )


@dataclass(frozen=True)
class AmbiguousOrNotFoundError(CatalogError):
    """A unique lookup did not resolve to exactly one unit-compatible entry."""
    name: str
    unit: str
    status: FindStatus

    def __str__(self):
        return (f"Failed to find unique match for name '{self.name}' and unit '{self.unit}'. "
                f"Search returned {self.status}.")

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Ambiguous Or Missing Constant",
            details=f"{self}\n{self.status.description}",
            suggestion=("Use a more specific name, or request a unit system ('mks', 'cgs'), "
                        "an explicit unit, or 'any'."),
            context={'query': self.name, 'unit': self.unit, 'status': self.status}
        )


@dataclass(frozen=True)
class AmbiguousDeleteError(CatalogError):
    """A removal request matched more than one entry."""
    name: str
    count: int

    def __str__(self):
        return f"Name '{self.name}' matches {self.count} entries; refusing to guess which one to remove."

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Ambiguous Removal",
            details=str(self),
            suggestion="Unit variants of one quantity share their names; remove them through an alias unique to one entry.",
            context={'query': self.name}
        )


@dataclass(frozen=True)
class DuplicateNameError(CatalogError):
    """An entry being added reuses names already present in the catalog."""
    names: Tuple[str, ...]

    def __str__(self):
        return f"Name(s) already present in the catalog: {list(self.names)}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Duplicate Constant Name",
            details=str(self),
            suggestion="Choose names and aliases that no existing constant uses.",
            context={'query': self.names[0] if self.names else None}
        )


@dataclass(frozen=True)
class InvalidArgumentError(CatalogError):
    """An argument violates a catalog invariant (e.g. an entry with no names)."""
    details: str

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Invalid Argument",
            details=self.details,
            suggestion="Every constant needs at least one name.",
            context={}
        )


@dataclass(frozen=True)
class CatalogDataError(CatalogError):
    """A seed table could not be read or contains inconsistent data."""
    details: str
    file_path: Path

    def __str__(self):
        return f"Constant table error in file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Constant Table Error",
            details=self.details,
            suggestion="Ensure the file exists, is valid YAML, and that every value expression evaluates to a finite number.",
            context={'source_file': self.file_path}
        )


@dataclass(frozen=True)
class SchemaValidationError(CatalogError):
    """A seed table is valid YAML but does not follow the table schema."""
    errors: Dict[str, Any]
    file_path: Path

    def _error_lines(self, prefix: str):
        return [
            f"  - {prefix} '{k}': {v[0] if isinstance(v, list) and v else v}"
            for k, v in sorted(self.errors.items(), key=lambda item: str(item[0]))
        ]

    def __str__(self):
        return (
            f"Constant table schema validation failed for file '{self.file_path}':\n"
            + "\n".join(self._error_lines("In field"))
        )

    def get_diagnostic_report(self) -> str:
        details = (
            "The structure of the table does not conform to the required schema.\n"
            f"See details for {len(self.errors)} issue(s) below:\n\n" + "\n".join(self._error_lines("Field"))
        )
        return format_diagnostic_report(
            error_type="Constant Table Schema Error",
            details=details,
            suggestion="Each quantity needs a non-empty 'names' list and at least one variant with 'unit', 'system' and 'value'.",
            context={'source_file': self.file_path}
        )
