# src/physconst_core/catalog/entry.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import NamedTuple, Optional, Tuple


class UnitSystem(Enum):
    """Classification of the unit an entry is expressed in."""
    MKS = "mks"
    CGS = "cgs"
    NONE = "none"    # Dimensionless, or no unit system at all.
    OTHER = "other"  # Meaningful unit outside MKS/CGS (GeV, MeV*fm, ...).

    @property
    def tag(self) -> str:
        """Short label used by the catalog listings."""
        return _UNIT_SYSTEM_TAGS[self]


_UNIT_SYSTEM_TAGS = {
    UnitSystem.MKS: "MKS",
    UnitSystem.CGS: "CGS",
    UnitSystem.NONE: "none",
    UnitSystem.OTHER: "other",
}


def unit_system_tag(system) -> str:
    """Listing label for a unit system; anything unrecognised is reported as 'unknown'."""
    if isinstance(system, UnitSystem):
        return system.tag
    return "unknown"


class DimensionExponents(NamedTuple):
    """SI dimensional signature of an entry. Informational only."""
    m: int = 0
    kg: int = 0
    s: int = 0
    K: int = 0
    A: int = 0
    mol: int = 0
    cd: int = 0


@dataclass(frozen=True)
class ConstantEntry:
    """
    One physical constant expressed in one unit.

    `names[0]` is the display name, the rest are aliases. Entries describing the
    same quantity in different units share a quantity group (see `group_key`).
    """
    names: Tuple[str, ...]
    unit: str
    unit_system: UnitSystem
    value: float
    source: str = ""
    dimensions: DimensionExponents = field(default_factory=DimensionExponents)
    group: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "value", float(self.value))
        if not isinstance(self.dimensions, DimensionExponents):
            object.__setattr__(self, "dimensions", DimensionExponents(*self.dimensions))

    @property
    def name(self) -> str:
        return self.names[0] if self.names else ""

    @property
    def aliases(self) -> Tuple[str, ...]:
        return self.names[1:]

    @property
    def group_key(self) -> str:
        """Key shared by every unit variant of the same quantity."""
        if self.group is not None:
            return self.group
        return "\x1f".join(self.names)

    def with_unit(self, unit: str, value: float) -> ConstantEntry:
        """Returns a copy of this entry re-expressed in `unit`."""
        return replace(self, unit=unit, value=value)
