# src/physconst_core/catalog/status.py
import logging
from enum import Enum
from typing import List, NamedTuple

from .entry import ConstantEntry

logger = logging.getLogger(__name__)


class MatchKind(Enum):
    """Which name-matching pass produced the candidates."""
    EXACT = "exact"
    PATTERN = "pattern"


class UnitOutcome(Enum):
    """How the requested unit was resolved against the candidates."""
    UNIT_OK = "unit_ok"
    UNIT_MISMATCH = "unit_mismatch"
    NO_UNIT = "no_unit"


class FindStatus(Enum):
    """
    Closed set of outcomes of ConstantCatalog.find.
    Each member's value is a tuple: (code, description).
    """
    NO_MATCHES = (0, "No constant matched the requested name.")
    ONE_EXACT_MATCH_UNIT_OK = (1, "One exact name match with a matching (or converted) unit.")
    ONE_PATTERN_MATCH_UNIT_OK = (2, "One pattern name match with a matching (or converted) unit.")
    ONE_EXACT_MATCH_UNIT_MISMATCH = (3, "One exact name match, but its unit differs from the requested unit.")
    ONE_PATTERN_MATCH_UNIT_MISMATCH = (4, "One pattern name match, but its unit differs from the requested unit.")
    MULTI_EXACT_MATCH_NO_UNIT = (5, "Several exact name matches and no unit was requested.")
    MULTI_PATTERN_MATCH_NO_UNIT = (6, "Several pattern name matches and no unit was requested.")
    MULTI_EXACT_MATCH_UNIT_OK = (7, "Several exact name matches with a matching (or converted) unit.")
    MULTI_PATTERN_MATCH_UNIT_OK = (8, "Several pattern name matches with a matching (or converted) unit.")
    MULTI_EXACT_MATCH_UNIT_MISMATCH = (9, "Several exact name matches, none in the requested unit.")
    MULTI_PATTERN_MATCH_UNIT_MISMATCH = (10, "Several pattern name matches, none in the requested unit.")

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def description(self) -> str:
        return self.value[1]

    @property
    def match_kind(self):
        if self is FindStatus.NO_MATCHES:
            return None
        return MatchKind.EXACT if "_EXACT_" in self.name else MatchKind.PATTERN

    @property
    def is_unit_ok(self) -> bool:
        return self.name.endswith("_UNIT_OK")

    @property
    def is_unique(self) -> bool:
        """True when find resolved to exactly one unit-compatible entry."""
        return self in (FindStatus.ONE_EXACT_MATCH_UNIT_OK, FindStatus.ONE_PATTERN_MATCH_UNIT_OK)

    @classmethod
    def from_outcome(cls, kind: MatchKind, outcome: UnitOutcome, count: int) -> "FindStatus":
        """Selects the status for `count` returned entries found by `kind` with `outcome`."""
        if count == 0:
            return cls.NO_MATCHES
        multiplicity = "ONE" if count == 1 else "MULTI"
        return cls[f"{multiplicity}_{kind.name}_MATCH_{outcome.name}"]

    def __str__(self):
        return f"{self.name} ({self.code})"


class FindResult(NamedTuple):
    """Status and entries returned by ConstantCatalog.find."""
    status: FindStatus
    matches: List[ConstantEntry]
