# src/physconst_core/catalog/matching.py
"""
Name normalization, name matching and unit compatibility rules used by
ConstantCatalog.find.

Queries and aliases are compared after `normalize_name`, which strips
whitespace and ASCII punctuation but keeps '+' and '-' so that charged
particles ('msigma+' vs 'msigma-') stay distinct. Because every other ASCII
punctuation character is removed, wildcard or regex metacharacters never
survive into a normalized query; the pattern pass is therefore a literal,
case-insensitive substring search.
"""
import logging
import re
import string
from typing import Iterable, List, Protocol

from .entry import ConstantEntry, UnitSystem

logger = logging.getLogger(__name__)

# '+' and '-' distinguish entries such as 'sigma+' and 'sigma-'.
KEPT_PUNCTUATION = "+-"
_STRIPPED_CHARS = set(string.punctuation) - set(KEPT_PUNCTUATION)


def normalize_name(name: str) -> str:
    """Removes whitespace and punctuation (except '+' and '-') from a name."""
    return "".join(ch for ch in name if not ch.isspace() and ch not in _STRIPPED_CHARS)


class NameMatcher(Protocol):
    """Strategy for the second (pattern) pass of a constant search."""
    def matches(self, query: str, alias: str) -> bool:
        """Both arguments are already normalized."""
        ...


class SubstringMatcher:
    """Matches when the query occurs anywhere inside the alias, ignoring case."""

    def matches(self, query: str, alias: str) -> bool:
        return re.search(re.escape(query), alias, re.IGNORECASE) is not None


def names_equal(query: str, alias: str) -> bool:
    """Exact-pass comparison of two normalized names."""
    return query.casefold() == alias.casefold()


def unit_matches(requested: str, entry: ConstantEntry) -> bool:
    """
    Decides whether `entry` satisfies the requested unit without conversion.

    'any' accepts everything, '' and 'none' accept only unit-less entries,
    'mks' and 'cgs' accept their own system plus unit-less entries, and any
    other string must equal the entry's unit (case-insensitively).
    """
    keyword = requested.casefold()
    if keyword == "any":
        return True
    if keyword in ("", "none"):
        return entry.unit_system is UnitSystem.NONE
    if keyword == "mks":
        return entry.unit_system in (UnitSystem.MKS, UnitSystem.NONE)
    if keyword == "cgs":
        return entry.unit_system in (UnitSystem.CGS, UnitSystem.NONE)
    return keyword == entry.unit.casefold()


def dedupe_by_group(entries: Iterable[ConstantEntry]) -> List[ConstantEntry]:
    """Keeps the first entry of every quantity group, preserving order."""
    seen = set()
    kept = []
    for entry in entries:
        if entry.group_key in seen:
            continue
        seen.add(entry.group_key)
        kept.append(entry)
    return kept
