# tests/test_matching.py

import pytest

from physconst_core.catalog.matching import (
    SubstringMatcher,
    dedupe_by_group,
    names_equal,
    normalize_name,
    unit_matches,
)
from physconst_core.catalog import ConstantEntry, UnitSystem


def make_entry(system: UnitSystem, unit: str = "m", names=("thing",), group=None) -> ConstantEntry:
    return ConstantEntry(names=names, unit=unit, unit_system=system, value=1.0, group=group)


# =========================================================================
# === Name normalization
# =========================================================================

@pytest.mark.parametrize("raw, expected", [
    ("speed of light", "speedoflight"),
    ("  Avogadro's number ", "Avogadrosnumber"),
    ("zeta(3/2)", "zeta32"),
    ("msigma+", "msigma+"),
    ("mass sigma-minus", "masssigma-minus"),
    ("r☉", "r☉"),
    ("b'", "b"),
    ("zzz_not_a_constant", "zzznotaconstant"),
])
def test_normalize_name(raw, expected):
    assert normalize_name(raw) == expected


@pytest.mark.parametrize("raw", ["speed of light", "m Σ+", "a.b*c?d[e]", "x - y + z", "ħ c", ""])
def test_normalize_name_is_idempotent(raw):
    once = normalize_name(raw)
    assert normalize_name(once) == once


def test_plus_and_minus_always_survive():
    assert normalize_name("+ - +-") == "+-+-"


def test_names_equal_ignores_case():
    assert names_equal("speedoflight", "SpeedOfLight")
    assert not names_equal("msigma+", "msigma-")


# =========================================================================
# === Pattern matching
# =========================================================================

def test_substring_matcher_is_case_insensitive():
    matcher = SubstringMatcher()
    assert matcher.matches("sigma", "mSigma+")
    assert matcher.matches("", "anything")
    assert not matcher.matches("sigmaz", "msigma0")


def test_substring_matcher_treats_query_literally():
    """Regex metacharacters in the query must not act as wildcards."""
    matcher = SubstringMatcher()
    assert not matcher.matches("m+", "mmm")
    assert matcher.matches("a+", "sigma+")


# =========================================================================
# === Unit compatibility
# =========================================================================

@pytest.mark.parametrize("requested, system, unit, expected", [
    ("any", UnitSystem.MKS, "m", True),
    ("ANY", UnitSystem.OTHER, "GeV", True),
    ("", UnitSystem.NONE, "", True),
    ("", UnitSystem.MKS, "m", False),
    ("none", UnitSystem.NONE, "", True),
    ("None", UnitSystem.CGS, "cm", False),
    ("mks", UnitSystem.MKS, "m", True),
    ("MKS", UnitSystem.NONE, "", True),
    ("mks", UnitSystem.CGS, "cm", False),
    ("cgs", UnitSystem.CGS, "cm", True),
    ("cgs", UnitSystem.NONE, "", True),
    ("cgs", UnitSystem.OTHER, "GeV", False),
    ("gev", UnitSystem.OTHER, "GeV", True),
    ("km", UnitSystem.MKS, "m", False),
])
def test_unit_matches(requested, system, unit, expected):
    assert unit_matches(requested, make_entry(system, unit)) is expected


# =========================================================================
# === Quantity-group de-duplication
# =========================================================================

def test_dedupe_keeps_first_entry_of_each_group():
    first = make_entry(UnitSystem.MKS, "m", names=("x", "y"))
    second = make_entry(UnitSystem.MKS, "km", names=("x", "y"))
    other = make_entry(UnitSystem.CGS, "cm", names=("z",))
    assert dedupe_by_group([first, second, other]) == [first, other]


def test_dedupe_uses_explicit_group_ids():
    a = make_entry(UnitSystem.MKS, "m", names=("a",), group="shared")
    b = make_entry(UnitSystem.CGS, "cm", names=("b",), group="shared")
    assert dedupe_by_group([a, b]) == [a]
