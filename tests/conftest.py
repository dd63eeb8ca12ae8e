# tests/conftest.py
from pathlib import Path
from typing import Dict, List, Tuple

import pytest

from physconst_core import ConstantCatalog, ConstantEntry, DimensionExponents, UnitSystem
from physconst_core.units import CONVERSION_DIMENSION_MISMATCH, CONVERSION_OK


class RecordingConverter:
    """
    UnitConverter test double. Converts only the (from, to) pairs it is given a
    factor for and records every call it receives.
    """
    def __init__(self, factors: Dict[Tuple[str, str], float] = None):
        self.factors = dict(factors or {})
        self.calls: List[Tuple[str, str, float]] = []

    def convert(self, from_unit: str, to_unit: str, value: float):
        self.calls.append((from_unit, to_unit, value))
        factor = self.factors.get((from_unit, to_unit))
        if factor is None:
            return CONVERSION_DIMENSION_MISMATCH, value
        return CONVERSION_OK, value * factor


SPEED_OF_LIGHT_MKS = ConstantEntry(
    names=("speed of light", "c"), unit="m/s", unit_system=UnitSystem.MKS,
    value=2.998e8, source="exact", dimensions=DimensionExponents(1, 0, -1),
)
SPEED_OF_LIGHT_CGS = ConstantEntry(
    names=("speed of light", "c"), unit="cm/s", unit_system=UnitSystem.CGS,
    value=2.998e10, source="exact", dimensions=DimensionExponents(1, 0, -1),
)
AVOGADRO = ConstantEntry(
    names=("Avogadro's number", "na", "avogadro"), unit="", unit_system=UnitSystem.NONE,
    value=6.02214076e23, source="exact",
)
BOHR_RADIUS = ConstantEntry(
    names=("Bohr radius", "rbohr"), unit="m", unit_system=UnitSystem.MKS,
    value=5.29177210903e-11, source="CODATA 2018", dimensions=DimensionExponents(1),
)


@pytest.fixture
def recording_converter():
    return RecordingConverter()


@pytest.fixture
def small_catalog(recording_converter):
    """Two unit variants of the speed of light plus two single-unit constants."""
    return ConstantCatalog(
        converter=recording_converter,
        entries=[SPEED_OF_LIGHT_MKS, SPEED_OF_LIGHT_CGS, AVOGADRO, BOHR_RADIUS],
    )


@pytest.fixture
def builtin_catalog():
    """A catalog seeded from the packaged table with pint-backed unit conversion."""
    return ConstantCatalog()


# Helper to write constant tables for loader and settings tests
def write_table(directory: Path, text: str, filename: str = "table.yaml") -> Path:
    path = directory / filename
    path.write_text(text, encoding="utf-8")
    return path


MINIMAL_TABLE = """
symbols:
  two: 2.0
quantities:
  - names: ["widget constant", "wc"]
    source: "test fixture"
    variants:
      - {unit: "m", system: mks, value: "two*3"}
      - {unit: "cm", system: cgs, value: 600}
  - names: ["pure number", "pn"]
    variants:
      - {unit: "", system: none, value: 0.5}
"""
