# --- src/physconst_core/units.py ---
import logging
from typing import Protocol, Tuple, runtime_checkable

import pint

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.debug("Pint Unit Registry initialized.")

#: Status codes returned by UnitConverter.convert. Zero is the only success value.
CONVERSION_OK = 0
CONVERSION_UNDEFINED_UNIT = 1
CONVERSION_DIMENSION_MISMATCH = 2
CONVERSION_PARSE_FAILURE = 3
CONVERSION_DISABLED = 4

#: pint base dimensions, in the order used by DimensionExponents (m, kg, s, K, A, mol, cd).
SI_BASE_DIMENSIONS = (
    "[length]", "[mass]", "[time]", "[temperature]",
    "[current]", "[substance]", "[luminosity]",
)


@runtime_checkable
class UnitConverter(Protocol):
    """
    The conversion service consumed by ConstantCatalog.

    `convert` never raises: a nonzero status means the conversion is not
    available (unknown unit, incompatible dimension, backend failure).
    """
    def convert(self, from_unit: str, to_unit: str, value: float) -> Tuple[int, float]:
        ...


class PintUnitConverter:
    """UnitConverter backed by a pint UnitRegistry (the shared `ureg` by default)."""

    def __init__(self, registry: pint.UnitRegistry = None):
        self._registry = registry if registry is not None else ureg

    def convert(self, from_unit: str, to_unit: str, value: float) -> Tuple[int, float]:
        try:
            source = self._registry.parse_expression(from_unit.strip())
            target = self._registry.parse_expression(to_unit.strip())
            # Expressions like '1/GeV^2' carry a numeric factor, so convert the ratio
            # rather than calling .to() with a unit string.
            converted = (value * source / target).m_as(self._registry.dimensionless)
        except pint.UndefinedUnitError as e:
            logger.debug(f"Conversion '{from_unit}' -> '{to_unit}' failed, undefined unit: {e}")
            return CONVERSION_UNDEFINED_UNIT, value
        except pint.DimensionalityError as e:
            logger.debug(f"Conversion '{from_unit}' -> '{to_unit}' failed, incompatible dimensions: {e}")
            return CONVERSION_DIMENSION_MISMATCH, value
        except (pint.PintError, ValueError, SyntaxError, TypeError, AttributeError, ArithmeticError) as e:
            logger.debug(f"Conversion '{from_unit}' -> '{to_unit}' failed, could not parse: {e}")
            return CONVERSION_PARSE_FAILURE, value

        logger.debug(f"Converted {value} '{from_unit}' to {converted} '{to_unit}'.")
        return CONVERSION_OK, float(converted)

    def conversion_factor(self, from_unit: str, to_unit: str) -> Tuple[int, float]:
        """Returns the factor that turns a value in `from_unit` into one in `to_unit`."""
        return self.convert(from_unit, to_unit, 1.0)


class NullUnitConverter:
    """UnitConverter used when unit conversion is disabled; every conversion fails."""

    def convert(self, from_unit: str, to_unit: str, value: float) -> Tuple[int, float]:
        logger.debug(f"Unit conversion disabled, not converting '{from_unit}' to '{to_unit}'.")
        return CONVERSION_DISABLED, value


def dimension_exponents(unit: str) -> Tuple[int, ...]:
    """
    Derives the seven SI dimension exponents (m, kg, s, K, A, mol, cd) of a unit string.

    Raises:
        ValueError: If the unit cannot be parsed or has a non-integer exponent.
    """
    if not unit.strip():
        return (0,) * len(SI_BASE_DIMENSIONS)
    try:
        dimensionality = ureg.parse_expression(unit).dimensionality
    except (pint.PintError, SyntaxError, TypeError, AttributeError) as e:
        raise ValueError(f"Cannot derive dimensions of unit '{unit}': {e}") from e

    exponents = []
    for dim in SI_BASE_DIMENSIONS:
        exponent = dimensionality.get(dim, 0)
        if exponent != int(exponent):
            raise ValueError(f"Unit '{unit}' has non-integer exponent {exponent} for {dim}.")
        exponents.append(int(exponent))
    return tuple(exponents)
