# src/physconst_core/catalog/loader.py
import functools
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import cerberus
import sympy
import yaml

from ..units import dimension_exponents
from .entry import ConstantEntry, DimensionExponents, UnitSystem
from .exceptions import CatalogDataError, SchemaValidationError

logger = logging.getLogger(__name__)

BUILTIN_TABLE_PATH = Path(__file__).parent / "data" / "constants.yaml"

SYMBOL_NAME_REGEX = r"^[a-zA-Z_][a-zA-Z0-9_]*$"


class TableValidator(cerberus.Validator):
    """Cerberus validator with the extra rules needed by constant tables."""
    def __init__(self, *args, **kwargs):
        super(TableValidator, self).__init__(*args, **kwargs)
        self.rules['unique_items'] = {'schema': {'type': 'boolean'}}

    def _validate_unique_items(self, constraint: bool, field: str, value: Any):
        """{'type': 'boolean'}"""
        if not constraint or not isinstance(value, list):
            return
        seen = set()
        duplicates = set()
        for item in value:
            if item in seen:
                duplicates.add(item)
            seen.add(item)
        if duplicates:
            self._error(field, f"Duplicate names within one quantity: {sorted(duplicates)}")


class SeedTableLoader:
    """
    Loads a YAML constant table into ConstantEntry objects.

    Every quantity in the table lists its names once and one or more unit
    variants. The variants become adjacent entries sharing the same names and
    quantity group, which is what find() relies on to collapse unit variants.
    """
    _variant_schema = {
        "unit": {"type": "string", "required": True},
        "system": {"type": "string", "required": True, "allowed": [s.value for s in UnitSystem]},
        "value": {"type": ["number", "string"], "required": True},
        "dimensions": {"type": "list", "required": False, "minlength": 7, "maxlength": 7, "schema": {"type": "integer"}},
        "source": {"type": "string", "required": False},
    }

    _quantity_schema = {
        "names": {"type": "list", "required": True, "minlength": 1, "unique_items": True,
                  "schema": {"type": "string", "empty": False}},
        "source": {"type": "string", "required": False, "default": ""},
        "variants": {"type": "list", "required": True, "minlength": 1,
                     "schema": {"type": "dict", "schema": _variant_schema}},
    }

    _schema = {
        "version": {"type": "string", "required": False},
        "symbols": {"type": "dict", "required": False,
                    "keysrules": {"type": "string", "regex": SYMBOL_NAME_REGEX},
                    "valuesrules": {"type": ["number", "string"]}},
        "quantities": {"type": "list", "required": True, "minlength": 1,
                       "schema": {"type": "dict", "schema": _quantity_schema}},
    }

    def __init__(self):
        self._validator = TableValidator(self._schema)
        self._validator.allow_unknown = False

    def load(self, table_path: Union[str, Path]) -> List[ConstantEntry]:
        """Parses, validates and evaluates a table file, returning its entries in table order."""
        path = Path(table_path).resolve()
        logger.debug(f"Loading constant table: {path}")
        content = self._load_yaml(path)
        if not self._validator.validate(content):
            raise SchemaValidationError(self._validator.errors, path)
        document = self._validator.document

        namespace = self._evaluate_symbols(document.get("symbols", {}), path)

        entries: List[ConstantEntry] = []
        owner_of_name: Dict[str, str] = {}
        for quantity in document["quantities"]:
            names = tuple(quantity["names"])
            group = names[0]
            for alias in names:
                if alias in owner_of_name:
                    raise CatalogDataError(
                        details=f"Name '{alias}' of '{group}' is already used by '{owner_of_name[alias]}'.",
                        file_path=path,
                    )
                owner_of_name[alias] = group

            for variant in quantity["variants"]:
                entries.append(self._build_entry(names, group, quantity["source"], variant, namespace, path))

        logger.info(f"Loaded {len(entries)} constant entries from '{path.name}'.")
        return entries

    def _build_entry(self, names: Tuple[str, ...], group: str, source: str,
                     variant: Dict[str, Any], namespace: Dict[str, sympy.Basic], path: Path) -> ConstantEntry:
        unit = variant["unit"]
        value = self._evaluate(variant["value"], namespace, path, context=f"{group} [{unit}]")
        if "dimensions" in variant:
            dimensions = DimensionExponents(*variant["dimensions"])
        else:
            try:
                dimensions = DimensionExponents(*dimension_exponents(unit))
            except ValueError as e:
                raise CatalogDataError(details=f"Quantity '{group}': {e}", file_path=path) from e
        return ConstantEntry(
            names=names,
            unit=unit,
            unit_system=UnitSystem(variant["system"]),
            value=value,
            source=variant.get("source", source),
            dimensions=dimensions,
            group=group,
        )

    def _evaluate_symbols(self, raw_symbols: Dict[str, Any], path: Path) -> Dict[str, sympy.Basic]:
        """Evaluates the 'symbols' section in order; later symbols may use earlier ones."""
        namespace: Dict[str, sympy.Basic] = {}
        for symbol_name, raw_value in raw_symbols.items():
            namespace[symbol_name] = sympy.Float(self._evaluate(raw_value, namespace, path, context=f"symbol '{symbol_name}'"))
        return namespace

    @staticmethod
    def _evaluate(raw_value: Union[int, float, str], namespace: Dict[str, sympy.Basic],
                  path: Path, context: str) -> float:
        if isinstance(raw_value, (int, float)):
            value = float(raw_value)
        else:
            try:
                expr = sympy.sympify(raw_value, locals=dict(namespace)).evalf()
            except (sympy.SympifyError, SyntaxError, TypeError, ValueError) as e:
                raise CatalogDataError(details=f"Cannot parse value '{raw_value}' of {context}: {e}", file_path=path) from e
            if expr.free_symbols:
                unknown = sorted(str(s) for s in expr.free_symbols)
                raise CatalogDataError(details=f"Value '{raw_value}' of {context} uses undefined symbol(s): {unknown}",
                                       file_path=path)
            try:
                value = float(expr)
            except TypeError as e:
                raise CatalogDataError(details=f"Value '{raw_value}' of {context} is not a real number.", file_path=path) from e
        if not math.isfinite(value):
            raise CatalogDataError(details=f"Value '{raw_value}' of {context} is not finite.", file_path=path)
        return value

    def _load_yaml(self, source: Path) -> Dict[str, Any]:
        """Loads and performs basic sanity checks on a YAML file."""
        if not source.is_file():
            raise CatalogDataError(details=f"Constant table not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except PermissionError as e:
            raise CatalogDataError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise CatalogDataError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
        if content is None:
            raise CatalogDataError(details="The YAML file is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise CatalogDataError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)
        return content


@functools.lru_cache(maxsize=1)
def _builtin_entries() -> Tuple[ConstantEntry, ...]:
    return tuple(SeedTableLoader().load(BUILTIN_TABLE_PATH))


def load_builtin_entries() -> List[ConstantEntry]:
    """Entries of the packaged constant table, parsed once per process."""
    return list(_builtin_entries())
