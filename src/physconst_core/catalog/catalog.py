# src/physconst_core/catalog/catalog.py
"""
The constant lookup engine.

`find` resolves a free-form name and a requested unit to catalog entries in
two passes (exact alias match, then substring pattern match), then applies the
unit policy: direct unit compatibility first, conversion through the injected
UnitConverter second, and the unconverted matches as a last resort. Unit
variants of one quantity are collapsed by their quantity group.
"""
import logging
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from ..log_config import set_package_log_level
from ..units import CONVERSION_OK, NullUnitConverter, PintUnitConverter, Quantity, UnitConverter
from .entry import ConstantEntry
from .exceptions import (
    AmbiguousDeleteError,
    AmbiguousOrNotFoundError,
    DuplicateNameError,
    InvalidArgumentError,
    NotFoundError,
)
from .formatting import DEFAULT_PRECISION, format_entry, format_find_report, format_full, format_summary
from .loader import SeedTableLoader, load_builtin_entries
from .matching import NameMatcher, SubstringMatcher, dedupe_by_group, names_equal, normalize_name, unit_matches
from .status import FindResult, FindStatus, MatchKind, UnitOutcome

logger = logging.getLogger(__name__)


class ConstantCatalog:
    """
    An ordered, mutable collection of physical constants with unit-aware search.

    The catalog holds no global state: the unit converter and the seed entries
    are passed in explicitly (defaulting to pint and the packaged table). It does
    no locking; callers sharing one catalog between threads must serialize
    `add`/`remove` against searches themselves.
    """

    def __init__(self,
                 converter: Optional[UnitConverter] = None,
                 entries: Optional[Iterable[ConstantEntry]] = None,
                 matcher: Optional[NameMatcher] = None,
                 precision: int = DEFAULT_PRECISION):
        self._converter = converter if converter is not None else PintUnitConverter()
        self._matcher = matcher if matcher is not None else SubstringMatcher()
        self._entries: List[ConstantEntry] = list(entries) if entries is not None else load_builtin_entries()
        self.precision = precision
        logger.info(f"ConstantCatalog initialized with {len(self._entries)} entries.")

    @classmethod
    def from_settings(cls, settings) -> "ConstantCatalog":
        """Builds a catalog from a CatalogSettings object (see physconst_core.config)."""
        set_package_log_level(settings.log_level)
        loader = SeedTableLoader()
        entries = loader.load(settings.seed_file) if settings.seed_file is not None else None
        converter = PintUnitConverter() if settings.unit_conversion else NullUnitConverter()
        catalog = cls(converter=converter, entries=entries, precision=settings.precision)
        for table_path in settings.extra_tables:
            catalog.add_table(loader.load(table_path))
        return catalog

    # --- Container protocol ---

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ConstantEntry]:
        return iter(tuple(self._entries))

    @property
    def entries(self) -> Tuple[ConstantEntry, ...]:
        return tuple(self._entries)

    # --- Search ---

    def find(self, name: str, unit: str = "", verbose: int = 0) -> FindResult:
        """
        Searches the catalog for `name`, preferring entries in `unit`.

        `unit` may be an explicit unit string, 'mks', 'cgs', 'none' or 'any'; the
        empty string means no unit was requested. Never raises for a search
        outcome: the returned FindStatus tells the caller how the search resolved.
        """
        trace = _Tracer(verbose)
        query = normalize_name(name)
        trace(2, f"Normalized query '{name}' to '{query}'.")

        indexes = self._scan(query, names_equal, trace)
        kind = MatchKind.EXACT
        trace(2, f"Exact pass matched entries {indexes}.")
        if not indexes:
            indexes = self._scan(query, self._matcher.matches, trace)
            kind = MatchKind.PATTERN
            trace(2, f"Pattern pass matched entries {indexes}.")

        if not indexes:
            return FindResult(FindStatus.NO_MATCHES, [])

        candidates = [self._entries[i] for i in indexes]

        if len(candidates) == 1:
            entry = candidates[0]
            trace(2, f"One match '{entry.name}' in '{entry.unit}' ({entry.unit_system.value}); requested unit '{unit}'.")
            if unit_matches(unit, entry):
                return FindResult(FindStatus.from_outcome(kind, UnitOutcome.UNIT_OK, 1), [entry])
            if unit:
                converted = self._convert(entry, unit, trace)
                if converted is not None:
                    return FindResult(FindStatus.from_outcome(kind, UnitOutcome.UNIT_OK, 1), [converted])
            return FindResult(FindStatus.from_outcome(kind, UnitOutcome.UNIT_MISMATCH, 1), [entry])

        if not unit:
            trace(2, "Multiple matches found. No unit given.")
            return FindResult(FindStatus.from_outcome(kind, UnitOutcome.NO_UNIT, len(candidates)), candidates)

        compatible = [entry for entry in candidates if unit_matches(unit, entry)]
        if compatible:
            kept = dedupe_by_group(compatible)
            trace(2, f"{len(compatible)} of {len(candidates)} matches are compatible with '{unit}'; {len(kept)} after dedupe.")
            return FindResult(FindStatus.from_outcome(kind, UnitOutcome.UNIT_OK, len(kept)), kept)

        trace(2, f"Multiple name matches but none in unit '{unit}'; trying conversions.")
        converted_entries = []
        converted_groups = set()
        for entry in candidates:
            if entry.group_key in converted_groups:
                continue
            converted = self._convert(entry, unit, trace)
            if converted is not None:
                converted_groups.add(entry.group_key)
                converted_entries.append(converted)
        if converted_entries:
            return FindResult(FindStatus.from_outcome(kind, UnitOutcome.UNIT_OK, len(converted_entries)),
                              converted_entries)

        kept = dedupe_by_group(candidates)
        return FindResult(FindStatus.from_outcome(kind, UnitOutcome.UNIT_MISMATCH, len(kept)), kept)

    def find_unique(self, name: str, unit: str) -> float:
        """Value of the single entry matching `name` in `unit`; raises AmbiguousOrNotFoundError otherwise."""
        return self._find_unique_entry(name, unit).value

    def find_quantity(self, name: str, unit: str) -> Quantity:
        """Like find_unique, but returns the value with its unit attached as a pint Quantity."""
        entry = self._find_unique_entry(name, unit)
        return Quantity(entry.value, entry.unit)

    def find_print(self, name: str, unit: str = "", precision: Optional[int] = None, verbose: int = 0) -> str:
        """Runs find() and renders its outcome as a human-readable report."""
        result = self.find(name, unit, verbose)
        return format_find_report(name, unit, result, self.precision if precision is None else precision)

    def _find_unique_entry(self, name: str, unit: str) -> ConstantEntry:
        status, matches = self.find(name, unit)
        if not status.is_unique:
            raise AmbiguousOrNotFoundError(name=name, unit=unit, status=status)
        return matches[0]

    def _scan(self, query: str, predicate: Callable[[str, str], bool], trace: "_Tracer") -> List[int]:
        """Indexes of entries with at least one alias satisfying predicate(query, alias)."""
        indexes = []
        for i, entry in enumerate(self._entries):
            for alias in entry.names:
                matched = predicate(query, normalize_name(alias))
                trace(3, f"'{query}' vs entry {i} alias '{alias}': {matched}")
                if matched:
                    indexes.append(i)
                    break
        return indexes

    def _convert(self, entry: ConstantEntry, unit: str, trace: "_Tracer") -> Optional[ConstantEntry]:
        trace(1, f"Trying to convert '{entry.name}' from '{entry.unit}' to '{unit}'.")
        status, value = self._converter.convert(entry.unit, unit, entry.value)
        if status != CONVERSION_OK:
            trace(1, f"Conversion from '{entry.unit}' to '{unit}' unavailable (status {status}).")
            return None
        return entry.with_unit(unit, value)

    # --- Mutation ---

    def add(self, entry: ConstantEntry) -> None:
        """Appends a new constant; none of its names may already be in the catalog."""
        if not entry.names:
            raise InvalidArgumentError(details="Cannot add a constant with no names.")
        existing = {alias for e in self._entries for alias in e.names}
        clashes = tuple(alias for alias in entry.names if alias in existing)
        if clashes:
            raise DuplicateNameError(names=clashes)
        self._entries.append(entry)
        logger.info(f"Added constant '{entry.name}' with value {entry.value} '{entry.unit}'.")

    def add_table(self, entries: Iterable[ConstantEntry]) -> None:
        """
        Appends a batch of entries, such as a loaded extra table. Unit variants of
        the same quantity inside the batch may share names; nothing else may
        reuse a name already in the catalog or in another quantity of the batch.
        """
        entries = list(entries)
        if any(not entry.names for entry in entries):
            raise InvalidArgumentError(details="Cannot add a constant with no names.")
        existing = {alias for e in self._entries for alias in e.names}
        owner = {}
        clashes = set()
        for entry in entries:
            for alias in entry.names:
                if alias in existing or owner.setdefault(alias, entry.group_key) != entry.group_key:
                    clashes.add(alias)
        if clashes:
            raise DuplicateNameError(names=tuple(sorted(clashes)))
        self._entries.extend(entries)
        logger.info(f"Added {len(entries)} constant entries.")

    def remove(self, name: str) -> ConstantEntry:
        """Removes the single entry that has `name` as its name or one of its aliases."""
        matching = [i for i, entry in enumerate(self._entries) if name in entry.names]
        if not matching:
            raise NotFoundError(name=name)
        if len(matching) > 1:
            raise AmbiguousDeleteError(name=name, count=len(matching))
        removed = self._entries.pop(matching[0])
        logger.info(f"Removed constant '{removed.name}' with value {removed.value} '{removed.unit}'.")
        return removed

    # --- Listings ---

    def list_summary(self) -> str:
        return format_summary(self._entries, self.precision)

    def list_full(self) -> str:
        return format_full(self._entries, self.precision)

    def print_entry(self, entry: ConstantEntry) -> str:
        return format_entry(entry, self.precision)


class _Tracer:
    """Emits search trace messages, promoted from DEBUG to INFO by the caller's verbosity."""

    def __init__(self, verbose: int):
        self._verbose = verbose

    def __call__(self, threshold: int, message: str):
        level = logging.INFO if self._verbose >= threshold else logging.DEBUG
        if logger.isEnabledFor(level):
            logger.log(level, f"find(): {message}")
