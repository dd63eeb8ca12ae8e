# src/physconst_core/catalog/formatting.py
import textwrap
from typing import Iterable, List

from .entry import ConstantEntry, unit_system_tag
from .status import FindResult, FindStatus

SUMMARY_WIDTH = 75
FULL_SOURCE_WIDTH = 77
ENTRY_SOURCE_WIDTH = 71
DEFAULT_PRECISION = 6

FULL_LISTING_HEADER = [
    "name unit flag value units (m,kg,s,K,A,mol,cd)",
    "  source",
    "  alternate names",
    "-" * 78,
]


def format_value(value: float, precision: int = DEFAULT_PRECISION) -> str:
    return format(value, f".{precision}g")


def _display_unit(unit: str) -> str:
    return unit if unit else '""'


def _quoted(names: Iterable[str], quote: str = '"') -> str:
    return "".join(f"{quote}{n}{quote} " for n in names)


def format_summary(entries: Iterable[ConstantEntry], precision: int = DEFAULT_PRECISION) -> str:
    """One line per entry; lines longer than the summary width are cut and marked with '...'."""
    lines = []
    for entry in entries:
        text = f"{entry.name} {format_value(entry.value, precision)} {entry.unit} " + _quoted(entry.aliases, "'")
        wrapped = textwrap.wrap(text, SUMMARY_WIDTH) or [""]
        lines.append(wrapped[0] + ("..." if len(wrapped) > 1 else ""))
    return "".join(line + "\n" for line in lines)


def format_full(entries: Iterable[ConstantEntry], precision: int = DEFAULT_PRECISION) -> str:
    lines: List[str] = list(FULL_LISTING_HEADER)
    for entry in entries:
        d = entry.dimensions
        lines.append(
            f"{entry.name} {_display_unit(entry.unit)} {unit_system_tag(entry.unit_system)} "
            f"{format_value(entry.value, precision)} ({d.m},{d.kg},{d.s},{d.K},{d.A},{d.mol},{d.cd})"
        )
        lines.extend(f"  {line}" for line in textwrap.wrap(entry.source, FULL_SOURCE_WIDTH))
        if entry.aliases:
            lines.append("  " + _quoted(entry.aliases))
        else:
            lines.append("  (no alternate names)")
    return "".join(line + "\n" for line in lines)


def format_entry(entry: ConstantEntry, precision: int = DEFAULT_PRECISION) -> str:
    """Verbose multi-line description of a single entry."""
    d = entry.dimensions
    lines = [
        f"Name: {entry.name} unit: {_display_unit(entry.unit)} "
        f"flag: {unit_system_tag(entry.unit_system)} value: {format_value(entry.value, precision)}",
        f"  (m:{d.m},kg:{d.kg},s:{d.s},K:{d.K},A:{d.A},mol:{d.mol},cd:{d.cd})",
    ]
    for i, line in enumerate(textwrap.wrap(entry.source, ENTRY_SOURCE_WIDTH)):
        lines.append(f"  Source: {line}" if i == 0 else f"  {line}")
    if entry.aliases:
        lines.append("  Other names: " + _quoted(entry.aliases))
    else:
        lines.append("  (no alternate names)")
    return "".join(line + "\n" for line in lines)


def format_find_report(name: str, unit: str, result: FindResult, precision: int = DEFAULT_PRECISION) -> str:
    """Report of a search, listing every returned entry."""
    if result.status is FindStatus.NO_MATCHES:
        return f"No matches found for name {name}\n"

    header = f"Matches for {name}"
    # Only exact-name mismatches are flagged; pattern mismatches still name the requested unit.
    if result.status in (FindStatus.ONE_EXACT_MATCH_UNIT_MISMATCH, FindStatus.MULTI_EXACT_MATCH_UNIT_MISMATCH):
        header += " (no matching units)"
    elif unit:
        header += f" in {unit}"
    parts = [header + ":\n"]
    total = len(result.matches)
    for i, entry in enumerate(result.matches, start=1):
        parts.append(f"({i}/{total}) " + format_entry(entry, precision))
    return "".join(parts)
