# src/physconst_core/errors.py
import logging
from abc import abstractmethod
from typing import Any, Dict, Protocol
from typing import runtime_checkable

logger = logging.getLogger(__name__)

REPORT_TITLE = "physconst_core: Actionable Diagnostic Report"
REPORT_WIDTH = 72

# Context keys rendered in the report header, in display order.
_CONTEXT_LABELS = (
    ("query", "Query"),
    ("unit", "Unit"),
    ("status", "Find Status"),
    ("source_file", "Source File"),
)

# --- User-Facing Exception Hierarchy ---

class PhysConstError(Exception):
    """Base class for all custom, user-facing errors in physconst_core."""
    pass


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """
    Anything that can describe its own failure as a multi-line report.
    Lets callers (an interactive session, a notebook, a logging hook) render any
    catalog failure without knowing its concrete type.
    """
    def get_diagnostic_report(self) -> str:
        ...

class DiagnosableError(PhysConstError, Diagnosable):
    """
    Concrete, catchable base class for every diagnosable error in the package.

    Subclasses must implement `get_diagnostic_report`.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        raise NotImplementedError


# --- Stateless Formatting Utility ---

def _format_context_value(key: str, value: Any) -> str:
    # Query and unit are user input; quote them so empty strings stay visible.
    if key in ("query", "unit"):
        return f"'{value}'"
    return str(value)


def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    Builds the report text shared by all diagnosable errors.

    Args:
        error_type: Short category shown in the header (e.g., "Constant Not Found").
        details: What went wrong; may span several lines.
        suggestion: What the user can do about it; omitted when empty.
        context: Optional header fields: 'query', 'unit', 'status', 'source_file'.
            An empty query, status or file is skipped; a unit is shown unless it is None.

    Returns:
        The report, framed by a title banner and a closing rule.
    """
    lines = [
        "\n",
        f" {REPORT_TITLE} ".center(REPORT_WIDTH, "="),
        f"Error Type:     {error_type}",
    ]
    for key, label in _CONTEXT_LABELS:
        value = context.get(key)
        shown = value is not None if key == "unit" else bool(value)
        if shown:
            lines.append(f"{label + ':':<16}{_format_context_value(key, value)}")

    lines.append("\nDetails:")
    lines.extend(f"  {line}" for line in details.splitlines())

    if suggestion:
        lines.append("\nSuggestion:")
        lines.extend(f"  {line}" for line in suggestion.splitlines())

    lines.append("=" * REPORT_WIDTH)
    return "\n".join(lines)
