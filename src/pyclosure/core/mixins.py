"""Text report formatting shared by result dataclasses."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

REPORT_WIDTH = 80
METRIC_WIDTH = 40


class ResultSummaryMixin:
    """Helpers for building fixed-width ``summary()`` reports.

    Result classes inherit these as static methods and assemble the report
    line by line: a header, one or more sections of dotted metric rows,
    optional truncated lists, and a timing footer.
    """

    @staticmethod
    def _format_header(title: str, width: int = REPORT_WIDTH) -> str:
        border = "=" * width
        return f"{border}\n{title.center(width).rstrip()}\n{border}"

    @staticmethod
    def _format_value(value: Any) -> str:
        """Render a metric value: Yes/No for bools, 4 decimals for floats."""
        if isinstance(value, bool):
            return "Yes" if value else "No"
        if value is None:
            return "N/A"
        if isinstance(value, float):
            return f"{value:.4f}"
        if isinstance(value, int):
            return f"{value:,}"
        return str(value)

    @classmethod
    def _format_metric(cls, label: str, value: Any, width: int = METRIC_WIDTH) -> str:
        """Format ``label ..... value`` padded to *width*."""
        text = cls._format_value(value)
        dots = "." * max(1, width - len(label) - len(text) - 2)
        return f"  {label} {dots} {text}"

    @staticmethod
    def _format_section(title: str) -> str:
        return f"\n{title}:\n{'-' * len(title)}"

    @staticmethod
    def _format_list(items: Sequence[Any], max_items: int = 5, item_name: str = "item") -> str:
        """Numbered list, truncated after *max_items* with a count of the rest."""
        if not items:
            return "  (none)"
        lines = [f"  {n}. {item}" for n, item in enumerate(items[:max_items], start=1)]
        hidden = len(items) - max_items
        if hidden > 0:
            lines.append(f"  ... and {hidden} more {item_name}(s)")
        return "\n".join(lines)

    @staticmethod
    def _format_footer(computation_time_ms: float, width: int = REPORT_WIDTH) -> str:
        if computation_time_ms >= 1000:
            elapsed = f"{computation_time_ms / 1000:.2f} s"
        else:
            elapsed = f"{computation_time_ms:.2f} ms"
        return f"\nComputation Time: {elapsed}\n{'=' * width}"
