"""Formatting of ServiceResult for stdout/stderr.

Successful results print their data as one line of normalized JSON, or a
Rich table when a human asked for one. Failures print a one-line error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from saltbox_facts.output.normalize import dumps_normalized

if TYPE_CHECKING:
    from saltbox_facts.services.result import ServiceResult


def format_result(result: ServiceResult, *, table: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        table: Render IP facts as a Rich table instead of JSON.
    """
    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {error_msg}"
    if table:
        from saltbox_facts.output.renderers import render_ip_table

        return render_ip_table(result.data)
    return dumps_normalized(result.data)
