"""Human/JSON output selection.

The CLI renders ServiceResult for humans through Rich (see
:mod:`fluentlink.output.renderers`) or for machines as JSON (--json).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fluentlink.output.renderers import render_result

if TYPE_CHECKING:
    from fluentlink.services.result import ServiceResult


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    verbose: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        verbose: Show error detail and extra columns in human output.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    return render_result(result, verbose=verbose)
