"""Verdict rendering.

Nothing is printed unless verbose output was requested; the exit
status is the authoritative answer either way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fqdncheck.output.console import create_console, get_output

if TYPE_CHECKING:
    from fqdncheck.domain.verdict import Verdict

VALID_SUMMARY = "The string is a valid FQDN."
INVALID_SUMMARY = "The string is not a valid FQDN."


def format_verdict(verdict: Verdict, *, verbose: bool = False, color: bool = False) -> str:
    """Format a Verdict for display.

    Args:
        verdict: The validation outcome.
        verbose: If False, return an empty string.
        color: Style the lines with ANSI codes (stdout is a terminal).
    """
    if not verbose:
        return ""
    console = create_console(color=color)
    if verdict.ok:
        console.print(VALID_SUMMARY, style="check.ok", markup=False)
    else:
        if verdict.error is not None:
            console.print(verdict.error.message, style="check.detail", markup=False)
        console.print(INVALID_SUMMARY, style="check.error", markup=False)
    return get_output(console).rstrip("\n")
