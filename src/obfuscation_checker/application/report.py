#!/usr/bin/env python3

"""Text report for analyzed assemblies."""

from ..domain.models import FileAnalysis, Severity

INDENT = "   "


def format_report(analysis: FileAnalysis) -> list[str]:
    """Format the report lines of one analyzed file.

    Obfuscated assemblies get three detail lines; others get a single
    status line.

    Args:
        analysis: ANALYZED outcome

    Returns:
        Report lines without trailing newlines
    """
    result = analysis.result
    if result is None:
        raise ValueError(f"No evaluation result for {analysis.path}")

    name = analysis.assembly_name or analysis.path.stem
    severity = result.severity
    lines = [f"{name} {severity}"]

    if severity is Severity.OBFUSCATED:
        lines.extend(
            [
                f"{INDENT}Estimated renaming percentage: {result.renaming_percentage:.2%}",
                f"{INDENT}Module Initializer: {result.has_synthetic_initializer}",
                f"{INDENT}BabelObfuscator attribute: {result.has_marker_attribute}",
            ]
        )

    return lines


def print_report(analysis: FileAnalysis) -> None:
    """Print the report of one analyzed file to stdout."""
    for line in format_report(analysis):
        print(line)
