"""
Formatting utilities for displaying query results.

This module provides functions to format query results into readable text
for console output.
"""

from typing import Dict


QUERY_LABELS = {
    'names_with_gpa': "Names with GPA",
    'unique_activities': "Unique Activities",
    'name_to_activity_count': "Name to Activity Count",
    'names_with_more_than_two_notebooks': "Names with >2 Notebooks",
    'name_to_bike_model': "Name to Bike Model",
    'names_with_high_gpa': "Names with High GPA",
}


class QueryFormatter:
    """Utilities for formatting query results into readable text."""

    @staticmethod
    def format_result(value) -> str:
        """
        Format a single query result.

        Lists keep their order, sets are sorted so output is stable between
        runs, and mappings render as {key=value, ...} in insertion order.

        Args:
            value: A list, set or dict returned by a query

        Returns:
            Single-line string suitable for display
        """
        if isinstance(value, dict):
            pairs = ", ".join(f"{key}={val}" for key, val in value.items())
            return f"{{{pairs}}}"
        if isinstance(value, (set, frozenset)):
            value = sorted(value)
        return f"[{', '.join(str(item) for item in value)}]"

    @staticmethod
    def label_for(key: str) -> str:
        """Human readable label for a query key, falling back to the key itself."""
        return QUERY_LABELS.get(key, key.replace('_', ' ').capitalize())

    @staticmethod
    def format_query_line(key: str, value) -> str:
        return f"{QueryFormatter.label_for(key)}: {QueryFormatter.format_result(value)}"

    @staticmethod
    def format_report(results: Dict[str, object], title: str = "STUDENT QUERIES") -> str:
        """
        Format a full report with one line per query.

        Args:
            results: Query key to result, in display order
            title: Banner title

        Returns:
            Formatted multi-line string suitable for display
        """
        lines = []
        lines.append("=" * 80)
        lines.append(title)
        lines.append("=" * 80)

        if not results:
            lines.append("No queries were run.")
        for key, value in results.items():
            lines.append(QueryFormatter.format_query_line(key, value))

        lines.append("=" * 80)

        return "\n".join(lines)
