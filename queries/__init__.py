"""
Query modules for projecting student data.

This package provides a clean interface for querying student collections
without coupling to any specific output layer.
"""

from .student_queries import StudentQueries, QUERIES, NO_BIKE
from .formatting import QueryFormatter, QUERY_LABELS

__all__ = [
    'StudentQueries',
    'QUERIES',
    'NO_BIKE',
    'QueryFormatter',
    'QUERY_LABELS',
]
