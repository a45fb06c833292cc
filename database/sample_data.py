"""
Bundled sample dataset.

Stands in for the student data source: every call hands back a fresh list
built from the same fixed records, so callers can never see each other's
changes to the list itself.
"""

from typing import List
from .models import Student, Bike


def get_all_students() -> List[Student]:
    """
    Get all students in the sample dataset.

    Returns:
        List of Student records in a fixed order

    Example:
        >>> students = get_all_students()
        >>> print(f"Loaded {len(students)} students")
    """
    return [
        Student("Adam", 3.6, 11, ["swimming", "basketball", "volleyball"],
                bike=Bike("Client123")),
        Student("Jenny", 3.8, 12, ["swimming", "gymnastics", "soccer"],
                bike=Bike("BMX")),
        Student("Emily", 4.0, 10, ["swimming", "gymnastics", "aerobics"]),
        Student("Dave", 4.0, 2, ["swimming", "gymnastics", "soccer"],
                bike=Bike(None)),  # Owns a bike, model unknown
        Student("Sophia", 3.5, 15, ["swimming", "dancing", "football"]),
        Student("James", 3.9, 1, ["swimming", "basketball", "baseball", "football"],
                bike=Bike("Mountain")),
    ]
