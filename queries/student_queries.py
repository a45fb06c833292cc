"""
Student-based queries over an in-memory collection of students.

This module provides six read-only projections/aggregations:
- Names with GPA appended
- Unique activities across all students
- Activity count per student name
- Names of students with more than two notebooks
- Bike model per student name
- Names of students with a GPA above 3.5

Every query is a pure function of its input: nothing is mutated, logged
or printed, and the empty collection yields an empty result.
"""

from collections import Counter
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set, Tuple
from database import Student

NO_BIKE = "No Bike"
HIGH_GPA_THRESHOLD = 3.5
NOTEBOOK_THRESHOLD = 2


class StudentQueries:
    """Queries for projecting and aggregating student records."""

    @staticmethod
    def validate_students(students: Optional[Iterable[Student]]) -> Tuple[Student, ...]:
        """
        Check that a student collection is well formed.

        Args:
            students: Collection to check; one-shot iterators are accepted

        Returns:
            The students as a tuple, safe to iterate more than once

        Raises:
            ValueError: If the collection is None or holds a None element
            TypeError: If the collection is not iterable or an element is not a Student
        """
        if students is None:
            raise ValueError("Student collection must not be None")

        students = tuple(students)
        for idx, student in enumerate(students):
            if student is None:
                raise ValueError(f"Student collection holds None at index {idx}")
            if not isinstance(student, Student):
                raise TypeError(
                    f"Expected Student at index {idx}, got {type(student).__name__}"
                )
        return students

    @staticmethod
    def names_with_gpa(students: Sequence[Student]) -> List[str]:
        """
        Get every student's name with their GPA appended.

        Args:
            students: Student collection

        Returns:
            List of "<name> - <gpa>" strings in input order

        Example:
            >>> StudentQueries.names_with_gpa(students)
            ['Jenny - 3.8', 'Mike - 3.2']
        """
        students = StudentQueries.validate_students(students)
        return [f"{student.name} - {student.gpa}" for student in students]

    @staticmethod
    def unique_activities(students: Sequence[Student]) -> Set[str]:
        """
        Get the set of all activities across every student.

        A student's own repeated activities collapse to one entry as well.
        """
        students = StudentQueries.validate_students(students)
        return {activity for student in students for activity in student.activities}

    @staticmethod
    def name_to_activity_count(students: Sequence[Student]) -> Dict[str, int]:
        """
        Map each student's name to how many activities they have.

        Students sharing a name collapse into one entry; the later student
        in input order wins.

        Example:
            >>> StudentQueries.name_to_activity_count(students)
            {'Jenny': 2, 'Mike': 1}
        """
        students = StudentQueries.validate_students(students)
        return {student.name: len(student.activities) for student in students}

    @staticmethod
    def names_with_more_than_two_notebooks(students: Sequence[Student]) -> List[str]:
        """Names of students with more than two notebooks, in input order."""
        students = StudentQueries.validate_students(students)
        return [student.name for student in students
                if student.note_books > NOTEBOOK_THRESHOLD]

    @staticmethod
    def name_to_bike_model(students: Sequence[Student]) -> Dict[str, str]:
        """
        Map each student's name to their bike model.

        Students without a bike, or whose bike has no model (None or empty),
        map to "No Bike". Duplicate names follow the same last-wins rule as
        name_to_activity_count.

        Example:
            >>> StudentQueries.name_to_bike_model(students)
            {'Jenny': 'BMX', 'Mike': 'No Bike'}
        """
        students = StudentQueries.validate_students(students)
        return {student.name: student.bike_model or NO_BIKE for student in students}

    @staticmethod
    def names_with_high_gpa(students: Sequence[Student]) -> List[str]:
        """Names of students whose GPA is strictly above 3.5, in input order."""
        students = StudentQueries.validate_students(students)
        return [student.name for student in students
                if student.gpa > HIGH_GPA_THRESHOLD]

    @staticmethod
    def duplicate_names(students: Sequence[Student]) -> List[str]:
        """
        Get names shared by more than one student.

        The name-keyed queries keep only one entry per name, so callers can
        use this to tell whether those results dropped anyone.

        Returns:
            Duplicated names in the order they first appear
        """
        students = StudentQueries.validate_students(students)
        counts = Counter(student.name for student in students)
        return [name for name, count in counts.items() if count > 1]


# Fixed order the queries are run and displayed in
QUERIES: Dict[str, Callable[[Sequence[Student]], object]] = {
    'names_with_gpa': StudentQueries.names_with_gpa,
    'unique_activities': StudentQueries.unique_activities,
    'name_to_activity_count': StudentQueries.name_to_activity_count,
    'names_with_more_than_two_notebooks': StudentQueries.names_with_more_than_two_notebooks,
    'name_to_bike_model': StudentQueries.name_to_bike_model,
    'names_with_high_gpa': StudentQueries.names_with_high_gpa,
}
