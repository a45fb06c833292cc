from .models import Student, Bike
from .sample_data import get_all_students

__all__ = [
    'Student',
    'Bike',
    'get_all_students',
]
