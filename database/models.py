from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Bike:
    model: Optional[str] = None

    def __repr__(self):
        return f"<Bike {self.model or 'N/A'}>"


@dataclass(frozen=True)
class Student:
    name: str
    gpa: float
    note_books: int = 0
    activities: Tuple[str, ...] = field(default_factory=tuple)
    bike: Optional[Bike] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Student name must be a non-empty string")
        if self.note_books < 0:
            raise ValueError(f"Notebook count cannot be negative (got {self.note_books} for {self.name})")
        # Frozen dataclass, so normalize lists passed in by callers this way
        object.__setattr__(self, 'activities', tuple(self.activities))

    @property
    def bike_model(self) -> Optional[str]:
        """The bike's model, or None if there is no bike or no model."""
        if self.bike is None:
            return None
        return self.bike.model or None

    def __repr__(self):
        return f"<Student {self.name} ({self.gpa})>"
