from school_registry.models.school import School
from school_registry.models.teacher import Teacher

__all__ = [
    "School",
    "Teacher",
]
