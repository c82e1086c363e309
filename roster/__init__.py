"""
Roster module
Student records, course catalog and the in-memory roster
"""

from .catalog import Course, get_courses, get_minimum_fee, course_label
from .models import PaymentMethod, Student, StudentIntake
from .store import RosterStore, RemoveResult

__all__ = [
    'Course', 'get_courses', 'get_minimum_fee', 'course_label',
    'PaymentMethod', 'Student', 'StudentIntake',
    'RosterStore', 'RemoveResult',
]
