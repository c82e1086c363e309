"""
Roster Store Module
In-memory, insertion-ordered collection of students
Reports remove/list outcomes as statuses rather than errors
"""

import logging
from enum import Enum
from typing import List

import config
from roster.models import Student


class RemoveResult(Enum):
    """Outcome of a remove request, with the message shown to the user"""

    REMOVED = "Student removed successfully!"
    NOT_FOUND = "Student not found with the provided ID. No student removed."
    EMPTY = "No students found. Cannot remove student."

    @property
    def message(self) -> str:
        return self.value


class RosterStore:
    """
    Owns the students enrolled during the current session
    Nothing is persisted; the roster is discarded with the store
    """

    EMPTY_MESSAGE = "No students found."

    def __init__(self):
        # Insertion order is listing order
        self._students: List[Student] = []

        self._setup_logging()

    def _setup_logging(self):
        """Setup roster logging"""
        self.logger = logging.getLogger('RosterStore')
        self.logger.setLevel(config.LOG_LEVEL)

        if config.LOG_TO_FILE and not self.logger.handlers:
            handler = logging.FileHandler(config.ROSTER_LOG)
            formatter = logging.Formatter(
                config.LOG_FORMAT,
                datefmt=config.LOG_DATE_FORMAT
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def __len__(self) -> int:
        return len(self._students)

    def add(self, student: Student):
        """
        Append a student to the roster

        Ids are not checked for uniqueness, so a second student with an
        existing id is kept alongside the first.

        Args:
            student: Student to enroll
        """
        self._students.append(student)
        self.logger.info(
            f"Student added: {student.name} (id={student.id}, "
            f"course={student.course.name}, fees={student.fees})"
        )

    def remove(self, student_id: int) -> RemoveResult:
        """
        Remove every student with the given id

        Args:
            student_id: Id to remove

        Returns:
            RemoveResult describing what happened
        """
        if not self._students:
            self.logger.info(f"Remove id={student_id}: roster is empty")
            return RemoveResult.EMPTY

        initial_count = len(self._students)
        self._students = [s for s in self._students if s.id != student_id]

        if len(self._students) == initial_count:
            self.logger.info(f"Remove id={student_id}: not found")
            return RemoveResult.NOT_FOUND

        removed = initial_count - len(self._students)
        self.logger.info(f"Remove id={student_id}: {removed} student(s) removed")
        return RemoveResult.REMOVED

    def list_students(self) -> List[Student]:
        """Snapshot of all students in insertion order"""
        return list(self._students)

    def display_students(self) -> int:
        """
        Print the roster

        Returns:
            Number of students printed
        """
        students = self.list_students()

        if not students:
            print(self.EMPTY_MESSAGE)
            return 0

        print("List of Students:")
        for student in students:
            print(student.summary())

        return len(students)
