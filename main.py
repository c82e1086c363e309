"""
Student Management System - Main Entry Point
Interactive menu for adding, removing and listing students
"""

import sys
import logging
from enum import Enum
from typing import Optional

import config
from roster.store import RosterStore
from registration.prompts import ConsolePrompter
from registration.intake import StudentIntakeForm


class MenuChoice(Enum):
    """Top-level menu options"""

    ADD_STUDENT = "Add Student"
    REMOVE_STUDENT = "Remove Student"
    DISPLAY_STUDENTS = "Display Students"
    EXIT = "Exit"


class StudentManagementSystem:
    """
    Main session controller
    Runs the menu loop against an explicitly owned roster store
    """

    def __init__(self, store: Optional[RosterStore] = None,
                 prompter: Optional[ConsolePrompter] = None):
        self.store = store if store is not None else RosterStore()
        self.prompter = prompter or ConsolePrompter()
        self.intake_form = StudentIntakeForm(self.prompter)

        self._setup_logging()

    def _setup_logging(self):
        """Setup session logging"""
        self.logger = logging.getLogger('StudentManagementSystem')
        self.logger.setLevel(config.LOG_LEVEL)

        if config.LOG_TO_FILE and not self.logger.handlers:
            handler = logging.FileHandler(config.SYSTEM_LOG)
            formatter = logging.Formatter(
                config.LOG_FORMAT,
                datefmt=config.LOG_DATE_FORMAT
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def show_banner(self):
        """Print the welcome banner"""
        print(config.WELCOME_MESSAGE)

    def run(self) -> RosterStore:
        """
        Menu loop, repeated until Exit is chosen

        Returns:
            The roster store as left by the session
        """
        self.logger.info(f"{config.SYSTEM_NAME} v{config.VERSION} session started")

        actions = {
            MenuChoice.ADD_STUDENT: self.add_student,
            MenuChoice.REMOVE_STUDENT: self.remove_student,
            MenuChoice.DISPLAY_STUDENTS: self.display_students,
        }

        while True:
            choice = self.prompter.ask_choice(
                "What would you like to do?",
                [(option.value, option) for option in MenuChoice]
            )

            if choice is MenuChoice.EXIT:
                print(config.EXIT_MESSAGE)
                self.logger.info(f"Session ended with {len(self.store)} student(s)")
                return self.store

            actions[choice]()

    def add_student(self):
        """Run the intake form and enroll the result"""
        intake = self.intake_form.collect()
        self.store.add(intake.to_student())
        print("Student added successfully!")

    def remove_student(self):
        """Ask for an id and remove matching students"""
        student_id = self.prompter.ask_number("Enter ID of student to remove:")
        result = self.store.remove(student_id)
        print(result.message)

    def display_students(self):
        """Print the current roster"""
        self.store.display_students()


def main() -> int:
    """Main entry point"""
    system = StudentManagementSystem()
    system.show_banner()
    system.run()
    return 0


def run():
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    run()
