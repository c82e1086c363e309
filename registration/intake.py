"""
Student Intake Module
Collects the details of a new student through the prompter
Re-asks the whole form until the fees cover the course minimum
"""

import logging
from typing import Optional

import config
from roster.catalog import get_courses, course_label
from roster.models import PaymentMethod, StudentIntake
from registration.prompts import ConsolePrompter


FEE_WARNING = (
    "Warning: Entered fees are less than the specified fees for the course. "
    "Please enter the correct fees."
)


class StudentIntakeForm:
    """
    Student intake procedure
    Prompts for id, name, age, course, fees and payment method in order
    """

    def __init__(self, prompter: Optional[ConsolePrompter] = None):
        self.prompter = prompter or ConsolePrompter()
        self._setup_logging()

    def _setup_logging(self):
        """Setup registration logging"""
        self.logger = logging.getLogger('StudentIntake')
        self.logger.setLevel(config.LOG_LEVEL)

        if config.LOG_TO_FILE and not self.logger.handlers:
            handler = logging.FileHandler(config.REGISTRATION_LOG)
            formatter = logging.Formatter(
                config.LOG_FORMAT,
                datefmt=config.LOG_DATE_FORMAT
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def collect(self) -> StudentIntake:
        """
        Run the form until a valid set of answers is entered

        Returns:
            StudentIntake built from the last answers given
        """
        while True:
            intake = self._ask_all()

            if intake.meets_minimum_fee:
                return intake

            print(FEE_WARNING)
            self.logger.warning(
                f"Fees rejected for id={intake.id}: {intake.fees} < "
                f"{intake.minimum_fee} ({intake.course.name})"
            )

    def _ask_all(self) -> StudentIntake:
        """Ask every field once"""
        answers = {}
        answers['id'] = self.prompter.ask_number("Enter ID:")
        answers['name'] = self.prompter.ask_text("Enter Name:")
        answers['age'] = self.prompter.ask_number("Enter Age:")
        answers['course'] = self.prompter.ask_choice(
            "Choose Course:",
            [(course_label(course), course) for course in get_courses()]
        )
        answers['fees'] = self.prompter.ask_number(
            f"Enter Fees (Course: {answers['course'].name}):", cast=float
        )
        answers['payment_method'] = self.prompter.ask_choice(
            "Choose Payment Method:",
            [(method.value, method) for method in PaymentMethod]
        )

        return StudentIntake(**answers)
