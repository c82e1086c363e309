"""
Roster Data Models
Student records and the structured result of student intake
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from roster.catalog import Course, get_minimum_fee


class PaymentMethod(str, Enum):
    """Accepted ways of paying course fees"""

    CREDIT_CARD = "Credit Card"
    DEBIT_CARD = "Debit Card"
    NET_BANKING = "Net Banking"
    CASH = "Cash"


class Student(BaseModel):
    """
    One enrolled learner
    Ids are not required to be unique within a roster
    """

    model_config = ConfigDict(extra='forbid')

    id: int
    name: str
    age: int
    course: Course
    fees: float
    payment_method: PaymentMethod

    def summary(self) -> str:
        """Single-line listing used by the roster display"""
        return (
            f"ID: {self.id}  Name: {self.name}  Age: {self.age}  "
            f"Course: {self.course.name}  Fees: {format_amount(self.fees)}  "
            f"Payment Method: {self.payment_method.value}"
        )


class StudentIntake(BaseModel):
    """
    Answers gathered by the intake form
    Missing or unexpected fields are rejected on construction
    """

    model_config = ConfigDict(extra='forbid')

    id: int
    name: str
    age: int
    course: Course
    fees: float
    payment_method: PaymentMethod

    @property
    def minimum_fee(self) -> int:
        """Catalog minimum for the chosen course"""
        return get_minimum_fee(self.course.name)

    @property
    def meets_minimum_fee(self) -> bool:
        """True when the entered fees cover the course minimum"""
        return self.fees >= self.minimum_fee

    def to_student(self) -> Student:
        """Build the roster record from these answers"""
        return Student(**self.model_dump())


def format_amount(amount: float) -> str:
    """Render whole amounts without a trailing .0, others as stored"""
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)
