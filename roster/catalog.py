"""
Course Catalog Module
Fixed list of courses and their minimum fees
Every catalog view and fee check reads config.COURSE_FEES
"""

from typing import List

from pydantic import BaseModel, ConfigDict

import config


class Course(BaseModel):
    """A catalog entry, carried by value on each student"""

    model_config = ConfigDict(frozen=True)

    name: str
    minimum_fee: int


def get_courses() -> List[Course]:
    """Get all catalog courses in display order"""
    return [
        Course(name=name, minimum_fee=fee)
        for name, fee in config.COURSE_FEES.items()
    ]


def get_minimum_fee(course_name: str) -> int:
    """
    Look up the minimum fee for a course

    Args:
        course_name: Course name as listed in the catalog

    Returns:
        Minimum fee, or 0 for a course that is not in the catalog
    """
    return config.COURSE_FEES.get(course_name, 0)


def course_label(course: Course) -> str:
    """Label used when offering the course as a choice"""
    return f"{course.name} - Fees: {course.minimum_fee}"
