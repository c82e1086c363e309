"""
Student registration module
Console prompts and the student intake form
"""

from .prompts import ConsolePrompter
from .intake import StudentIntakeForm, FEE_WARNING

__all__ = ['ConsolePrompter', 'StudentIntakeForm', 'FEE_WARNING']
