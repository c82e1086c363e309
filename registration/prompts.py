"""
Console Prompt Module
Line-based prompts that return typed answers
Re-asks until the answer has the requested shape
"""

from typing import Any, Callable, Sequence, Tuple


class ConsolePrompter:
    """
    Reads answers from an input function (console by default)
    Faults raised by the input function itself are not handled here
    """

    def __init__(self, input_func: Callable[[str], str] = input):
        self.input_func = input_func

    def ask_text(self, message: str) -> str:
        """Ask for free text"""
        return self.input_func(f"{message} ").strip()

    def ask_number(self, message: str, cast: Callable[[str], Any] = int):
        """
        Ask for a number

        Args:
            message: Prompt text
            cast: Conversion applied to the answer (int, float, ...)

        Returns:
            The converted answer
        """
        while True:
            answer = self.ask_text(message)
            try:
                return cast(answer)
            except ValueError:
                print("[ERROR] Please enter a valid number")

    def ask_choice(self, message: str, choices: Sequence[Tuple[str, Any]]):
        """
        Ask the user to pick one of several options

        Args:
            message: Prompt text
            choices: (label, value) pairs in display order

        Returns:
            The value of the chosen option
        """
        print(f"\n{message}")
        for i, (label, _) in enumerate(choices, 1):
            print(f"{i}. {label}")

        labels = {label.lower(): value for label, value in choices}

        while True:
            answer = self.ask_text(f"Enter choice (1-{len(choices)}):")

            if answer.isdecimal() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1][1]
            if answer.lower() in labels:
                return labels[answer.lower()]

            print("[ERROR] Invalid choice")
