"""Interactive confirmation before wiping every release of a project."""

from __future__ import annotations

import re
from typing import Callable

ANSI_YELLOW = "\033[33m"
ANSI_RESET = "\033[0m"

AFFIRMATIVE_PATTERN = re.compile(r"^(Y(es)?)?$", re.IGNORECASE)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]
ConfirmFunc = Callable[[str], bool]


def is_affirmative(answer: str) -> bool:
    """Return True for an empty answer, "y" or "yes" in any case."""
    return AFFIRMATIVE_PATTERN.match(answer.rstrip("\r\n")) is not None


def confirm_destruction(
    subject_name: str,
    *,
    skip_prompt: bool = False,
    input_func: InputFunc | None = None,
    output_func: OutputFunc | None = None,
) -> bool:
    """
    Warn that every release of subject_name is about to be removed and ask once.

    Args:
        subject_name: Project name shown in the warning
        skip_prompt: If True, skip the prompt and return True
        input_func: Reads one line of user input given a prompt (default: input)
        output_func: Writes one line to the terminal (default: print)

    Returns:
        bool: True if the user accepted (an empty answer accepts), False otherwise
    """
    if skip_prompt:
        return True
    read = input_func or input
    write = output_func or print

    write(ANSI_YELLOW)
    message = (
        f"THIS WILL REMOVE ALL RELEASES AND RELATED CONFIGURATION FOR {subject_name.upper()}!\n"
        "Are you absolutely sure you want to proceed?\n"
    )
    try:
        answer = read(message + " [Yn]: ")
    except EOFError:
        answer = None
    write(ANSI_RESET)
    if answer is None:
        write("Confirmation not received.")
        return False
    return is_affirmative(answer)
