"""
Name transforms for deriving API names from storage names.

Storage names such as ``first_name`` or ``HTTPStatus2`` are split into words
and re-joined in the casing each API surface expects. Letters outside ASCII
are kept, so ``naïve_date`` becomes ``naïveDate``.
"""

import re

# Runs of letters and digits; underscores and punctuation separate words
_RUN_PATTERN = re.compile(r"[^\W_]+")


def _split_run(run: str) -> list[str]:
    # Breaks: letter/digit changes, lower-to-upper ("firstName"), and the last
    # capital of an acronym that starts a new word ("HTTPStatus")
    words = []
    start = 0
    for i in range(1, len(run)):
        prev, char = run[i - 1], run[i]
        if prev.isdigit() != char.isdigit():
            boundary = True
        elif char.isupper():
            following = run[i + 1] if i + 1 < len(run) else ""
            boundary = not prev.isupper() or (
                following.isalpha() and not following.isupper()
            )
        else:
            boundary = False
        if boundary:
            words.append(run[start:i])
            start = i
    words.append(run[start:])
    return words


def split_words(value: str) -> list[str]:
    """Split a name into its words, dropping separators."""
    return [word for run in _RUN_PATTERN.findall(value) for word in _split_run(run)]


def camel_case(value: str) -> str:
    """
    Convert a name to camelCase.

    Example:
        camel_case("first_name") == "firstName"
    """
    words = split_words(value)
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(word.capitalize() for word in rest)


def pascal_case(value: str) -> str:
    """Convert a name to PascalCase."""
    return "".join(word.capitalize() for word in split_words(value))


def upper_snake_case(value: str) -> str:
    """
    Convert a name to UPPER_SNAKE_CASE.

    Example:
        upper_snake_case("createdAt") == "CREATED_AT"
    """
    return "_".join(word.upper() for word in split_words(value))
