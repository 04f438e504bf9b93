"""
Optional value formatting.
"""

NAME_NOT_PROVIDED = "Name not provided"


def format_optional_length(value: str | None) -> str:
    """
    Describe an optional string by its length.

    Returns the character length as text when a value is present
    (an empty string counts as present), otherwise a fixed fallback.
    """
    if value is None:
        return NAME_NOT_PROVIDED
    return str(len(value))
