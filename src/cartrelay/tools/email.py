"""Email related tools."""

import re

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(email: str | None) -> bool:
    """Check the email is a single `local@domain.tld` token without whitespace."""
    if not isinstance(email, str):
        return False
    # fullmatch, because `$` would accept a trailing newline
    return EMAIL_PATTERN.fullmatch(email) is not None


def split_name(name: str | None) -> tuple[str, str]:
    """
    Split a full name into first and last name.

    The first token is the first name, the remaining tokens are joined back
    with a single space to form the last name.
    """
    first_name, *last_names = (name or "").split() or [""]
    return first_name, " ".join(last_names)
