"""
Field rules shared by create and update.
"""

from typing import Optional

MIN_AGE = 0
MAX_AGE = 100


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_valid_salary(salary: int) -> bool:
    return salary >= 0


def is_valid_age(age: int) -> bool:
    return MIN_AGE <= age <= MAX_AGE


def is_valid_email(email: Optional[str]) -> bool:
    """
    Minimal email shape check.

    Exactly one '@', not in the first position, and a non-empty domain that
    contains a '.'. Nothing else is checked.

    Args:
        email: Raw email string, surrounding whitespace allowed

    Returns:
        True if the trimmed value has the expected shape
    """
    if email is None:
        return False
    e = email.strip()
    at = e.find("@")
    if at <= 0 or at != e.rfind("@"):
        return False
    domain = e[at + 1:]
    return bool(domain) and "." in domain
