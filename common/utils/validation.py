"""
Input validation helpers.

Example:
    from common.utils import validate_password, is_valid_email

    is_valid, errors = validate_password("abc")
    if not is_valid:
        print("Password errors:", errors)

    is_valid_email("ann@x.com")  # True
"""

import re
from typing import List, Tuple

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_valid_email(email: str) -> bool:
    """Check an address against the basic local@domain.tld shape."""
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def validate_password(
    password: str,
    min_length: int = 6,
    max_length: int = 128,
    require_uppercase: bool = False,
    require_lowercase: bool = False,
    require_digit: bool = False,
) -> Tuple[bool, List[str]]:
    """
    Validate password strength.

    Args:
        password: The password to validate
        min_length: Minimum password length
        max_length: Maximum password length
        require_uppercase: Require at least one uppercase letter
        require_lowercase: Require at least one lowercase letter
        require_digit: Require at least one digit

    Returns:
        Tuple of (is_valid: bool, errors: List[str])

    Examples:
        >>> validate_password("abc")
        (False, ['Password must be at least 6 characters long'])

        >>> validate_password("secret123")
        (True, [])
    """
    errors: List[str] = []

    if len(password) < min_length:
        errors.append(f"Password must be at least {min_length} characters long")

    if len(password) > max_length:
        errors.append(f"Password must be no more than {max_length} characters")

    if require_uppercase and not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")

    if require_lowercase and not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")

    if require_digit and not re.search(r"\d", password):
        errors.append("Password must contain at least one digit")

    return len(errors) == 0, errors
