import re
from typing import Tuple

from roster.errors import ValidationError

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 50
GROUP_NAME_MAX_LENGTH = 100


def validate_credential(raw) -> Tuple[str, str]:
    """Normalize a login credential and return ``(kind, value)`` where kind is 'email' or 'username'."""
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError('Username or email is required')

    value = raw.strip()
    if '@' in value:
        if not EMAIL_PATTERN.match(value):
            raise ValidationError('Invalid email address')
        return 'email', value.lower()

    if not (USERNAME_MIN_LENGTH <= len(value) <= USERNAME_MAX_LENGTH):
        raise ValidationError(f'Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters')
    return 'username', value


def validate_group_name(raw) -> str:
    if not raw or not isinstance(raw, str):
        raise ValidationError('group_name is required')

    name = raw.strip()
    if not name:
        raise ValidationError('group_name cannot be empty')
    if len(name) > GROUP_NAME_MAX_LENGTH:
        raise ValidationError(f'group_name must be {GROUP_NAME_MAX_LENGTH} characters or less')
    return name


def validate_count(raw, maximum) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 1 or raw > maximum:
        raise ValidationError(f'Count must be a number between 1 and {maximum}')
    return raw
