"""
Input validation and normalization for user fields.

Each helper returns the value as it should be stored, or raises
``ValidationError`` with a client-facing message.
"""

from __future__ import annotations

from ..errors import ValidationError


def normalize_email(email: str) -> str:
    """Trim and lower-case an email address for storage and comparison."""
    return email.strip().lower()


def clean_name(name: str | None, *, required: bool = True) -> str:
    """Return the trimmed name, rejecting blank values."""
    if name is None or not name.strip():
        if required:
            raise ValidationError("Name is required and cannot be empty")
        raise ValidationError("Name cannot be empty")
    return name.strip()


def clean_email(email: str | None, *, required: bool = True) -> str:
    """Return the normalized email, rejecting blank values and values without '@'."""
    if email is None or not email.strip():
        if required:
            raise ValidationError("Email is required and cannot be empty")
        raise ValidationError("Email cannot be empty")
    if "@" not in email:
        raise ValidationError("Email must be a valid email address")
    return normalize_email(email)
