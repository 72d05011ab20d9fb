"""Input validation utilities for the taxpayer application.

Only required-field checks are performed; values are stripped of
surrounding whitespace and otherwise stored exactly as entered.
"""
from typing import Optional

from utils.constants import FIELD_LABELS, TAXPAYER_FIELDS


class ValidationError(ValueError):
    """Raised when input validation fails.

    Attributes:
        fields: Names of the fields that failed validation.
    """

    def __init__(self, message: str, fields: tuple = ()):
        super().__init__(message)
        self.fields = tuple(fields)


def clean_text(text: Optional[str]) -> str:
    """Convert input to a stripped string ('' for None)."""
    if text is None:
        return ''
    return str(text).strip()


def validate_taxpayer(tid, first_name, last_name, address) -> dict:
    """Validate all four taxpayer fields are present.

    Args:
        tid: Taxpayer identifier
        first_name: First name
        last_name: Last name
        address: Postal address

    Returns:
        Record dict with stripped values

    Raises:
        ValidationError: If any field is empty. ``fields`` lists every
            empty field, in form order.
    """
    record = dict(zip(TAXPAYER_FIELDS, map(clean_text, (tid, first_name, last_name, address))))

    missing = tuple(field for field in TAXPAYER_FIELDS if not record[field])
    if missing:
        labels = ', '.join(FIELD_LABELS[field] for field in missing)
        raise ValidationError(f"Required: {labels}", missing)

    return record


def missing_flags(error: ValidationError) -> list:
    """Map a validation error to per-field ``invalid`` flags in form order."""
    return [field in error.fields for field in TAXPAYER_FIELDS]
