"""Column name validation."""

from __future__ import annotations

import re

from colprov.errors import InvalidInput

# ASCII alphanumerics, underscore and precomposed Hangul syllables.
COLUMN_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_가-힣]+$")


def validate_column_name(column_name: object) -> str:
    """Return the name unchanged or raise InvalidInput.

    The name is later interpolated into DDL, so nothing outside the allowed
    character class may pass.
    """
    if not isinstance(column_name, str) or not column_name:
        raise InvalidInput("Column name is required.", code="missing_column_name")
    if not COLUMN_NAME_PATTERN.fullmatch(column_name):
        raise InvalidInput(
            "Column name may only contain letters, digits, Hangul and underscores.",
            code="invalid_column_name",
        )
    return column_name
