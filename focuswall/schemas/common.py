# focuswall/schemas/common.py
from typing import Optional

# Version written into every persisted goal and task record
CURRENT_SCHEMA_VERSION = 2

# Longest accepted goal name / task title
MAX_TITLE_LENGTH = 100


def strip_text(value: Optional[str]) -> Optional[str]:
    if isinstance(value, str):
        return value.strip()
    return value


def strip_optional_text(value: Optional[str]) -> Optional[str]:
    """Trim free text; an empty string means "not set"."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value
