from __future__ import annotations

import re

PHONE_NUMBER_LENGTH = 10
DEFAULT_COUNTRY_CODE = "+91"

# ASCII digits only; \d would also accept other Unicode digits
_PHONE_EDIT_PATTERN = re.compile(r"[0-9]{0,%d}" % PHONE_NUMBER_LENGTH)


def is_valid_phone_edit(value: str) -> bool:
    """True if `value` is zero to ten ASCII digits and nothing else."""
    return _PHONE_EDIT_PATTERN.fullmatch(value) is not None


def apply_phone_edit(current: str, proposed: str) -> str:
    """Return `proposed` if it is a valid edit, otherwise keep `current`."""
    return proposed if is_valid_phone_edit(proposed) else current


def is_complete_phone_number(value: str) -> bool:
    return len(value) == PHONE_NUMBER_LENGTH


def to_international(value: str, country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    return f"{country_code}{value}"
