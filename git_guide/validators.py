"""Field grammars checked while collecting commit message input."""

import re

from git_guide.config import MAX_DESCRIPTION_LENGTH, WORK_ITEM_PATTERN


_WORK_ITEM_RE = re.compile(WORK_ITEM_PATTERN)


def valid_work_item(value: str) -> bool:
    """Return True if *value* is a work item such as ``bcds-42`` or ``bcds-42-login``."""

    return _WORK_ITEM_RE.fullmatch(value) is not None


def valid_short_description(value: str) -> bool:
    """Return True for a trimmed description of 1-50 characters that starts
    with a lowercase letter and does not end with a period."""

    value = value.strip()
    if not value or len(value) > MAX_DESCRIPTION_LENGTH:
        return False
    if not value[0].islower():
        return False
    return not value.endswith(".")
