from __future__ import annotations

import re
from datetime import date
from typing import Any, Dict, List

from taskboard.models.task import Priority

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
ALLOWED_PRIORITIES = [p.value for p in Priority]


def is_valid_date(value: Any) -> bool:
    """
    True for a real calendar date in YYYY-MM-DD form.
    The parsed date must format back to the exact input, so 2023-02-30 fails.
    Year 0000 is rejected: Python dates start at year 1.
    """
    if not value or not isinstance(value, str):
        return False
    if not _DATE_RE.fullmatch(value):
        return False
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return False
    return parsed.isoformat() == value


def _is_blank_or_not_text(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def validate_task_payload(payload: Dict[str, Any], for_update: bool = False) -> List[str]:
    """
    Check a task payload and return every violated rule (empty list = valid).
    A key counts as provided whenever it is present, even with a null value.
    """
    errors: List[str] = []

    if not for_update:
        if _is_blank_or_not_text(payload.get("title")):
            errors.append("Title is required when creating a task and must not be empty.")
    elif "title" in payload and _is_blank_or_not_text(payload["title"]):
        errors.append("If provided, title must be a non-empty string.")

    if "description" in payload and not isinstance(payload["description"], str):
        errors.append("Description must be a string.")

    if "completed" in payload and not isinstance(payload["completed"], bool):
        errors.append("Completed must be a boolean.")

    if "priority" in payload and payload["priority"] not in ALLOWED_PRIORITIES:
        errors.append(f"Priority must be one of: {', '.join(ALLOWED_PRIORITIES)}.")

    if "dueDate" in payload and not is_valid_date(payload["dueDate"]):
        errors.append("Due date must use the YYYY-MM-DD format and be a valid date.")

    return errors
