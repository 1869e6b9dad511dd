# helpers.py - Utility functions and helper methods
from typing import Any, Dict, List, Mapping, Optional

from .constants import JOB_FIELDS


def clean_text(s: Optional[str]) -> str:
    """Drop carriage returns so every line break is a bare newline."""
    if not isinstance(s, str):
        return ""
    return s.replace("\r", "")


def split_lines(s: str) -> List[str]:
    """Trimmed, non-empty lines of already cleaned text."""
    return [line.strip() for line in s.split("\n") if line.strip()]


def blank_record() -> Dict[str, str]:
    """A Job Record with every field empty."""
    return {f: "" for f in JOB_FIELDS}


def merge_fields(current: Mapping[str, str], parsed: Mapping[str, Any]) -> Dict[str, str]:
    """Overlay parsed values on the current record; keys absent from parsed keep their value."""
    merged = dict(current)
    for key, value in parsed.items():
        if key in merged and value is not None:
            merged[key] = str(value)
    return merged
