from safetext.parser import parse
from safetext.sanitize import (
    DEFAULT_DENYLIST,
    extract_text,
    remove_denylisted,
    sanitize_to_text,
)

__all__ = [
    "DEFAULT_DENYLIST",
    "extract_text",
    "parse",
    "remove_denylisted",
    "sanitize_to_text",
]
