from __future__ import annotations

import re

# whitespace, dashes, underscores and commas never carry meaning in a course code
_STRIP_RE = re.compile(r"[\s\-_,]+")


def normalize_course_id(raw: str) -> str:
    """Canonical lookup key for a course code.

    "cs-200", "  cs 200 " and "CS_200" all become "CS200".
    An empty result means there was no usable identifier.
    """
    s = _STRIP_RE.sub("", str(raw or ""))
    return s.upper().strip()
