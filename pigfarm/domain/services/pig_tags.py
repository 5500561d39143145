from __future__ import annotations

import re
from collections.abc import Iterable


def tag_prefix(farm_name: str | None) -> str:
    words = (farm_name or "").split()
    if not words:
        return "P"
    if len(words) >= 2:
        return f"{words[0][0]}{words[1][0]}".upper()
    return words[0][0].upper()


def next_pig_tag(farm_name: str | None, existing_tags: Iterable[str]) -> str:
    """Next sequential tag such as 'GF-007' for farm 'Green Fields'."""
    prefix = tag_prefix(farm_name)
    pattern = re.compile(rf"^{re.escape(prefix)}-(\d+)$")
    numbers = {int(m.group(1)) for tag in existing_tags if tag and (m := pattern.match(tag))}
    next_number = max(numbers, default=0) + 1
    return f"{prefix}-{next_number:03d}"
