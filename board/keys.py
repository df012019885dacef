# ============================================
# board/keys.py
# ============================================
import re
from typing import Optional


def next_issue_key(last_key: Optional[str], prefix: str) -> str:
    """
    Next sequential key after ``last_key`` for ``prefix``.

    A missing or foreign key restarts the sequence at 1. The number is
    zero-padded to four digits and grows past that without truncation:
    APP-0007 -> APP-0008, APP-9999 -> APP-10000.
    """
    match = re.fullmatch(rf"{re.escape(prefix)}-(\d+)", last_key or "")
    number = int(match.group(1)) + 1 if match else 1
    return f"{prefix}-{number:04d}"
