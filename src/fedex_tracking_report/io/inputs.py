from __future__ import annotations

from pathlib import Path
from typing import List


def read_tracking_numbers(path: Path) -> List[str]:
    """Newline-separated tracking numbers; blank lines and padding are dropped."""
    text = Path(path).read_text(encoding="utf-8-sig")
    return [line.strip() for line in text.splitlines() if line.strip()]
