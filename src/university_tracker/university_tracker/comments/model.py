from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Comment:
    """Free-form note posted by any signed-in user."""

    id: int
    title: str
    body: str
    created_by: str
    created_at: Optional[datetime] = None
