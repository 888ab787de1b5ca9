"""Download request entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class DownloadRequest:
    """A recorded CV download. Immutable once created."""

    email: str
    purpose: str
    timestamp: datetime
    id: Optional[str] = None
