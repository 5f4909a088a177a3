"""Mini README: Persistence for finwallet users.

Exposes ``UserDataStorage`` which writes and reads a versioned JSON snapshot
of every user, validated through the pydantic records in ``schema``.
"""

from .repository import UserDataStorage
from .schema import SnapshotRecord

__all__ = ["SnapshotRecord", "UserDataStorage"]
