from .connection import Base, SessionLocal, engine
from .models import AuditSnapshotRow

__all__ = [
    "AuditSnapshotRow",
    "Base",
    "SessionLocal",
    "engine",
]
