from .audit_log import AUDIT_SNAPSHOT_LIMIT, AuditLogStore
from .models import AuditEntry, AuditStats, InputMethod
from .snapshot import AuditSnapshot, SqlAuditSnapshot

__all__ = [
    "AUDIT_SNAPSHOT_LIMIT",
    "AuditEntry",
    "AuditLogStore",
    "AuditSnapshot",
    "AuditStats",
    "InputMethod",
    "SqlAuditSnapshot",
]
