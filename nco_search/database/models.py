from sqlalchemy import Column, DateTime, Float, Integer, String, Text

from nco_search.database.connection import Base


class AuditSnapshotRow(Base):
    """One search audit entry inside the persisted (capped) window."""

    __tablename__ = "search_audit_snapshot"

    id             = Column(String,  primary_key=True)        # "log_<ms>_<suffix>"
    position       = Column(Integer, nullable=False, index=True)  # 0 = oldest in window
    timestamp      = Column(DateTime(timezone=True), nullable=False, index=True)
    query          = Column(Text,    nullable=False)
    filters_json   = Column(Text,    nullable=False)          # SearchFilters as JSON
    results_count  = Column(Integer, nullable=False)
    user_id        = Column(String,  nullable=True)
    session_id     = Column(String,  nullable=False, index=True)
    search_time_ms = Column(Float,   nullable=False)
    language       = Column(String,  nullable=False)
    input_method   = Column(String,  nullable=False)          # "text" | "voice"
