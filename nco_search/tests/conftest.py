import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from nco_search.audit import AuditLogStore, SqlAuditSnapshot
from nco_search.catalog import default_catalog, load_catalog
from nco_search.database.connection import Base
from nco_search.engine import SearchEngine


def make_record(code="1000", title="Test Worker", description="Does test work",
                division="9", sector="Testing", keywords=("test",),
                skill_level=1, tasks=("Run tests",), **overrides) -> dict:
    record = {
        "code": code,
        "title": title,
        "description": description,
        "division": division,
        "division_title": f"Division {division}",
        "group": f"{division}1",
        "group_title": "Group",
        "sub_group": f"{division}11",
        "sub_group_title": "Sub-group",
        "sector": sector,
        "keywords": list(keywords),
        "skill_level": skill_level,
        "tasks": list(tasks),
    }
    record.update(overrides)
    return record


@pytest.fixture()
def catalog():
    return default_catalog()


@pytest.fixture()
def session_factory():
    """Isolated in-memory SQLite database per test.

    StaticPool ensures every SQLAlchemy checkout reuses the same underlying
    connection, which is required for in-memory SQLite (each real connection
    would otherwise get its own empty database).
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield sessionmaker(autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def snapshot(session_factory):
    return SqlAuditSnapshot(session_factory=session_factory)


@pytest.fixture()
def audit_store(snapshot):
    return AuditLogStore(snapshot=snapshot)


@pytest.fixture()
def engine(catalog, audit_store):
    """SearchEngine over the bundled catalog, audit snapshot in memory."""
    return SearchEngine(catalog, audit_store=audit_store)


@pytest.fixture()
def tiny_catalog():
    """Three records that all mention 'worker', two of them identical in text."""
    return load_catalog([
        make_record(code="A", title="Farm Worker", keywords=("farm", "worker")),
        make_record(code="B", title="Farm Worker", keywords=("farm", "worker")),
        make_record(code="C", title="Dock Worker", keywords=("dock", "worker"),
                    division="8", sector="Transport", skill_level=2),
    ])
