"""
nco_search/database/connection.py

SQLAlchemy engine, session factory and declarative base for the audit
snapshot table.

Environment variables
---------------------
DATABASE_URL   SQLAlchemy URL (default: sqlite:///./nco_audit.db)
"""

import os

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./nco_audit.db")

_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=_connect_args)
SessionLocal = sessionmaker(autoflush=False, bind=engine)
Base = declarative_base()
