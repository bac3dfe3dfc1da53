"""Database layer"""

from .client import DatabaseClient, db_client, get_db
from .models import Base, ReportDB

__all__ = ["DatabaseClient", "db_client", "get_db", "Base", "ReportDB"]
