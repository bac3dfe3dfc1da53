"""
Database Models

SQLAlchemy ORM models for report storage.
"""

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base

from report_service.models.report import utc_now

Base = declarative_base()


class ReportDB(Base):
    """Lost/stolen report database model"""

    __tablename__ = "reports"
    __table_args__ = (
        CheckConstraint("status IN ('lost', 'stolen', 'recovered')", name="ck_reports_status"),
    )

    # Internal row id; never exposed, `ref` is the external handle
    id = Column(Integer, primary_key=True, autoincrement=True)
    ref = Column(String(36), nullable=False, unique=True)
    imei = Column(String(15), nullable=False, index=True)
    status = Column(String(16), nullable=False)
    brand = Column(String(100), nullable=True)
    model = Column(String(100), nullable=True)
    color = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    lost_date = Column(String(50), nullable=True)
    location = Column(Text, nullable=True)
    contact_name = Column(String(255), nullable=True)
    contact_email = Column(String(255), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    police_report = Column(String(100), nullable=True)
    is_public = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utc_now, index=True)

    def __repr__(self):
        return f"<ReportDB(ref='{self.ref}', status='{self.status}')>"
