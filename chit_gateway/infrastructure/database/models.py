"""SQLAlchemy ORM models for chit parameters"""

import uuid
from sqlalchemy import Column, Date, DateTime, Integer, Numeric, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class Chit(Base):
    """Chit group parameters; the payment schedule is derived, never stored"""

    __tablename__ = "chit"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    chit_amount = Column(Numeric(14, 2), nullable=False)
    members_count = Column(Integer, nullable=False)
    months = Column(Integer, nullable=False)
    base_monthly_payment = Column(Numeric(14, 2), nullable=False)
    post_take_monthly_payment = Column(Numeric(14, 2), nullable=False)
    start_date = Column(Date, nullable=True)
    status = Column(Text, nullable=False, default="active")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
