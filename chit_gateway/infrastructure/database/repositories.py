"""Data access layer for chit entities"""

import uuid
from datetime import date
from decimal import Decimal
from typing import Optional
from sqlalchemy.orm import Session
from chit_gateway.infrastructure.database.models import Chit
from chit_gateway.domain.models import ChitParameters


class ChitRepository:
    """Repository for chit parameters"""

    def __init__(self, db: Session):
        self.db = db

    def create_chit(
        self,
        name: str,
        chit_amount: Decimal,
        params: ChitParameters,
        start_date: Optional[date] = None,
    ) -> Chit:
        """Persist chit parameters; one month per member"""
        db_chit = Chit(
            name=name,
            chit_amount=chit_amount,
            members_count=params.members_count,
            months=params.members_count,
            base_monthly_payment=params.base_payment,
            post_take_monthly_payment=params.post_take_payment,
            start_date=start_date,
        )
        self.db.add(db_chit)
        self.db.flush()  # Get ID without committing
        return db_chit

    def get_chit_by_id(self, chit_id: uuid.UUID) -> Optional[Chit]:
        """Fetch a chit by primary key"""
        return (
            self.db.query(Chit)
            .filter(Chit.id == chit_id)
            .first()
        )

    @staticmethod
    def to_parameters(chit: Chit) -> ChitParameters:
        """Rebuild the schedule inputs from a stored chit"""
        return ChitParameters(
            members_count=chit.members_count,
            base_payment=Decimal(chit.base_monthly_payment),
            post_take_payment=Decimal(chit.post_take_monthly_payment),
        )
