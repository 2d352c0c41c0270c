from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.exceptions import ConflictError
from src.models import Ticket


class SqlTicketRepository:
    """Ticket storage backed by a SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    def code_exists(self, redemption_code: str) -> bool:
        return self.db.query(Ticket.id).filter(
            Ticket.redemption_code == redemption_code
        ).first() is not None

    def add(self, ticket: Ticket) -> Ticket:
        """Insert a ticket, raising ConflictError if its redemption code is taken"""
        self.db.add(ticket)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self.code_exists(ticket.redemption_code):
                raise ConflictError(f"Redemption code {ticket.redemption_code} already issued")
            raise
        self.db.refresh(ticket)
        return ticket

    def save(self, ticket: Ticket) -> Ticket:
        self.db.commit()
        self.db.refresh(ticket)
        return ticket

    def get_for_owner(self, owner_id: str, ticket_id: str) -> Optional[Ticket]:
        return self.db.query(Ticket).filter(
            Ticket.id == ticket_id,
            Ticket.user_id == owner_id
        ).first()

    def list_for_owner(self, owner_id: str) -> List[Ticket]:
        return self.db.query(Ticket).filter(
            Ticket.user_id == owner_id
        ).order_by(Ticket.created_at.desc()).all()

    def list_active(self, owner_id: str, now: datetime) -> List[Ticket]:
        """Unused tickets whose validity window has not elapsed at `now`"""
        return self.db.query(Ticket).filter(
            Ticket.user_id == owner_id,
            Ticket.is_used == False,
            Ticket.valid_until >= now
        ).order_by(Ticket.valid_from.desc()).all()
