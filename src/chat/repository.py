from typing import List

from sqlalchemy.orm import Session

from src.models import ChatMessage


class SqlChatRepository:
    """Chat message storage backed by a SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    def add(self, message: ChatMessage) -> ChatMessage:
        """Stage a new message; it is written on commit()"""
        self.db.add(message)
        self.db.flush()
        return message

    def commit(self, message: ChatMessage) -> ChatMessage:
        self.db.commit()
        self.db.refresh(message)
        return message

    def rollback(self):
        self.db.rollback()

    def recent_for_owner(self, owner_id: str, limit: int) -> List[ChatMessage]:
        """The `limit` newest messages, oldest first"""
        newest = self.db.query(ChatMessage).filter(
            ChatMessage.user_id == owner_id
        ).order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc()).limit(limit).all()
        return list(reversed(newest))
