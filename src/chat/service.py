import logging
from datetime import datetime
from typing import Callable, List, Optional

from src.config import settings
from src.exceptions import ValidationError
from src.models import ChatMessage, generate_uuid
from src.chat.classifier import INTENTS, classify, respond

logger = logging.getLogger(__name__)


class ChatService:
    """Stores user messages and attaches the assistant's reply"""

    def __init__(
        self,
        repository,
        clock: Callable[[], datetime] = datetime.utcnow,
        history_limit: Optional[int] = None
    ):
        self.repository = repository
        self.clock = clock
        self.history_limit = history_limit or settings.CHAT_HISTORY_LIMIT

    def send(self, owner_id: str, body: str, message_type: Optional[str] = None) -> ChatMessage:
        """Record a message, classify it and attach the reply in one transaction"""

        text = (body or "").strip()
        if not text:
            raise ValidationError("Message must not be empty")

        if message_type is not None and message_type not in INTENTS:
            raise ValidationError(f"Message type must be one of: {', '.join(INTENTS)}")

        intent = classify(text)
        if message_type is not None and message_type != intent:
            logger.debug("Client tagged message as %s, server classified %s", message_type, intent)

        message = ChatMessage(
            id=generate_uuid(),
            user_id=owner_id,
            message=text,
            response=None,
            message_type=intent,
            created_at=self.clock()
        )

        try:
            message = self.repository.add(message)
            message.response = respond(intent)
            message = self.repository.commit(message)
        except Exception:
            self.repository.rollback()
            raise

        logger.info("Answered %s message %s for user %s", intent, message.id, owner_id)
        return message

    def history(self, owner_id: str) -> List[ChatMessage]:
        return self.repository.recent_for_owner(owner_id, self.history_limit)
