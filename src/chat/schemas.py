from pydantic import Field
from typing import List, Literal, Optional
from datetime import datetime
from src.schemas import CamelModel

Intent = Literal["query", "route_request", "fare_inquiry"]

class ChatRequest(CamelModel):
    message: str = Field(..., min_length=1)
    message_type: Optional[Intent] = None

class ChatMessage(CamelModel):
    id: str
    user_id: str
    message: str
    response: Optional[str] = None
    message_type: Intent
    created_at: datetime

class ChatEnvelope(CamelModel):
    message: ChatMessage

class ChatHistory(CamelModel):
    messages: List[ChatMessage]
