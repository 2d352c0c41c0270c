from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.database import get_db
from src.auth.dependencies import get_current_user
from src.chat.schemas import ChatRequest, ChatMessage, ChatEnvelope, ChatHistory
from src.chat.repository import SqlChatRepository
from src.chat.service import ChatService

router = APIRouter()

def get_chat_service(db: Session = Depends(get_db)) -> ChatService:
    return ChatService(SqlChatRepository(db))

@router.post("", response_model=ChatEnvelope)
def send_message(
    request: ChatRequest,
    current_user=Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service)
):
    """Ask the assistant a question"""
    message = chat_service.send(current_user.id, request.message, request.message_type)
    return ChatEnvelope(message=ChatMessage.model_validate(message))

@router.get("/history", response_model=ChatHistory)
def get_history(
    current_user=Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service)
):
    """The caller's recent conversation, oldest first"""
    messages = chat_service.history(current_user.id)
    return ChatHistory(messages=[ChatMessage.model_validate(m) for m in messages])
