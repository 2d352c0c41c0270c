"""
Assistant Chat Module

Rule-based assistant: messages are tagged by keyword matching and answered
with one of three canned replies.
"""

from .router import router
from .classifier import classify, respond
from .service import ChatService

__all__ = ["router", "classify", "respond", "ChatService"]
