"""
Ticketing Module

Digital ticket lifecycle for the UrbanPilot API:

- Purchase with a server-computed validity window (24h day pass, 2h otherwise)
- Globally unique redemption codes, regenerated on collision
- Redemption (unused -> used), with no expiry or prior-use guard
- Active-ticket view computed at query time
- QR code rendering of the redemption code

Key Components:
- service.py: TicketService and the validity/redemption-code rules
- repository.py: SQLAlchemy-backed ticket storage
- qr.py: PNG QR code rendering
- router.py: FastAPI endpoints
- schemas.py: Pydantic models for requests and responses
"""

from .router import router
from .service import TicketService, generate_redemption_code, is_active
from .repository import SqlTicketRepository
from .schemas import Ticket, TicketList, TicketPurchaseRequest

__all__ = [
    "router",
    "TicketService",
    "generate_redemption_code",
    "is_active",
    "SqlTicketRepository",
    "Ticket",
    "TicketList",
    "TicketPurchaseRequest"
]
