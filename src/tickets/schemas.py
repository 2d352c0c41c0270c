from pydantic import Field
from typing import List, Literal, Optional
from datetime import datetime
from decimal import Decimal
from src.schemas import CamelModel

TicketClass = Literal["single", "day_pass", "monthly"]
TransportMode = Literal["bus", "metro"]

class TicketPurchaseRequest(CamelModel):
    """Request to buy a ticket"""
    type: TicketClass
    transport_type: TransportMode
    fare: Decimal = Field(..., ge=0, max_digits=8, decimal_places=2)

class Ticket(CamelModel):
    """Digital ticket with its redemption code"""
    id: str
    user_id: str
    type: TicketClass
    transport_type: TransportMode
    fare: Decimal
    valid_from: datetime
    valid_until: datetime
    redemption_code: str
    is_used: bool
    used_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

class TicketList(CamelModel):
    tickets: List[Ticket]
