from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from src.database import get_db
from src.auth.dependencies import get_current_user
from src.tickets.schemas import Ticket, TicketList, TicketPurchaseRequest
from src.tickets.repository import SqlTicketRepository
from src.tickets.service import TicketService
from src.tickets.qr import render_qr_png

router = APIRouter()

def get_ticket_service(db: Session = Depends(get_db)) -> TicketService:
    return TicketService(SqlTicketRepository(db))

@router.post("", response_model=Ticket, status_code=status.HTTP_201_CREATED)
def purchase_ticket(
    request: TicketPurchaseRequest,
    current_user=Depends(get_current_user),
    ticket_service: TicketService = Depends(get_ticket_service)
):
    """Buy a ticket; validity window and redemption code are set by the server"""
    return ticket_service.purchase(
        owner_id=current_user.id,
        ticket_class=request.type,
        transport_mode=request.transport_type,
        fare=request.fare
    )

@router.get("", response_model=TicketList)
def list_tickets(
    current_user=Depends(get_current_user),
    ticket_service: TicketService = Depends(get_ticket_service)
):
    """All of the caller's tickets, including used and expired ones"""
    tickets = ticket_service.list_tickets(current_user.id)
    return TicketList(tickets=[Ticket.model_validate(t) for t in tickets])

@router.get("/active", response_model=TicketList)
def list_active_tickets(
    current_user=Depends(get_current_user),
    ticket_service: TicketService = Depends(get_ticket_service)
):
    """Unused tickets that are still within their validity window"""
    tickets = ticket_service.active_tickets(current_user.id)
    return TicketList(tickets=[Ticket.model_validate(t) for t in tickets])

@router.post("/{ticket_id}/use", response_model=Ticket)
def use_ticket(
    ticket_id: str,
    current_user=Depends(get_current_user),
    ticket_service: TicketService = Depends(get_ticket_service)
):
    """Redeem a ticket"""
    return ticket_service.redeem(current_user.id, ticket_id)

@router.get("/{ticket_id}/qr", response_class=Response)
def get_ticket_qr(
    ticket_id: str,
    size: int = Query(300, ge=100, le=1000, description="Image size in pixels"),
    current_user=Depends(get_current_user),
    ticket_service: TicketService = Depends(get_ticket_service)
):
    """PNG QR code encoding the ticket's redemption code"""
    ticket = ticket_service.get_ticket(current_user.id, ticket_id)
    return Response(content=render_qr_png(ticket.redemption_code, size=size), media_type="image/png")
