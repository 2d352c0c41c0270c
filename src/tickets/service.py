import logging
import secrets
import time
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, List, Optional

from src.config import settings
from src.exceptions import ConflictError, NotFoundError, ValidationError
from src.models import Ticket, generate_uuid

logger = logging.getLogger(__name__)

TICKET_CLASSES = ("single", "day_pass", "monthly")
TRANSPORT_MODES = ("bus", "metro")

DAY_PASS_VALIDITY = timedelta(hours=24)
# Every class other than day_pass gets the single-journey window, monthly included
SINGLE_JOURNEY_VALIDITY = timedelta(hours=2)

MAX_FARE = Decimal("999999.99")
FARE_STEP = Decimal("0.01")


def generate_redemption_code() -> str:
    """Millisecond timestamp plus a random suffix, e.g. TKT_1729339200000_9F2C4A1B7E30"""
    return f"TKT_{int(time.time() * 1000)}_{secrets.token_hex(6).upper()}"


def validity_window(ticket_class: str) -> timedelta:
    if ticket_class == "day_pass":
        return DAY_PASS_VALIDITY
    return SINGLE_JOURNEY_VALIDITY


def is_active(ticket: Ticket, now: datetime) -> bool:
    """A ticket is active while unused and not past valid_until"""
    return not ticket.is_used and ticket.valid_until >= now


class TicketService:
    """Issues tickets, redeems them and answers the active-ticket query"""

    def __init__(
        self,
        repository,
        clock: Callable[[], datetime] = datetime.utcnow,
        code_factory: Callable[[], str] = generate_redemption_code,
        max_code_attempts: Optional[int] = None
    ):
        self.repository = repository
        self.clock = clock
        self.code_factory = code_factory
        self.max_code_attempts = max_code_attempts or settings.TICKET_CODE_MAX_ATTEMPTS

    def purchase(self, owner_id: str, ticket_class: str, transport_mode: str, fare: Decimal) -> Ticket:
        """Create a ticket with a computed validity window and a fresh redemption code"""

        self._validate_purchase(ticket_class, transport_mode, fare)

        valid_from = self.clock()
        valid_until = valid_from + validity_window(ticket_class)

        for attempt in range(1, self.max_code_attempts + 1):
            code = self.code_factory()
            if self.repository.code_exists(code):
                logger.warning("Redemption code collision on attempt %d, regenerating", attempt)
                continue

            ticket = Ticket(
                id=generate_uuid(),
                user_id=owner_id,
                type=ticket_class,
                transport_type=transport_mode,
                fare=Decimal(str(fare)),
                valid_from=valid_from,
                valid_until=valid_until,
                redemption_code=code,
                is_used=False,
                used_at=None,
                created_at=valid_from
            )

            try:
                ticket = self.repository.add(ticket)
            except ConflictError:
                # Lost a race with a concurrent purchase for the same code
                logger.warning("Redemption code rejected by storage on attempt %d, regenerating", attempt)
                continue

            logger.info(
                "Issued %s %s ticket %s to user %s, valid until %s",
                ticket_class, transport_mode, ticket.id, owner_id, valid_until.isoformat()
            )
            return ticket

        logger.error("Could not issue a unique redemption code after %d attempts", self.max_code_attempts)
        raise ConflictError("Could not issue a unique redemption code, please retry")

    def redeem(self, owner_id: str, ticket_id: str) -> Ticket:
        """Mark a ticket as used.

        Expiry and prior use are not checked here: redeeming an expired or
        already-used ticket succeeds and overwrites used_at.
        """

        ticket = self.repository.get_for_owner(owner_id, ticket_id)
        if ticket is None:
            raise NotFoundError("Ticket not found")

        if ticket.is_used:
            logger.warning("Ticket %s redeemed again, overwriting used_at", ticket_id)

        ticket.is_used = True
        ticket.used_at = self.clock()
        ticket = self.repository.save(ticket)

        logger.info("Redeemed ticket %s for user %s", ticket_id, owner_id)
        return ticket

    def get_ticket(self, owner_id: str, ticket_id: str) -> Ticket:
        ticket = self.repository.get_for_owner(owner_id, ticket_id)
        if ticket is None:
            raise NotFoundError("Ticket not found")
        return ticket

    def list_tickets(self, owner_id: str) -> List[Ticket]:
        return self.repository.list_for_owner(owner_id)

    def active_tickets(self, owner_id: str) -> List[Ticket]:
        """Tickets usable right now, recomputed on every call"""
        return self.repository.list_active(owner_id, self.clock())

    def _validate_purchase(self, ticket_class: str, transport_mode: str, fare: Decimal):
        if ticket_class not in TICKET_CLASSES:
            raise ValidationError(f"Ticket type must be one of: {', '.join(TICKET_CLASSES)}")

        if transport_mode not in TRANSPORT_MODES:
            raise ValidationError(f"Transport type must be one of: {', '.join(TRANSPORT_MODES)}")

        if fare is None or Decimal(str(fare)) < 0:
            raise ValidationError("Fare must be zero or greater")

        # Stored as Numeric(8, 2)
        amount = Decimal(str(fare))
        if amount > MAX_FARE or amount != amount.quantize(FARE_STEP):
            raise ValidationError(f"Fare must have at most 2 decimal places and not exceed {MAX_FARE}")
