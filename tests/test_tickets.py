from datetime import datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace

import pytest

from src.exceptions import ConflictError, NotFoundError, ValidationError
from src.models import Ticket
from src.tickets import service as ticket_service_module
from src.tickets.repository import SqlTicketRepository
from src.tickets.service import TicketService
from tests.fakes import FakeClock, InMemoryTicketRepository


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repository():
    return InMemoryTicketRepository()


@pytest.fixture
def service(repository, clock):
    return TicketService(repository, clock=clock)


def test_day_pass_is_valid_for_24_hours(service, clock):
    ticket = service.purchase("user-1", "day_pass", "metro", Decimal("100"))

    assert ticket.valid_from == clock.now
    assert ticket.valid_until - ticket.valid_from == timedelta(hours=24)
    assert ticket.is_used is False
    assert ticket.used_at is None
    assert ticket.fare == Decimal("100")


@pytest.mark.parametrize("ticket_class", ["single", "monthly"])
def test_other_classes_get_two_hour_window(service, ticket_class):
    ticket = service.purchase("user-1", ticket_class, "bus", Decimal("25"))
    assert ticket.valid_until - ticket.valid_from == timedelta(hours=2)


@pytest.mark.parametrize("ticket_class, mode, fare", [
    ("weekly", "bus", Decimal("25")),
    ("single", "ferry", Decimal("25")),
    ("single", "bus", Decimal("-1")),
    ("single", "bus", Decimal("25.555")),
    ("single", "bus", Decimal("1000000")),
])
def test_purchase_rejects_invalid_input_without_persisting(service, repository, ticket_class, mode, fare):
    with pytest.raises(ValidationError):
        service.purchase("user-1", ticket_class, mode, fare)
    assert repository.tickets == {}


def test_codes_differ_within_the_same_millisecond(service, monkeypatch):
    monkeypatch.setattr(ticket_service_module, "time", SimpleNamespace(time=lambda: 1760000000.0))

    first = service.purchase("user-1", "single", "bus", Decimal("25"))
    second = service.purchase("user-1", "single", "bus", Decimal("25"))

    assert first.redemption_code.startswith("TKT_1760000000000_")
    assert first.redemption_code != second.redemption_code


def test_existing_code_is_regenerated(repository, clock):
    codes = iter(["TKT_DUP", "TKT_DUP", "TKT_FRESH"])
    service = TicketService(repository, clock=clock, code_factory=lambda: next(codes))

    first = service.purchase("user-1", "single", "bus", Decimal("25"))
    second = service.purchase("user-2", "single", "metro", Decimal("30"))

    assert first.redemption_code == "TKT_DUP"
    assert second.redemption_code == "TKT_FRESH"
    assert len(repository.tickets) == 2


def test_storage_conflict_is_retried(clock):
    class RacingRepository(InMemoryTicketRepository):
        def __init__(self):
            super().__init__()
            self.rejections = 1

        def code_exists(self, redemption_code):
            return False

        def add(self, ticket):
            if self.rejections:
                self.rejections -= 1
                raise ConflictError("taken")
            return super().add(ticket)

    repository = RacingRepository()
    codes = iter(["TKT_A", "TKT_B"])
    service = TicketService(repository, clock=clock, code_factory=lambda: next(codes))

    ticket = service.purchase("user-1", "single", "bus", Decimal("25"))

    assert ticket.redemption_code == "TKT_B"
    assert list(repository.tickets) == [ticket.id]


def test_gives_up_after_max_attempts(repository, clock):
    service = TicketService(repository, clock=clock, code_factory=lambda: "TKT_SAME", max_code_attempts=3)
    service.purchase("user-1", "single", "bus", Decimal("25"))

    with pytest.raises(ConflictError):
        service.purchase("user-1", "single", "bus", Decimal("25"))
    assert len(repository.tickets) == 1


def test_redeem_marks_ticket_used(service, clock):
    ticket = service.purchase("user-1", "single", "bus", Decimal("25"))
    clock.advance(minutes=10)

    redeemed = service.redeem("user-1", ticket.id)

    assert redeemed.is_used is True
    assert redeemed.used_at == clock.now


def test_redeem_unknown_ticket_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.redeem("user-1", "no-such-ticket")


def test_redeem_other_users_ticket_raises_not_found(service):
    ticket = service.purchase("user-1", "single", "bus", Decimal("25"))
    with pytest.raises(NotFoundError):
        service.redeem("user-2", ticket.id)


def test_redeem_twice_overwrites_used_at(service, clock):
    ticket = service.purchase("user-1", "single", "bus", Decimal("25"))
    service.redeem("user-1", ticket.id)
    clock.advance(minutes=5)

    again = service.redeem("user-1", ticket.id)

    assert again.is_used is True
    assert again.used_at == clock.now


def test_redeem_after_expiry_still_succeeds(service, clock):
    ticket = service.purchase("user-1", "single", "bus", Decimal("25"))
    clock.advance(hours=3)

    redeemed = service.redeem("user-1", ticket.id)

    assert redeemed.is_used is True
    assert redeemed.used_at > redeemed.valid_until


def test_active_tickets_exclude_used_and_expired(service, clock):
    used = service.purchase("user-1", "single", "bus", Decimal("25"))
    service.redeem("user-1", used.id)
    single = service.purchase("user-1", "single", "metro", Decimal("30"))
    clock.advance(minutes=1)
    day_pass = service.purchase("user-1", "day_pass", "metro", Decimal("100"))
    service.purchase("user-2", "day_pass", "bus", Decimal("80"))

    assert [t.id for t in service.active_tickets("user-1")] == [day_pass.id, single.id]

    clock.advance(hours=3)
    assert [t.id for t in service.active_tickets("user-1")] == [day_pass.id]


def test_ticket_is_active_until_the_last_instant(service, clock):
    ticket = service.purchase("user-1", "single", "bus", Decimal("25"))

    clock.now = ticket.valid_until
    assert [t.id for t in service.active_tickets("user-1")] == [ticket.id]

    clock.advance(microseconds=1)
    assert service.active_tickets("user-1") == []


def test_sql_repository_rejects_duplicate_code(db_session, user):
    repository = SqlTicketRepository(db_session)
    now = datetime(2026, 10, 19, 9, 0, 0)

    def build(ticket_id):
        return Ticket(
            id=ticket_id, user_id=user.id, type="single", transport_type="bus",
            fare=Decimal("25"), valid_from=now, valid_until=now + timedelta(hours=2),
            redemption_code="TKT_SHARED", is_used=False, created_at=now,
        )

    repository.add(build("ticket-a"))
    with pytest.raises(ConflictError):
        repository.add(build("ticket-b"))

    assert repository.code_exists("TKT_SHARED")
    assert [t.id for t in repository.list_for_owner(user.id)] == ["ticket-a"]


# HTTP

def purchase(client, headers, **body):
    payload = {"type": "single", "transportType": "bus", "fare": 25}
    payload.update(body)
    return client.post("/api/v1/tickets", json=payload, headers=headers)


def test_purchase_endpoint_returns_ticket(client, auth_headers, user):
    response = purchase(client, auth_headers, type="day_pass", transportType="metro", fare=100)

    assert response.status_code == 201
    ticket = response.json()
    assert ticket["userId"] == user.id
    assert ticket["type"] == "day_pass"
    assert ticket["transportType"] == "metro"
    assert Decimal(str(ticket["fare"])) == Decimal("100")
    assert ticket["isUsed"] is False
    assert ticket["usedAt"] is None
    assert ticket["redemptionCode"].startswith("TKT_")
    valid_from = datetime.fromisoformat(ticket["validFrom"])
    valid_until = datetime.fromisoformat(ticket["validUntil"])
    assert valid_until - valid_from == timedelta(hours=24)


@pytest.mark.parametrize("body", [
    {"fare": -5},
    {"fare": "25.555"},
    {"fare": "123456789.5"},
    {"type": "weekly"},
    {"transportType": "taxi"},
])
def test_purchase_endpoint_validates_body(client, auth_headers, body):
    response = purchase(client, auth_headers, **body)
    assert response.status_code == 422


def test_use_endpoint_redeems_ticket(client, auth_headers):
    ticket = purchase(client, auth_headers).json()

    response = client.post(f"/api/v1/tickets/{ticket['id']}/use", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["isUsed"] is True
    assert response.json()["usedAt"] is not None


def test_use_endpoint_unknown_ticket_is_404(client, auth_headers):
    response = client.post("/api/v1/tickets/missing/use", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"detail": "Ticket not found"}


def test_use_endpoint_hides_other_users_tickets(client, auth_headers, other_auth_headers):
    ticket = purchase(client, auth_headers).json()
    response = client.post(f"/api/v1/tickets/{ticket['id']}/use", headers=other_auth_headers)
    assert response.status_code == 404


def test_active_endpoint(client, auth_headers, db_session, user):
    kept = purchase(client, auth_headers).json()
    used = purchase(client, auth_headers).json()
    client.post(f"/api/v1/tickets/{used['id']}/use", headers=auth_headers)

    past = datetime.utcnow() - timedelta(days=1)
    db_session.add(Ticket(
        user_id=user.id, type="single", transport_type="bus", fare=Decimal("25"),
        valid_from=past, valid_until=past + timedelta(hours=2),
        redemption_code="TKT_EXPIRED", is_used=False,
    ))
    db_session.commit()

    response = client.get("/api/v1/tickets/active", headers=auth_headers)

    assert response.status_code == 200
    assert [t["id"] for t in response.json()["tickets"]] == [kept["id"]]

    history = client.get("/api/v1/tickets", headers=auth_headers).json()["tickets"]
    assert len(history) == 3


def test_qr_endpoint_renders_png(client, auth_headers):
    ticket = purchase(client, auth_headers).json()

    response = client.get(f"/api/v1/tickets/{ticket['id']}/qr?size=200", headers=auth_headers)

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")


def test_qr_endpoint_unknown_ticket_is_404(client, auth_headers):
    response = client.get("/api/v1/tickets/missing/qr", headers=auth_headers)
    assert response.status_code == 404


def test_ticket_endpoints_require_authentication(client):
    assert client.get("/api/v1/tickets/active").status_code == 401
    assert purchase(client, {}).status_code == 401


def test_fare_at_column_limit_is_accepted(service):
    ticket = service.purchase("user-1", "single", "bus", Decimal("999999.99"))
    assert ticket.fare == Decimal("999999.99")
