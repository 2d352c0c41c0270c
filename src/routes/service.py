import logging
from decimal import Decimal
from typing import List, Tuple

from src.exceptions import ValidationError
from src.routes.schemas import Leg, RouteCandidate

logger = logging.getLogger(__name__)

PREFERENCES = ("fastest", "cheapest", "safest")

# (mode, line, duration minutes, fare, color)
LegTemplate = Tuple[str, str, int, str, str]

# (id, category, interchange label, legs) in generation order
ROUTE_TEMPLATES: List[Tuple[str, str, str, List[LegTemplate]]] = [
    ("route_1", "fastest", "Central Station", [
        ("metro", "Metro Line 1", 18, "25", "#3B82F6"),
        ("bus", "Bus 42A", 11, "20", "#EF4444"),
    ]),
    ("route_2", "cheapest", "", [
        ("bus", "Bus 15", 48, "25", "#EF4444"),
    ]),
    ("route_3", "alternative", "Metro Station", [
        ("auto", "Auto Rickshaw", 8, "35", "#F59E0B"),
        ("metro", "Metro Line 2", 27, "20", "#3B82F6"),
    ]),
]


class RouteService:
    """Builds and ranks route candidates between two free-text locations"""

    def generate_routes(self, origin: str, destination: str, preference: str) -> List[RouteCandidate]:
        """Return the candidate routes ordered and flagged for the given preference"""

        if preference not in PREFERENCES:
            raise ValidationError(
                f"Preference must be one of: {', '.join(PREFERENCES)}"
            )

        candidates = [
            self._build_candidate(route_id, category, interchange, legs, origin, destination)
            for route_id, category, interchange, legs in ROUTE_TEMPLATES
        ]

        # sorted() is stable, ties keep template order
        if preference == "fastest":
            candidates = sorted(candidates, key=lambda c: c.total_duration_minutes)
        elif preference == "cheapest":
            candidates = sorted(candidates, key=lambda c: c.total_fare)

        # No template is categorised "safest", so that preference recommends nothing
        for candidate in candidates:
            candidate.is_recommended = candidate.category == preference

        logger.debug(
            "Generated %d routes from %r to %r for %s",
            len(candidates), origin, destination, preference
        )
        return candidates

    def _build_candidate(
        self,
        route_id: str,
        category: str,
        interchange: str,
        leg_templates: List[LegTemplate],
        origin: str,
        destination: str
    ) -> RouteCandidate:
        """Fill a template with the request's endpoints and derive its totals"""

        last = len(leg_templates) - 1
        legs = []
        for index, (mode, line, duration, fare, color) in enumerate(leg_templates):
            legs.append(Leg(
                mode=mode,
                line_label=line,
                origin_label=origin if index == 0 else interchange,
                destination_label=destination if index == last else interchange,
                duration_minutes=duration,
                fare=Decimal(fare),
                display_color=color
            ))

        return RouteCandidate(
            id=route_id,
            category=category,
            total_duration_minutes=sum(leg.duration_minutes for leg in legs),
            total_fare=sum((leg.fare for leg in legs), Decimal("0")),
            transfer_count=len(legs) - 1,
            legs=legs
        )
