"""
Route Planning Module

Suggests journeys between two free-text locations. There is no routing engine
behind it: a fixed set of route templates is filled with the caller's origin
and destination, ranked by the requested preference, and one candidate is
flagged as the recommended pick.

Key Components:
- service.py: route templates, ranking and recommendation
- router.py: FastAPI endpoint for route search
- schemas.py: Pydantic models for legs, candidates and the search request
"""

from .router import router
from .service import RouteService, ROUTE_TEMPLATES, PREFERENCES
from .schemas import RouteSearchRequest, RouteSearchResponse, RouteCandidate, Leg

__all__ = [
    "router",
    "RouteService",
    "ROUTE_TEMPLATES",
    "PREFERENCES",
    "RouteSearchRequest",
    "RouteSearchResponse",
    "RouteCandidate",
    "Leg"
]
