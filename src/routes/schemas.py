from pydantic import Field
from typing import List, Literal
from decimal import Decimal
from src.schemas import CamelModel

Preference = Literal["fastest", "cheapest", "safest"]
RouteCategory = Literal["fastest", "cheapest", "alternative"]
LegMode = Literal["bus", "metro", "auto", "taxi"]

class RouteSearchRequest(CamelModel):
    """Request schema for route search"""
    origin: str = Field(..., alias="from", min_length=1)
    destination: str = Field(..., alias="to", min_length=1)
    preference: Preference = "fastest"

class Leg(CamelModel):
    """One uninterrupted segment using a single mode/line"""
    mode: LegMode
    line_label: str
    origin_label: str
    destination_label: str
    duration_minutes: int = Field(..., ge=0)
    fare: Decimal = Field(..., ge=0)
    display_color: str

class RouteCandidate(CamelModel):
    """One proposed journey composed of ordered legs"""
    id: str
    category: RouteCategory
    total_duration_minutes: int = Field(..., ge=0)
    total_fare: Decimal = Field(..., ge=0)
    transfer_count: int = Field(..., ge=0)
    legs: List[Leg] = Field(..., min_length=1)
    is_recommended: bool = False

class RouteSearchResponse(CamelModel):
    routes: List[RouteCandidate]
