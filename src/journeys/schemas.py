from pydantic import Field
from typing import Any, List, Literal, Optional
from datetime import datetime
from decimal import Decimal
from src.schemas import CamelModel

JourneyStatus = Literal["planned", "active", "completed", "cancelled"]

class JourneyCreate(CamelModel):
    from_location: str = Field(..., min_length=1)
    to_location: str = Field(..., min_length=1)
    route_data: Optional[Any] = None
    total_fare: Optional[Decimal] = Field(None, ge=0, max_digits=8, decimal_places=2)
    total_duration: Optional[int] = Field(None, ge=0)
    status: JourneyStatus = "completed"

class JourneyStatusUpdate(CamelModel):
    status: JourneyStatus

class Journey(CamelModel):
    id: str
    user_id: str
    from_location: str
    to_location: str
    route_data: Optional[Any] = None
    total_fare: Optional[Decimal] = None
    total_duration: Optional[int] = None
    status: str
    created_at: datetime

class JourneyEnvelope(CamelModel):
    journey: Journey

class JourneyList(CamelModel):
    journeys: List[Journey]
