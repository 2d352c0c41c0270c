from typing import List, Literal, Optional
from datetime import datetime
from decimal import Decimal
from src.schemas import CamelModel

StopType = Literal["bus", "metro", "auto", "taxi"]

class StopBase(CamelModel):
    name: str
    type: StopType
    address: Optional[str] = None
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
    is_active: bool = True

class StopCreate(StopBase):
    pass

class Stop(StopBase):
    id: str
    created_at: datetime

class NearbyStopsResponse(CamelModel):
    stops: List[Stop]
