from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import Optional
from src.database import get_db
from src.auth.dependencies import get_current_user
from src.stops.schemas import Stop, NearbyStopsResponse, StopType
from src.stops.service import StopService

router = APIRouter()

@router.get("/nearby", response_model=NearbyStopsResponse)
def get_nearby_stops(
    lat: float = Query(..., description="Latitude"),
    lng: float = Query(..., description="Longitude"),
    type: Optional[StopType] = Query(None, description="Filter by stop type"),
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List active stops near a location"""
    stops = StopService.get_nearby_stops(db, lat=lat, lng=lng, stop_type=type)
    return NearbyStopsResponse(stops=[Stop.model_validate(stop) for stop in stops])

@router.get("/{stop_id}", response_model=Stop)
def get_stop(
    stop_id: str,
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get stop details by ID"""
    stop = StopService.get_stop_by_id(db, stop_id)
    if not stop:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stop not found"
        )
    return stop
