from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from src.database import get_db
from src.auth.dependencies import get_current_user
from src.journeys.schemas import Journey, JourneyCreate, JourneyStatusUpdate, JourneyEnvelope, JourneyList
from src.journeys.service import JourneyService

router = APIRouter()

@router.post("", response_model=JourneyEnvelope, status_code=status.HTTP_201_CREATED)
def create_journey(
    journey: JourneyCreate,
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Save a planned or completed journey"""
    db_journey = JourneyService.create_journey(db, current_user.id, journey)
    return JourneyEnvelope(journey=Journey.model_validate(db_journey))

@router.get("", response_model=JourneyList)
def list_journeys(
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the caller's journey history"""
    journeys = JourneyService.get_user_journeys(db, current_user.id)
    return JourneyList(journeys=[Journey.model_validate(j) for j in journeys])

@router.patch("/{journey_id}/status", response_model=JourneyEnvelope)
def update_journey_status(
    journey_id: str,
    update: JourneyStatusUpdate,
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Move a journey to a new status"""
    journey = JourneyService.update_journey_status(db, current_user.id, journey_id, update.status)
    if not journey:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Journey not found"
        )
    return JourneyEnvelope(journey=Journey.model_validate(journey))
