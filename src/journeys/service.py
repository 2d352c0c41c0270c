import logging
from sqlalchemy.orm import Session
from typing import List, Optional
from src.models import Journey
from src.journeys.schemas import JourneyCreate

logger = logging.getLogger(__name__)

class JourneyService:
    @staticmethod
    def create_journey(db: Session, user_id: str, journey: JourneyCreate) -> Journey:
        """Record a journey for the user"""
        db_journey = Journey(user_id=user_id, **journey.model_dump())
        db.add(db_journey)
        db.commit()
        db.refresh(db_journey)
        logger.info("Recorded journey %s for user %s", db_journey.id, user_id)
        return db_journey

    @staticmethod
    def get_user_journeys(db: Session, user_id: str) -> List[Journey]:
        """User's journeys, newest first"""
        return db.query(Journey).filter(
            Journey.user_id == user_id
        ).order_by(Journey.created_at.desc()).all()

    @staticmethod
    def update_journey_status(db: Session, user_id: str, journey_id: str, status: str) -> Optional[Journey]:
        """Change a journey's status; None if the user has no such journey"""
        journey = db.query(Journey).filter(
            Journey.id == journey_id,
            Journey.user_id == user_id
        ).first()
        if not journey:
            return None

        journey.status = status
        db.commit()
        db.refresh(journey)
        return journey
