from sqlalchemy.orm import Session
from typing import List, Optional
from src.models import TransportStop
from src.stops.schemas import StopCreate

class StopService:
    @staticmethod
    def get_nearby_stops(db: Session, lat: float, lng: float, stop_type: Optional[str] = None) -> List[TransportStop]:
        """Active stops, optionally of one type; coordinates are accepted but not used for filtering"""
        query = db.query(TransportStop).filter(TransportStop.is_active == True)

        if stop_type:
            query = query.filter(TransportStop.type == stop_type)

        return query.order_by(TransportStop.name.asc()).all()

    @staticmethod
    def get_stop_by_id(db: Session, stop_id: str) -> Optional[TransportStop]:
        """Get stop by ID"""
        return db.query(TransportStop).filter(TransportStop.id == stop_id).first()

    @staticmethod
    def create_stop(db: Session, stop: StopCreate) -> TransportStop:
        """Create a new stop"""
        db_stop = TransportStop(**stop.model_dump())
        db.add(db_stop)
        db.commit()
        db.refresh(db_stop)
        return db_stop
