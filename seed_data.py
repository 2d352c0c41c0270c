#!/usr/bin/env python3

from decimal import Decimal

from src.database import SessionLocal, init_db
from src.models import TransportStop
from src.stops.schemas import StopCreate
from src.stops.service import StopService

# (name, type, address, latitude, longitude)
STOPS = [
    ("Central Station", "metro", "Station Road, City Centre", "28.6328000", "77.2197000"),
    ("Metro Station", "metro", "Ring Road Interchange", "28.6139000", "77.2090000"),
    ("Rajiv Chowk", "metro", "Connaught Place", "28.6330000", "77.2194000"),
    ("Kashmere Gate", "metro", "Kashmere Gate ISBT", "28.6675000", "77.2282000"),
    ("Bus Stop 42A", "bus", "MG Road, near Central Station", "28.6301000", "77.2170000"),
    ("Bus Stop 15", "bus", "Main Market", "28.6253000", "77.2110000"),
    ("Civil Lines Bus Depot", "bus", "Civil Lines", "28.6814000", "77.2226000"),
    ("Auto Stand - Janpath", "auto", "Janpath Lane", "28.6250000", "77.2190000"),
    ("Auto Stand - Karol Bagh", "auto", "Ajmal Khan Road", "28.6519000", "77.1909000"),
    ("Taxi Rank - Airport", "taxi", "Terminal 3 Arrivals", "28.5562000", "77.1000000"),
    ("Taxi Rank - Railway Station", "taxi", "New Delhi Railway Station", "28.6430000", "77.2190000"),
]

def create_seed_data():
    init_db()
    db = SessionLocal()

    try:
        print("Creating seed data for UrbanPilot...")

        print("Clearing existing stops...")
        db.query(TransportStop).delete()
        db.commit()

        print("Creating transport stops...")
        for name, stop_type, address, lat, lng in STOPS:
            StopService.create_stop(db, StopCreate(
                name=name,
                type=stop_type,
                address=address,
                latitude=Decimal(lat),
                longitude=Decimal(lng),
                is_active=True
            ))

        print(f"Created {len(STOPS)} stops")

    except Exception as e:
        print(f"Error creating seed data: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    create_seed_data()
