import uuid
from datetime import datetime

from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey, Numeric, Integer, JSON
from sqlalchemy.orm import relationship
from src.database import Base

# All timestamps are stored as naive UTC

def generate_uuid() -> str:
    return str(uuid.uuid4())

# ================================
# Users
# ================================
class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    journeys = relationship("Journey", back_populates="user")
    tickets = relationship("Ticket", back_populates="user")
    chat_messages = relationship("ChatMessage", back_populates="user")

# ================================
# Transport Stops
# ================================
class TransportStop(Base):
    __tablename__ = "transport_stops"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False, index=True)
    type = Column(String(20), nullable=False, index=True)  # bus, metro, auto, taxi
    address = Column(Text)
    latitude = Column(Numeric(10, 7))
    longitude = Column(Numeric(10, 7))
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

# ================================
# Journeys
# ================================
class Journey(Base):
    __tablename__ = "journeys"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    from_location = Column(Text, nullable=False)
    to_location = Column(Text, nullable=False)
    route_data = Column(JSON)  # route suggestions and the selected route
    total_fare = Column(Numeric(8, 2))
    total_duration = Column(Integer)  # minutes
    status = Column(String(20), default="completed")  # planned, active, completed, cancelled
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="journeys")

# ================================
# Tickets
# ================================
class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    type = Column(String(20), nullable=False)  # single, day_pass, monthly
    transport_type = Column(String(20), nullable=False)  # bus, metro
    fare = Column(Numeric(8, 2), nullable=False)
    valid_from = Column(DateTime, nullable=False, index=True)
    valid_until = Column(DateTime, nullable=False, index=True)
    redemption_code = Column(String(100), unique=True, nullable=False)
    is_used = Column(Boolean, default=False, nullable=False)
    used_at = Column(DateTime)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="tickets")

# ================================
# AI Chat
# ================================
class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    message = Column(Text, nullable=False)
    response = Column(Text)
    message_type = Column(String(20), default="query")  # query, route_request, fare_inquiry
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    user = relationship("User", back_populates="chat_messages")
