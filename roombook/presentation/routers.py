from __future__ import annotations

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from roombook.infrastructure.database import SessionLocal
from roombook.services.roombook_service import (
    book_room_service,
    cancel_booking_service,
    get_available_rooms_service,
    get_room_service,
    register_room_service,
)
from roombook.schemas.models import BookingRequest, BookingResult, CancellationResult, Room, RoomCreate
from roombook.core.use_cases.errors import DomainRuleViolation, ValidationError
from roombook.core.use_cases.get_room import NotFoundError as RoomNotFoundError
from roombook.core.use_cases.register_room import RoomAlreadyExistsError

router = APIRouter()


def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@router.post("/rooms", response_model=Room, status_code=201)
def post_rooms(body: RoomCreate, db: Session = Depends(get_db)) -> Room:
    """
    Register a room

    Returns:
      - 201 with the new (empty) room
      - 409 if the room id is taken
      - 422 on validation error
    """
    try:
        return register_room_service(body, db)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except RoomAlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/rooms/available", response_model=List[Room])
def get_rooms_available(start_time: datetime, end_time: datetime, db: Session = Depends(get_db)) -> List[Room]:
    """
    List rooms free for the whole span [start_time, end_time)
    """
    try:
        return get_available_rooms_service(start_time, end_time, db)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/rooms/{room_id}", response_model=Room)
def get_rooms_room_id(room_id: str, db: Session = Depends(get_db)) -> Room:
    """
    Get a room with its active bookings
    """
    try:
        return get_room_service(room_id, db)
    except RoomNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/rooms/{room_id}/bookings", response_model=BookingResult, status_code=201)
def post_rooms_room_id_bookings(room_id: str, body: BookingRequest, db: Session = Depends(get_db)) -> BookingResult:
    """
    Book a room

    Returns:
      - 201 if booked (confirmation_sent=false when the confirmation failed)
      - 409 if the room is unknown or already booked for the span
      - 422 on validation error
    """
    try:
        result = book_room_service(room_id, body, db)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if not result.booked:
        raise HTTPException(status_code=409, detail="Room is not available for the requested time span")
    return result


@router.delete("/bookings/{booking_id}", response_model=CancellationResult)
def delete_bookings_booking_id(booking_id: str, db: Session = Depends(get_db)) -> CancellationResult:
    """
    Cancel a booking that has not started yet

    Returns:
      - 200 if cancelled (confirmation_sent=false when the confirmation failed)
      - 404 if no room holds the booking
      - 409 if the booking has started or finished
      - 422 on validation error
    """
    try:
        result = cancel_booking_service(booking_id, db)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except DomainRuleViolation as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not result.cancelled:
        raise HTTPException(status_code=404, detail="Booking not found")
    return result
