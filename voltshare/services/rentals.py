"""Rental property service: room templates used to pre-fill calculations."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from voltshare.core.config import settings
from voltshare.models.rental import RentalProperty, RentalRoom
from voltshare.schemas.allocation import RoomReading
from voltshare.schemas.rental import RentalCreate

logger = logging.getLogger(__name__)


def _default_room_name(index: int) -> str:
    """Name for the room at 0-based ``index``, e.g. "Room 1"."""
    return f"{settings.DEFAULT_ROOM_NAME} {index + 1}"


def create_rental(db: Session, data: RentalCreate, owner_id: int) -> RentalProperty:
    """Create a rental property. Without room names it starts with one room."""
    names = data.rooms if data.rooms else [_default_room_name(0)]
    rental = RentalProperty(owner_id=owner_id, name=data.name)
    rental.rooms = [
        RentalRoom(name=name.strip() or _default_room_name(i), position=i)
        for i, name in enumerate(names)
    ]
    db.add(rental)
    db.commit()
    db.refresh(rental)
    logger.info("Created rental %s (%s) for user %s", rental.id, rental.name, owner_id)
    return rental


def get_rentals(db: Session, owner_id: int) -> list[RentalProperty]:
    """Get an owner's rental properties, newest first."""
    return (
        db.query(RentalProperty)
        .filter(RentalProperty.owner_id == owner_id)
        .order_by(RentalProperty.created_at.desc())
        .all()
    )


def get_rental(db: Session, rental_id: str, owner_id: int) -> RentalProperty:
    """Get one of the owner's rental properties by ID."""
    rental = (
        db.query(RentalProperty)
        .filter(RentalProperty.id == rental_id, RentalProperty.owner_id == owner_id)
        .first()
    )
    if not rental:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Rental property not found",
        )
    return rental


def rename_rental(db: Session, rental_id: str, owner_id: int, name: str) -> RentalProperty:
    """Rename a rental property."""
    rental = get_rental(db, rental_id, owner_id)
    rental.name = name
    db.commit()
    db.refresh(rental)
    return rental


def delete_rental(db: Session, rental_id: str, owner_id: int) -> None:
    """Delete a rental property and its room templates.

    Bills already calculated for it keep their copy of the property name.
    """
    rental = get_rental(db, rental_id, owner_id)
    db.delete(rental)
    db.commit()
    logger.info("Deleted rental %s for user %s", rental_id, owner_id)


def _get_room(rental: RentalProperty, room_id: str) -> RentalRoom:
    room = next((r for r in rental.rooms if r.id == room_id), None)
    if room is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Room not found",
        )
    return room


def add_room(
    db: Session,
    rental_id: str,
    owner_id: int,
    name: str | None = None,
) -> RentalProperty:
    """Append a room; without a name it is called "Room N+1"."""
    rental = get_rental(db, rental_id, owner_id)
    count = len(rental.rooms)
    next_position = max((r.position for r in rental.rooms), default=-1) + 1
    room_name = name.strip() if name and name.strip() else _default_room_name(count)
    rental.rooms.append(RentalRoom(name=room_name, position=next_position))
    db.commit()
    db.refresh(rental)
    return rental


def rename_room(
    db: Session,
    rental_id: str,
    owner_id: int,
    room_id: str,
    name: str,
) -> RentalProperty:
    """Rename a room template."""
    rental = get_rental(db, rental_id, owner_id)
    _get_room(rental, room_id).name = name
    db.commit()
    db.refresh(rental)
    return rental


def remove_room(db: Session, rental_id: str, owner_id: int, room_id: str) -> RentalProperty:
    """Remove a room template. Remaining rooms keep their order."""
    rental = get_rental(db, rental_id, owner_id)
    rental.rooms.remove(_get_room(rental, room_id))
    db.commit()
    db.refresh(rental)
    return rental


def count_rooms(rentals: list[RentalProperty]) -> int:
    """Total number of room templates across rentals."""
    return sum(len(r.rooms) for r in rentals)


def rental_room_readings(rental: RentalProperty) -> list[RoomReading]:
    """Room templates as zero readings, ready to be filled in for a calculation."""
    return [RoomReading(id=room.id, name=room.name, consumption=0) for room in rental.rooms]
