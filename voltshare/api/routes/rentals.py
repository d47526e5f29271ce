"""Rental property routes: templates of room names per property."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from voltshare.api.dependencies import get_current_user
from voltshare.core.database import get_db
from voltshare.models.user import User
from voltshare.schemas.allocation import RoomReading
from voltshare.schemas.rental import (
    RentalCreate,
    RentalResponse,
    RentalRoomCreate,
    RentalRoomUpdate,
    RentalUpdate,
)
from voltshare.services import rentals as rental_service

router = APIRouter(prefix="/rentals", tags=["rentals"])


@router.post("", response_model=RentalResponse, status_code=status.HTTP_201_CREATED)
def create_rental(
    data: RentalCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> RentalResponse:
    """Create a rental property (one room "Room 1" unless rooms are given)."""
    rental = rental_service.create_rental(db, data, user.id)
    return RentalResponse.model_validate(rental)


@router.get("", response_model=list[RentalResponse])
def list_rentals(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> list[RentalResponse]:
    """List the user's rental properties, newest first."""
    return [RentalResponse.model_validate(r) for r in rental_service.get_rentals(db, user.id)]


@router.get("/{rental_id}", response_model=RentalResponse)
def get_rental(
    rental_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> RentalResponse:
    """Get a rental property by ID."""
    return RentalResponse.model_validate(rental_service.get_rental(db, rental_id, user.id))


@router.patch("/{rental_id}", response_model=RentalResponse)
def rename_rental(
    rental_id: str,
    data: RentalUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> RentalResponse:
    """Rename a rental property."""
    rental = rental_service.rename_rental(db, rental_id, user.id, data.name)
    return RentalResponse.model_validate(rental)


@router.delete("/{rental_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_rental(
    rental_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> None:
    """Delete a rental property and its room templates."""
    rental_service.delete_rental(db, rental_id, user.id)


@router.post(
    "/{rental_id}/rooms",
    response_model=RentalResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_room(
    rental_id: str,
    data: RentalRoomCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> RentalResponse:
    """Append a room template."""
    rental = rental_service.add_room(db, rental_id, user.id, data.name)
    return RentalResponse.model_validate(rental)


@router.patch("/{rental_id}/rooms/{room_id}", response_model=RentalResponse)
def rename_room(
    rental_id: str,
    room_id: str,
    data: RentalRoomUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> RentalResponse:
    """Rename a room template."""
    rental = rental_service.rename_room(db, rental_id, user.id, room_id, data.name)
    return RentalResponse.model_validate(rental)


@router.delete("/{rental_id}/rooms/{room_id}", response_model=RentalResponse)
def remove_room(
    rental_id: str,
    room_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> RentalResponse:
    """Remove a room template."""
    rental = rental_service.remove_room(db, rental_id, user.id, room_id)
    return RentalResponse.model_validate(rental)


@router.get("/{rental_id}/readings", response_model=list[RoomReading])
def room_readings(
    rental_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
) -> list[RoomReading]:
    """Room templates as zero readings to start a calculation from."""
    rental = rental_service.get_rental(db, rental_id, user.id)
    return rental_service.rental_room_readings(rental)
