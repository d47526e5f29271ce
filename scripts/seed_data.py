"""Seed script to populate the database with a demo landlord, rental and bills."""

from voltshare.core.database import Base, SessionLocal, engine
from voltshare.models.rental import RentalProperty
from voltshare.schemas.rental import RentalCreate
from voltshare.schemas.user import UserCreate
from voltshare.services import bills as bill_service
from voltshare.services import rentals as rental_service
from voltshare.services.allocation import calculate_bill
from voltshare.services.auth import create_user

DEMO_EMAIL = "demo@voltshare.app"
DEMO_PASSWORD = "demo-password"

# (period, main meter kWh, per-room kWh)
DEMO_MONTHS = [
    ("January", 200.0, [90.0, 100.0]),
    ("February", 410.0, [120.5, 140.0, 95.25]),
    ("March", 385.0, [110.0, 150.0, 101.0]),
]


def seed_database() -> None:
    """Seed the database with sample data."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(RentalProperty).first():
            print("Database already has data. Skipping seed.")
            return

        print("Seeding database...")

        user = create_user(
            db,
            UserCreate(email=DEMO_EMAIL, name="Demo Landlord", password=DEMO_PASSWORD),
        )
        print(f"Created user: {user.email} (password: {DEMO_PASSWORD})")

        rental = rental_service.create_rental(
            db,
            RentalCreate(name="Sunrise Boarding House", rooms=["Room 1", "Room 2", "Room 3"]),
            user.id,
        )
        print(f"Created rental: {rental.name} with {len(rental.rooms)} rooms")

        for month, main_kwh, room_kwh in DEMO_MONTHS:
            readings = rental_service.rental_room_readings(rental)[: len(room_kwh)]
            filled = [r.model_copy(update={"consumption": kwh}) for r, kwh in zip(readings, room_kwh)]
            record = calculate_bill(
                main_kwh,
                12,
                filled,
                month,
                2024,
                property_id=rental.id,
                property_name=rental.name,
            )
            bill_service.save_bill(db, record, user.id)
            print(
                f"Saved {month} bill: {record.missing_consumption:.2f} kWh shared, "
                f"total {record.total_amount:.2f}"
            )

        print("\nSeed data created successfully!")
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
