"""Tests for rental property templates."""

import pytest

from voltshare.schemas.rental import RentalCreate
from voltshare.services import rentals as rental_service
from voltshare.services.allocation import calculate_bill


class TestRentalEndpoints:
    """Tests for /api/rentals."""

    def test_create_with_default_room(self, client, auth_headers) -> None:
        """Test a new rental starts with a single "Room 1"."""
        response = client.post("/api/rentals", json={"name": "Dorm A"}, headers=auth_headers)
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Dorm A"
        assert [room["name"] for room in data["rooms"]] == ["Room 1"]
        assert "id" in data
        assert "created_at" in data

    def test_create_with_rooms(self, client, auth_headers) -> None:
        """Test explicit room names keep their order; blanks are auto-named."""
        response = client.post(
            "/api/rentals",
            json={"name": "Dorm A", "rooms": ["Attic", " ", "Basement"]},
            headers=auth_headers,
        )
        assert [room["name"] for room in response.json()["rooms"]] == [
            "Attic",
            "Room 2",
            "Basement",
        ]

    def test_create_blank_name(self, client, auth_headers) -> None:
        """Test a blank property name is rejected."""
        response = client.post("/api/rentals", json={"name": "  "}, headers=auth_headers)
        assert response.status_code == 422

    def test_requires_auth(self, client) -> None:
        """Test rentals need a signed-in user."""
        assert client.get("/api/rentals").status_code == 401

    def test_list_newest_first(self, client, auth_headers) -> None:
        """Test rentals are listed newest first."""
        client.post("/api/rentals", json={"name": "Old"}, headers=auth_headers)
        client.post("/api/rentals", json={"name": "New"}, headers=auth_headers)
        response = client.get("/api/rentals", headers=auth_headers)
        assert [r["name"] for r in response.json()] == ["New", "Old"]

    def test_rename_and_delete(self, client, auth_headers) -> None:
        """Test renaming then deleting a rental."""
        rental = client.post("/api/rentals", json={"name": "Old"}, headers=auth_headers).json()
        response = client.patch(
            f"/api/rentals/{rental['id']}",
            json={"name": "Renamed"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"

        response = client.delete(f"/api/rentals/{rental['id']}", headers=auth_headers)
        assert response.status_code == 204
        assert client.get(f"/api/rentals/{rental['id']}", headers=auth_headers).status_code == 404

    def test_rentals_are_private(self, client, auth_headers, make_user) -> None:
        """Test another landlord cannot touch someone's rental."""
        rental = client.post("/api/rentals", json={"name": "Mine"}, headers=auth_headers).json()
        other = make_user("other@example.com")
        assert client.get("/api/rentals", headers=other).json() == []
        assert client.get(f"/api/rentals/{rental['id']}", headers=other).status_code == 404
        response = client.post(f"/api/rentals/{rental['id']}/rooms", json={}, headers=other)
        assert response.status_code == 404


class TestRoomTemplates:
    """Tests for the room sub-resources."""

    @pytest.fixture
    def rental(self, client, auth_headers) -> dict:
        """A rental with one default room."""
        return client.post("/api/rentals", json={"name": "Dorm"}, headers=auth_headers).json()

    def test_add_room_auto_named(self, client, auth_headers, rental) -> None:
        """Test added rooms are named after their position."""
        url = f"/api/rentals/{rental['id']}/rooms"
        client.post(url, json={}, headers=auth_headers)
        response = client.post(url, json={"name": "Loft"}, headers=auth_headers)
        assert response.status_code == 201
        assert [room["name"] for room in response.json()["rooms"]] == ["Room 1", "Room 2", "Loft"]

    def test_rename_room(self, client, auth_headers, rental) -> None:
        """Test renaming a room template."""
        room_id = rental["rooms"][0]["id"]
        response = client.patch(
            f"/api/rentals/{rental['id']}/rooms/{room_id}",
            json={"name": "Front Room"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["rooms"][0] == {"id": room_id, "name": "Front Room"}

    def test_rename_unknown_room(self, client, auth_headers, rental) -> None:
        """Test renaming a missing room is 404."""
        response = client.patch(
            f"/api/rentals/{rental['id']}/rooms/nope",
            json={"name": "X"},
            headers=auth_headers,
        )
        assert response.status_code == 404

    def test_remove_room_keeps_order(self, client, auth_headers, rental) -> None:
        """Test removing the middle room leaves the others in order."""
        url = f"/api/rentals/{rental['id']}/rooms"
        client.post(url, json={"name": "B"}, headers=auth_headers)
        rooms = client.post(url, json={"name": "C"}, headers=auth_headers).json()["rooms"]

        response = client.delete(f"{url}/{rooms[1]['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert [room["name"] for room in response.json()["rooms"]] == ["Room 1", "C"]

    def test_readings_prefill(self, client, auth_headers, rental) -> None:
        """Test template rooms come back as zero readings."""
        client.post(
            f"/api/rentals/{rental['id']}/rooms",
            json={"name": "Loft"},
            headers=auth_headers,
        )
        response = client.get(f"/api/rentals/{rental['id']}/readings", headers=auth_headers)
        assert response.status_code == 200
        readings = response.json()
        assert [r["name"] for r in readings] == ["Room 1", "Loft"]
        assert all(r["consumption"] == 0 for r in readings)


class TestRentalService:
    """Service-level tests for rental templates."""

    def test_room_readings_feed_calculation(self, test_db, auth_headers) -> None:
        """Test template readings can go straight into the engine."""
        rental = rental_service.create_rental(
            test_db, RentalCreate(name="Dorm", rooms=["A", "B"]), owner_id=1
        )
        readings = rental_service.rental_room_readings(rental)
        filled = [r.model_copy(update={"consumption": kwh}) for r, kwh in zip(readings, [30, 70])]

        bill = calculate_bill(120, 10, filled, "May", 2024, property_id=rental.id)
        assert [room.id for room in bill.rooms] == [room.id for room in rental.rooms]
        assert [room.final_consumption for room in bill.rooms] == pytest.approx([36, 84])

    def test_count_rooms(self, test_db, auth_headers) -> None:
        """Test room counting across rentals."""
        rental_service.create_rental(test_db, RentalCreate(name="A", rooms=["1", "2"]), 1)
        rental_service.create_rental(test_db, RentalCreate(name="B"), 1)
        assert rental_service.count_rooms(rental_service.get_rentals(test_db, 1)) == 3
