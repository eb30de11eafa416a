"""
CRUD endpoints for airplanes, cities and airports, through the real app and
the in-memory store.
"""
from datetime import datetime

import pytest
from sqlalchemy import select

from airline.models.airport import Airport
from airline.models.flight import Flight


# ---------------------------------------------------------------------------
# Airplanes
# ---------------------------------------------------------------------------

class TestAirplanesApi:

    async def test_create_and_fetch(self, client):
        resp = await client.post("/api/v1/airplanes", json={"modelNumber": "airbus320", "capacity": 180})

        assert resp.status_code == 201
        created = resp.json()["data"]
        assert created["modelNumber"] == "airbus320"
        assert created["capacity"] == 180
        assert "createdAt" in created and "updatedAt" in created

        resp = await client.get(f"/api/v1/airplanes/{created['id']}")
        assert resp.status_code == 200
        assert resp.json()["data"]["modelNumber"] == "airbus320"

    async def test_list(self, client):
        await client.post("/api/v1/airplanes", json={"modelNumber": "a1", "capacity": 10})
        await client.post("/api/v1/airplanes", json={"modelNumber": "a2", "capacity": 20})

        resp = await client.get("/api/v1/airplanes")

        assert [a["modelNumber"] for a in resp.json()["data"]] == ["a1", "a2"]

    async def test_capacity_above_limit_rejected(self, client):
        resp = await client.post("/api/v1/airplanes", json={"modelNumber": "big", "capacity": 1001})
        assert resp.status_code == 400

    async def test_model_number_must_be_alphanumeric(self, client):
        resp = await client.post("/api/v1/airplanes", json={"modelNumber": "airbus 320", "capacity": 10})
        assert resp.status_code == 400

    async def test_duplicate_model_number_conflicts(self, client):
        await client.post("/api/v1/airplanes", json={"modelNumber": "airbus320", "capacity": 180})
        resp = await client.post("/api/v1/airplanes", json={"modelNumber": "airbus320", "capacity": 100})

        assert resp.status_code == 409
        assert resp.json()["error"]["code"] == "CONFLICT"

    async def test_partial_update(self, client):
        created = (await client.post("/api/v1/airplanes", json={"modelNumber": "a1", "capacity": 10})).json()["data"]

        resp = await client.patch(f"/api/v1/airplanes/{created['id']}", json={"capacity": 250})

        assert resp.status_code == 200
        assert resp.json()["data"]["capacity"] == 250
        assert resp.json()["data"]["modelNumber"] == "a1"

    async def test_delete(self, client):
        created = (await client.post("/api/v1/airplanes", json={"modelNumber": "a1", "capacity": 10})).json()["data"]

        resp = await client.delete(f"/api/v1/airplanes/{created['id']}")
        assert resp.status_code == 200
        assert resp.json()["data"]["id"] == created["id"]

        resp = await client.get(f"/api/v1/airplanes/{created['id']}")
        assert resp.status_code == 404

    async def test_delete_airplane_with_flights_conflicts(self, client, session, world):
        session.add(Flight(
            flight_number="AI101",
            airplane_id=world["airplane"].id,
            departure_airport_id="DEL",
            arrival_airport_id="BOM",
            departure_time=datetime(2026, 6, 1, 9, 0),
            arrival_time=datetime(2026, 6, 1, 11, 0),
            price=5000,
            total_seats=100,
        ))
        await session.commit()

        resp = await client.delete(f"/api/v1/airplanes/{world['airplane'].id}")

        assert resp.status_code == 409
        assert (await client.get(f"/api/v1/airplanes/{world['airplane'].id}")).status_code == 200

    async def test_update_missing_is_404(self, client):
        resp = await client.patch("/api/v1/airplanes/42", json={"capacity": 1})
        assert resp.status_code == 404


# ---------------------------------------------------------------------------
# Cities
# ---------------------------------------------------------------------------

class TestCitiesApi:

    async def test_create_list_update_delete(self, client):
        resp = await client.post("/api/v1/cities", json={"name": "Tokyo"})
        assert resp.status_code == 201
        city_id = resp.json()["data"]["id"]

        resp = await client.patch(f"/api/v1/cities/{city_id}", json={"name": "Kyoto"})
        assert resp.json()["data"]["name"] == "Kyoto"

        resp = await client.get("/api/v1/cities")
        assert [c["name"] for c in resp.json()["data"]] == ["Kyoto"]

        resp = await client.delete(f"/api/v1/cities/{city_id}")
        assert resp.status_code == 200
        assert (await client.get("/api/v1/cities")).json()["data"] == []

    async def test_duplicate_name_conflicts(self, client):
        await client.post("/api/v1/cities", json={"name": "Tokyo"})
        resp = await client.post("/api/v1/cities", json={"name": "Tokyo"})
        assert resp.status_code == 409

    async def test_empty_name_rejected(self, client):
        resp = await client.post("/api/v1/cities", json={"name": ""})
        assert resp.status_code == 400

    async def test_delete_city_with_airports_conflicts(self, client, world, session_maker):
        resp = await client.delete(f"/api/v1/cities/{world['delhi'].id}")

        assert resp.status_code == 409
        assert resp.json()["error"]["code"] == "CONFLICT"
        async with session_maker() as session:
            result = await session.execute(select(Airport.code))
            assert set(result.scalars().all()) == {"BOM", "DEL", "LHR"}
        assert (await client.get(f"/api/v1/cities/{world['delhi'].id}")).status_code == 200


# ---------------------------------------------------------------------------
# Airports
# ---------------------------------------------------------------------------

class TestAirportsApi:

    async def test_create_uppercases_code(self, client, world):
        resp = await client.post(
            "/api/v1/airports",
            json={"name": "Gatwick", "code": "lgw", "address": "Horley", "cityId": world["london"].id},
        )

        assert resp.status_code == 201
        data = resp.json()["data"]
        assert data["code"] == "LGW"
        assert data["cityId"] == world["london"].id

    async def test_unknown_city_is_404(self, client):
        resp = await client.post("/api/v1/airports", json={"name": "Nowhere", "code": "NWH", "cityId": 99})

        assert resp.status_code == 404
        assert resp.json()["message"] == "City not found"

    async def test_duplicate_code_conflicts(self, client, world):
        resp = await client.post(
            "/api/v1/airports",
            json={"name": "Another Delhi", "code": "DEL", "cityId": world["delhi"].id},
        )
        assert resp.status_code == 409

    async def test_invalid_code_rejected(self, client, world):
        resp = await client.post(
            "/api/v1/airports",
            json={"name": "Bad", "code": "DE1", "cityId": world["delhi"].id},
        )
        assert resp.status_code == 400

    async def test_list_ordered_by_code(self, client, world):
        resp = await client.get("/api/v1/airports")
        assert [a["code"] for a in resp.json()["data"]] == ["BOM", "DEL", "LHR"]

    async def test_update_and_delete(self, client, world):
        airports = (await client.get("/api/v1/airports")).json()["data"]
        lhr = next(a for a in airports if a["code"] == "LHR")

        resp = await client.patch(f"/api/v1/airports/{lhr['id']}", json={"address": "Hounslow"})
        assert resp.json()["data"]["address"] == "Hounslow"

        resp = await client.patch(f"/api/v1/airports/{lhr['id']}", json={"cityId": 999})
        assert resp.status_code == 404

        resp = await client.delete(f"/api/v1/airports/{lhr['id']}")
        assert resp.status_code == 200
        assert (await client.get(f"/api/v1/airports/{lhr['id']}")).status_code == 404

    @pytest.mark.parametrize("field", ["name", "code", "cityId"])
    async def test_update_null_required_field_is_400(self, client, world, field):
        airports = (await client.get("/api/v1/airports")).json()["data"]
        lhr = next(a for a in airports if a["code"] == "LHR")

        resp = await client.patch(f"/api/v1/airports/{lhr['id']}", json={field: None})

        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "BAD_REQUEST"
        unchanged = (await client.get(f"/api/v1/airports/{lhr['id']}")).json()["data"]
        assert unchanged == lhr

    async def test_update_null_address_clears_it(self, client, world):
        airports = (await client.get("/api/v1/airports")).json()["data"]
        lhr = next(a for a in airports if a["code"] == "LHR")
        await client.patch(f"/api/v1/airports/{lhr['id']}", json={"address": "Hounslow"})

        resp = await client.patch(f"/api/v1/airports/{lhr['id']}", json={"address": None})

        assert resp.status_code == 200
        assert resp.json()["data"]["address"] is None
