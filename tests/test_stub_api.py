"""Write-stub endpoints — instant capture, registration, bookings.

Learn: The `client` fixture installs a MarketplaceService with a frozen
clock (see the frozen_ms fixture), so every generated id in these tests is predictable.
"""

import pytest


# ═══════════════════════════════════════════════════════════
# Instant capture
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_instant_capture_echoes_request(client, frozen_ms):
    body = {"services": ["photography"], "location": "Lagos", "date": "2024-01-01"}
    resp = await client.post("/api/v1/discover/instant-capture", json=body)
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["success"] is True
    assert payload["message"] == "Instant capture request received"
    data = payload["data"]
    assert data["requestId"] == f"REQ_{frozen_ms}"
    assert data["services"] == ["photography"]
    assert data["location"] == "Lagos"
    assert data["date"] == "2024-01-01"
    assert isinstance(data["matchedProfessionals"], int)
    assert 1 <= data["matchedProfessionals"] <= 10


@pytest.mark.asyncio
async def test_instant_capture_accepts_any_shape(client):
    """No validation: nested objects and numbers are echoed verbatim."""
    body = {"services": {"kind": "drone", "hours": 2}, "location": 42, "date": None}
    resp = await client.post("/api/v1/discover/instant-capture", json=body)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["services"] == {"kind": "drone", "hours": 2}
    assert data["location"] == 42
    assert data["date"] is None


@pytest.mark.asyncio
async def test_instant_capture_omits_missing_fields(client):
    resp = await client.post(
        "/api/v1/discover/instant-capture", json={"location": "Abuja"}
    )
    data = resp.json()["data"]
    assert data["location"] == "Abuja"
    assert "services" not in data
    assert "date" not in data


@pytest.mark.asyncio
async def test_instant_capture_without_body(client, frozen_ms):
    resp = await client.post("/api/v1/discover/instant-capture")
    assert resp.status_code == 200
    assert resp.json()["data"]["requestId"] == f"REQ_{frozen_ms}"


@pytest.mark.asyncio
async def test_instant_capture_rejects_malformed_json(client):
    resp = await client.post(
        "/api/v1/discover/instant-capture",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert 400 <= resp.status_code < 500


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [["photography"], "Lagos", 7, None])
async def test_instant_capture_non_object_body(client, frozen_ms, body):
    """Valid JSON that isn't an object is accepted; nothing is echoed."""
    resp = await client.post("/api/v1/discover/instant-capture", json=body)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["requestId"] == f"REQ_{frozen_ms}"
    assert 1 <= data["matchedProfessionals"] <= 10
    assert {"services", "location", "date"}.isdisjoint(data)


# ═══════════════════════════════════════════════════════════
# Registration
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_register_professional_keeps_type(client, frozen_ms):
    resp = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "a@b.com",
            "userType": "professional",
            "professionalType": "photographer",
        },
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["user"] == {
        "id": frozen_ms,
        "email": "a@b.com",
        "userType": "professional",
        "professionalType": "photographer",
    }
    assert data["token"] == "jwt_token_here"


@pytest.mark.asyncio
async def test_register_client_nulls_type(client):
    resp = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "a@b.com",
            "userType": "client",
            "professionalType": "photographer",
        },
    )
    user = resp.json()["data"]["user"]
    assert user["userType"] == "client"
    assert user["professionalType"] is None


@pytest.mark.asyncio
async def test_register_does_not_validate(client):
    """Unknown professional types and odd emails are accepted as-is."""
    resp = await client.post(
        "/api/v1/auth/register",
        json={"email": "nope", "userType": "professional", "professionalType": "juggler"},
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["user"]["professionalType"] == "juggler"


@pytest.mark.asyncio
async def test_register_empty_body(client, frozen_ms):
    resp = await client.post("/api/v1/auth/register", json={})
    assert resp.status_code == 200
    user = resp.json()["data"]["user"]
    assert user == {"id": frozen_ms, "professionalType": None}


@pytest.mark.asyncio
async def test_register_array_body(client, frozen_ms):
    resp = await client.post("/api/v1/auth/register", json=["a@b.com", "professional"])
    assert resp.status_code == 200
    assert resp.json()["data"]["user"] == {"id": frozen_ms, "professionalType": None}


@pytest.mark.asyncio
async def test_register_rejects_malformed_json(client):
    resp = await client.post(
        "/api/v1/auth/register",
        content=b'{"email": ',
        headers={"Content-Type": "application/json"},
    )
    assert 400 <= resp.status_code < 500


# ═══════════════════════════════════════════════════════════
# Bookings
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_create_booking(client, frozen_ms):
    resp = await client.post("/api/v1/bookings", json={"professionalId": 3})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["success"] is True
    assert payload["data"] == {
        "bookingId": f"BOOK_{frozen_ms}",
        "status": "pending",
        "message": "Booking created successfully",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{}, [], "text", None])
async def test_create_booking_ignores_body(client, body):
    resp = await client.post("/api/v1/bookings", json=body)
    assert resp.status_code == 200
    assert resp.json()["data"]["status"] == "pending"


@pytest.mark.asyncio
async def test_create_booking_rejects_malformed_json(client):
    """The body is ignored, but it still has to parse."""
    resp = await client.post(
        "/api/v1/bookings",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert 400 <= resp.status_code < 500
