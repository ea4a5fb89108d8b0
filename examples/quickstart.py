#!/usr/bin/env python3
"""
Wide Angu Quickstart — walk the whole HTTP surface in one script.

Health → professional types → categories → listing → instant capture →
register (client + professional) → booking.
Run with: python examples/quickstart.py

Requires: pip install httpx
Backend must be running: http://localhost:3000
"""

import httpx

from _common import BASE, check_backend


def main():
    check_backend()
    client = httpx.Client(base_url=BASE, timeout=10)

    # ── Catalog ───────────────────────────────────────────────────
    print("\n1. Professional types...")
    types = client.get("/professionals/types").json()["data"]
    print(f"   {', '.join(types.values())}")

    print("\n2. Service categories...")
    for category in client.get("/discover/categories").json()["data"]:
        print(f"   {category['icon']}  {category['name']} ({category['id']})")

    print("\n3. Featured professionals...")
    listing = client.get("/discover/professionals").json()["data"]
    for pro in listing["professionals"]:
        print(f"   #{pro['id']} {pro['name']} — {pro['type']}, ★{pro['rating']} ({pro['location']})")
    print(f"   total={listing['total']} page={listing['page']}")

    # ── Instant capture ───────────────────────────────────────────
    print("\n4. Requesting an instant capture...")
    resp = client.post("/discover/instant-capture", json={
        "services": ["photography", "aerial"],
        "location": "Lagos",
        "date": "2024-01-01",
    })
    assert resp.status_code == 200, f"Failed: {resp.text}"
    capture = resp.json()["data"]
    print(f"   {capture['requestId']}: {capture['matchedProfessionals']} professionals matched")

    # ── Registration ──────────────────────────────────────────────
    print("\n5. Registering users...")
    for user_type in ("client", "professional"):
        resp = client.post("/auth/register", json={
            "email": f"{user_type}@example.com",
            "userType": user_type,
            "professionalType": "photographer",
        })
        user = resp.json()["data"]["user"]
        print(f"   {user['email']}: userType={user['userType']} professionalType={user['professionalType']}")

    # ── Booking ───────────────────────────────────────────────────
    print("\n6. Creating a booking...")
    resp = client.post("/bookings", json={"professionalId": 1, "date": "2024-01-02"})
    booking = resp.json()["data"]
    print(f"   {booking['bookingId']}: {booking['status']} — {booking['message']}")

    print("\nDone.")


if __name__ == "__main__":
    main()
