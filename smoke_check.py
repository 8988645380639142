#!/usr/bin/env python3
"""
Smoke check against a running backend: hubs, events and the plate watch list
"""

import os
import sys

import requests

# Configuration
BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")
HUB_ID = 1


def check_hubs():
    """Arm and disarm a hub through the API"""

    print("🏠 Checking hubs")
    print("=" * 60)

    print("\n1. Fetching hub...")
    response = requests.get(f"{BACKEND_URL}/api/hubs/{HUB_ID}", timeout=5)
    if response.status_code != 200:
        print(f"❌ Hub not found: {response.status_code}")
        return False
    hub = response.json()
    print(f"✅ Hub found: {hub['name']} ({hub['status']}, armed={hub['systemArmed']})")

    print("\n2. Arming hub...")
    response = requests.post(f"{BACKEND_URL}/api/hubs/{HUB_ID}/arm", timeout=5)
    if response.status_code != 200 or not response.json()["systemArmed"]:
        print(f"❌ Failed to arm hub: {response.status_code}")
        return False
    print("✅ Hub armed")

    print("\n3. Restoring previous arm state...")
    action = "arm" if hub["systemArmed"] else "disarm"
    requests.post(f"{BACKEND_URL}/api/hubs/{HUB_ID}/{action}", timeout=5)
    print(f"✅ Hub {action}ed")
    return True


def check_events():
    """Report an event, then acknowledge it"""

    print("\n📋 Checking events")
    print("=" * 60)

    print("\n1. Reporting event...")
    response = requests.post(f"{BACKEND_URL}/api/events", json={
        "hubId": HUB_ID,
        "type": "system",
        "severity": "low",
        "title": "Smoke check",
        "description": "Event created by smoke_check.py",
    }, timeout=5)
    if response.status_code != 201:
        print(f"❌ Failed to create event: {response.status_code} {response.text}")
        return False
    event = response.json()
    print(f"✅ Event {event['id']} created")

    print("\n2. Acknowledging event...")
    response = requests.patch(f"{BACKEND_URL}/api/events/{event['id']}/acknowledge", timeout=5)
    if response.status_code != 200 or not response.json()["acknowledged"]:
        print(f"❌ Failed to acknowledge event: {response.status_code}")
        return False
    print("✅ Event acknowledged")

    requests.delete(f"{BACKEND_URL}/api/events/{event['id']}", timeout=5)
    return True


def check_watch_list():
    """Add a plate, look it up in a different spelling, remove it"""

    print("\n🚗 Checking watch list")
    print("=" * 60)

    print("\n1. Adding plate...")
    response = requests.post(f"{BACKEND_URL}/api/watchlist", json={
        "licensePlate": "smk-001",
        "reason": "other",
        "addedBy": "smoke_check.py",
    }, timeout=5)
    if response.status_code != 201:
        print(f"❌ Failed to add plate: {response.status_code} {response.text}")
        return False
    entry = response.json()
    print(f"✅ Plate stored as {entry['licensePlate']}")

    try:
        print("\n2. Checking plate...")
        response = requests.post(f"{BACKEND_URL}/api/watchlist/check", json={"licensePlate": "SMK 001"}, timeout=5)
        match = response.json().get("match")
        if not match or match["id"] != entry["id"]:
            print(f"❌ Plate not matched: {response.text}")
            return False
        print("✅ Plate matched")
        return True
    finally:
        requests.delete(f"{BACKEND_URL}/api/watchlist/{entry['id']}", timeout=5)


if __name__ == "__main__":
    print("Security Hub Backend Smoke Check")
    print(f"Make sure the backend API server is running on {BACKEND_URL}")

    try:
        results = [check_hubs(), check_events(), check_watch_list()]
    except requests.RequestException as e:
        print(f"\n❌ Backend is not reachable: {e}")
        sys.exit(1)

    if all(results):
        print("\n🎉 Smoke check passed!")
    else:
        print("\n❌ Smoke check failed")
        sys.exit(1)
