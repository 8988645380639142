# init_db.py
import json
from datetime import timedelta

from app.db.store import DataStore
from app.db.schemas.common import utcnow
from app.db.schemas.hub import Hub
from app.db.schemas.camera import Camera
from app.db.schemas.event import Event
from app.db.schemas.speaker import Speaker
from app.db.schemas.ai_trigger import AITrigger
from app.db.schemas.watchlist import WatchListEntry

# 1x1 JPEG used as the plate crop of the seeded license plate events
PLATE_THUMBNAIL = (
    "data:image/jpeg;base64,/9j/4AAQSkZJRgABAQEAYABgAAD/2wBDAAEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEB"
    "AQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQEBAQH/wAARCAABAAEDASIAAhEBAxEB/8QAFQABAQAAAAAAAAAA"
    "AAAAAAAAAAv/xAAUEAEAAAAAAAAAAAAAAAAAAAAA/9oADAMBAAIRAxEAPwA/2gA"
)


def _thumbnail(photo_id: str) -> str:
    return f"https://images.unsplash.com/photo-{photo_id}?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=300"


def seed_hubs(store: DataStore, now):
    store.hubs.put(Hub(
        id=1, name="Hub-01", location="Main Building", serial_number="AO-HUB-001-2024",
        status="online", system_armed=True, last_heartbeat=now,
        configuration={"zones": 4, "maxCameras": 16},
    ))
    store.hubs.put(Hub(
        id=2, name="Hub-02", location="Parking Lot", serial_number="AO-HUB-002-2024",
        status="online", system_armed=False, last_heartbeat=now,
        configuration={"zones": 2, "maxCameras": 8},
    ))
    store.hubs.put(Hub(
        id=3, name="Hub-03", location="Perimeter", serial_number="AO-HUB-003-2024",
        status="offline", system_armed=False, last_heartbeat=now - timedelta(minutes=30),
        configuration={"zones": 3, "maxCameras": 12},
    ))


def seed_cameras(store: DataStore):
    cameras = [
        (1, 1, "Camera 01", "Entrance", "192.168.1.100", "online", True, _thumbnail("1497366216548-37526070297c")),
        (2, 1, "Camera 02", "Lobby", "192.168.1.101", "online", True, _thumbnail("1497366811353-6870744d04b2")),
        (3, 1, "Camera 03", "Server Room", "192.168.1.102", "online", True, _thumbnail("1558494949-ef010cbdcc31")),
        (4, 2, "Camera 04", "Parking Garage", "192.168.1.200", "online", True, _thumbnail("1506905925346-21bda4d32df4")),
        (5, 2, "Camera 05", "Parking Exit", "192.168.1.201", "online", True, _thumbnail("1497366412874-3415097a27e7")),
        (6, 3, "Camera 06", "Perimeter North", "192.168.1.300", "offline", False, None),
    ]
    for camera_id, hub_id, name, location, ip_address, status, is_recording, thumbnail_url in cameras:
        store.cameras.put(Camera(
            id=camera_id, hub_id=hub_id, name=name, location=location, ip_address=ip_address,
            status=status, is_recording=is_recording,
            stream_url=f"rtsp://{ip_address}/stream", thumbnail_url=thumbnail_url,
        ))


def seed_events(store: DataStore, now):
    store.events.put(Event(
        id=1, hub_id=1, camera_id=2, type="person_detection", severity="medium",
        title="Unauthorized Person Detected",
        description="Person detected in restricted area after hours",
        timestamp=now - timedelta(minutes=2), acknowledged=False,
        metadata={"confidence": 0.92, "person_count": 1, "location": "restricted_zone",
                  "alert_reason": "after_hours_access"},
    ))
    store.events.put(Event(
        id=2, hub_id=1, camera_id=None, type="system", severity="low",
        title="System Armed", description="Security system armed by admin user",
        timestamp=now - timedelta(minutes=15), acknowledged=True,
        metadata={"user": "admin"},
    ))
    store.events.put(Event(
        id=3, hub_id=3, camera_id=6, type="connection", severity="high",
        title="Connection Lost", description="Camera connection lost",
        timestamp=now - timedelta(minutes=60), acknowledged=False,
        metadata={"lastPing": "2024-01-25T14:30:00Z"},
    ))
    store.events.put(Event(
        id=4, hub_id=1, camera_id=1, type="license_plate", severity="medium",
        title="License Plate Detected",
        description="License plate ABC-1234 detected at main entrance",
        timestamp=now - timedelta(minutes=5), acknowledged=False,
        metadata={"vehicle_type": "sedan", "color": "blue"},
        license_plate="ABC-1234", license_plate_thumbnail=PLATE_THUMBNAIL, license_plate_confidence=0.92,
    ))
    store.events.put(Event(
        id=5, hub_id=2, camera_id=4, type="weapon_detection", severity="critical",
        title="Weapon Detected", description="Potential weapon detected in main entrance area",
        timestamp=now - timedelta(minutes=30), acknowledged=False,
        metadata={"weapon_type": "handgun", "confidence": 0.94, "person_count": 1,
                  "alert_reason": "security_threat"},
    ))
    store.events.put(Event(
        id=6, hub_id=1, camera_id=1, type="license_plate", severity="critical",
        title="Watch List Vehicle Detected",
        description="Vehicle on stolen watch list detected: ABC-1234",
        timestamp=now - timedelta(minutes=45), acknowledged=False,
        metadata={"vehicle_type": "sedan", "color": "black", "alert_reason": "stolen_vehicle",
                  "case_number": "CASE-2024-001"},
        license_plate="ABC-1234", license_plate_thumbnail=PLATE_THUMBNAIL, license_plate_confidence=0.96,
    ))
    store.events.put(Event(
        id=7, hub_id=3, camera_id=5, type="suspicious_behavior", severity="high",
        title="Loitering Detected",
        description="Person loitering near emergency exit for extended period",
        timestamp=now - timedelta(minutes=75), acknowledged=False,
        metadata={"behavior_type": "loitering", "duration_minutes": 15, "location": "emergency_exit",
                  "person_count": 1, "confidence": 0.89},
    ))


def seed_speakers(store: DataStore):
    store.speakers.put(Speaker(
        id=1, hub_id=1, name="Main Speaker", zone="Zone 1", ip_address="192.168.1.150",
        status="online", volume=75, is_active=True,
    ))
    store.speakers.put(Speaker(
        id=2, hub_id=2, name="Parking Speaker", zone="Zone 2", ip_address="192.168.1.250",
        status="online", volume=50, is_active=False,
    ))


def seed_ai_triggers(store: DataStore, now):
    store.ai_triggers.put(AITrigger(
        id=1, name="Weapon Detection",
        description="Alert when weapons are detected in camera feeds",
        prompt="Analyze this image for any weapons including guns, knives, or other dangerous objects. "
               "Alert if confidence is above 80%.",
        severity="critical", enabled=True, confidence=80,
        hub_ids=["1", "2"], camera_ids=[], actions=["email", "notification", "sms"],
        created_at=now, updated_at=now,
    ))
    store.ai_triggers.put(AITrigger(
        id=2, name="Suspicious Behavior",
        description="Detect loitering, running, or unusual movement patterns",
        prompt="Look for suspicious behavior such as loitering near entrances, people running in "
               "non-emergency situations, or unusual movement patterns.",
        severity="medium", enabled=True, confidence=70,
        hub_ids=["1"], camera_ids=["1", "2"], actions=["notification"],
        created_at=now, updated_at=now,
    ))


def seed_watch_list(store: DataStore, now):
    store.watch_list.put(WatchListEntry(
        id=1, license_plate="ABC-1234", reason="stolen",
        description="Black sedan reported stolen from downtown area",
        severity="critical", added_by="Officer Johnson", is_active=True,
        vehicle_details=json.dumps({"make": "Honda", "model": "Civic", "year": "2020", "color": "Black"}),
        case_number="CASE-2024-001", contact_info="Detective Smith - ext. 4455",
        expires_at=None,
        created_at=now - timedelta(days=2), updated_at=now - timedelta(days=2),
    ))
    store.watch_list.put(WatchListEntry(
        id=2, license_plate="XYZ-9876", reason="suspect",
        description="Vehicle of interest in armed robbery investigation",
        severity="high", added_by="Detective Williams", is_active=True,
        vehicle_details=json.dumps({"make": "Ford", "model": "F-150", "year": "2019", "color": "White"}),
        case_number="CASE-2024-025", contact_info="Detective Williams - ext. 3322",
        expires_at=now + timedelta(days=30),
        created_at=now - timedelta(days=5), updated_at=now - timedelta(days=1),
    ))


def seed(store: DataStore):
    now = utcnow()
    seed_hubs(store, now)
    seed_cameras(store)
    seed_events(store, now)
    seed_speakers(store)
    seed_ai_triggers(store, now)
    seed_watch_list(store, now)


def init() -> DataStore:
    store = DataStore().initialize(seed=True)
    print("✅ Seed data added:", store.counts())
    return store


if __name__ == "__main__":
    init()
