import logging
from datetime import timedelta

import pytest

from app.db.crud import ai_trigger as ai_trigger_crud
from app.db.crud import camera as camera_crud
from app.db.crud import event as event_crud
from app.db.crud import hub as hub_crud
from app.db.crud import speaker as speaker_crud
from app.db.schemas.ai_trigger import AITriggerCreate, AITriggerUpdate
from app.db.schemas.camera import CameraCreate, CameraUpdate
from app.db.schemas.common import utcnow
from app.db.schemas.event import Event, EventCreate
from app.db.schemas.hub import HubCreate, HubUpdate
from app.db.schemas.speaker import SpeakerUpdate


def make_event(**overrides):
    data = {"hub_id": 1, "type": "system", "severity": "low", "title": "Test event"}
    data.update(overrides)
    return EventCreate(**data)


def test_seed_snapshot(store):
    assert store.counts() == {
        "hubs": 3,
        "cameras": 6,
        "events": 7,
        "speakers": 2,
        "ai_triggers": 2,
        "watch_list": 2,
    }


def test_ids_continue_after_seed(store):
    hub = hub_crud.create_hub(store, HubCreate(name="Hub-04", location="Dock", serial_number="AO-HUB-004-2024"))
    assert hub.id == 4


def test_ids_strictly_increase_and_are_not_reused(store):
    first = event_crud.create_event(store, make_event())
    second = event_crud.create_event(store, make_event())
    assert second.id > first.id

    assert event_crud.delete_event(store, second.id)
    third = event_crud.create_event(store, make_event())
    assert third.id > second.id
    assert event_crud.get_event(store, second.id) is None


def test_create_fills_defaults(empty_store):
    hub = hub_crud.create_hub(empty_store, HubCreate(name="Hub", location="Yard", serial_number="SN-1"))
    assert hub.id == 1
    assert hub.status == "offline"
    assert hub.system_armed is False
    assert hub.configuration is None
    assert hub.last_heartbeat is not None

    camera = camera_crud.create_camera(
        empty_store, CameraCreate(hub_id=1, name="Cam", location="Gate", ip_address="10.0.0.2")
    )
    assert camera.is_recording is False
    assert camera.status == "offline"
    assert camera.stream_url is None

    trigger = ai_trigger_crud.create_ai_trigger(
        empty_store, AITriggerCreate(name="Fire", prompt="Look for smoke or flames", severity="high")
    )
    assert trigger.confidence == 70
    assert trigger.enabled is True
    assert trigger.created_at == trigger.updated_at


def test_get_unknown_id_returns_none(store):
    assert hub_crud.get_hub(store, 999) is None
    assert camera_crud.get_camera(store, 999) is None
    assert event_crud.get_event(store, 999) is None


def test_update_unknown_id_does_not_create(store):
    assert hub_crud.update_hub(store, 999, HubUpdate(name="Ghost")) is None
    assert speaker_crud.update_speaker(store, 999, SpeakerUpdate(volume=10)) is None
    assert hub_crud.get_hub(store, 999) is None
    assert store.counts()["hubs"] == 3
    assert store.counts()["speakers"] == 2


def test_update_is_a_shallow_merge(store):
    camera = camera_crud.update_camera(store, 1, CameraUpdate(status="error"))
    assert camera.status == "error"
    assert camera.name == "Camera 01"
    assert camera.thumbnail_url is not None

    camera = camera_crud.update_camera(store, 1, CameraUpdate(thumbnail_url=None))
    assert camera.thumbnail_url is None
    assert camera.status == "error"


def test_update_bumps_updated_at(store):
    before = store.ai_triggers.merge(1, {"updated_at": utcnow() - timedelta(hours=1)})
    after = ai_trigger_crud.update_ai_trigger(store, 1, AITriggerUpdate(enabled=False))
    assert after.enabled is False
    assert after.created_at == before.created_at
    assert after.updated_at > before.updated_at


def test_acknowledge_is_idempotent(store):
    event = event_crud.acknowledge_event(store, 1)
    assert event.acknowledged is True

    again = event_crud.acknowledge_event(store, 1)
    assert again.acknowledged is True
    assert again == event


def test_acknowledge_unknown_event(store):
    assert event_crud.acknowledge_event(store, 999) is None


def test_events_sorted_newest_first(empty_store):
    now = utcnow()
    for event_id, minutes in ((1, 2), (2, 3), (3, 1)):
        empty_store.events.put(Event(
            id=event_id, hub_id=1, type="system", severity="low", title=f"t={minutes}",
            timestamp=now + timedelta(minutes=minutes),
        ))

    assert [event.title for event in event_crud.get_events(empty_store)] == ["t=3", "t=2", "t=1"]


def test_recent_events_limit(store):
    recent = event_crud.get_recent_events(store, limit=3)
    assert len(recent) == 3
    assert recent == event_crud.get_events(store)[:3]


def test_list_by_hub(store):
    cameras = camera_crud.get_cameras_by_hub(store, 1)
    assert [camera.id for camera in cameras] == [1, 2, 3]
    assert all(camera.hub_id == 1 for camera in cameras)

    events = event_crud.get_events_by_hub(store, 3)
    assert {event.id for event in events} == {3, 7}
    assert events[0].timestamp >= events[1].timestamp

    assert camera_crud.get_cameras_by_hub(store, 42) == []
    assert event_crud.get_events_by_hub(store, 42) == []
    assert speaker_crud.get_speakers_by_hub(store, 42) == []


def test_arm_offline_hub(store):
    hub = hub_crud.get_hub(store, 3)
    assert hub.status == "offline"

    armed = hub_crud.arm_hub(store, 3)
    assert armed.system_armed is True
    assert armed.last_heartbeat > hub.last_heartbeat

    disarmed = hub_crud.disarm_hub(store, 3)
    assert disarmed.system_armed is False


def test_delete(store):
    assert ai_trigger_crud.delete_ai_trigger(store, 2) is True
    assert ai_trigger_crud.delete_ai_trigger(store, 2) is False
    assert [trigger.id for trigger in ai_trigger_crud.get_ai_triggers(store)] == [1]


def test_initialize_resets_to_seed(store):
    hub_crud.delete_hub(store, 1)
    store.initialize()
    assert hub_crud.get_hub(store, 1) is not None
    assert store.counts()["hubs"] == 3


@pytest.mark.parametrize("field", ["name", "status", "system_armed"])
def test_update_schema_rejects_null_for_required_fields(field):
    with pytest.raises(ValueError):
        HubUpdate(**{field: None})


def test_camera_and_speaker_changes_are_logged(store, caplog):
    caplog.set_level(logging.INFO)

    camera = camera_crud.create_camera(store, CameraCreate(hub_id=2, name="Cam 07", location="Gate", ip_address="10.0.0.7"))
    camera_crud.delete_camera(store, camera.id)
    speaker_crud.delete_speaker(store, 1)

    messages = [record.getMessage() for record in caplog.records]
    assert f"Created camera {camera.id} (Cam 07) on hub 2" in messages
    assert f"Deleted camera {camera.id}" in messages
    assert "Deleted speaker 1" in messages
