import json
from datetime import timedelta

import pytest

from app.db.crud import watchlist as watchlist_crud
from app.db.crud.watchlist import normalize_plate
from app.db.schemas.common import utcnow
from app.db.schemas.watchlist import WatchListEntryCreate, WatchListEntryUpdate


def add_entry(store, **overrides):
    data = {"license_plate": "ABC-1234", "reason": "stolen", "added_by": "Officer"}
    data.update(overrides)
    return watchlist_crud.create_watch_list_entry(store, WatchListEntryCreate(**data))


@pytest.mark.parametrize("raw, expected", [
    ("abc-1234", "ABC1234"),
    ("ABC 1234", "ABC1234"),
    (" x.y.z_9 ", "XYZ9"),
    ("---", ""),
])
def test_normalize_plate(raw, expected):
    assert normalize_plate(raw) == expected


def test_plate_is_uppercased_on_create(empty_store):
    entry = add_entry(empty_store, license_plate="xyz-999")
    assert entry.license_plate == "XYZ-999"
    assert entry.severity == "medium"
    assert entry.is_active is True


def test_vehicle_details_object_is_serialized(empty_store):
    entry = add_entry(empty_store, vehicle_details={"make": "Honda", "color": "Red"})
    assert json.loads(entry.vehicle_details) == {"make": "Honda", "color": "Red"}


def test_check_matches_case_and_punctuation_insensitive(store):
    match = watchlist_crud.check_license_plate_watch(store, "abc-1234")
    assert match is not None
    assert match.id == 1

    assert watchlist_crud.check_license_plate_watch(store, "ABC 1234").id == 1
    assert watchlist_crud.check_license_plate_watch(store, "abc1234").id == 1


def test_check_no_match(store):
    assert watchlist_crud.check_license_plate_watch(store, "NOPE-000") is None
    assert watchlist_crud.check_license_plate_watch(store, "--") is None


def test_check_skips_inactive_entries(store):
    watchlist_crud.update_watch_list_entry(store, 1, WatchListEntryUpdate(is_active=False))
    assert watchlist_crud.check_license_plate_watch(store, "abc-1234") is None


def test_check_skips_expired_entries(store):
    watchlist_crud.update_watch_list_entry(
        store, 2, WatchListEntryUpdate(expires_at=utcnow() - timedelta(minutes=1))
    )
    assert watchlist_crud.check_license_plate_watch(store, "XYZ-9876") is None


def test_naive_expiry_is_treated_as_utc(empty_store):
    naive_future = (utcnow() + timedelta(days=1)).replace(tzinfo=None)
    entry = add_entry(empty_store, expires_at=naive_future)
    assert entry.expires_at.tzinfo is not None
    assert watchlist_crud.check_license_plate_watch(empty_store, "ABC1234").id == entry.id


def test_first_inserted_active_entry_wins(empty_store):
    first = add_entry(empty_store, license_plate="ABC-1234")
    add_entry(empty_store, license_plate="abc 1234", reason="suspect")
    assert watchlist_crud.check_license_plate_watch(empty_store, "ABC1234").id == first.id

    watchlist_crud.update_watch_list_entry(empty_store, first.id, WatchListEntryUpdate(is_active=False))
    assert watchlist_crud.check_license_plate_watch(empty_store, "ABC1234").reason == "suspect"


def test_watch_list_shows_only_active_newest_first(store):
    newest = add_entry(store, license_plate="NEW-0001")
    add_entry(store, license_plate="OLD-0001", expires_at=utcnow() - timedelta(days=1))
    add_entry(store, license_plate="OFF-0001", is_active=False)

    plates = [entry.license_plate for entry in watchlist_crud.get_watch_list(store)]
    assert plates == [newest.license_plate, "ABC-1234", "XYZ-9876"]
    assert len(watchlist_crud.get_all_watch_list_entries(store)) == 5


def test_update_uppercases_plate_and_bumps_updated_at(store):
    before = watchlist_crud.get_watch_list_entry(store, 2)
    after = watchlist_crud.update_watch_list_entry(store, 2, WatchListEntryUpdate(license_plate="xyz-0000"))
    assert after.license_plate == "XYZ-0000"
    assert after.updated_at > before.updated_at
    assert after.case_number == before.case_number
