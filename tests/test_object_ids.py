import time
from datetime import datetime, timezone

from forum.utils.object_ids import new_object_id, object_id_to_datetime


def test_ids_strictly_increase():
    ids = [new_object_id() for _ in range(200)]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_id_carries_creation_time():
    before = time.time()
    created = object_id_to_datetime(new_object_id())
    assert created.tzinfo is timezone.utc
    assert abs(created.timestamp() - before) < 5


def test_id_to_datetime_accepts_strings():
    assert object_id_to_datetime("1351036800000") == datetime(2012, 10, 24, tzinfo=timezone.utc)
