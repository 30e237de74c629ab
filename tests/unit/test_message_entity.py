from __future__ import annotations

from datetime import datetime, timedelta, timezone

from chatroom_service.domain.value_objects.enums import MessageType
from tests.conftest import T0, make_message


def test_time_is_rendered_in_utc():
    brasilia = timezone(timedelta(hours=-3))
    msg = make_message(created_at=datetime(2024, 5, 1, 9, 0, 0, tzinfo=brasilia))

    assert msg.time == "12:00:00"


def test_time_of_utc_timestamp():
    assert make_message(created_at=T0 + timedelta(seconds=5)).time == "12:00:05"


def test_kind_flags():
    assert make_message(type=MessageType.STATUS).is_status
    assert make_message(to="Bob", type=MessageType.PRIVATE_MESSAGE).is_private
    assert not make_message().is_private
