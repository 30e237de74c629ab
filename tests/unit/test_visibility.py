from __future__ import annotations

from datetime import timedelta

import pytest

from chatroom_service.application.policies.visibility import (
    filter_visible,
    is_visible_to,
    parse_limit,
)
from chatroom_service.domain.value_objects.enums import MessageType
from tests.conftest import T0, make_message


def _log():
    rows = [
        ("Alice", "Todos", MessageType.STATUS),
        ("Alice", "Todos", MessageType.MESSAGE),
        ("Alice", "Bob", MessageType.PRIVATE_MESSAGE),
        ("Bob", "Todos", MessageType.STATUS),
        ("Bob", "Alice", MessageType.PRIVATE_MESSAGE),
        ("Carol", "Todos", MessageType.MESSAGE),
        ("Carol", "Bob", MessageType.PRIVATE_MESSAGE),
        ("Bob", "Todos", MessageType.MESSAGE),
    ]
    return [
        make_message(sender=s, to=t, type=k, text=f"m{i}", created_at=T0 + timedelta(seconds=i), seq=i + 1)
        for i, (s, t, k) in enumerate(rows)
    ]


VIEWERS = [None, "", "Alice", "Bob", "Carol", "Dave"]


def test_public_and_status_visible_to_everyone():
    public = make_message(type=MessageType.MESSAGE)
    status = make_message(type=MessageType.STATUS)
    for viewer in VIEWERS:
        assert is_visible_to(public, viewer)
        assert is_visible_to(status, viewer)


def test_private_visible_only_to_both_ends():
    msg = make_message(sender="Alice", to="Bob", type=MessageType.PRIVATE_MESSAGE)

    assert is_visible_to(msg, "Alice")
    assert is_visible_to(msg, "Bob")
    assert not is_visible_to(msg, "Carol")
    assert not is_visible_to(msg, None)
    assert not is_visible_to(msg, "")


@pytest.mark.parametrize("viewer", VIEWERS)
def test_filter_never_leaks_private_messages(viewer):
    for msg in filter_visible(_log(), viewer):
        assert not msg.is_private or viewer in (msg.sender, msg.to)


@pytest.mark.parametrize("viewer", VIEWERS)
def test_truncation_is_tail_of_filtered_feed(viewer):
    log = _log()
    full = filter_visible(log, viewer)
    for n in range(1, len(log) + 3):
        assert filter_visible(log, viewer, n) == full[-n:]


def test_limit_applies_after_filtering():
    log = _log()

    # The last two entries of the raw log include a private message Carol->Bob;
    # Alice must still receive two messages she can see.
    feed = filter_visible(log, "Alice", 2)

    assert [m.text for m in feed] == ["m5", "m7"]


def test_feed_is_oldest_first():
    feed = filter_visible(_log(), "Bob", 3)

    assert [m.seq for m in feed] == sorted(m.seq for m in feed)


def test_anonymous_viewer_sees_no_private_messages():
    feed = filter_visible(_log(), None)

    assert all(not m.is_private for m in feed)
    assert len(feed) == 5


@pytest.mark.parametrize("limit", [None, 0, -4])
def test_non_positive_limit_means_everything(limit):
    log = _log()
    assert filter_visible(log, "Bob", limit) == filter_visible(log, "Bob")


def test_filter_does_not_mutate_input():
    log = _log()
    snapshot = list(log)

    filter_visible(log, "Carol", 1)

    assert log == snapshot


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, None),
        ("10", 10),
        (3, 3),
        ("0", None),
        ("-2", None),
        ("abc", None),
        ("", None),
        ("2.5", None),
    ],
)
def test_parse_limit(raw, expected):
    assert parse_limit(raw) == expected
