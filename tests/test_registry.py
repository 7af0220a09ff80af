"""Tests for the in-memory listener registry."""

from __future__ import annotations

import pytest

from busline.repos.memory import ListenerRepository


def _noop(message):
    return None


@pytest.fixture()
def repo():
    return ListenerRepository()


def test_register_preserves_order_within_channel(repo):
    first = repo.register("A", _noop)
    second = repo.register("A", _noop)
    third = repo.register("A", _noop)

    assert [r.id for r in repo.listeners_for("A")] == [first.id, second.id, third.id]


def test_registration_carries_channel_filter_and_once(repo):
    predicate = lambda m: True  # noqa: E731
    reg = repo.register("A", _noop, filter=predicate, once=True)

    assert reg.channel == "A"
    assert reg.filter is predicate
    assert reg.once is True
    assert reg.callback is _noop


def test_unknown_channel_returns_empty(repo):
    assert repo.listeners_for("missing") == ()


def test_channels_are_exact_and_case_sensitive(repo):
    repo.register("ping", _noop)

    assert repo.listeners_for("PING") == ()
    assert repo.listeners_for("pin") == ()
    assert len(repo.listeners_for("ping")) == 1


def test_unregister_is_idempotent(repo):
    reg = repo.register("A", _noop)

    assert repo.unregister(reg.id) is True
    assert repo.unregister(reg.id) is False
    assert repo.unregister("never-registered") is False
    assert repo.listeners_for("A") == ()


def test_unregister_only_removes_target(repo):
    keep = repo.register("A", _noop)
    drop = repo.register("A", _noop)
    other = repo.register("B", _noop)

    repo.unregister(drop.id)

    assert [r.id for r in repo.listeners_for("A")] == [keep.id]
    assert [r.id for r in repo.listeners_for("B")] == [other.id]


def test_snapshot_is_not_affected_by_later_changes(repo):
    reg = repo.register("A", _noop)
    snapshot = repo.listeners_for("A")

    repo.unregister(reg.id)
    repo.register("A", _noop)

    assert [r.id for r in snapshot] == [reg.id]


def test_count_and_channels(repo):
    a = repo.register("A", _noop)
    repo.register("A", _noop)
    repo.register("B", _noop)

    assert repo.count() == 3
    assert repo.count("A") == 2
    assert repo.count("missing") == 0
    assert sorted(repo.channels()) == ["A", "B"]

    repo.unregister(a.id)
    assert repo.count("A") == 1


def test_empty_channel_is_dropped_after_last_removal(repo):
    reg = repo.register("A", _noop)
    repo.unregister(reg.id)

    assert repo.channels() == []
    assert repo.contains(reg.id) is False


def test_degenerate_channels_are_allowed(repo):
    repo.register("", _noop)
    repo.register(None, _noop)

    assert len(repo.listeners_for("")) == 1
    assert len(repo.listeners_for(None)) == 1
    assert repo.count(None) == 1
