"""Service tests with an in-memory event source."""

from __future__ import annotations

import pytest

from github_activity.core.errors import NotFoundError
from github_activity.core.models.domain import ActivityEvent
from github_activity.ports.event_source import EventSource
from github_activity.services.activity import ActivityService


class StaticEventSource(EventSource):
    def __init__(self, records):
        self.records = records
        self.requested: list[str] = []

    def fetch_user_events(self, username):
        self.requested.append(username)
        return [ActivityEvent.from_raw(record) for record in self.records]


class MissingUserSource(EventSource):
    def fetch_user_events(self, username):
        raise NotFoundError(username)


def test_renders_fetched_events():
    source = StaticEventSource([{"type": "IssuesEvent", "repo": {"name": "a/b"}, "payload": {"action": "closed"}}])

    lines = ActivityService(source).recent_activity("bob")

    assert source.requested == ["bob"]
    assert lines == ["Recent Activity for bob:", "- Closed an issue in a/b"]


def test_applies_limit():
    source = StaticEventSource([{"type": "WatchEvent"}] * 4)
    assert len(ActivityService(source, limit=3).recent_activity("bob")) == 4


def test_fetch_errors_propagate():
    with pytest.raises(NotFoundError):
        ActivityService(MissingUserSource()).recent_activity("ghost")
