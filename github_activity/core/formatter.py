from typing import Any, Callable, Dict, Mapping, Union

from github_activity.core.models.domain import ActivityEvent, EventKind

EventLike = Union[ActivityEvent, Mapping[str, Any]]
Formatter = Callable[[ActivityEvent], str]

EVENT_SUFFIX = "Event"


def _format_push(event: ActivityEvent) -> str:
    return f"Pushed {event.commit_count()} commit(s) to {event.repo_name}"


def _format_issues(event: ActivityEvent) -> str:
    action = event.issue_action()
    return f"{action[0].upper() + action[1:]} an issue in {event.repo_name}"


def _format_watch(event: ActivityEvent) -> str:
    return f"Starred {event.repo_name}"


def _format_create(event: ActivityEvent) -> str:
    return f"Created {event.ref_type()} in {event.repo_name}"


def _format_member(event: ActivityEvent) -> str:
    return f"Added {event.member_login()} as a collaborator to {event.repo_name}"


def _format_public(event: ActivityEvent) -> str:
    return f"Made {event.repo_name} public"


def _format_other(event: ActivityEvent) -> str:
    # PullRequestEvent -> PullRequest; names without the suffix stay as they are
    label = event.type
    if label.endswith(EVENT_SUFFIX):
        label = label[: -len(EVENT_SUFFIX)]
    return f"{label} in {event.repo_name}"


_FORMATTER_REGISTRY: Dict[EventKind, Formatter] = {
    EventKind.PUSH: _format_push,
    EventKind.ISSUES: _format_issues,
    EventKind.WATCH: _format_watch,
    EventKind.CREATE: _format_create,
    EventKind.MEMBER: _format_member,
    EventKind.PUBLIC: _format_public,
}


def format_event(event: EventLike) -> str:
    """
    Turns one event into its one-line description.

    Total over well-formed but incomplete events: a missing repo, payload or
    payload field yields fallback text, never an exception.
    Kinds without an entry in `_FORMATTER_REGISTRY` use the generic rule.
    """
    event = ActivityEvent.from_raw(event)
    formatter = _FORMATTER_REGISTRY.get(event.kind, _format_other)
    return formatter(event)
