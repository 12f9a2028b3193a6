from typing import List, Sequence

from github_activity.core.formatter import EventLike, format_event

DEFAULT_LIMIT = 10


def render_activity(events: Sequence[EventLike], username: str, limit: int = DEFAULT_LIMIT) -> List[str]:
    """
    Builds the lines shown for a user's activity.

    Only the first `limit` events are shown, in the order received (the API
    already returns newest first). An empty sequence yields a single
    "no activity" line and no header.
    Raises ValueError when `limit` is below 1.
    """
    if limit < 1:
        raise ValueError(f"Invalid limit: {limit} (must be at least 1).")
    if not events:
        return [f"No recent activity found for {username}."]

    lines = [f"Recent Activity for {username}:"]
    lines.extend(f"- {format_event(event)}" for event in list(events)[:limit])
    return lines
