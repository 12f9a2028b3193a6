from typing import List
from github_activity.core.logger import get_logger
from github_activity.core.renderer import DEFAULT_LIMIT, render_activity
from github_activity.ports.event_source import EventSource

logger = get_logger(__name__)


class ActivityService:
    def __init__(self, source: EventSource, limit: int = DEFAULT_LIMIT):
        self.source = source
        self.limit = limit

    def recent_activity(self, username: str) -> List[str]:
        """
        Fetches a user's events and renders them as display lines.
        Fetch errors propagate untouched; rendering itself cannot fail.
        """
        events = self.source.fetch_user_events(username)
        logger.info(f"Rendering {min(len(events), self.limit)} of {len(events)} events for {username}")
        return render_activity(events, username, limit=self.limit)
