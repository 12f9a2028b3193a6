from abc import ABC, abstractmethod
from typing import List
from github_activity.core.models.domain import ActivityEvent


class EventSource(ABC):
    """
    Port (Interface) for any source of user activity events.
    The service depends on this abstraction, never on the concrete GitHub client.
    """

    @abstractmethod
    def fetch_user_events(self, username: str) -> List[ActivityEvent]:
        """
        Fetches the first page of a user's public events, newest first.

        Args:
            username (str): The account whose activity is requested.

        Returns:
            List[ActivityEvent]: The decoded events, in the order returned.

        Raises:
            GitHubActivityError: one of the subclasses in `core.errors`.
        """
        pass
