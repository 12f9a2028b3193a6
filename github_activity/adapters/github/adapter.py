from typing import Any, Dict, List, Optional
from urllib.parse import quote
import requests
from pydantic import ValidationError
from github_activity.core.config import Settings, get_settings
from github_activity.core.errors import (
    FormatError,
    NotFoundError,
    RateLimitError,
    TransportError,
    UnexpectedStatusError,
)
from github_activity.core.logger import get_logger
from github_activity.core.models.domain import ActivityEvent
from github_activity.ports.event_source import EventSource

logger = get_logger(__name__)

RATE_LIMIT_STATUSES = (403, 429)


class GitHubEventsAdapter(EventSource):
    """
    Concrete implementation for the public GitHub REST events API.
    Unauthenticated, first page only: `GET /users/{username}/events`.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self._owns_session = session is None
        self.session = session or requests.Session()
        self._headers = {
            "User-Agent": self.settings.user_agent,
            "Accept": "application/vnd.github+json",
        }

    def __enter__(self) -> "GitHubEventsAdapter":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def events_url(self, username: str) -> str:
        return f"{self.settings.api_url}/users/{quote(username, safe='')}/events"

    def fetch_user_events(self, username: str) -> List[ActivityEvent]:
        url = self.events_url(username)
        logger.info(f"📡 Fetching public events for {username} from {url}")

        try:
            response = self.session.get(url, headers=self._headers, timeout=self.settings.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"❌ GitHub request failed: {e}")
            raise TransportError(str(e)) from e

        logger.debug(f"GitHub responded with status {response.status_code}")
        self._raise_for_status(response, username)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"❌ GitHub returned a non-JSON body: {e}")
            raise FormatError() from e

        if not isinstance(data, list):
            logger.error(f"❌ Expected a JSON array, got {type(data).__name__}")
            raise FormatError()

        events: List[ActivityEvent] = []
        for index, record in enumerate(data):
            if not isinstance(record, dict):
                logger.error(f"❌ Event #{index} is a {type(record).__name__}, not an object")
                raise FormatError()
            try:
                events.append(ActivityEvent.from_raw(record))
            except ValidationError as e:
                logger.error(f"❌ Event #{index} could not be decoded: {e}")
                raise FormatError() from e

        logger.info(f"✅ Fetched {len(events)} events for {username}")
        return events

    def _raise_for_status(self, response: requests.Response, username: str) -> None:
        status = response.status_code
        if status == 200:
            return
        if status == 404:
            logger.warning(f"⚠️ GitHub user not found: {username}")
            raise NotFoundError(username)
        if status in RATE_LIMIT_STATUSES:
            headers: Dict[str, str] = response.headers or {}
            reset_at = headers.get("X-RateLimit-Reset")
            logger.warning(f"⚠️ GitHub rate limit hit (status {status}, reset at {reset_at})")
            raise RateLimitError(reset_at=reset_at)

        body = response.text or ""
        if len(body) > 500:
            body = body[:500] + "... (truncated)"
        logger.error(f"❌ GitHub HTTP Error {status}: {body}")
        raise UnexpectedStatusError(status)
