import argparse
import sys
from typing import List, Optional, Sequence
from github_activity.adapters.github.adapter import GitHubEventsAdapter
from github_activity.core.config import get_settings
from github_activity.core.errors import GitHubActivityError, UsageError
from github_activity.core.logger import get_logger, set_level
from github_activity.services.activity import ActivityService

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-activity",
        description="Show the recent public GitHub activity of a user.",
    )
    parser.add_argument("username", nargs="?", help="GitHub username to look up")
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of events to show (default: GITHUB_ACTIVITY_LIMIT or 10)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP details to stderr")
    return parser


def run(username: str, limit: int) -> List[str]:
    """
    Runs the full flow: GitHub -> Adapter -> Renderer -> lines.
    """
    with GitHubEventsAdapter() as adapter:
        return ActivityService(adapter, limit=limit).recent_activity(username)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    set_level("DEBUG" if args.verbose else settings.log_level)

    try:
        username = (args.username or "").strip()
        if not username:
            raise UsageError()
        if args.limit is not None and args.limit < 1:
            raise UsageError("--limit must be at least 1.")
        lines = run(username, args.limit or settings.limit)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(parser.format_usage().rstrip(), file=sys.stderr)
        return 1
    except GitHubActivityError as e:
        logger.debug(f"Fetch failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
