"""Fetch and order unread notifications."""

from collections.abc import Iterable

from ..github import GitHubClient, Notification
from ..log import get_logger

_log = get_logger("fetch")

MAX_PER_PAGE = 100


def fetch_all_unread(
    client: GitHubClient, owner: str, repo: str, per_page: int = MAX_PER_PAGE
) -> list[Notification]:
    """Fetch every unread notification for owner/repo, following pagination.

    Includes threads the user isn't directly participating in. Any failed
    request raises GitHubError; there are no partial results.
    """
    notifications: list[Notification] = []
    page = 1
    while True:
        result = client.list_repository_notifications(
            owner, repo, page=page, per_page=per_page, all=False, participating=False
        )
        _log.info("page %d: %d notifications", page, len(result.notifications))
        notifications.extend(result.notifications)

        if result.next_page is None:
            break
        page = result.next_page

    _log.info("fetched %d unread notifications for %s/%s", len(notifications), owner, repo)
    return notifications


def sort_oldest_first(notifications: Iterable[Notification]) -> list[Notification]:
    return sorted(notifications, key=lambda n: n.updated_at)
