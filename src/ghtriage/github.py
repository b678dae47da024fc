"""Minimal GitHub REST client for repository notifications."""

from __future__ import annotations

import typing as ty
import urllib.parse
from dataclasses import dataclass
from datetime import datetime

import requests

from .log import get_logger

_log = get_logger("github")

_TIMEOUT_SECONDS = 30
_API_VERSION = "2022-11-28"


class GitHubError(Exception):
    """A GitHub API request failed (transport error or HTTP status >= 400)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class Notification:
    """One unread notification thread."""

    id: str
    title: str
    subject_type: str
    subject_url: str
    repository: str
    updated_at: datetime
    reason: str = ""
    unread: bool = True

    @classmethod
    def from_api(cls, data: dict[str, ty.Any]) -> Notification:
        subject = data.get("subject") or {}
        repository = data.get("repository") or {}
        return cls(
            id=str(data["id"]),
            title=subject.get("title") or "",
            subject_type=subject.get("type") or "",
            # null for some subject types (e.g. CheckSuite)
            subject_url=subject.get("url") or "",
            repository=repository.get("full_name") or "",
            updated_at=datetime.fromisoformat(data["updated_at"]),
            reason=data.get("reason") or "",
            unread=bool(data.get("unread", True)),
        )


class NotificationPage(ty.NamedTuple):
    notifications: list[Notification]
    next_page: int | None


def next_page_from_links(links: dict[str, dict[str, str]]) -> int | None:
    """Extract the page number of the rel="next" link, if any."""
    next_link = links.get("next")
    if not next_link:
        return None
    query = urllib.parse.urlparse(next_link.get("url", "")).query
    values = urllib.parse.parse_qs(query).get("page")
    if not values:
        return None
    try:
        return int(values[0])
    except ValueError:
        return None


class GitHubClient:
    def __init__(
        self,
        token: str,
        api_url: str = "https://api.github.com",
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": _API_VERSION,
                "User-Agent": "ghtriage",
            }
        )

    def _request(self, method: str, path: str, **kwargs: ty.Any) -> requests.Response:
        url = self.api_url + path
        try:
            response = self.session.request(method, url, timeout=_TIMEOUT_SECONDS, **kwargs)
        except requests.RequestException as e:
            raise GitHubError(f"{method} {path} failed: {e}") from e

        if response.status_code >= 400:
            raise GitHubError(
                f"{method} {path} returned {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )
        return response

    def list_repository_notifications(
        self,
        owner: str,
        repo: str,
        *,
        page: int = 1,
        per_page: int = 100,
        all: bool = False,
        participating: bool = False,
    ) -> NotificationPage:
        """Fetch a single page of notifications for owner/repo."""
        path = f"/repos/{urllib.parse.quote(owner)}/{urllib.parse.quote(repo)}/notifications"
        params = {
            "all": str(all).lower(),
            "participating": str(participating).lower(),
            "per_page": per_page,
            "page": page,
        }
        response = self._request("GET", path, params=params)

        try:
            data = response.json()
        except requests.JSONDecodeError as e:
            raise GitHubError(f"GET {path} returned invalid JSON: {e}", response.status_code) from e
        if not isinstance(data, list):
            raise GitHubError(f"GET {path} returned unexpected payload", response.status_code)

        notifications = [Notification.from_api(item) for item in data]
        return NotificationPage(notifications, next_page_from_links(response.links))

    def mark_thread_read(self, thread_id: str) -> None:
        """Mark one notification thread as read."""
        self._request("PATCH", f"/notifications/threads/{urllib.parse.quote(thread_id)}")
        _log.debug("marked thread %s read", thread_id)
