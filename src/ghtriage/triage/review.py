"""Interactive review loop.

Each notification is handled exactly once, oldest first: dependency-bot
noise is marked read without asking, everything else is shown and the
user decides. Only an explicit "y"/"yes" marks a thread read.
"""

from __future__ import annotations

import typing as ty
from collections.abc import Iterable
from datetime import datetime, timezone

from rich.console import Console
from rich.text import Text

from ..durations import format_duration
from ..github import GitHubClient, GitHubError, Notification
from ..log import get_logger
from .rules import is_auto_approved
from .urls import DEFAULT_API_ROOT, DEFAULT_WEB_ROOT, ui_url

_log = get_logger("review")

SEPARATOR = "─" * 30
PROMPT = "Mark as read? [y/N]: "

_CONFIRM_ANSWERS = {"y", "yes"}


class ReviewResult(ty.NamedTuple):
    auto_approved: int = 0
    marked_read: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def processed(self) -> int:
        return self.auto_approved + self.marked_read


def make_console() -> Console:
    # soft_wrap keeps long URLs on one line so they stay clickable
    return Console(soft_wrap=True, highlight=False)


def normalize_answer(text: str) -> bool:
    """True if the answer confirms; anything unrecognized is a "no"."""
    return text.strip().lower() in _CONFIRM_ANSWERS


def mark_as_read(client: GitHubClient, notification: Notification, console: Console) -> bool:
    """Mark one thread read. Failures are reported, never raised."""
    try:
        client.mark_thread_read(notification.id)
    except GitHubError as e:
        _log.warning("failed to mark %s as read: %s", notification.id, e)
        console.print(Text(f"Failed to mark as read: {e}", style="red"))
        return False

    console.print(Text("Marked as read.", style="green"))
    return True


def _render(
    notification: Notification,
    console: Console,
    *,
    api_root: str,
    web_root: str,
    now: datetime,
) -> None:
    age = format_duration(now - notification.updated_at)
    url = ui_url(notification.subject_url, api_root=api_root, web_root=web_root)

    console.print(Text.assemble((notification.title, "bold"), f" ({notification.id})"))
    console.print(Text(f"Repo: {notification.repository}"))
    console.print(Text(f"Type: {notification.subject_type}"))
    console.print(Text(f"URL:  {url}"))
    console.print(Text(f"Updated: {age} ago"))


def _ask(console: Console, stdin: ty.TextIO | None) -> str:
    try:
        return console.input(Text(PROMPT), stream=stdin)
    except EOFError:
        # stdin closed: nothing was confirmed
        return ""


def review(
    client: GitHubClient,
    notifications: Iterable[Notification],
    *,
    console: Console | None = None,
    stdin: ty.TextIO | None = None,
    api_root: str = DEFAULT_API_ROOT,
    web_root: str = DEFAULT_WEB_ROOT,
    now: datetime | None = None,
) -> ReviewResult:
    """Walk notifications in the given order, prompting for each non-noise item."""
    if console is None:
        console = make_console()

    auto_approved = marked_read = skipped = failed = 0

    for notification in notifications:
        console.print(SEPARATOR)

        if is_auto_approved(notification):
            _log.info("auto approving %s: %s", notification.id, notification.title)
            console.print(Text.assemble(("Auto approving: ", "yellow"), notification.title))
            if mark_as_read(client, notification, console):
                auto_approved += 1
            else:
                failed += 1
            continue

        _render(
            notification,
            console,
            api_root=api_root,
            web_root=web_root,
            now=now or datetime.now(timezone.utc),
        )

        if not normalize_answer(_ask(console, stdin)):
            _log.info("skipped %s", notification.id)
            console.print(Text("Skipped.", style="dim"))
            skipped += 1
            continue

        if mark_as_read(client, notification, console):
            marked_read += 1
        else:
            failed += 1

    result = ReviewResult(auto_approved, marked_read, skipped, failed)
    summary = f"Done processing notifications: {result.processed} processed, {skipped} skipped"
    if failed:
        summary += f", {failed} failed"
    console.print(Text(summary, style="bold green"))
    return result
