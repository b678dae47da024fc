"""Tests for the dependency-bot auto-approval rule."""

from datetime import datetime, timezone

from ghtriage.github import Notification
from ghtriage.triage.rules import is_auto_approved


def _notification(title: str) -> Notification:
    return Notification(
        id="1",
        title=title,
        subject_type="PullRequest",
        subject_url="",
        repository="acme/widgets",
        updated_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def test_dependency_prefixes_are_auto_approved():
    assert is_auto_approved(_notification("chore(deps): bump x to y"))
    assert is_auto_approved(_notification("fix(deps): patch z"))


def test_other_titles_are_not_auto_approved():
    assert not is_auto_approved(_notification("feat: add widget"))
    assert not is_auto_approved(_notification(""))


def test_prefix_must_be_at_start():
    assert not is_auto_approved(_notification("Revert chore(deps): bump x"))
    assert not is_auto_approved(_notification("Chore(deps): bump x"))
