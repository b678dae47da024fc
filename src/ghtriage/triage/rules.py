"""Auto-approval rule for dependency-bot noise."""

from ..github import Notification

# Renovate/Dependabot conventional-commit titles
AUTO_APPROVE_PREFIXES = ("chore(deps)", "fix(deps)")


def is_auto_approved(notification: Notification) -> bool:
    return notification.title.startswith(AUTO_APPROVE_PREFIXES)
