"""Triage unread GitHub notifications: fetch, classify, review, mark read."""

from .fetch import fetch_all_unread, sort_oldest_first
from .review import ReviewResult, mark_as_read, normalize_answer, review
from .rules import AUTO_APPROVE_PREFIXES, is_auto_approved
from .urls import ui_url

__all__ = [
    "AUTO_APPROVE_PREFIXES",
    "ReviewResult",
    "fetch_all_unread",
    "is_auto_approved",
    "mark_as_read",
    "normalize_answer",
    "review",
    "sort_oldest_first",
    "ui_url",
]
