"""Tests for ghtriage.triage.urls module."""

import pytest

from ghtriage.triage.urls import ui_url


@pytest.mark.parametrize(
    ("api_url", "expected"),
    [
        (
            "https://api.github.com/repos/acme/widgets/pulls/42",
            "https://github.com/acme/widgets/pull/42",
        ),
        (
            "https://api.github.com/repos/acme/widgets/issues/7",
            "https://github.com/acme/widgets/issues/7",
        ),
        (
            "https://api.github.com/repos/acme/widgets/commits/abc123",
            "https://github.com/acme/widgets/commit/abc123",
        ),
        (
            "https://api.github.com/repos/acme/widgets/releases/9",
            "https://github.com/acme/widgets/releases/9",
        ),
    ],
)
def test_known_kinds_map_to_web_pages(api_url, expected):
    assert ui_url(api_url) == expected


def test_unknown_kind_links_to_repo_homepage():
    assert (
        ui_url("https://api.github.com/repos/acme/widgets/discussions/1")
        == "https://github.com/acme/widgets"
    )


def test_known_kind_without_id_links_to_repo_homepage():
    home = "https://github.com/acme/widgets"
    assert ui_url("https://api.github.com/repos/acme/widgets/pulls") == home
    assert ui_url("https://api.github.com/repos/acme/widgets/pulls/") == home


def test_non_api_url_is_returned_unchanged():
    assert ui_url("not-a-github-url") == "not-a-github-url"
    assert ui_url("") == ""


def test_too_few_segments_is_returned_unchanged():
    url = "https://api.github.com/repos/acme/widgets"
    assert ui_url(url) == url


def test_custom_roots_for_enterprise():
    url = ui_url(
        "https://ghe.example.com/api/v3/repos/acme/widgets/issues/3",
        api_root="https://ghe.example.com/api/v3",
        web_root="https://ghe.example.com/",
    )
    assert url == "https://ghe.example.com/acme/widgets/issues/3"
