"""CLI entry point for ghtriage.

ghtriage walks through the unread GitHub notifications of one repository:
- review: mark dependency-bot noise read automatically, ask about the rest
- list: print unread notifications, oldest first, without touching them
"""

import argparse
import json
import sys
import typing as ty
from dataclasses import asdict

from .config import (
    ConfigError,
    GitHubConfig,
    ensure_config_exists,
    get_config_path,
    get_token,
    load_config,
    parse_repo,
)
from .github import GitHubClient, GitHubError, Notification
from .log import get_logger
from .triage import fetch_all_unread, review, sort_oldest_first, ui_url
from .triage.review import make_console

_log = get_logger("cli")


def _fail(message: str) -> ty.NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _fetch_sorted(
    args: argparse.Namespace, github: GitHubConfig
) -> tuple[GitHubClient, list[Notification]]:
    """Build a client from config/env and fetch unread notifications, oldest first.

    Exits the process on configuration or fetch errors.
    """
    owner, repo = github.owner, github.repo

    try:
        if getattr(args, "repo", None):
            owner, repo = parse_repo(args.repo)
        token = get_token(github.token_env)
    except ConfigError as e:
        _fail(str(e))

    client = GitHubClient(token, api_url=github.api_url)
    try:
        notifications = fetch_all_unread(client, owner, repo, per_page=github.per_page)
    except GitHubError as e:
        _log.error("fetch failed for %s/%s: %s", owner, repo, e)
        _fail(f"error fetching notifications: {e}")

    return client, sort_oldest_first(notifications)


def cmd_review(args: argparse.Namespace) -> None:
    """Interactively triage unread notifications."""
    github = load_config().github
    client, notifications = _fetch_sorted(args, github)

    if not notifications:
        print("No unread notifications.")
        return

    console = make_console()
    console.print(f"{len(notifications)} unread notifications, oldest first.")
    review(
        client,
        notifications,
        console=console,
        api_root=github.api_url,
        web_root=github.web_url,
    )


def _notification_to_json(n: Notification, web_root: str, api_root: str) -> dict:
    """Convert notification to JSON-serializable dict."""
    data = asdict(n)
    data["updated_at"] = n.updated_at.isoformat()
    data["html_url"] = ui_url(n.subject_url, api_root=api_root, web_root=web_root)
    return data


def cmd_list(args: argparse.Namespace) -> None:
    """List unread notifications without marking anything read."""
    github = load_config().github
    _, notifications = _fetch_sorted(args, github)

    if getattr(args, "json", False):
        print(
            json.dumps(
                [_notification_to_json(n, github.web_url, github.api_url) for n in notifications]
            )
        )
        return

    if not notifications:
        print("No unread notifications.")
        return

    for n in notifications:
        updated = n.updated_at.strftime("%Y-%m-%d %H:%M")
        print(f"[{n.id}] {updated} | {n.subject_type} | {n.reason} | {n.title}")


def cmd_config_init(args: argparse.Namespace) -> None:
    """Initialize config file with defaults."""
    config_path = ensure_config_exists()
    print(f"Config file at: {config_path}")


def cmd_config_path(args: argparse.Namespace) -> None:
    """Print config file path."""
    print(get_config_path())


def cmd_config_show(args: argparse.Namespace) -> None:
    """Show current config."""
    config_path = get_config_path()
    if config_path.exists():
        print(config_path.read_text())
    else:
        print(f"No config file at {config_path}")
        print("Run 'ghtriage config init' to create one.")


def _add_repo_argument(parser: argparse.ArgumentParser, default: ty.Any = None) -> None:
    parser.add_argument(
        "-r",
        "--repo",
        metavar="OWNER/NAME",
        default=default,
        help="Repository to triage (default: from config)",
    )


def setup_config_parser(subparsers: argparse._SubParsersAction) -> None:
    """Set up the config subcommand."""
    config_parser = subparsers.add_parser(
        "config",
        help="Manage ghtriage configuration",
    )
    config_subparsers = config_parser.add_subparsers(dest="config_command")

    # config init
    init_parser = config_subparsers.add_parser("init", help="Create default config file")
    init_parser.set_defaults(func=cmd_config_init)

    # config path
    path_parser = config_subparsers.add_parser("path", help="Print config file path")
    path_parser.set_defaults(func=cmd_config_path)

    # config show
    show_parser = config_subparsers.add_parser("show", help="Show current config")
    show_parser.set_defaults(func=cmd_config_show)

    config_parser.set_defaults(func=cmd_config_show, config_command=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghtriage",
        description="Triage unread GitHub notifications for a repository",
    )
    _add_repo_argument(parser)
    subparsers = parser.add_subparsers(dest="command")

    # review
    review_parser = subparsers.add_parser(
        "review", help="Go through unread notifications and mark them read"
    )
    _add_repo_argument(review_parser, default=argparse.SUPPRESS)
    review_parser.set_defaults(func=cmd_review)

    # list
    list_parser = subparsers.add_parser("list", aliases=["ls"], help="List unread notifications")
    _add_repo_argument(list_parser, default=argparse.SUPPRESS)
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")
    list_parser.set_defaults(func=cmd_list)

    setup_config_parser(subparsers)

    # Bare "ghtriage" is the interactive review
    parser.set_defaults(func=cmd_review)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
