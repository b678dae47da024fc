"""Configuration management for ghtriage."""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_MAX_PER_PAGE = 100


class ConfigError(Exception):
    """Fatal configuration problem (missing token, bad repository spec)."""


def get_config_path() -> Path:
    """Get the path to the ghtriage config file."""
    xdg_config = Path.home() / ".config"
    return xdg_config / "ghtriage" / "config.toml"


def get_default_config() -> str:
    """Return the default config file contents."""
    return """\
# ghtriage configuration

[github]
# Repository whose unread notifications get triaged
owner = "runatlantis"
repo = "atlantis"

# Change these for GitHub Enterprise
api_url = "https://api.github.com"
web_url = "https://github.com"

# Environment variable holding the access token
token_env = "GITHUB_TOKEN"

# Notifications requested per page (GitHub allows at most 100)
per_page = 100
"""


@dataclass
class GitHubConfig:
    """Where to find notifications and how to talk to GitHub."""

    owner: str = "runatlantis"
    repo: str = "atlantis"
    api_url: str = "https://api.github.com"
    web_url: str = "https://github.com"
    token_env: str = "GITHUB_TOKEN"
    per_page: int = _MAX_PER_PAGE

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class Config:
    """ghtriage configuration."""

    github: GitHubConfig = field(default_factory=GitHubConfig)


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file, or return defaults."""
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return Config()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        # Log warning but return defaults
        print(f"Warning: Could not load config from {config_path}: {e}")
        return Config()

    return _parse_config(data)


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse config dict into Config object."""
    defaults = GitHubConfig()
    github_data = data.get("github", {})

    per_page = int(github_data.get("per_page", defaults.per_page))
    github = GitHubConfig(
        owner=github_data.get("owner", defaults.owner),
        repo=github_data.get("repo", defaults.repo),
        api_url=github_data.get("api_url", defaults.api_url).rstrip("/"),
        web_url=github_data.get("web_url", defaults.web_url).rstrip("/"),
        token_env=github_data.get("token_env", defaults.token_env),
        per_page=max(1, min(per_page, _MAX_PER_PAGE)),
    )

    return Config(github=github)


def parse_repo(spec: str) -> tuple[str, str]:
    """Split an OWNER/NAME string into its two parts."""
    owner, sep, repo = spec.strip().partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise ConfigError(f"expected OWNER/NAME, got {spec!r}")
    return owner, repo


def get_token(env_var: str = "GITHUB_TOKEN", environ: Mapping[str, str] | None = None) -> str:
    """Read the access token from the environment.

    Raises ConfigError when the variable is unset or empty.
    """
    if environ is None:
        environ = os.environ

    token = environ.get(env_var, "")
    if not token:
        raise ConfigError(f"{env_var} environment variable is required")
    return token


def ensure_config_exists() -> Path:
    """Ensure the config file exists, creating with defaults if needed."""
    config_path = get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(get_default_config())

    return config_path
