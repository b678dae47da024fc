"""Tests for configuration parsing and token loading."""

import pytest

from ghtriage.config import (
    ConfigError,
    GitHubConfig,
    _parse_config,
    get_token,
    load_config,
    parse_repo,
)


def test_github_defaults():
    github = GitHubConfig()
    assert github.full_name == "runatlantis/atlantis"
    assert github.api_url == "https://api.github.com"
    assert github.web_url == "https://github.com"
    assert github.token_env == "GITHUB_TOKEN"
    assert github.per_page == 100


def test_parse_partial_override():
    """Parsing config with partial github section uses defaults for the rest."""
    config = _parse_config({"github": {"owner": "acme", "repo": "widgets"}})

    assert config.github.full_name == "acme/widgets"
    assert config.github.api_url == "https://api.github.com"
    assert config.github.per_page == 100


def test_parse_strips_trailing_slashes():
    config = _parse_config(
        {
            "github": {
                "api_url": "https://ghe.example.com/api/v3/",
                "web_url": "https://ghe.example.com/",
            }
        }
    )
    assert config.github.api_url == "https://ghe.example.com/api/v3"
    assert config.github.web_url == "https://ghe.example.com"


def test_parse_clamps_per_page():
    assert _parse_config({"github": {"per_page": 500}}).github.per_page == 100
    assert _parse_config({"github": {"per_page": 0}}).github.per_page == 1


def test_load_config_missing_file_returns_defaults(tmp_path):
    config = load_config(tmp_path / "nope.toml")
    assert config.github == GitHubConfig()


def test_load_config_reads_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[github]\nowner = "acme"\nrepo = "widgets"\ntoken_env = "ACME_TOKEN"\n')

    config = load_config(path)
    assert config.github.full_name == "acme/widgets"
    assert config.github.token_env == "ACME_TOKEN"


def test_load_config_invalid_toml_returns_defaults(tmp_path, capsys):
    path = tmp_path / "config.toml"
    path.write_text("[github\n")

    config = load_config(path)
    assert config.github == GitHubConfig()
    assert "Could not load config" in capsys.readouterr().out


def test_parse_repo():
    assert parse_repo("acme/widgets") == ("acme", "widgets")
    assert parse_repo(" acme/widgets ") == ("acme", "widgets")


@pytest.mark.parametrize("spec", ["acme", "acme/", "/widgets", "acme/widgets/extra", ""])
def test_parse_repo_rejects_malformed(spec):
    with pytest.raises(ConfigError):
        parse_repo(spec)


def test_get_token_present():
    assert get_token("GITHUB_TOKEN", {"GITHUB_TOKEN": "ghp_abc"}) == "ghp_abc"


def test_get_token_missing_or_empty():
    with pytest.raises(ConfigError, match="GITHUB_TOKEN"):
        get_token("GITHUB_TOKEN", {})
    with pytest.raises(ConfigError):
        get_token("GITHUB_TOKEN", {"GITHUB_TOKEN": ""})


def test_get_token_reads_process_environment(monkeypatch):
    monkeypatch.setenv("ACME_TOKEN", "secret")
    assert get_token("ACME_TOKEN") == "secret"
