"""Translate GitHub API resource URLs into browsable web URLs."""

DEFAULT_API_ROOT = "https://api.github.com"
DEFAULT_WEB_ROOT = "https://github.com"

# API collection name -> web path segment
_KIND_PATHS = {
    "pulls": "pull",
    "issues": "issues",
    "commits": "commit",
    "releases": "releases",
}


def ui_url(
    api_url: str,
    *,
    api_root: str = DEFAULT_API_ROOT,
    web_root: str = DEFAULT_WEB_ROOT,
) -> str:
    """Map e.g. .../repos/acme/widgets/pulls/42 to https://github.com/acme/widgets/pull/42.

    Never raises. URLs that don't look like <api_root>/repos/<owner>/<repo>/<kind>
    come back unchanged; unknown kinds, or known kinds without an id, link to
    the repository homepage.
    """
    prefix = api_root.rstrip("/") + "/repos/"
    if not api_url.startswith(prefix):
        return api_url

    parts = api_url[len(prefix) :].split("/")
    if len(parts) < 3:
        return api_url

    owner, repo, kind = parts[0], parts[1], parts[2]
    repo_url = f"{web_root.rstrip('/')}/{owner}/{repo}"

    web_kind = _KIND_PATHS.get(kind)
    if web_kind is None or len(parts) < 4 or not parts[3]:
        return repo_url

    return f"{repo_url}/{web_kind}/{parts[3]}"
