"""Latest commit status for the site's repository."""
from typing import Any, Tuple

from ..proxy import CachePolicy, Endpoint, ProxyRequest, ProxyResponse, ProxyRoute, Unconfigured

GITHUB_API = "https://api.github.com"


def commit_message(owner: str, repo: str, commits: Any) -> str:
    """Format the newest commit as a one-line status message."""
    head = commits[0] if isinstance(commits, list) and commits else None
    sha = msg = None

    if isinstance(head, dict):
        if isinstance(head.get("sha"), str):
            sha = head["sha"][:7]
        commit = head.get("commit")
        if isinstance(commit, dict) and isinstance(commit.get("message"), str):
            msg = commit["message"].split("\n")[0]

    if sha and msg:
        return f"github: {owner}/{repo} @ {sha} — {msg}"
    return f"github: {owner}/{repo} (latest)"


class GithubStatusRoute(ProxyRoute):
    """GET /api/status/github"""

    name = "github"
    path = "/api/status/github"
    optional = True
    success_cache = CachePolicy(120, 1800)

    def resolve_config(self) -> Tuple[str, str]:
        owner = self.settings.github_owner
        repo = self.settings.github_repo
        if not owner:
            raise Unconfigured(self.name, "GITHUB_OWNER")
        if not repo:
            raise Unconfigured(self.name, "GITHUB_REPO")
        return owner, repo

    def endpoint(self, settings: Tuple[str, str], request: ProxyRequest) -> Endpoint:
        owner, repo = settings
        return Endpoint(
            url=f"{GITHUB_API}/repos/{owner}/{repo}/commits",
            headers={
                "User-Agent": self.settings.user_agent,
                "Accept": "application/vnd.github+json",
            },
            params={"per_page": "1"},
        )

    def normalize(self, settings: Tuple[str, str], body: Any) -> ProxyResponse:
        owner, repo = settings
        return ProxyResponse(200, {"ok": True, "message": commit_message(owner, repo, body)})
