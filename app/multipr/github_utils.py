from __future__ import annotations

from typing import List

from github import Auth, Github, GithubException
from requests.exceptions import RequestException

from .models import ConfirmedSelection, PRResult, RunConfig, mask_secret


def get_github_client(config: RunConfig) -> Github:
    print("🔗 Connecting to GitHub...")
    print(f"   Server: {config.api_url}")
    print(f"   Token: {mask_secret(config.access_token)} (masked)")
    # one request per repository: no retry or backoff on 5xx and rate limits
    return Github(
        auth=Auth.Token(config.access_token),
        base_url=config.api_url,
        retry=None,
        lazy=True,
    )


def describe_error(exc: Exception) -> str:
    if isinstance(exc, GithubException):
        data = exc.data if isinstance(exc.data, dict) else {}
        message = data.get("message") or "GitHub API error"
        details = [
            err["message"]
            for err in data.get("errors", []) or []
            if isinstance(err, dict) and err.get("message")
        ]
        text = f"{exc.status} {message}"
        if details:
            text += f" ({'; '.join(details)})"
        return text
    return str(exc)


def create_pull_request(gh: Github, owner: str, repo: str, base_branch: str, compare_branch: str, title: str) -> PRResult:
    """Open one PR from `compare_branch` into `base_branch`.

    API and transport errors are reported and returned as a failed result,
    never raised.
    """
    try:
        repository = gh.get_repo(f"{owner}/{repo}")
        pr = repository.create_pull(
            title=title,
            head=compare_branch,
            base=base_branch,
            maintainer_can_modify=True,
        )
    except (GithubException, RequestException) as e:
        error = describe_error(e)
        print(f"Failed to create PR for repository {repo}: {error}")
        return PRResult(repository=repo, error=error)
    print(f"PR created: {pr.html_url}")
    return PRResult(repository=repo, url=pr.html_url)


def create_pull_requests(gh: Github, config: RunConfig, confirmed: ConfirmedSelection) -> List[PRResult]:
    if not isinstance(confirmed, ConfirmedSelection):
        raise TypeError("create_pull_requests needs a ConfirmedSelection")
    selection = confirmed.selection
    print(f"🔄 Creating {len(selection.selected_repositories)} pull request(s)...")
    print(f"   🌿 {selection.compare_branch} -> {selection.base_branch}")
    results: List[PRResult] = []
    for repo in selection.selected_repositories:
        results.append(
            create_pull_request(
                gh,
                config.repository_owner,
                repo,
                selection.base_branch,
                selection.compare_branch,
                selection.pr_title,
            )
        )
    return results
