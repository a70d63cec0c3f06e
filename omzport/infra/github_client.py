"""
GitHub API client infrastructure for omzport.

Provides a thin, anonymous, read-only view of the GitHub REST API.
Requests are made once: there is no retry or backoff, and any transport
or API failure is raised to the caller as an APIError.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Dict, Any

import requests

from ..exit_codes import APIError

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


@dataclass
class GitHubCommit:
    """A commit as returned by the GitHub commits endpoint."""
    sha: str
    committed_at: datetime  # Committer date, UTC
    message: str = ""

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'GitHubCommit':
        """
        Create from a GitHub API commit response.

        Raises:
            APIError: if the sha or the committer date is missing or malformed
        """
        sha = data.get('sha')
        commit = data.get('commit') or {}
        committer = commit.get('committer') or {}
        date_str = committer.get('date')

        if not sha:
            raise APIError("GitHub API response has no commit sha")
        if not date_str:
            raise APIError(f"GitHub API response for {sha} has no committer date")

        try:
            # GitHub returns ISO 8601 with a trailing Z
            committed_at = datetime.fromisoformat(date_str.replace('Z', '+00:00'))
        except ValueError as e:
            raise APIError(f"Invalid committer date {date_str!r}: {e}") from e

        if committed_at.tzinfo is None:
            committed_at = committed_at.replace(tzinfo=timezone.utc)

        return cls(
            sha=sha,
            committed_at=committed_at.astimezone(timezone.utc),
            message=commit.get('message', ''),
        )


class GitHubClient:
    """
    Anonymous GitHub API client.

    Example:
        client = GitHubClient()
        commit = client.get_commit("ohmyzsh", "ohmyzsh", "master")
        print(commit.sha, commit.committed_at)
    """

    def __init__(self, api_url: Optional[str] = None):
        """
        Initialize GitHubClient.

        Args:
            api_url: Base URL of the REST API (defaults to api.github.com)
        """
        self.api_url = (api_url or GITHUB_API_URL).rstrip('/')
        self.session = requests.Session()
        self.session.headers.update({
            'Accept': 'application/vnd.github.v3+json',
            'User-Agent': 'omzport',
        })

    def _api(self, endpoint: str) -> Dict[str, Any]:
        """Call the GitHub API and return the decoded JSON body."""
        url = f"{self.api_url}/{endpoint}"
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url)
            response.raise_for_status()
        except requests.RequestException as e:
            raise APIError(f"GitHub API request failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise APIError(f"GitHub API returned invalid JSON for {endpoint}: {e}") from e

    def get_commit(self, owner: str, name: str, ref: str) -> GitHubCommit:
        """
        Get the commit a ref points to.

        Args:
            owner: Repository owner
            name: Repository name
            ref: Branch, tag or sha

        Returns:
            GitHubCommit for the ref
        """
        data = self._api(f"repos/{owner}/{name}/commits/{ref}")
        if not isinstance(data, dict):
            raise APIError(f"Unexpected GitHub API response for {owner}/{name}@{ref}")
        return GitHubCommit.from_api_response(data)
