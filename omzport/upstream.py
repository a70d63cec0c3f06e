#!/usr/bin/env python3

from .config import logger
from .infra.github_client import GitHubClient
from .version_manager import VersionInfo, numeric_date

UPSTREAM_OWNER = "ohmyzsh"
UPSTREAM_REPO = "ohmyzsh"
UPSTREAM_BRANCH = "master"


def get_remote_version(client: GitHubClient) -> VersionInfo:
    """
    Fetch the latest upstream commit and turn it into a VersionInfo.

    The date is the committer date in UTC; the sha is the full hash.
    Errors from the client are not caught here.
    """
    commit = client.get_commit(UPSTREAM_OWNER, UPSTREAM_REPO, UPSTREAM_BRANCH)
    logger.debug(f"{UPSTREAM_OWNER}/{UPSTREAM_REPO}@{UPSTREAM_BRANCH} is {commit.sha} ({commit.committed_at.isoformat()})")
    return VersionInfo(numeric_date=numeric_date(commit.committed_at.date()), sha=commit.sha)
