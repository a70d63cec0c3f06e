"""
Infrastructure layer for omzport.

Contains abstractions for external systems:
- GitHubClient: GitHub API access
- MakeClient: Build tool execution in the port directory

These provide clean interfaces that can be mocked for testing.
"""

from .github_client import GitHubClient, GitHubCommit
from .make_client import MakeClient

__all__ = [
    'GitHubClient',
    'GitHubCommit',
    'MakeClient',
]
