"""
omzport - keep the FreeBSD ohmyzsh port in step with upstream.

Quick Start:
    from omzport import PortConfig, GitHubClient, MakeClient, update_port

    config = PortConfig.from_port_dir("/usr/ports/shells/ohmyzsh")
    result = update_port(config, GitHubClient(), MakeClient(config.port_path))
    print(result.reason, result.remote)

Command line:
    omzport --omz-port /usr/ports/shells/ohmyzsh [--force] [--dry-run]
"""

__version__ = "0.1.0"

from .config import PortConfig, load_config
from .core import UpdateResult, update_port
from .infra import GitHubClient, GitHubCommit, MakeClient
from .version_manager import VersionInfo, get_local_version, render_makefile, update_required

__all__ = [
    "__version__",
    "PortConfig",
    "load_config",
    "UpdateResult",
    "update_port",
    "GitHubClient",
    "GitHubCommit",
    "MakeClient",
    "VersionInfo",
    "get_local_version",
    "render_makefile",
    "update_required",
]
