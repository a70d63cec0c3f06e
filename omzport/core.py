"""
The port update procedure.

update_port() runs the whole check-rewrite-rebuild sequence once.
It is strictly linear: the first exception from any step propagates
to the caller and nothing is undone.
"""

from dataclasses import dataclass, field
from typing import List

from .config import PortConfig, logger
from .infra.github_client import GitHubClient
from .infra.make_client import MakeClient
from .port import regenerate_distinfo, regenerate_plist, run_port_tests, cleanup
from .upstream import get_remote_version
from .version_manager import VersionInfo, get_local_version, update_required, write_makefile

# Steps run once an update goes ahead, in order
UPDATE_STEPS = [
    "Writing modified Makefile",
    "Re-creating distinfo",
    "Re-creating plist",
    "Testing port",
]


@dataclass
class UpdateResult:
    """Outcome of one update_port() run."""
    remote: VersionInfo
    local: VersionInfo
    updated: bool = False
    reason: str = "up-to-date"  # newer, forced, up-to-date
    dry_run: bool = False
    steps: List[str] = field(default_factory=list)


def update_port(config: PortConfig, github: GitHubClient, make: MakeClient,
                on_versions=None) -> UpdateResult:
    """
    Bring the port up to the latest upstream commit.

    Args:
        config: Port paths and run flags
        github: Client used for the upstream lookup
        make: Client used for every build step
        on_versions: Optional callback(remote, local) invoked once both
            versions are known, before any decision is taken

    Returns:
        UpdateResult describing what was done
    """
    logger.info("Checking upstream version")
    remote = get_remote_version(github)

    logger.info("Reading Makefile")
    makefile_data = config.makefile_path.read_bytes()

    logger.info("Checking local version")
    local = get_local_version(makefile_data)

    logger.info(f"Upstream:\t{remote}")
    logger.info(f"Local:\t{local}")
    if on_versions is not None:
        on_versions(remote, local)

    result = UpdateResult(remote=remote, local=local)

    if update_required(remote, local):
        logger.info("Update is required")
        result.reason = "newer"
    elif config.force:
        logger.info("Update is NOT required, continuing anyway because of --force")
        result.reason = "forced"
    else:
        logger.info("Update is NOT required, exiting")
        return result

    if config.dry_run:
        for step in UPDATE_STEPS:
            logger.info(f"[Dry Run] Would run: {step}")
        result.dry_run = True
        return result

    _run_update(config, make, remote, makefile_data, result)
    result.updated = True

    logger.info("All done")
    return result


def _run_update(config: PortConfig, make: MakeClient, remote: VersionInfo,
                makefile_data: bytes, result: UpdateResult) -> None:
    """Rewrite the Makefile and rebuild everything derived from it."""
    logger.info("Writing modified Makefile")
    write_makefile(config.makefile_path, makefile_data, remote)
    result.steps.append("makefile")

    logger.info("Re-creating distinfo")
    regenerate_distinfo(config, make)
    result.steps.append("distinfo")

    logger.info("Re-creating plist")
    regenerate_plist(config, make)
    result.steps.append("plist")

    logger.info("Testing port")
    run_port_tests(make)
    cleanup(make)
    result.steps.append("test")
