"""
Regeneration and testing of the port's derived files.

Every step runs make in the port directory through a MakeClient and
aborts on the first failure. Nothing is rolled back.
"""

import os

from .config import PortConfig, logger
from .exit_codes import PlistError
from .infra.make_client import MakeClient


def regenerate_distinfo(config: PortConfig, make: MakeClient) -> None:
    """Delete distinfo and let `make makesum` write a fresh one."""
    os.remove(config.distinfo_path)
    make.run("clean", "fetch", "makesum")


def strip_plist_warning(output: bytes) -> bytes:
    """
    Drop the first line of `make makeplist` output.

    makeplist always starts with a line telling you to check the
    generated plist; the rest is the plist itself.

    Raises:
        PlistError: if the output has no line terminator at all
    """
    parts = output.split(b"\n", 1)
    if len(parts) != 2:
        raise PlistError("make makeplist produced no plist output")
    return parts[1]


def regenerate_plist(config: PortConfig, make: MakeClient) -> None:
    """Stage the port and write pkg-plist from `make makeplist`."""
    make.run("stage")
    plist = strip_plist_warning(make.output("makeplist"))

    config.plist_path.write_bytes(plist)
    logger.debug(f"Wrote {len(plist.splitlines())} entries to {config.plist_path}")


def run_port_tests(make: MakeClient) -> None:
    """Rebuild and package the port with stage QA and plist checks."""
    make.run("clean", "stage", "stage-qa", "check-plist", "package")


def cleanup(make: MakeClient) -> None:
    make.run("clean")
