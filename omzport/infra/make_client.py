"""
Build-tool client infrastructure for omzport.

All make invocations go through this client, making them:
- Easy to mock for testing
- Pinned to the port directory as working directory
- Consistent in error handling (every failure raises BuildError)
"""

import subprocess
import logging
from pathlib import Path
from typing import List, Optional

from ..exit_codes import BuildError

logger = logging.getLogger(__name__)


class MakeClient:
    """
    Runs make targets inside a port directory.

    Example:
        make = MakeClient("/usr/ports/shells/ohmyzsh")
        make.run("clean", "fetch", "makesum")
        plist = make.output("makeplist")
    """

    def __init__(self, port_path, make_command: str = "make"):
        """
        Initialize MakeClient.

        Args:
            port_path: Working directory for every invocation
            make_command: Build tool executable (default: make)
        """
        self.port_path = Path(port_path)
        self.make_command = make_command

    def _run(self, targets: List[str], capture: bool) -> Optional[bytes]:
        """
        Run make with the given targets.

        Stdout is captured only when asked for; stderr always passes
        through. The environment is inherited from the parent.

        Returns:
            Captured stdout, or None when not capturing
        """
        cmd = [self.make_command, *targets]
        cmd_str = ' '.join(cmd)
        logger.debug(f"Running command in '{self.port_path}': {cmd_str}")

        try:
            result = subprocess.run(
                cmd,
                cwd=self.port_path,
                stdout=subprocess.PIPE if capture else None,
            )
        except OSError as e:
            raise BuildError(f"Could not run '{cmd_str}': {e}", command=cmd) from e

        if result.returncode != 0:
            raise BuildError(
                f"'{cmd_str}' failed with exit status {result.returncode}",
                command=cmd,
                returncode=result.returncode,
            )

        return result.stdout if capture else None

    def run(self, *targets: str) -> None:
        """Run make targets, letting their output through."""
        self._run(list(targets), capture=False)

    def output(self, *targets: str) -> bytes:
        """Run make targets and return their standard output."""
        return self._run(list(targets), capture=True)
