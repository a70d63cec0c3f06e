"""
Process exit codes for omzport.

0 means the port is up to date or was updated and packaged. Anything
else means the run stopped at the first failure; the code says which
stage failed. Application codes sit in the 64-113 range.
"""
from typing import Optional

SUCCESS = 0
GENERAL_ERROR = 1
USAGE_ERROR = 2          # Bad command line (click)

API_ERROR = 65           # GitHub lookup failed
CONFIG_ERROR = 66        # Port directory or settings file unusable
PERMISSION_ERROR = 67
NETWORK_ERROR = 68
DATA_ERROR = 70          # Makefile or makeplist output not understood
BUILD_ERROR = 72         # make failed or could not be started
INTERRUPTED = 130        # SIGINT

# Fallback codes for exceptions that are not CommandErrors, by class name
EXCEPTION_EXIT_CODES = {
    'FileNotFoundError': GENERAL_ERROR,
    'IsADirectoryError': GENERAL_ERROR,
    'PermissionError': PERMISSION_ERROR,
    'ConnectionError': NETWORK_ERROR,
    'TimeoutError': NETWORK_ERROR,
    'ValueError': DATA_ERROR,
    'UnicodeDecodeError': DATA_ERROR,
    'CalledProcessError': BUILD_ERROR,
    'KeyboardInterrupt': INTERRUPTED,
}


def get_exit_code_for_exception(exc: Exception) -> int:
    """Exit code for ``exc``: its own for CommandErrors, else by class name."""
    if isinstance(exc, CommandError):
        return exc.exit_code
    return EXCEPTION_EXIT_CODES.get(type(exc).__name__, GENERAL_ERROR)


class CommandError(Exception):
    """An error that ends the run with a specific exit code."""
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class APIError(CommandError):
    """The GitHub API could not be reached or gave an unusable answer."""
    def __init__(self, message: str):
        super().__init__(message, exit_code=API_ERROR)


class ConfigError(CommandError):
    """The port directory or the settings file is unusable."""
    def __init__(self, message: str):
        super().__init__(message, exit_code=CONFIG_ERROR)


class ParseError(CommandError):
    """PORTVERSION or GH_TAGNAME is missing from the Makefile."""
    def __init__(self, message: str):
        super().__init__(message, exit_code=DATA_ERROR)


class PlistError(CommandError):
    """`make makeplist` output has no plist after the warning line."""
    def __init__(self, message: str):
        super().__init__(message, exit_code=DATA_ERROR)


class BuildError(CommandError):
    """A make invocation exited non-zero or could not be launched."""
    def __init__(self, message: str, command=None, returncode: Optional[int] = None):
        super().__init__(message, exit_code=BUILD_ERROR)
        self.command = command
        self.returncode = returncode
