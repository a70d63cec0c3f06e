"""
Version management for the ohmyzsh port Makefile.

The port tracks upstream by two Makefile variables:
- PORTVERSION: the upstream commit date as YYYYMMDD
- GH_TAGNAME: the upstream commit the distfile is fetched from

Both are read and rewritten with fixed patterns operating on the raw
Makefile bytes, so everything around the two values is left untouched.
"""

import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from .exit_codes import ParseError

PORTVERSION_RE = re.compile(rb'(PORTVERSION=\s+)(\d+)')
TAGNAME_RE = re.compile(rb'(GH_TAGNAME=\s+)(\w+)')


@dataclass(frozen=True)
class VersionInfo:
    """A port version: numeric commit date plus revision token."""
    numeric_date: int
    sha: str

    def __str__(self) -> str:
        return f"date: {self.numeric_date}, sha: {self.sha}"


def numeric_date(day: date) -> int:
    """Encode a date as year*10000 + month*100 + day (20230601)."""
    return day.year * 10000 + day.month * 100 + day.day


def get_local_version(makefile_data: bytes) -> VersionInfo:
    """
    Read PORTVERSION and GH_TAGNAME from Makefile contents.

    Args:
        makefile_data: Raw Makefile bytes

    Returns:
        VersionInfo with the values found

    Raises:
        ParseError: if either variable is missing
    """
    match = PORTVERSION_RE.search(makefile_data)
    if not match:
        raise ParseError("Can't find PORTVERSION in the Makefile")
    port_version = int(match.group(2))

    match = TAGNAME_RE.search(makefile_data)
    if not match:
        raise ParseError("Can't find GH_TAGNAME in the Makefile")
    sha = match.group(2).decode('ascii')

    return VersionInfo(numeric_date=port_version, sha=sha)


def update_required(remote: VersionInfo, local: VersionInfo) -> bool:
    """True when the upstream commit date is strictly newer than the port's."""
    return remote.numeric_date > local.numeric_date


def render_makefile(makefile_data: bytes, info: VersionInfo) -> bytes:
    """Return the Makefile bytes with both version values replaced by ``info``."""
    sha = info.sha.encode('ascii')
    port_version = str(info.numeric_date).encode('ascii')

    makefile_data = TAGNAME_RE.sub(lambda m: m.group(1) + sha, makefile_data)
    makefile_data = PORTVERSION_RE.sub(lambda m: m.group(1) + port_version, makefile_data)
    return makefile_data


def write_makefile(makefile_path, makefile_data: bytes, info: VersionInfo) -> None:
    """
    Overwrite the Makefile with the version values from ``info``.

    The file keeps its existing permissions.
    """
    Path(makefile_path).write_bytes(render_makefile(makefile_data, info))
