"""
Shared fixtures for omzport tests.
"""

import os
from pathlib import Path

import pytest

LOCAL_SHA = "0a1b2c3d4e5f60718293a4b5c6d7e8f901234567"
REMOTE_SHA = "f1e2d3c4b5a60718293a4b5c6d7e8f9012345678"

MAKEFILE_TEMPLATE = (
    "PORTNAME=\tohmyzsh\n"
    "PORTVERSION=\t{date}\n"
    "CATEGORIES=\tshells\n"
    "\n"
    "MAINTAINER=\tports@example.org\n"
    "COMMENT=\tFramework for managing your zsh configuration\n"
    "WWW=\t\thttps://ohmyz.sh/\n"
    "\n"
    "LICENSE=\tMIT\n"
    "LICENSE_FILE=\t${{WRKSRC}}/LICENSE.txt\n"
    "\n"
    "RUN_DEPENDS=\tzsh:shells/zsh\n"
    "\n"
    "USE_GITHUB=\tyes\n"
    "GH_ACCOUNT=\tohmyzsh\n"
    "GH_TAGNAME=\t{sha}\n"
    "\n"
    "NO_ARCH=\tyes\n"
    "NO_BUILD=\tyes\n"
    "\n"
    ".include <bsd.port.mk>\n"
)

DISTINFO = (
    "TIMESTAMP = 1672531200\n"
    "SHA256 (ohmyzsh-ohmyzsh-20230101-0a1b2c3d_GH0.tar.gz) = 00ff\n"
    "SIZE (ohmyzsh-ohmyzsh-20230101-0a1b2c3d_GH0.tar.gz) = 1024\n"
)

PLIST = "share/ohmyzsh/oh-my-zsh.sh\n"

MAKEPLIST_OUTPUT = (
    b"/you/have/to/check/what/makeplist/gives/you\n"
    b"share/ohmyzsh/oh-my-zsh.sh\n"
    b"share/ohmyzsh/plugins/git/git.plugin.zsh\n"
)


def makefile_text(date=20230101, sha=LOCAL_SHA):
    return MAKEFILE_TEMPLATE.format(date=date, sha=sha)


class FakeMake:
    """Records make invocations instead of running them."""

    def __init__(self, port_path, makeplist_output=MAKEPLIST_OUTPUT):
        self.port_path = Path(port_path)
        self.makeplist_output = makeplist_output
        self.calls = []
        self.distinfo_present_at_makesum = None

    def run(self, *targets):
        self.calls.append(list(targets))
        if "makesum" in targets:
            distinfo = self.port_path / "distinfo"
            self.distinfo_present_at_makesum = distinfo.exists()
            distinfo.write_text("TIMESTAMP = 1685577600\n")

    def output(self, *targets):
        self.calls.append(list(targets))
        return self.makeplist_output


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path_factory, monkeypatch):
    """Keep the user's ~/.omzport and OMZPORT_* variables out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("OMZPORT_CONFIG", raising=False)
    for key in list(os.environ):
        if key.startswith("OMZPORT_"):
            monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def port_dir(tmp_path):
    """A port directory holding Makefile, distinfo and pkg-plist."""
    port = tmp_path / "ohmyzsh"
    port.mkdir()
    (port / "Makefile").write_text(makefile_text())
    (port / "distinfo").write_text(DISTINFO)
    (port / "pkg-plist").write_text(PLIST)
    return port


@pytest.fixture
def fake_make(port_dir):
    return FakeMake(port_dir)
