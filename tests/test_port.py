"""
Tests for regenerating distinfo and pkg-plist.
"""

import os
import stat

import pytest

from omzport.config import PortConfig
from omzport.exit_codes import PlistError, DATA_ERROR
from omzport.port import (
    strip_plist_warning,
    regenerate_distinfo,
    regenerate_plist,
    run_port_tests,
    cleanup,
)

from conftest import FakeMake


class TestStripPlistWarning:
    """Test makeplist output post-processing."""

    def test_drops_first_line_only(self):
        output = b"WARNING line\nactual\nplist\ncontent"
        assert strip_plist_warning(output) == b"actual\nplist\ncontent"

    def test_keeps_trailing_newline(self):
        assert strip_plist_warning(b"warn\nbin/a\nbin/b\n") == b"bin/a\nbin/b\n"

    def test_header_only(self):
        assert strip_plist_warning(b"warn\n") == b""

    def test_empty_output(self):
        with pytest.raises(PlistError) as exc_info:
            strip_plist_warning(b"")
        assert exc_info.value.exit_code == DATA_ERROR

    def test_no_line_terminator(self):
        with pytest.raises(PlistError):
            strip_plist_warning(b"only a warning")


class TestRegenerateDistinfo:
    """Test distinfo deletion and regeneration."""

    def test_deletes_then_makesum(self, port_dir, fake_make):
        config = PortConfig.from_port_dir(port_dir)

        regenerate_distinfo(config, fake_make)

        assert fake_make.calls == [["clean", "fetch", "makesum"]]
        assert fake_make.distinfo_present_at_makesum is False
        assert config.distinfo_path.read_text() == "TIMESTAMP = 1685577600\n"

    def test_missing_distinfo_is_fatal(self, port_dir, fake_make):
        config = PortConfig.from_port_dir(port_dir)
        os.remove(config.distinfo_path)

        with pytest.raises(FileNotFoundError):
            regenerate_distinfo(config, fake_make)
        assert fake_make.calls == []


class TestRegeneratePlist:
    """Test pkg-plist regeneration."""

    def test_stage_then_makeplist(self, port_dir, fake_make):
        config = PortConfig.from_port_dir(port_dir)

        regenerate_plist(config, fake_make)

        assert fake_make.calls == [["stage"], ["makeplist"]]
        assert config.plist_path.read_bytes() == (
            b"share/ohmyzsh/oh-my-zsh.sh\n"
            b"share/ohmyzsh/plugins/git/git.plugin.zsh\n"
        )

    def test_plist_keeps_existing_mode(self, port_dir, fake_make):
        config = PortConfig.from_port_dir(port_dir)
        os.chmod(config.plist_path, 0o664)

        regenerate_plist(config, fake_make)

        assert stat.S_IMODE(os.stat(config.plist_path).st_mode) == 0o664

    def test_empty_makeplist_leaves_plist(self, port_dir):
        config = PortConfig.from_port_dir(port_dir)
        before = config.plist_path.read_bytes()

        with pytest.raises(PlistError):
            regenerate_plist(config, FakeMake(port_dir, makeplist_output=b""))

        assert config.plist_path.read_bytes() == before

    def test_output_is_written_verbatim(self, port_dir):
        config = PortConfig.from_port_dir(port_dir)
        output = b"warn\n@dir share/ohmyzsh/cache\n  spaced entry \n\n"

        regenerate_plist(config, FakeMake(port_dir, makeplist_output=output))

        assert config.plist_path.read_bytes() == b"@dir share/ohmyzsh/cache\n  spaced entry \n\n"


class TestTestAndCleanup:
    """Test the final build steps."""

    def test_run_port_tests_targets(self, fake_make):
        run_port_tests(fake_make)
        assert fake_make.calls == [["clean", "stage", "stage-qa", "check-plist", "package"]]

    def test_cleanup_targets(self, fake_make):
        cleanup(fake_make)
        assert fake_make.calls == [["clean"]]
