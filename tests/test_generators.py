"""
Tests for the launcher script and man page generators.

Pure file tests: path in → file on disk out.
"""

import os
import stat
from datetime import date
from pathlib import Path

import pytest

from checkcites_build.core.errors import (
    ErrorKind,
    ManPageWriteFailed,
    ScriptWriteFailed,
)
from checkcites_build.core.services.generators.launcher import (
    LAUNCHER_SCRIPT,
    create_script,
    generate_launcher_script,
)
from checkcites_build.core.services.generators.manpage import (
    MAN_PAGE_PLACEHOLDER,
    create_man_page,
    generate_man_page,
    man_page_date,
)


# ═══════════════════════════════════════════════════════════════════
#  Launcher script
# ═══════════════════════════════════════════════════════════════════


class TestGenerateLauncherScript:
    def test_content_is_template(self):
        gen = generate_launcher_script()
        assert gen.content == LAUNCHER_SCRIPT
        assert gen.path == "checkcites"
        assert gen.executable

    def test_name_only_changes_path(self):
        gen = generate_launcher_script("other")
        assert gen.path == "other"
        assert gen.content == LAUNCHER_SCRIPT


class TestLauncherTemplate:
    def test_shebang(self):
        assert LAUNCHER_SCRIPT.splitlines()[0] == "#!/bin/sh"

    def test_single_trailing_newline(self):
        assert LAUNCHER_SCRIPT.endswith('"$@"\n')
        assert not LAUNCHER_SCRIPT.endswith("\n\n")

    def test_kpsewhich_lookup(self):
        assert (
            'jarpath=`kpsewhich --progname="$scriptname" '
            '--format=texmfscripts "$jar"`'
        ) in LAUNCHER_SCRIPT

    def test_self_name_resolved_at_run_time(self):
        assert 'scriptname=`basename "$0"`' in LAUNCHER_SCRIPT
        assert 'jar="$scriptname.jar"' in LAUNCHER_SCRIPT

    def test_cygwin_branch(self):
        assert "kernel=`uname -s 2>/dev/null`" in LAUNCHER_SCRIPT
        assert 'if echo "$kernel" | grep CYGWIN >/dev/null; then' in LAUNCHER_SCRIPT
        assert "  CYGWIN_ROOT=`cygpath -w /`\n  export CYGWIN_ROOT\n" in LAUNCHER_SCRIPT
        assert '  jarpath=`cygpath -w "$jarpath"`\nfi\n' in LAUNCHER_SCRIPT

    def test_execs_java(self):
        assert LAUNCHER_SCRIPT.splitlines()[-1] == 'exec java -jar "$jarpath" "$@"'

    def test_no_indentation_outside_if_block(self):
        for line in LAUNCHER_SCRIPT.splitlines():
            if line.startswith(" "):
                assert line.startswith("  ") and not line.startswith("   ")


class TestCreateScript:
    def test_checkcites(self, out_dir: Path):
        """Scenario: create_script(checkcites) writes the launcher."""
        target = out_dir / "checkcites"
        returned = create_script(target)

        assert returned == target
        assert target.is_file()
        content = target.read_text(encoding="utf-8")
        assert content.splitlines()[0] == "#!/bin/sh"
        assert "kpsewhich --progname=" in content
        assert content == LAUNCHER_SCRIPT

    def test_bytes_use_unix_newlines(self, out_dir: Path):
        target = create_script(out_dir / "checkcites")
        data = target.read_bytes()
        assert b"\r\n" not in data
        assert data.endswith(b'"$@"\n')

    def test_accepts_string_path(self, out_dir: Path):
        target = create_script(str(out_dir / "checkcites"))
        assert target.read_text() == LAUNCHER_SCRIPT

    def test_marks_executable(self, out_dir: Path):
        target = create_script(out_dir / "checkcites")
        mode = target.stat().st_mode
        assert mode & stat.S_IXUSR

    def test_idempotent(self, out_dir: Path):
        target = out_dir / "checkcites"
        create_script(target)
        first = target.read_bytes()
        create_script(target)
        assert target.read_bytes() == first

    def test_overwrites_existing(self, out_dir: Path):
        target = out_dir / "checkcites"
        target.write_text("old content that is much longer than nothing\n" * 100)
        create_script(target)
        assert target.read_text() == LAUNCHER_SCRIPT

    def test_missing_directory_fails(self, tmp_path: Path):
        with pytest.raises(ScriptWriteFailed) as exc:
            create_script(tmp_path / "missing" / "checkcites")
        assert exc.value.kind is ErrorKind.SCRIPT_WRITE_FAILED
        assert "permissions" in str(exc.value)
        assert isinstance(exc.value.__cause__, OSError)

    def test_null_byte_path_fails(self, out_dir: Path):
        with pytest.raises(ScriptWriteFailed) as exc:
            create_script(str(out_dir / "a\0b"))
        assert isinstance(exc.value.__cause__, ValueError)

    def test_directory_target_fails(self, out_dir: Path):
        with pytest.raises(ScriptWriteFailed):
            create_script(out_dir)

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="root ignores directory permissions",
    )
    def test_read_only_directory_fails(self, out_dir: Path):
        out_dir.chmod(0o500)
        try:
            with pytest.raises(ScriptWriteFailed):
                create_script(out_dir / "checkcites")
        finally:
            out_dir.chmod(0o700)


# ═══════════════════════════════════════════════════════════════════
#  Man page
# ═══════════════════════════════════════════════════════════════════


class TestManPageDate:
    def test_format(self):
        assert man_page_date(date(2025, 3, 3)) == date(2025, 3, 3).strftime("%d %B %Y")
        assert man_page_date(date(2025, 3, 3)).startswith("03 ")
        assert man_page_date(date(2025, 3, 3)).endswith(" 2025")

    def test_defaults_to_today(self):
        assert man_page_date() == date.today().strftime("%d %B %Y")


class TestGenerateManPage:
    def test_placeholder(self):
        gen = generate_man_page("2.6")
        assert gen.content == "TODO write manpage for checkcites\n"
        assert gen.path == "checkcites.1"
        assert not gen.executable

    def test_date_not_embedded(self):
        gen = generate_man_page("2.6")
        assert man_page_date() not in gen.content


class TestCreateManPage:
    @pytest.mark.parametrize("version", ["2.6", "", "1.0.0-rc1"])
    def test_placeholder_for_any_version(self, out_dir: Path, version: str):
        target = create_man_page(out_dir / "checkcites.1", version)
        assert target.read_text(encoding="utf-8") == MAN_PAGE_PLACEHOLDER

    def test_idempotent(self, out_dir: Path):
        target = out_dir / "checkcites.1"
        create_man_page(target, "2.6")
        first = target.read_bytes()
        create_man_page(target, "2.7")
        assert target.read_bytes() == first

    def test_missing_directory_fails(self, tmp_path: Path):
        with pytest.raises(ManPageWriteFailed) as exc:
            create_man_page(tmp_path / "missing" / "checkcites.1", "2.6")
        assert exc.value.kind is ErrorKind.MAN_PAGE_WRITE_FAILED
        assert "man page" in str(exc.value)

    def test_null_byte_path_fails(self, out_dir: Path):
        with pytest.raises(ManPageWriteFailed) as exc:
            create_man_page(str(out_dir / "a\0b.1"), "2.6")
        assert isinstance(exc.value.__cause__, ValueError)
