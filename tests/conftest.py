"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Return an empty directory for generated files."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def packaging_yml(tmp_path: Path) -> Path:
    """A packaging.yml whose required commands exist everywhere."""
    content = textwrap.dedent("""\
        packaging:
          name: checkcites
          version: "2.6"
          output_dir: dist
          required_commands:
            - ["true"]
            - ["sh", "-c", "exit 0"]
    """)
    path = tmp_path / "packaging.yml"
    path.write_text(content)
    return path


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Keep CLI logging setup from leaking between tests."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
