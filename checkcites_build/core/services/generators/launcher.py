"""
Launcher script generator — the ``checkcites`` wrapper shipped in TeX Live.

The script finds ``<scriptname>.jar`` through kpsewhich, converts the
path when running under Cygwin, and execs java on it. TeX distribution
tooling expects this exact text, so the template is a constant with no
substitution at generation time; ``$0`` is resolved when the script runs.
"""

from __future__ import annotations

import logging
from pathlib import Path

from checkcites_build.adapters.shell.filesystem import write_generated
from checkcites_build.core.errors import ScriptWriteFailed
from checkcites_build.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


LAUNCHER_SCRIPT = """\
#!/bin/sh
# Public domain. Originally written by Norbert Preining and Karl Berry, 2018.
# Note from Paulo: this script provides better Cygwin support than our original
# approach, so the team decided to use it as a proper wrapper for checkcites as well.

scriptname=`basename "$0"`
jar="$scriptname.jar"
jarpath=`kpsewhich --progname="$scriptname" --format=texmfscripts "$jar"`

kernel=`uname -s 2>/dev/null`
if echo "$kernel" | grep CYGWIN >/dev/null; then
  CYGWIN_ROOT=`cygpath -w /`
  export CYGWIN_ROOT
  jarpath=`cygpath -w "$jarpath"`
fi

exec java -jar "$jarpath" "$@"
"""


def generate_launcher_script(name: str = "checkcites") -> GeneratedFile:
    """Return the launcher script as a ``GeneratedFile``.

    ``name`` only sets the suggested file name; the content never changes.
    """
    return GeneratedFile(
        path=name,
        content=LAUNCHER_SCRIPT,
        executable=True,
        reason="Shell wrapper that locates and runs the checkcites jar",
    )


def create_script(file: str | Path) -> Path:
    """Create the shell script file for checkcites.

    Raises:
        ScriptWriteFailed: The file could not be written.
    """
    target = Path(file)
    try:
        write_generated(generate_launcher_script(target.name), target)
    except (OSError, ValueError) as e:
        raise ScriptWriteFailed(detail=str(e)) from e

    logger.info("Launcher script written to %s", target)
    return target
