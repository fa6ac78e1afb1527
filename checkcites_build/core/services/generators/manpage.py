"""
Man page generator for checkcites.

The real page has not been written yet; the generator ships a one-line
placeholder. The release date is already computed so the template can
pick it up once it exists.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from checkcites_build.adapters.shell.filesystem import write_generated
from checkcites_build.core.errors import ManPageWriteFailed
from checkcites_build.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)

MAN_PAGE_PLACEHOLDER = "TODO write manpage for checkcites\n"

# dd MMMM yyyy, e.g. "03 March 2025"
MAN_PAGE_DATE_FORMAT = "%d %B %Y"


def man_page_date(today: date | None = None) -> str:
    """Format the date stamp a man page header would carry."""
    return (today or date.today()).strftime(MAN_PAGE_DATE_FORMAT)


def generate_man_page(version: str, name: str = "checkcites.1") -> GeneratedFile:
    """Return the man page as a ``GeneratedFile``.

    ``version`` and the date are accepted but not rendered yet.
    """
    today = man_page_date()
    logger.debug("Man page for version %s dated %s (not rendered)", version, today)
    return GeneratedFile(
        path=name,
        content=MAN_PAGE_PLACEHOLDER,
        reason="Manual page for checkcites",
    )


def create_man_page(file: str | Path, version: str) -> Path:
    """Create the man page file for checkcites.

    Raises:
        ManPageWriteFailed: The file could not be written.
    """
    target = Path(file)
    try:
        write_generated(generate_man_page(version, target.name), target)
    except (OSError, ValueError) as e:
        raise ManPageWriteFailed(detail=str(e)) from e

    logger.info("Man page written to %s", target)
    return target
