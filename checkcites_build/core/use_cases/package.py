"""
Package use case — the full packaging step for checkcites.

Checks the required tools, then writes the launcher script and the
man page into the output directory. Errors are reported on the
result instead of raised, like the other entry points of the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from checkcites_build.adapters.shell.command import assert_all_available
from checkcites_build.core.config.loader import ConfigError, resolve_config
from checkcites_build.core.errors import PackagingError
from checkcites_build.core.models.packaging import PackagingConfig
from checkcites_build.core.services.generators.launcher import create_script
from checkcites_build.core.services.generators.manpage import create_man_page

logger = logging.getLogger(__name__)


@dataclass
class PackageResult:
    """Result of a packaging run."""

    config: PackagingConfig | None = None
    output_dir: Path | None = None
    checked: list[str] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)
    error: str | None = None
    error_kind: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error, "kind": self.error_kind}
        return {
            "name": self.config.name if self.config else None,
            "version": self.config.version if self.config else None,
            "output_dir": str(self.output_dir) if self.output_dir else None,
            "checked": self.checked,
            "files": [str(f) for f in self.files],
        }


def run_package(
    config_path: Path | None = None,
    output_dir: Path | None = None,
    skip_checks: bool = False,
) -> PackageResult:
    """Run the packaging step.

    Args:
        config_path: Optional explicit path to packaging.yml.
        output_dir: Overrides the configured output directory.
        skip_checks: Don't probe the required commands.

    Returns:
        PackageResult listing the written files, or the error.
    """
    result = PackageResult()

    try:
        config, root = resolve_config(config_path)
    except ConfigError as e:
        result.error = str(e)
        result.error_kind = "config"
        return result

    result.config = config
    target_dir = output_dir or (root / config.output_dir)
    result.output_dir = target_dir

    try:
        if not skip_checks:
            assert_all_available(config.required_commands)
            result.checked = [probe[0] for probe in config.required_commands]

        target_dir.mkdir(parents=True, exist_ok=True)
        result.files.append(create_script(target_dir / config.script_name))
        result.files.append(
            create_man_page(target_dir / config.man_page_name, config.version)
        )
    except PackagingError as e:
        result.error = e.message
        result.error_kind = e.kind.value
        return result
    except (OSError, ValueError) as e:
        result.error = f"Cannot create output directory {target_dir}: {e}"
        result.error_kind = "io"
        return result

    logger.info(
        "Packaged %s %s into %s", config.name, config.version, target_dir,
    )
    return result
