"""
Packaging model — what a packaging run produces and what it needs.

Loaded from packaging.yml. Every field has a default, so a project
without a config file still packages checkcites.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator


def _default_required_commands() -> list[list[str]]:
    return [["kpsewhich", "--version"], ["java", "-version"]]


class PackagingConfig(BaseModel):
    """Settings for one packaging run."""

    name: str = "checkcites"
    version: str = "0.0.0"
    script_name: str = ""
    man_page_name: str = ""
    output_dir: str = "build/packaging"
    required_commands: list[list[str]] = Field(
        default_factory=_default_required_commands,
    )

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_text(cls, value: object) -> object:
        # YAML reads `version: 2.4` as a float
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @model_validator(mode="after")
    def _fill_derived_names(self) -> PackagingConfig:
        if not self.script_name:
            self.script_name = self.name
        if not self.man_page_name:
            self.man_page_name = f"{self.name}.1"
        for probe in self.required_commands:
            if not probe or not probe[0].strip():
                raise ValueError("required_commands entries must name a program")
        return self
