"""
Command invocation models — what gets spawned and what came back.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CommandInvocation(BaseModel):
    """A single external command call.

    ``argv[0]`` is the program name, resolved through the host PATH
    at spawn time. ``cwd`` is not checked up front; a missing
    directory surfaces as a spawn failure.
    """

    argv: list[str] = Field(min_length=1)
    cwd: str = "."
    timeout: float | None = None    # None = wait forever

    @field_validator("argv")
    @classmethod
    def _program_named(cls, value: list[str]) -> list[str]:
        if not value[0].strip():
            raise ValueError("argv[0] must name a program")
        return value

    @property
    def program(self) -> str:
        return self.argv[0]

    def display(self) -> str:
        """Human-readable form of the call for logs."""
        return " ".join(self.argv)


class CommandOutput(BaseModel):
    """Captured result of a successful command call."""

    argv: list[str]
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""
    duration_ms: int = 0
