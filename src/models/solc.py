"""Solc command models.

These models describe what crosses the boundary between the command builder
and the process that actually runs the compiler.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class CompileSettings(BaseModel):
    """Directories and paths a CompileCommand starts from."""

    root: Path = Field(default=Path("."), description="Working directory for solc")
    allow_paths: list[Path] = Field(default_factory=list)
    output_dir: Path | None = Field(default=None, description="Relative to root")
    libraries_file: Path | None = Field(
        default=None, description="Link file path relative to root"
    )
    solc_binary: str = "solc"


class SolcInvocation(BaseModel):
    """A rendered compiler command, ready to be handed to a process runner."""

    model_config = ConfigDict(frozen=True)

    program: str
    args: tuple[str, ...] = ()
    cwd: Path

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def command_line(self) -> str:
        """Space-joined command line, for logs and dry runs."""
        return " ".join(self.argv)


class CompileResult(BaseModel):
    """Outcome of running a SolcInvocation."""

    argv: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0
