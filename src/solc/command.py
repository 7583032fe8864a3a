"""
Compile command builder.

Accumulates the options for one solc invocation and renders them into an
argument list. All paths are relative to the root directory, which becomes
the working directory of the spawned process.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from src.models.solc import CompileSettings, SolcInvocation

from .errors import CommandAlreadyExecutedError, NoCommandError, OutputModeError
from .outputs import CombinedOutput, OutputMode, SeparateOutput
from .paths import join_path

logger = logging.getLogger(__name__)


class CompileCommand:
    """Build up the compile command.

    Every mutator returns the command so calls can be chained:

        invocation = solc.compile().bin().abi().add_source("contracts/A.sol").execute()

    A command is single use. Once execute() has rendered it, further
    mutation raises CommandAlreadyExecutedError.
    """

    def __init__(
        self,
        root: str | os.PathLike = ".",
        output_dir: str | os.PathLike | None = None,
        libraries_file: str | os.PathLike | None = None,
        solc_binary: str = "solc",
    ):
        self.root = Path(root)
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.libraries_file = Path(libraries_file) if libraries_file is not None else None
        self.solc_binary = solc_binary

        self.allow_paths: list[Path] = []
        self.mappings: list[tuple[str, str]] = []
        self.source_files: list[Path] = []
        self.output_mode = OutputMode.NONE
        self.separate_outputs: list[SeparateOutput] = []
        self.combined_outputs: list[CombinedOutput] = []
        self.link_enabled = False
        self.overwrite_enabled = False
        self._invocation: SolcInvocation | None = None

    @classmethod
    def from_settings(cls, settings: CompileSettings) -> CompileCommand:
        """Create a command from the given settings."""
        cmd = cls(
            root=settings.root,
            output_dir=settings.output_dir,
            libraries_file=settings.libraries_file,
            solc_binary=settings.solc_binary,
        )
        for path in settings.allow_paths:
            cmd.allow_path(path)
        return cmd

    @property
    def executed(self) -> bool:
        return self._invocation is not None

    def _ensure_configuring(self) -> None:
        if self._invocation is not None:
            raise CommandAlreadyExecutedError(
                "Command has already been executed; create a new one with compile()"
            )

    # input

    def allow_path(self, path: str | os.PathLike) -> CompileCommand:
        """Authorize solc to read imports from the given path."""
        self._ensure_configuring()
        path = Path(path)
        if path not in self.allow_paths:
            self.allow_paths.append(path)
        return self

    def add_source(self, path: str | os.PathLike) -> CompileCommand:
        """Add a source `.sol` file."""
        self._ensure_configuring()
        self.source_files.append(Path(path))
        return self

    def add_mapping(self, prefix: str, path: str | os.PathLike) -> CompileCommand:
        """Add an import remapping, rendered as `prefix=path`."""
        self._ensure_configuring()
        self.mappings.append((prefix, os.fspath(path).strip('"')))
        return self

    def link(self) -> CompileCommand:
        """Link the library addresses written by Solc.prepare_link()."""
        self._ensure_configuring()
        self.link_enabled = True
        return self

    # output types

    def abi(self) -> CompileCommand:
        """Output `.abi` files."""
        return self.outputs(SeparateOutput.ABI)

    def bin(self) -> CompileCommand:
        """Output `.bin` files (bytecode)."""
        return self.outputs(SeparateOutput.BIN)

    def outputs(self, *kinds: SeparateOutput | str) -> CompileCommand:
        """Output separate files for each of the given kinds."""
        self._ensure_configuring()
        for kind in kinds:
            self._add_output(OutputMode.SEPARATE, SeparateOutput(kind), self.separate_outputs)
        return self

    def combined_json(self, *kinds: CombinedOutput | str) -> CompileCommand:
        """Output a combined JSON file holding each of the given kinds."""
        self._ensure_configuring()
        for kind in kinds:
            self._add_output(OutputMode.COMBINED_JSON, CombinedOutput(kind), self.combined_outputs)
        return self

    def _add_output(self, mode: OutputMode, kind, selected: list) -> None:
        if self.output_mode not in (OutputMode.NONE, mode):
            raise OutputModeError("Cannot combine combined and separate output modes")
        self.output_mode = mode
        if kind not in selected:
            selected.append(kind)

    # output

    def overwrite(self) -> CompileCommand:
        """Overwrite existing outputs."""
        self._ensure_configuring()
        self.overwrite_enabled = True
        return self

    def _link_file_path(self) -> Path | None:
        if self.libraries_file is None:
            return None
        if self.output_dir is None:
            return self.libraries_file
        return join_path(self.output_dir, self.libraries_file)

    def _render_args(self) -> list[str]:
        args: list[str] = []

        if self.allow_paths:
            args.extend(["--allow-paths", ",".join(os.fspath(p) for p in self.allow_paths)])

        for prefix, path in self.mappings:
            args.append(f"{prefix}={path}")

        if self.output_mode == OutputMode.SEPARATE:
            args.extend(output.flag for output in self.separate_outputs)
        elif self.output_mode == OutputMode.COMBINED_JSON:
            args.extend(
                ["--combined-json", ",".join(output.value for output in self.combined_outputs)]
            )

        if self.link_enabled:
            libraries = self._link_file_path()
            if libraries is None:
                logger.warning("link() requested but no libraries file is configured")
            else:
                if not (self.root / libraries).exists():
                    logger.debug(f"Libraries file not found yet: {self.root / libraries}")
                args.extend(["--libraries", os.fspath(libraries)])

        if self.overwrite_enabled:
            args.append("--overwrite")

        if self.output_dir is not None:
            args.extend(["-o", os.fspath(self.output_dir)])

        args.extend(os.fspath(source) for source in self.source_files)
        return args

    def arguments(self) -> list[str]:
        """Rendered arguments, for inspection only.

        Does not check that a source was added; use execute() to get an
        invocation that can be run.
        """
        if self._invocation is not None:
            return list(self._invocation.args)
        return self._render_args()

    def command_line(self) -> str:
        """Get the command that will be executed in the shell."""
        return " ".join([self.solc_binary, *self.arguments()])

    def execute(self) -> SolcInvocation:
        """Render the command for execution.

        Returns:
            SolcInvocation to hand to a SolcRunner

        Raises:
            NoCommandError: If no source file was added
        """
        if self._invocation is not None:
            return self._invocation

        if not self.source_files:
            raise NoCommandError()

        self._invocation = SolcInvocation(
            program=self.solc_binary, args=self._render_args(), cwd=self.root
        )
        logger.debug(f"Command: {self._invocation.command_line()}")
        return self._invocation

    def __repr__(self) -> str:
        state = "rendered" if self.executed else "configuring"
        return f"CompileCommand(root={self.root!s}, sources={len(self.source_files)}, {state})"
