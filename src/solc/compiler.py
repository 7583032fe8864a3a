"""
Solidity compiler context.

A Solc instance owns the working directory, the output directory and the
library addresses used for linking. Calling compile() returns a fresh
CompileCommand; calling execute() on that command renders the invocation
that a SolcRunner spawns inside the root directory.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from src.config import Settings, get_settings

from .command import CompileCommand
from .errors import NoOutputDirError
from .paths import absolute, join_path

logger = logging.getLogger(__name__)


def format_address(address: str | bytes) -> str:
    """Render a library address for the link file.

    Raw bytes are written as 0x-prefixed lowercase hex; strings are kept
    as given. The compiler validates the format.
    """
    if isinstance(address, (bytes, bytearray)):
        return "0x" + bytes(address).hex()
    return str(address)


def render_link_file(libraries: dict[str, str]) -> str:
    """Serialize library mappings as `name:address` lines."""
    return "".join(f"{name}:{address}\n" for name, address in libraries.items())


class Solc:
    """Wrapper around the Solidity compiler.

    Usage:
        solc = Solc("project", output_dir="build")
        solc.add_library_address("SafeMath", "0x" + "12" * 20)
        solc.prepare_link()
        invocation = solc.compile().bin().abi().link().add_source("contracts/A.sol").execute()
        SolcRunner().run(invocation)
    """

    def __init__(
        self,
        root: str | os.PathLike,
        output_dir: str | os.PathLike | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the compiler context.

        Args:
            root: Working directory; converted to an absolute path
            output_dir: Directory for build artifacts, relative to root
            settings: Optional settings (defaults to environment settings)
        """
        self.settings = settings or get_settings()
        self._root = absolute(root)
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.lib_file = self.settings.libraries_file
        self.libraries: dict[str, str] = {}

    @property
    def root(self) -> Path:
        """The compiler's working directory."""
        return self._root

    @property
    def libraries_file(self) -> Path:
        """Link file location relative to root."""
        if self.output_dir is None:
            return Path(self.lib_file)
        return join_path(self.output_dir, self.lib_file)

    @property
    def libraries_path(self) -> Path:
        """Absolute link file location."""
        return self._root / self.libraries_file

    def add_library_address(self, name: str, address: str | bytes) -> None:
        """Add a library address for linking; replaces any previous address for `name`."""
        self.libraries[name] = format_address(address)

    def prepare_link(self) -> Path:
        """Write the library file from the library mappings.

        Overwrites any previous content.

        Returns:
            Absolute path of the written file

        Raises:
            OSError: If the file cannot be written (e.g. missing output directory)
        """
        path = self.libraries_path
        path.write_text(render_link_file(self.libraries), encoding="utf-8")
        logger.info(f"Wrote {len(self.libraries)} library address(es) to {path}")
        return path

    def compile(self) -> CompileCommand:
        """Generate a CompileCommand for building up the compilation."""
        return CompileCommand(
            root=self._root,
            output_dir=self.output_dir,
            libraries_file=self.lib_file,
            solc_binary=self.settings.solc_binary,
        )

    command = compile

    def _artifact_path(self, name: str) -> Path:
        if self.output_dir is None:
            raise NoOutputDirError()
        return self._root / self.output_dir / name

    def load_bytecode(self, name: str) -> bytes:
        """Load linked bytecode from `<root>/<output_dir>/<name>`.

        Raises:
            NoOutputDirError: If no output directory is set
            OSError: If the file cannot be read
            ValueError: If the file is not valid hex (e.g. still unlinked)
        """
        path = self._artifact_path(name)
        logger.debug(f"Loading bytecode from {path}")
        code = path.read_text(encoding="utf-8").strip()
        if code.startswith("0x"):
            code = code[2:]
        return bytes.fromhex(code)

    def load_abi(self, name: str) -> bytes:
        """Load a given ABI file from the output directory."""
        return self._artifact_path(name).read_bytes()

    def load_abi_json(self, name: str) -> list[dict[str, Any]]:
        """Load a given ABI file from the output directory as JSON."""
        return json.loads(self.load_abi(name))

    def __repr__(self) -> str:
        return f"Solc(root={self._root!s}, output_dir={self.output_dir!s}, libraries={len(self.libraries)})"
