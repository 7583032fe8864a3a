"""Output kinds supported by the solc command line."""

from enum import Enum


class SeparateOutput(str, Enum):
    """Outputs written as separate files into the output directory."""

    AST = "ast"
    AST_JSON = "ast-json"
    AST_COMPACT_JSON = "ast-compact-json"
    ASM = "asm"
    ASM_JSON = "asm-json"
    OPCODES = "opcodes"
    BIN = "bin"
    BIN_RUNTIME = "bin-runtime"
    ABI = "abi"
    HASHES = "hashes"
    USER_DOC = "userdoc"
    DEV_DOC = "devdoc"
    METADATA = "metadata"

    @property
    def flag(self) -> str:
        return f"--{self.value}"


class CombinedOutput(str, Enum):
    """Outputs bundled into the single --combined-json file."""

    ABI = "abi"
    ASM = "asm"
    AST = "ast"
    BIN = "bin"
    BIN_RUNTIME = "bin-runtime"
    COMPACT_FORMAT = "compact-format"
    DEV_DOC = "devdoc"
    HASHES = "hashes"
    INTERFACE = "interface"
    METADATA = "metadata"
    OPCODES = "opcodes"
    SOURCE_MAP = "srcmap"
    SOURCE_MAP_RUNTIME = "srcmap-runtime"
    USER_DOC = "userdoc"


class OutputMode(str, Enum):
    """Which family of outputs a command has committed to."""

    NONE = "none"
    SEPARATE = "separate"
    COMBINED_JSON = "combined-json"
