"""Builder-style interface for invoking the Solidity compiler."""

from .command import CompileCommand
from .compiler import Solc
from .errors import (
    CommandAlreadyExecutedError,
    ConfigurationError,
    NoCommandError,
    NoOutputDirError,
    OutputModeError,
    SolcError,
    SolcProcessError,
)
from .outputs import CombinedOutput, SeparateOutput
from .runner import SolcRunner

__all__ = [
    "Solc",
    "CompileCommand",
    "SolcRunner",
    "SeparateOutput",
    "CombinedOutput",
    "SolcError",
    "ConfigurationError",
    "NoCommandError",
    "OutputModeError",
    "CommandAlreadyExecutedError",
    "NoOutputDirError",
    "SolcProcessError",
]
