"""Errors raised while building or running solc commands."""


class SolcError(Exception):
    """Base class for all solc command errors."""

    pass


class ConfigurationError(SolcError):
    """Raised when a command is configured in a way that cannot be rendered."""

    pass


class NoCommandError(ConfigurationError):
    """Raised by execute() when no source file was added."""

    def __init__(self, message: str = "No command: at least one source file is required"):
        super().__init__(message)


class OutputModeError(ConfigurationError):
    """Raised when separate-file and combined JSON outputs are mixed."""

    pass


class CommandAlreadyExecutedError(ConfigurationError):
    """Raised when a command is mutated after execute()."""

    pass


class NoOutputDirError(ConfigurationError):
    """Raised when artifacts are requested but no output directory is set."""

    def __init__(self, message: str = "No output path set"):
        super().__init__(message)


class SolcProcessError(SolcError):
    """Raised when the spawned compiler process fails.

    Carries the exit status and captured output so callers can report
    exactly what the compiler said.
    """

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ):
        super().__init__(message)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
