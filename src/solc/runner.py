"""
Solc process runner.

Spawns a rendered SolcInvocation and captures its output. This is the only
place that touches subprocess.
"""

import logging
import subprocess

from src.models.solc import CompileResult, SolcInvocation

from .errors import SolcProcessError

logger = logging.getLogger(__name__)


class SolcRunner:
    """Runs solc invocations via subprocess."""

    def __init__(self, solc_binary: str = "solc"):
        """Initialize the runner.

        Args:
            solc_binary: Program used by version() and check_available()
        """
        self.solc_binary = solc_binary

    def run(self, invocation: SolcInvocation, check: bool = True) -> CompileResult:
        """Run a compile invocation in its working directory.

        Args:
            invocation: Rendered command from CompileCommand.execute()
            check: Raise SolcProcessError on a non-zero exit status

        Returns:
            CompileResult with the exit status and captured output

        Raises:
            SolcProcessError: If the binary is missing, or exits non-zero with check=True
        """
        logger.info(f"Running solc in {invocation.cwd}")
        logger.debug(f"Command: {invocation.command_line()}")

        try:
            result = subprocess.run(
                invocation.argv,
                cwd=invocation.cwd,
                capture_output=True,
                text=True,
                check=False,  # Don't raise on non-zero exit
            )
        except FileNotFoundError as e:
            logger.error(f"solc not found: {invocation.program}")
            raise SolcProcessError(f"Compiler not found: {invocation.program}") from e

        compile_result = CompileResult(
            argv=invocation.argv,
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )

        if not compile_result.success:
            logger.error(f"solc failed with exit code {result.returncode}")
            logger.error(f"STDERR: {result.stderr}")
            if check:
                raise SolcProcessError(
                    f"solc exited with code {result.returncode}: {result.stderr.strip()}",
                    returncode=result.returncode,
                    stdout=compile_result.stdout,
                    stderr=compile_result.stderr,
                )

        return compile_result

    def version(self) -> str:
        """Return the output of `solc --version`.

        Raises:
            SolcProcessError: If solc is missing or fails
        """
        try:
            result = subprocess.run(
                [self.solc_binary, "--version"],
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise SolcProcessError(f"Compiler not found: {self.solc_binary}") from e
        except subprocess.CalledProcessError as e:
            raise SolcProcessError(
                f"{self.solc_binary} --version failed",
                returncode=e.returncode,
                stdout=e.stdout or "",
                stderr=e.stderr or "",
            ) from e
        return result.stdout.strip()

    def check_available(self) -> bool:
        """Check if the compiler binary can be run.

        Returns:
            True if `solc --version` succeeds
        """
        try:
            version = self.version()
        except SolcProcessError as e:
            logger.error(f"solc not available: {e}")
            return False
        logger.info(f"solc available: {version.splitlines()[-1] if version else ''}")
        return True
