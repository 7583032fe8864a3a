"""Environment-driven settings for the solc command builder."""

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_BINARY = "solc"
DEFAULT_LIBRARIES_FILE = "libs.txt"


class Settings(BaseModel):
    """Settings shared by every compiler context."""

    solc_binary: str = Field(default=DEFAULT_BINARY, description="Compiler program name or path")
    libraries_file: str = Field(
        default=DEFAULT_LIBRARIES_FILE,
        description="Link file name, relative to the output directory",
    )
    log_level: str = Field(default="INFO", description="Log level used by the CLI")

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> "Settings":
        """Load settings from the environment.

        Args:
            env_file: Optional .env file; defaults to .env in the current directory

        Returns:
            Settings populated from SOLC_* variables
        """
        env_path = env_file or Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path)

        return cls(
            solc_binary=os.getenv("SOLC_BINARY", DEFAULT_BINARY),
            libraries_file=os.getenv("SOLC_LIBRARIES_FILE", DEFAULT_LIBRARIES_FILE),
            log_level=os.getenv("SOLC_LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get settings (cached)."""
    return Settings.from_env()
