"""Shared test fixtures and helpers."""

from pathlib import Path

import pytest

from src.config import Settings
from src.solc import Solc

ADDRESS_A = "0x" + "11" * 20
ADDRESS_B = "0x" + "22" * 20


def parse_libraries(path: Path) -> dict[str, str]:
    """Read a libraries file back as name -> address."""
    mappings = {}
    for line in path.read_text().splitlines():
        name, address = line.split(":", 1)
        mappings[name] = address
    return mappings


@pytest.fixture
def settings() -> Settings:
    """Settings that do not depend on the environment."""
    return Settings(solc_binary="solc", libraries_file="libs.txt", log_level="DEBUG")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project root with a contracts/ source and an existing build/ directory."""
    (tmp_path / "contracts").mkdir()
    (tmp_path / "contracts" / "MyContract.sol").write_text("pragma solidity ^0.8.0;\n")
    (tmp_path / "build").mkdir()
    return tmp_path


@pytest.fixture
def solc(project: Path, settings: Settings) -> Solc:
    """Compiler context rooted at the project with output into build/."""
    return Solc(project, output_dir="build", settings=settings)
