"""Tests for the solc CLI."""

from unittest.mock import patch

import pytest

from src.models.solc import CompileResult
from src.solc import SolcProcessError
from src.solc.cli import main, parse_library, parse_mapping
from tests.conftest import ADDRESS_A, parse_libraries


@pytest.fixture(autouse=True)
def fixed_settings(settings):
    with patch("src.solc.cli.get_settings", return_value=settings):
        yield


def test_parse_mapping():
    assert parse_mapping("dll=installed_contracts/dll") == ("dll", "installed_contracts/dll")


def test_parse_library_keeps_address():
    assert parse_library(f"SafeMath:{ADDRESS_A}") == ("SafeMath", ADDRESS_A)


def test_parse_invalid_mapping():
    with pytest.raises(Exception, match="Invalid mapping"):
        parse_mapping("no-separator")


def test_dry_run_prints_command(project, capsys):
    """--dry-run prints the rendered command without running solc."""
    with patch("src.solc.runner.subprocess.run") as run:
        code = main(
            [
                "compile",
                str(project),
                "contracts/MyContract.sol",
                "-o",
                "build",
                "--bin",
                "--abi",
                "--mapping",
                "dll=lib/dll",
                "--dry-run",
            ]
        )

    assert code == 0
    run.assert_not_called()
    out = capsys.readouterr().out.strip()
    assert out == "solc dll=lib/dll --bin --abi -o build contracts/MyContract.sol"


def test_compile_with_libraries_writes_link_file(project):
    """--library writes the link file and passes --libraries to solc."""
    result = CompileResult(argv=["solc"], returncode=0)
    with patch("src.solc.cli.SolcRunner.run", return_value=result) as run:
        code = main(
            [
                "compile",
                str(project),
                "contracts/MyContract.sol",
                "-o",
                "build",
                "--bin",
                "--library",
                f"SafeMath:{ADDRESS_A}",
            ]
        )

    assert code == 0
    assert parse_libraries(project / "build" / "libs.txt") == {"SafeMath": ADDRESS_A}
    invocation = run.call_args.args[0]
    assert "--libraries" in invocation.args
    assert "build/libs.txt" in invocation.args


def test_link_into_missing_output_dir_is_configuration_error(project, caplog):
    """An output directory that does not exist yet exits with status 2, not a traceback."""
    with patch("src.solc.cli.SolcRunner.run") as run:
        code = main(
            [
                "compile",
                str(project),
                "contracts/MyContract.sol",
                "-o",
                "fresh",
                "--bin",
                "--library",
                f"SafeMath:{ADDRESS_A}",
            ]
        )

    assert code == 2
    run.assert_not_called()
    assert "Cannot write libraries file" in caplog.text
    assert not (project / "fresh").exists()


def test_mixed_outputs_is_configuration_error(project):
    """Mixing output modes exits with status 2."""
    code = main(
        ["compile", str(project), "A.sol", "--bin", "--combined-json", "abi,bin", "--dry-run"]
    )
    assert code == 2


def test_unknown_output_is_configuration_error(project):
    code = main(["compile", str(project), "A.sol", "--output", "bytecode", "--dry-run"])
    assert code == 2


def test_compiler_failure_returns_exit_code(project):
    """A compiler failure exits with the compiler's status."""
    error = SolcProcessError("solc exited with code 1: boom", returncode=1, stderr="boom")
    with patch("src.solc.cli.SolcRunner.run", side_effect=error):
        code = main(["compile", str(project), "contracts/MyContract.sol", "--bin"])

    assert code == 1


def test_version(capsys):
    with patch("src.solc.cli.SolcRunner.version", return_value="Version: 0.8.24"):
        assert main(["version"]) == 0
    assert "0.8.24" in capsys.readouterr().out


def test_version_unavailable(capsys):
    with patch("src.solc.cli.SolcRunner.version", side_effect=SolcProcessError("Compiler not found: solc")):
        assert main(["version"]) == 1
    assert "Compiler not found" in capsys.readouterr().out
