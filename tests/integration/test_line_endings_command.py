"""Integration tests for the common-ext line-endings commands."""

import json
from pathlib import Path

from click.testing import CliRunner

from common_extensions.cli import main
from common_extensions.cli.exit_codes import ExitCode


def _write_bytes(path: Path, data: bytes) -> Path:
    path.write_bytes(data)
    return path


class TestDetectCommand:
    """Tests for the line-endings detect command."""

    def test_detect_help(self) -> None:
        """Test that detect shows help."""
        runner = CliRunner()
        result = runner.invoke(main, ["line-endings", "detect", "--help"])

        assert result.exit_code == 0
        assert "line ending style" in result.output

    def test_detect_styles(self, temp_dir: Path) -> None:
        """Test detect reports one style per file."""
        unix = _write_bytes(temp_dir / "unix.txt", b"a\nb\n")
        windows = _write_bytes(temp_dir / "win.txt", b"a\r\nb\r\n")
        mixed = _write_bytes(temp_dir / "mixed.txt", b"a\nb\r\n")

        runner = CliRunner()
        result = runner.invoke(
            main, ["line-endings", "detect", str(unix), str(windows), str(mixed)]
        )

        assert result.exit_code == 0
        assert f"{unix}: unix" in result.output
        assert f"{windows}: windows" in result.output
        assert f"{mixed}: mixed" in result.output

    def test_detect_json(self, temp_dir: Path) -> None:
        """Test detect emits a JSON object with --json."""
        mac = _write_bytes(temp_dir / "mac.txt", b"a\rb")
        empty = _write_bytes(temp_dir / "empty.txt", b"")

        runner = CliRunner()
        result = runner.invoke(
            main, ["line-endings", "detect", "--json", str(mac), str(empty)]
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == {str(mac): "mac", str(empty): "none"}

    def test_detect_file_not_found(self, temp_dir: Path) -> None:
        """Test detect with a missing file returns TARGET_NOT_FOUND."""
        runner = CliRunner()
        result = runner.invoke(
            main, ["line-endings", "detect", str(temp_dir / "missing.txt")]
        )

        assert result.exit_code == ExitCode.TARGET_NOT_FOUND
        assert "File not found" in result.output


class TestNormalizeCommand:
    """Tests for the line-endings normalize command."""

    def test_normalize_in_place(self, temp_dir: Path) -> None:
        """Test normalize rewrites the file when --in-place is given."""
        path = _write_bytes(temp_dir / "a.txt", b"one\r\ntwo\rthree\n")

        runner = CliRunner()
        result = runner.invoke(
            main, ["line-endings", "normalize", "--style", "windows", "-i", str(path)]
        )

        assert result.exit_code == 0
        assert path.read_bytes() == b"one\r\ntwo\r\nthree\r\n"
        assert "mixed -> windows" in result.output

    def test_normalize_to_output(self, temp_dir: Path) -> None:
        """Test normalize writes to --output and leaves the source alone."""
        source = _write_bytes(temp_dir / "a.txt", b"x\r\ny\r\n")
        target = temp_dir / "b.txt"

        runner = CliRunner()
        result = runner.invoke(
            main,
            ["line-endings", "normalize", "-s", "unix", "-o", str(target), str(source)],
        )

        assert result.exit_code == 0
        assert target.read_bytes() == b"x\ny\n"
        assert source.read_bytes() == b"x\r\ny\r\n"

    def test_normalize_to_stdout_keeps_crlf(self, temp_dir: Path) -> None:
        """Test normalize writes exact terminator bytes to stdout."""
        source = _write_bytes(temp_dir / "a.txt", b"x\ny\rz\r\n")

        runner = CliRunner()
        result = runner.invoke(
            main, ["line-endings", "normalize", "-s", "windows", str(source)]
        )

        assert result.exit_code == 0
        assert result.stdout_bytes == b"x\r\ny\r\nz\r\n"
        assert source.read_bytes() == b"x\ny\rz\r\n"

    def test_normalize_to_stdout_encodes_utf8(self, temp_dir: Path) -> None:
        """Test normalize writes non-ASCII text to stdout as UTF-8."""
        source = _write_bytes(temp_dir / "a.txt", "caf\u00e9\r\n".encode())

        runner = CliRunner()
        result = runner.invoke(
            main, ["line-endings", "normalize", "-s", "unix", str(source)]
        )

        assert result.exit_code == 0
        assert result.stdout_bytes == "caf\u00e9\n".encode()

    def test_normalize_uses_configured_default(
        self, temp_dir: Path, monkeypatch
    ) -> None:
        """Test normalize falls back to the configured default style."""
        monkeypatch.setenv("COMMON_EXT_DEFAULT_LINE_ENDING", "mac")
        path = _write_bytes(temp_dir / "a.txt", b"x\ny\n")

        runner = CliRunner()
        result = runner.invoke(main, ["line-endings", "normalize", "-i", str(path)])

        assert result.exit_code == 0
        assert path.read_bytes() == b"x\ry\r"

    def test_normalize_mixed_rejected(self, temp_dir: Path) -> None:
        """Test normalize refuses mixed as a target by default."""
        path = _write_bytes(temp_dir / "a.txt", b"x\r\n")

        runner = CliRunner()
        result = runner.invoke(
            main, ["line-endings", "normalize", "-s", "mixed", "-i", str(path)]
        )

        assert result.exit_code == ExitCode.INVALID_ARGUMENT
        assert "MIXED" in result.output
        assert path.read_bytes() == b"x\r\n"

    def test_normalize_mixed_legacy(self, temp_dir: Path, monkeypatch) -> None:
        """Test legacy_mixed_target treats mixed as unix."""
        monkeypatch.setenv("COMMON_EXT_LEGACY_MIXED_TARGET", "1")
        path = _write_bytes(temp_dir / "a.txt", b"x\r\ny\r")

        runner = CliRunner()
        result = runner.invoke(
            main, ["line-endings", "normalize", "-s", "mixed", "-i", str(path)]
        )

        assert result.exit_code == 0
        assert path.read_bytes() == b"x\ny\n"

    def test_output_and_in_place_conflict(self, temp_dir: Path) -> None:
        """Test --output and --in-place cannot be combined."""
        path = _write_bytes(temp_dir / "a.txt", b"x\n")

        runner = CliRunner()
        result = runner.invoke(
            main,
            [
                "line-endings",
                "normalize",
                "-i",
                "-o",
                str(temp_dir / "b.txt"),
                str(path),
            ],
        )

        assert result.exit_code == ExitCode.INVALID_ARGUMENT
        assert "mutually exclusive" in result.output

    def test_normalize_file_not_found(self, temp_dir: Path) -> None:
        """Test normalize with a missing file returns TARGET_NOT_FOUND."""
        runner = CliRunner()
        result = runner.invoke(
            main, ["line-endings", "normalize", str(temp_dir / "missing.txt")]
        )

        assert result.exit_code == ExitCode.TARGET_NOT_FOUND

    def test_invalid_config_exits_with_config_error(
        self, temp_dir: Path, monkeypatch
    ) -> None:
        """Test an invalid configured style fails before the command runs."""
        monkeypatch.setenv("COMMON_EXT_DEFAULT_LINE_ENDING", "vms")
        path = _write_bytes(temp_dir / "a.txt", b"x\n")

        runner = CliRunner()
        result = runner.invoke(main, ["line-endings", "normalize", str(path)])

        assert result.exit_code == ExitCode.CONFIG_ERROR
        assert "Invalid configuration" in result.output
