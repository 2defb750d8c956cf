"""Unit tests for command and filesystem capabilities."""

import sys

import pytest

from zfsmon.constants import ARCSTATS_PATH, ZPOOL_COMMAND
from zfsmon.errors import CommandError, CommandTimeoutError, FilesystemError
from zfsmon.system import (
    DemoCommandExecutor,
    DemoFilesystemReader,
    RealCommandExecutor,
    RealFilesystemReader,
)


class TestRealCommandExecutor:
    """Tests for RealCommandExecutor (runs the current interpreter)."""

    def test_returns_stdout(self):
        output = RealCommandExecutor().run(sys.executable, ["-c", "print('ONLINE')"])
        assert output.strip() == "ONLINE"

    def test_nonzero_exit(self):
        code = "import sys; sys.stderr.write('no pools available'); sys.exit(1)"
        with pytest.raises(CommandError) as exc_info:
            RealCommandExecutor().run(sys.executable, ["-c", code])
        assert exc_info.value.reason == "no pools available"

    def test_nonzero_exit_without_stderr(self):
        with pytest.raises(CommandError) as exc_info:
            RealCommandExecutor().run(sys.executable, ["-c", "raise SystemExit(3)"])
        assert exc_info.value.reason == "exit code 3"

    def test_timeout(self):
        with pytest.raises(CommandTimeoutError) as exc_info:
            RealCommandExecutor().run(sys.executable, ["-c", "import time; time.sleep(5)"], timeout=0.2)
        assert exc_info.value.timeout == 0.2
        assert isinstance(exc_info.value, CommandError)

    def test_missing_executable(self):
        with pytest.raises(CommandError) as exc_info:
            RealCommandExecutor().run("zfsmon-no-such-command", ["status"])
        assert exc_info.value.command == "zfsmon-no-such-command"
        assert exc_info.value.args_list == ["status"]


class TestRealFilesystemReader:
    """Tests for RealFilesystemReader."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "arcstats"
        path.write_text("hits 4 10\n")
        assert RealFilesystemReader().read(str(path)) == "hits 4 10\n"

    def test_missing_file(self, tmp_path):
        path = str(tmp_path / "missing")
        with pytest.raises(FilesystemError) as exc_info:
            RealFilesystemReader().read(path)
        assert exc_info.value.path == path
        assert exc_info.value.operation == "read"


class TestDemoCapabilities:
    """Tests for the demo executor and reader."""

    def test_known_command(self):
        assert "logs" in DemoCommandExecutor().run(ZPOOL_COMMAND, ["status"])

    def test_unknown_command(self):
        with pytest.raises(CommandError):
            DemoCommandExecutor().run(ZPOOL_COMMAND, ["scrub", "data"])

    def test_custom_responses(self):
        executor = DemoCommandExecutor({("arcstat", "1", "1"): "output"})
        assert executor.run("arcstat", ("1", "1")) == "output"

    def test_known_file(self):
        assert "l2_size" in DemoFilesystemReader().read(ARCSTATS_PATH)

    def test_unknown_file(self):
        with pytest.raises(FilesystemError):
            DemoFilesystemReader().read("/proc/meminfo")


class TestErrorMessages:
    """Tests for error string rendering."""

    def test_command_error(self):
        error = CommandError("zpool", ["iostat", "-v"], "exit code 1")
        assert str(error) == "Command failed: zpool iostat -v: exit code 1"

    def test_timeout_error(self):
        error = CommandTimeoutError("arcstat", ["1", "1"], 3.0)
        assert str(error) == "Command failed: arcstat 1 1: timed out after 3s"
