import os
import tempfile
import unittest
from unittest.mock import Mock, patch
from lsreg.config.schema import AppConfig
from lsreg.errors import RegdumpError
from lsreg.regdump.command import LEGACY_LSREGISTER, LSREGISTER, default_command
from lsreg.regdump.sources import FileDumpSource, ProcessDumpSource, open_regdump


class TestDefaultCommand(unittest.TestCase):
    def setUp(self):
        patcher = patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop("LSREG_COMMAND", None)

    def test_modern_system(self):
        self.assertEqual(default_command("10.6.8"), f"{LSREGISTER} -dump")
        self.assertEqual(default_command("14.2"), f"{LSREGISTER} -dump")

    def test_legacy_system(self):
        self.assertEqual(default_command("10.4.11"), f"{LEGACY_LSREGISTER} -dump")

    def test_unknown_release(self):
        self.assertEqual(default_command("garbage"), f"{LSREGISTER} -dump")

    def test_not_macos(self):
        with patch("lsreg.regdump.command.platform.mac_ver", return_value=("", ("", "", ""), "")):
            self.assertEqual(default_command(), f"{LSREGISTER} -dump")

    def test_environment_override(self):
        os.environ["LSREG_COMMAND"] = "cat saved.txt"
        self.assertEqual(default_command("10.4"), "cat saved.txt")


class TestProcessDumpSource(unittest.TestCase):
    @patch("lsreg.regdump.sources.subprocess.Popen")
    def test_close_reaps_process(self, popen):
        proc = popen.return_value
        proc.wait.return_value = 0
        with ProcessDumpSource("/bin/lsregister -dump") as source:
            self.assertIs(source.stream, proc.stdout)
        proc.stdout.close.assert_called_once()
        proc.wait.assert_called_once()

    @patch("lsreg.regdump.sources.subprocess.Popen")
    def test_failed_exit_is_logged(self, popen):
        popen.return_value.wait.return_value = 1
        source = ProcessDumpSource("/bin/lsregister -dump")
        with self.assertLogs("lsreg.regdump.sources", level="WARNING"):
            source.close()

    @patch("lsreg.regdump.sources.subprocess.Popen", side_effect=FileNotFoundError("no such file"))
    def test_missing_executable(self, popen):
        with self.assertRaises(RegdumpError):
            ProcessDumpSource("/nonexistent/lsregister -dump")

    def test_empty_command(self):
        with self.assertRaises(RegdumpError):
            ProcessDumpSource("   ")


class TestFileDumpSource(unittest.TestCase):
    def test_reads_and_closes(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "dump.txt")
            with open(path, "wb") as f:
                f.write(b"line\n")
            source = FileDumpSource(path)
            self.assertEqual(source.stream.readline(), b"line\n")
            source.close()
            self.assertTrue(source.stream.closed)

    def test_missing_file(self):
        with self.assertRaises(RegdumpError):
            FileDumpSource("/nonexistent/dump.txt")

    def test_stdin_is_not_closed(self):
        fake_stdin = Mock()
        with patch("lsreg.regdump.sources.sys.stdin", fake_stdin):
            source = FileDumpSource("-")
            source.close()
        self.assertIs(source.stream, fake_stdin.buffer)
        fake_stdin.buffer.close.assert_not_called()


class TestOpenRegdump(unittest.TestCase):
    def test_input_path_wins(self):
        with tempfile.NamedTemporaryFile(delete=False) as f:
            path = f.name
        try:
            with open_regdump(AppConfig(), input_path=path) as source:
                self.assertIsInstance(source, FileDumpSource)
        finally:
            os.unlink(path)

    @patch("lsreg.regdump.sources.subprocess.Popen")
    def test_configured_command(self, popen):
        popen.return_value.wait.return_value = 0
        config = AppConfig(regdump={"command": "cat /tmp/dump.txt"})
        with open_regdump(config) as source:
            self.assertIsInstance(source, ProcessDumpSource)
        self.assertEqual(popen.call_args[0][0], ["cat", "/tmp/dump.txt"])

    @patch("lsreg.regdump.sources.default_command", return_value="/bin/lsregister -dump")
    @patch("lsreg.regdump.sources.subprocess.Popen")
    def test_default_command(self, popen, default):
        popen.return_value.wait.return_value = 0
        with open_regdump(AppConfig()):
            pass
        self.assertEqual(popen.call_args[0][0], ["/bin/lsregister", "-dump"])


if __name__ == "__main__":
    unittest.main()
