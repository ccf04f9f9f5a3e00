import logging
import shlex
import signal
import subprocess
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Union

from ..config.schema import AppConfig
from ..errors import RegdumpError
from .command import default_command

logger = logging.getLogger(__name__)


class ProcessDumpSource:
    """Runs lsregister and exposes its stdout."""

    def __init__(self, command: str):
        self.command = command
        argv = shlex.split(command)
        if not argv:
            raise RegdumpError("Empty regdump command")

        logger.debug(f"[Regdump] Spawning: {command}")
        try:
            self.proc = subprocess.Popen(argv, stdout=subprocess.PIPE)
        except OSError as e:
            raise RegdumpError(f"Failed to open regdump '{command}': {e}") from e
        self.stream: BinaryIO = self.proc.stdout

    def close(self):
        if self.stream is not None:
            self.stream.close()
        returncode = self.proc.wait()
        # Stopping early closes the pipe under the writer
        if returncode not in (0, -signal.SIGPIPE):
            logger.warning(f"[Regdump] '{self.command}' exited with status {returncode}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class FileDumpSource:
    """Reads a dump previously saved with "lsregister -dump > file"; "-" is stdin."""

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        self._owned = self.path != "-"
        if not self._owned:
            self.stream: BinaryIO = sys.stdin.buffer
            return
        try:
            self.stream = open(self.path, "rb")
        except OSError as e:
            raise RegdumpError(f"Failed to open dump file {self.path}: {e}") from e

    def close(self):
        if self._owned:
            self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def open_regdump(config: Optional[AppConfig] = None, input_path: Optional[str] = None):
    """Opens a saved dump when ``input_path`` is given, otherwise runs lsregister."""
    if input_path:
        logger.info(f"[Regdump] Reading dump from {input_path}")
        return FileDumpSource(input_path)

    command = config.regdump.command if config else ""
    if not command:
        command = default_command()
    logger.info(f"[Regdump] Running {command}")
    return ProcessDumpSource(command)
