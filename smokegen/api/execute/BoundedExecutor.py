"""Bounded subprocess execution engine."""

import logging
import os
import select
import signal
import subprocess
import time
from contextlib import suppress

from ...constants import DEFAULT_MAX_OUTPUT_BYTES, DEFAULT_TIMEOUT_SECS
from ...error_messages import environment_fault, setup_fault
from ._decode_exit_status import _decode_exit_status
from .ExecutionError import ExecutionError
from .ExecutionResult import ExecutionResult

logger = logging.getLogger(__name__)

_READ_SIZE = 4096


class BoundedExecutor:
    """Run a shell command with a bounded window to produce output.

    The child runs in its own process group so it can be terminated as a unit
    without affecting the parent. Utilities that block on interactive input
    (e.g. passwd(1)) never exit on their own, and some of them ignore SIGINT
    (e.g. pax(1)), so every execution ends by sending SIGTERM to the group.
    """

    def __init__(
        self,
        timeout_secs: float = DEFAULT_TIMEOUT_SECS,
        shell: str = "/bin/sh",
        clean_env: bool = True,
        max_output_bytes: int = DEFAULT_MAX_OUTPUT_BYTES,
    ):
        if timeout_secs <= 0:
            raise ValueError(f"timeout_secs must be positive (found: {timeout_secs})")
        if max_output_bytes <= 0:
            raise ValueError(f"max_output_bytes must be positive (found: {max_output_bytes})")
        self.timeout_secs = timeout_secs
        self.shell = shell
        self.clean_env = clean_env
        self.max_output_bytes = max_output_bytes

    def execute(self, command: str) -> ExecutionResult:
        """Execute ``command`` via ``sh -c`` and capture its standard output.

        Non-zero exit, empty output and children still running at the timeout
        are reported as data. A setup fault (pipe or process creation) or a
        multiplexing fault terminates the process.

        Args:
            command: Complete shell command line; quoting is the caller's job

        Returns:
            ExecutionResult with the decoded output and exit status

        Raises:
            ExecutionError: If reading the child's output fails
        """
        logger.debug(f"Executing: {command}")
        try:
            proc = subprocess.Popen(
                [self.shell, "-c", command],
                stdout=subprocess.PIPE,
                env={} if self.clean_env else None,
                start_new_session=True,  # pgid == child pid
            )
        except OSError as exc:
            setup_fault("popen()", exc)

        assert proc.stdout is not None
        try:
            output, truncated = self._drain(proc, command)
        finally:
            self._terminate(proc)
            proc.stdout.close()
            exit_status = _decode_exit_status(self._reap(proc))

        logger.debug(f"{command!r} exited with status {exit_status}")
        return ExecutionResult(captured_output=output, exit_status=exit_status, truncated=truncated)

    def _drain(self, proc: subprocess.Popen, command: str) -> tuple[str, bool]:
        """Read the child's output until end-of-stream, the time budget runs out or the size cap is hit.

        Returns the decoded output and whether it was cut at the cap.
        """
        assert proc.stdout is not None
        fd = proc.stdout.fileno()
        deadline = time.monotonic() + self.timeout_secs
        chunks: list[bytes] = []
        captured = 0

        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                logger.info(f"No end of output within {self.timeout_secs}s: {command}")
                break

            try:
                ready, _, _ = select.select([fd], [], [], remaining)
            except (OSError, ValueError) as exc:
                environment_fault("select()", exc)

            if not ready:
                logger.info(f"No output within {self.timeout_secs}s: {command}")
                break

            try:
                chunk = os.read(fd, min(_READ_SIZE, self.max_output_bytes - captured))
            except OSError as exc:
                raise ExecutionError(command) from exc

            if not chunk:
                break
            chunks.append(chunk)
            captured += len(chunk)
            if captured >= self.max_output_bytes:
                logger.warning(f"Output of {command!r} reached the {self.max_output_bytes}-byte cap, truncated")
                return b"".join(chunks).decode("utf-8", errors="replace"), True

        return b"".join(chunks).decode("utf-8", errors="replace"), False

    def _terminate(self, proc: subprocess.Popen) -> None:
        try:
            os.killpg(proc.pid, signal.SIGTERM)
        except (ProcessLookupError, PermissionError) as exc:
            logger.warning(f"kill() failed for process group {proc.pid}: {exc}")

    def _reap(self, proc: subprocess.Popen) -> int:
        """Wait for the child; escalate to SIGKILL if it survives SIGTERM."""
        try:
            return proc.wait(timeout=self.timeout_secs)
        except subprocess.TimeoutExpired:
            logger.warning(f"Process group {proc.pid} ignored SIGTERM, sending SIGKILL")
            with suppress(ProcessLookupError, PermissionError):
                os.killpg(proc.pid, signal.SIGKILL)
            return proc.wait()
