"""Execution error."""


class ExecutionError(RuntimeError):
    """Raised when a command's output could not be drained."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Unable to execute the command: {command}")
