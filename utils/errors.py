"""
Exception types for the card API runner.

Every error a command can raise derives from :class:`RunnerError`, which
carries the process exit code the dispatcher should use.
"""


class RunnerError(Exception):
    """Base class for failures reported by a command."""

    exit_code = 1


class UsageError(RunnerError):
    """The command line was missing a subcommand or a required value."""

    exit_code = 2


class FileAccessError(RunnerError):
    """A local file could not be read or written."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ImageReadError(FileAccessError):
    """The image to upload could not be read."""


class PayloadEncodingError(RunnerError):
    """A request body could not be serialized to JSON."""


class TransportError(RunnerError):
    """The request could not be sent or the response could not be read."""

    def __init__(self, message, timed_out=False):
        self.timed_out = timed_out
        super().__init__(message)


class HTTPStatusError(RunnerError):
    """The API answered with a status the command treats as failure."""

    def __init__(self, status_code, body=b"", message=None):
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"request failed: {status_code}")


class StepError(RunnerError):
    """A step of the ``run-all`` flow failed."""

    def __init__(self, step, cause):
        self.step = step
        self.cause = cause
        super().__init__(f"{step} failed: {cause}")
