"""Errors raised while collecting host facts. Every one of them is fatal."""


class FetchError(Exception):
    pass


class SourceFileNotFound(FetchError):
    """A source file is missing or cannot be opened."""


class LineNotFound(FetchError):
    """End of file reached without a line matching the prefix."""


class InvalidFormat(FetchError):
    """A line or value does not have the expected shape."""


class PartNotFound(FetchError):
    """The requested space-separated part does not exist."""


class ShellNotFound(FetchError):
    pass


class CommandFailed(FetchError):
    pass


class StatvfsFailed(FetchError):
    pass
