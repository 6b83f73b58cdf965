"""Sentseg error types."""


class SentsegError(Exception):
    """Base error for all sentseg failures."""


class SentsegVersionError(SentsegError):
    """Model manifest version mismatch."""


class SentsegChecksumError(SentsegError):
    """Model file checksum verification failed."""


class SplitterNotOperationalError(SentsegError):
    """A splitter was used although its self-check fails."""


class ResolutionError(SentsegError):
    """No usable splitter, not even the fallback, could be built."""
