"""Error kinds raised while loading and querying fortune categories.

Every error derives from FortuneError and from the builtin it most
resembles, so ``except KeyError`` style handling keeps working.
"""


class FortuneError(Exception):
    """Base class for all fortune_store failures."""


class ResourceNotFound(FortuneError, FileNotFoundError):
    """A directory or file could not be listed or read during bootstrap."""


class MalformedIndex(FortuneError, ValueError):
    """Index bytes cannot hold the header or the declared offset table."""


class UnknownCategory(FortuneError, KeyError):
    """No category with the requested name is loaded."""

    def __str__(self):
        # KeyError repr()s its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class InvalidArgument(FortuneError, ValueError):
    """Record number is not positive."""


class OutOfRange(FortuneError, IndexError):
    """Record number beyond the category, or byte range beyond the data."""


class DecodeError(FortuneError, ValueError):
    """Extracted record bytes are not valid UTF‑8."""


class InternalInconsistency(FortuneError, RuntimeError):
    """Offset table produced a negative payload length."""
