class InvalidInputError(ValueError):
    """A null or malformed argument: missing word, non-square board, bad min length, unreadable dictionary."""


class NotReadyError(RuntimeError):
    """A lexicon query was issued before any dictionary was loaded."""
