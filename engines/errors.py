"""Error kinds raised by the codec."""


class ThumbHashError(ValueError):
    """Base class for codec errors."""


class InvalidArgumentError(ThumbHashError):
    """Caller-supplied size or buffer violates a precondition."""


class MalformedInputError(ThumbHashError):
    """Hash bytes are too short or inconsistent with their own header."""
