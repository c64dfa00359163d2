"""Exceptions raised by the conversion core.

WHY: Callers (the CLI, library users) need to tell a structurally broken
document apart from an unreadable timecode, and both apart from I/O
failures, to print distinct messages.

RULES:
- ConversionError subclasses ValueError so generic ``except ValueError``
  handlers keep working
- A raised error means no output at all; the core never returns a
  partially rendered document
"""


class ConversionError(ValueError):
    """Base class for all conversion failures."""


class MalformedInputError(ConversionError):
    """The document is not well-formed XML or lacks body/div structure."""


class InvalidTimecodeError(ConversionError):
    """A timecode token matches none of the supported encodings."""

    def __init__(self, token: str) -> None:
        super().__init__("Unsupported timecode: {!r}".format(token))
        self.token = token
