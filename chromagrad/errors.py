"""Exceptions raised by chromagrad."""


class ChromagradError(Exception):
    """Base class for every error raised by this package."""


class InvalidSpecification(ChromagradError, ValueError):
    """A gradient was described with inputs that can never be painted.

    Raised eagerly when a gradient is constructed (bad density, mismatched
    stops, too few colors) and by the resampler when its preconditions are
    not met.
    """


class UnsupportedColorSpace(ChromagradError, ValueError):
    """A color space name or conversion pair is not known."""

    def __init__(self, space: object, detail: str = "") -> None:
        self.space = space
        message = f"Unsupported color space: {space!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
