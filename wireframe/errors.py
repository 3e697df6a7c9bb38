class WireframeError(Exception):
    """Base class for fatal wireframe errors."""


class UnreadableInput(WireframeError):
    """The edge list source could not be opened or read."""


class UnwritableOutput(WireframeError):
    """An output sink could not be opened or written."""
