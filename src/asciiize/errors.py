class InvalidArgument(ValueError):
    """A transform parameter or pixel buffer is malformed."""


class SurfaceUnavailable(RuntimeError):
    """The surface cannot supply pixel data (zero-sized or detached)."""
