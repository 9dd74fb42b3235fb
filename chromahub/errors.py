class ColorConversionError(ValueError):
    """Base class for errors raised by chromahub."""


class BufferTooSmall(ColorConversionError):
    """A byte buffer is shorter than the color type it should be read into requires."""

    def __init__(self, required: int, actual: int, type_name: str = "color") -> None:
        self.required = required
        self.actual = actual
        super().__init__(
            f"{type_name} needs at least {required} byte(s), buffer holds {actual}"
        )
