"""Exceptions raised by the encoder core."""


class EncodeError(Exception):
    """Base class for errors that abort the encoding of a single record."""


class MissingFieldError(EncodeError):
    """A mandatory field is absent from the input record.

    Attributes:
        field_name: Name of the missing field ("Metric" or "Value").
    """

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Unable to find Field[{field_name}] in message")
        self.field_name = field_name


class ConfigError(ValueError):
    """Encoder configuration is unusable."""
