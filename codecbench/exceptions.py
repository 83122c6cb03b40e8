"""codecbench exception hierarchy."""


class BenchError(Exception):
    """Base exception for all harness failures."""

    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(message)

    def __str__(self):
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class SchemaLoadError(BenchError):
    """Schema file missing, unreadable or not a valid Avro schema."""
    pass


class EncodingError(BenchError):
    """Serialization failure (unsupported value, unserializable type)."""
    pass


class SchemaMismatchError(EncodingError):
    """Dataset shape and schema disagree."""
    pass


class DecodeError(EncodingError):
    """Encoded payload could not be turned back into a dataset."""
    pass


class CorruptDataError(BenchError):
    """Input to a decompressor is not a valid compressed stream."""
    pass
