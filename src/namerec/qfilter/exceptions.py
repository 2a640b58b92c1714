"""Query filter exception hierarchy."""


class QueryFilterError(ValueError):
    """Base exception for query filter errors."""


class DecodeError(QueryFilterError):
    """Raised when a matched clause value cannot be decoded into its declared type."""

    kind = 'value'

    def __init__(
        self,
        text: str,
        key: str | None = None,
        operator: str | None = None,
        reason: str | None = None,
    ) -> None:
        """
        Initialize DecodeError.

        Args:
            text: Offending value text
            key: Condition key the value was decoded for
            operator: Operator token matched before the value
            reason: Optional detail appended to the message
        """
        self.text = text
        self.key = key
        self.operator = operator
        self.reason = reason
        self.clause: str | None = None

        message = f'Malformed {self.kind}: {text!r}'
        if reason:
            message += f' ({reason})'
        if key is not None:
            message += f' (at {key}{operator})' if operator else f' (at {key})'
        super().__init__(message)


class MalformedIntegerError(DecodeError):
    """Raised when an integer literal is invalid or out of range."""

    kind = 'integer'


class MalformedFloatError(DecodeError):
    """Raised when a floating point literal is invalid or out of range."""

    kind = 'float'


class MalformedBoolError(DecodeError):
    """Raised when a boolean literal is not recognized."""

    kind = 'boolean'


class MalformedTimestampError(DecodeError):
    """Raised when a timestamp does not follow the YYYY-MM-DD HH:MM:SS layout."""

    kind = 'timestamp'


class AmbiguousOperatorSetError(QueryFilterError):
    """Raised in strict mode when an operator shadows a later operator it is a prefix of."""

    def __init__(self, key: str, pairs: list[tuple[str, str]]) -> None:
        """
        Initialize AmbiguousOperatorSetError.

        Args:
            key: Condition key being registered
            pairs: (shorter, longer) operator pairs where the shorter one comes first
        """
        self.key = key
        self.pairs = pairs
        shadowed = ', '.join(f"'{short}' before '{long}'" for short, long in pairs)
        super().__init__(f'Ambiguous operator set for {key!r}: {shadowed}')
