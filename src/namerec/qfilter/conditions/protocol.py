"""Protocol definition for value decoders."""

from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class ValueDecoder(Protocol):
    """
    Protocol for value decoders.

    Allows structural subtyping - any object implementing ``set`` can be
    registered as a condition sink. Implementations store the key, the
    matched operator and the decoded value, or raise a DecodeError and
    leave their previous state untouched.
    """

    def set(self, key: str, op: str, text: str) -> None:
        """
        Decode clause value text into the sink.

        Args:
            key: Matched condition key
            op: Matched operator token
            text: Clause remainder after the operator, leading whitespace removed

        Raises:
            DecodeError: If text is not a valid literal for this decoder
        """
        ...
