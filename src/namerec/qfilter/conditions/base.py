"""Base class for the built-in condition sinks."""

from abc import ABC
from abc import abstractmethod
from typing import Any
from typing import ClassVar

from namerec.qfilter.constants import ConditionKind
from namerec.qfilter.types import Match


class BaseCondition(ABC):
    """
    Caller-owned sink populated by the parser.

    Subclasses are dataclasses declaring ``key``, ``op`` and ``value``.
    They compare by identity so they can serve as handles into a ParseResult.
    """

    kind: ClassVar[ConditionKind]

    key: str
    op: str
    value: Any

    def set(self, key: str, op: str, text: str) -> None:
        """
        Decode text and overwrite key, operator and value.

        Args:
            key: Matched condition key
            op: Matched operator token
            text: Value text

        Raises:
            DecodeError: If text cannot be decoded; the sink is left unchanged
        """
        value = self.decode(text, key=key, op=op)
        self.key = key
        self.op = op
        self.value = value

    @abstractmethod
    def decode(self, text: str, key: str | None = None, op: str | None = None) -> Any:
        """
        Decode value text without touching the sink.

        Args:
            text: Value text
            key: Condition key, used for error context
            op: Operator token, used for error context

        Returns:
            Typed value
        """

    def as_match(self) -> Match:
        """
        Snapshot the current state.

        Returns:
            Frozen Match with this sink's key, operator and value
        """
        value = list(self.value) if isinstance(self.value, list) else self.value
        return Match(key=self.key, op=self.op, value=value)
