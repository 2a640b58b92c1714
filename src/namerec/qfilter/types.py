"""Type definitions for the query filter parser."""

from collections.abc import Iterator
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from namerec.qfilter.constants import Op


class OperatorSet:
    """
    Ordered, immutable sequence of operator tokens scoped to one condition.

    Order is matching precedence: every token is tried in turn against the
    clause remainder, so longer tokens must come before the shorter tokens
    they start with (``<=`` before ``<``).
    """

    __slots__ = ('_ops',)

    def __init__(self, *ops: str | Op) -> None:
        """
        Initialize operator set.

        Args:
            *ops: Operator tokens in matching order
        """
        self._ops: tuple[str, ...] = tuple(op.value if isinstance(op, Op) else str(op) for op in ops)

    @classmethod
    def longest_first(cls, *ops: str | Op) -> 'OperatorSet':
        """
        Create an operator set sorted by decreasing token length.

        Tokens of equal length keep their given order.

        Args:
            *ops: Operator tokens in any order

        Returns:
            OperatorSet with no token shadowing a longer one
        """
        tokens = [op.value if isinstance(op, Op) else str(op) for op in ops]
        return cls(*sorted(tokens, key=len, reverse=True))

    def shadowed_pairs(self) -> list[tuple[str, str]]:
        """
        Find tokens that would shadow a later, longer token.

        Returns:
            List of (earlier, later) pairs where the later token starts with the earlier one
        """
        pairs = []
        for i, earlier in enumerate(self._ops):
            for later in self._ops[i + 1:]:
                if later.startswith(earlier):
                    pairs.append((earlier, later))
        return pairs

    def __iter__(self) -> Iterator[str]:
        return iter(self._ops)

    def __len__(self) -> int:
        return len(self._ops)

    def __contains__(self, op: object) -> bool:
        token = op.value if isinstance(op, Op) else op
        return token in self._ops

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OperatorSet):
            return NotImplemented
        return self._ops == other._ops

    def __hash__(self) -> int:
        return hash(self._ops)

    def __repr__(self) -> str:
        return f'OperatorSet({", ".join(repr(op) for op in self._ops)})'


@dataclass(frozen=True, slots=True)
class Match:
    """Snapshot of one successful decode: matched key, operator and typed value."""

    key: str
    op: str
    value: Any

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary with 'key', 'op' and 'value' keys
        """
        return {
            'key': self.key,
            'op': self.op,
            'value': self.value,
        }


class ParseResult(Mapping[Any, Match]):
    """
    Result of one parse call, keyed by the condition handle (sink identity).

    Only conditions that matched at least one clause are present. When a
    condition matches several clauses the last successful decode wins.
    """

    def __init__(self) -> None:
        self._matches: dict[int, tuple[Any, Match]] = {}

    def record(self, handle: Any, match: Match) -> None:
        """
        Store the match for a handle, replacing any earlier one.

        Args:
            handle: Condition sink that produced the match
            match: Decoded snapshot
        """
        self._matches[id(handle)] = (handle, match)

    def __getitem__(self, handle: Any) -> Match:
        try:
            return self._matches[id(handle)][1]
        except KeyError:
            raise KeyError(handle) from None

    def __contains__(self, handle: object) -> bool:
        return id(handle) in self._matches

    def __iter__(self) -> Iterator[Any]:
        return (handle for handle, _ in self._matches.values())

    def __len__(self) -> int:
        return len(self._matches)

    def by_key(self) -> dict[str, Match]:
        """
        Index matches by condition key.

        Returns:
            Mapping of matched key to its Match (later registrations win on duplicate keys)
        """
        return {match.key: match for _, match in self._matches.values()}

    def __repr__(self) -> str:
        return f'ParseResult({[match for _, match in self._matches.values()]!r})'
