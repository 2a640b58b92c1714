"""Condition registry for the query filter parser."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from namerec.qfilter.conditions.protocol import ValueDecoder
from namerec.qfilter.exceptions import AmbiguousOperatorSetError
from namerec.qfilter.types import OperatorSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegisteredCondition:
    """A declared key with its operator set and the decoder that receives matches."""

    key: str
    operators: OperatorSet
    decoder: ValueDecoder


class ConditionRegistry:
    """
    Ordered list of registered conditions.

    Registration order is matching order: every condition is tried against
    every clause, so a key that is a prefix of another key (``id`` and
    ``identity``) sees the longer key's clauses too.
    """

    def __init__(self, strict_operators: bool = False) -> None:
        """
        Initialize registry.

        Args:
            strict_operators: Reject operator sets where a token precedes a longer token it starts with
        """
        self.strict_operators = strict_operators
        self._conditions: list[RegisteredCondition] = []

    def register(self, key: str, operators: OperatorSet, decoder: ValueDecoder) -> RegisteredCondition:
        """
        Append a condition.

        Args:
            key: Key the clause must start with
            operators: Operators accepted after the key, in matching order
            decoder: Sink that decodes the value text

        Returns:
            The registered condition

        Raises:
            AmbiguousOperatorSetError: In strict mode, if an operator shadows a later one
        """
        if not isinstance(operators, OperatorSet):
            operators = OperatorSet(*operators)

        pairs = operators.shadowed_pairs()
        if pairs:
            if self.strict_operators:
                raise AmbiguousOperatorSetError(key, pairs)
            logger.debug(f'Operator set for {key!r} has shadowed operators: {pairs}')

        condition = RegisteredCondition(key=key, operators=operators, decoder=decoder)
        self._conditions.append(condition)
        logger.debug(f'Registered condition {key!r} with operators {list(operators)}')
        return condition

    def keys(self) -> list[str]:
        """
        List registered keys in registration order.

        Returns:
            Keys, duplicates included
        """
        return [condition.key for condition in self._conditions]

    def __iter__(self) -> Iterator[RegisteredCondition]:
        return iter(self._conditions)

    def __len__(self) -> int:
        return len(self._conditions)
