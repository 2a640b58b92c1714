"""Query filter parser - extracts typed conditions from a delimited query string."""

import logging
from collections.abc import Iterable
from datetime import tzinfo
from typing import TypeVar

from namerec.qfilter.conditions import CONDITION_CLASSES
from namerec.qfilter.conditions import BaseCondition
from namerec.qfilter.conditions import BoolCondition
from namerec.qfilter.conditions import FloatCondition
from namerec.qfilter.conditions import IntCondition
from namerec.qfilter.conditions import IntListCondition
from namerec.qfilter.conditions import TextCondition
from namerec.qfilter.conditions import TextListCondition
from namerec.qfilter.conditions import TimestampCondition
from namerec.qfilter.conditions import ValueDecoder
from namerec.qfilter.constants import DEFAULT_DELIMITER
from namerec.qfilter.constants import DEFAULT_TIMEZONE
from namerec.qfilter.constants import ConditionKind
from namerec.qfilter.constants import Op
from namerec.qfilter.exceptions import DecodeError
from namerec.qfilter.registry import ConditionRegistry
from namerec.qfilter.registry import RegisteredCondition
from namerec.qfilter.splitter import split_clauses
from namerec.qfilter.types import Match
from namerec.qfilter.types import OperatorSet
from namerec.qfilter.types import ParseResult

logger = logging.getLogger(__name__)

DecoderT = TypeVar('DecoderT', bound=ValueDecoder)
Operators = OperatorSet | Iterable[str | Op]


class QueryParser:
    """
    Parser for delimited filter query strings such as ``name=alice&age>=30``.

    Conditions are declared up front; each declaration returns a sink that
    ``parse`` fills in place. Registration must be finished before parsing,
    after which ``parse`` may be called repeatedly.
    """

    def __init__(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        *,
        default_timezone: tzinfo = DEFAULT_TIMEZONE,
        strict_operators: bool = False,
    ) -> None:
        """
        Initialize query parser.

        Args:
            delimiter: Clause separator
            default_timezone: Time zone for timestamp conditions declared without one
            strict_operators: Reject operator sets where a token shadows a longer later token

        Raises:
            ValueError: If delimiter is empty
        """
        if not delimiter:
            msg = 'delimiter must not be empty'
            raise ValueError(msg)

        self.delimiter = delimiter
        self.default_timezone = default_timezone
        self.registry = ConditionRegistry(strict_operators=strict_operators)

    def condition(self, key: str, operators: Operators, decoder: DecoderT) -> DecoderT:
        """
        Register a condition with a caller-supplied decoder.

        Args:
            key: Key the clause must start with
            operators: Operators accepted after the key, in matching order
            decoder: Object implementing the ValueDecoder protocol

        Returns:
            The decoder, for use as a result handle
        """
        self.registry.register(key, _as_operator_set(operators), decoder)
        return decoder

    def register_condition(
        self,
        key: str,
        operators: Operators,
        kind: ConditionKind | str,
        timezone: tzinfo | None = None,
    ) -> BaseCondition:
        """
        Register a built-in condition by kind.

        Args:
            key: Key the clause must start with
            operators: Operators accepted after the key, in matching order
            kind: Value kind to decode to
            timezone: Time zone for timestamp conditions

        Returns:
            New sink of the class matching kind

        Raises:
            ValueError: If kind is unknown, or timezone is given for a non-timestamp kind
        """
        kind = ConditionKind(kind)
        if kind is ConditionKind.TIMESTAMP:
            return self.timestamp(key, operators, timezone)
        if timezone is not None:
            msg = f'timezone only applies to {ConditionKind.TIMESTAMP.value} conditions, not {kind.value}'
            raise ValueError(msg)
        return self.condition(key, operators, CONDITION_CLASSES[kind]())

    def text(self, key: str, operators: Operators) -> TextCondition:
        """Register a text condition."""
        return self.condition(key, operators, TextCondition())

    def text_list(self, key: str, operators: Operators) -> TextListCondition:
        """Register a comma separated text list condition."""
        return self.condition(key, operators, TextListCondition())

    def int64(self, key: str, operators: Operators) -> IntCondition:
        """Register an integer condition."""
        return self.condition(key, operators, IntCondition())

    def int64_list(self, key: str, operators: Operators) -> IntListCondition:
        """Register a comma separated integer list condition."""
        return self.condition(key, operators, IntListCondition())

    def float64(self, key: str, operators: Operators) -> FloatCondition:
        """Register a floating point condition."""
        return self.condition(key, operators, FloatCondition())

    def boolean(self, key: str, operators: Operators) -> BoolCondition:
        """Register a boolean condition."""
        return self.condition(key, operators, BoolCondition())

    def timestamp(self, key: str, operators: Operators, timezone: tzinfo | None = None) -> TimestampCondition:
        """
        Register a timestamp condition.

        Args:
            key: Key the clause must start with
            operators: Operators accepted after the key, in matching order
            timezone: Zone the wall clock value is interpreted in (parser default when omitted)

        Returns:
            New timestamp sink
        """
        zone = timezone if timezone is not None else self.default_timezone
        return self.condition(key, operators, TimestampCondition(timezone=zone))

    def parse(self, query: str) -> ParseResult:
        """
        Parse a query string, filling every matched sink.

        Each clause is trimmed and tried against every registered condition
        in registration order, and within a condition against every operator
        in order. Matching an operator consumes it from the remainder, so a
        later operator is tested against the shortened text. Clauses that
        match nothing are ignored.

        Args:
            query: Raw query string

        Returns:
            Matches keyed by sink

        Raises:
            DecodeError: On the first value that fails to decode; sinks filled
                by earlier clauses keep their values
        """
        result = ParseResult()
        clauses = split_clauses(query, self.delimiter)
        for clause in clauses:
            self._parse_clause(clause.strip(), result)

        logger.debug(f'Parsed {len(clauses)} clauses, {len(result)} conditions matched')
        return result

    def _parse_clause(self, clause: str, result: ParseResult) -> None:
        """
        Match one trimmed clause against all registered conditions.

        Args:
            clause: Trimmed clause text
            result: Result to record matches into
        """
        for condition in self.registry:
            if not clause.startswith(condition.key):
                continue

            remainder = clause[len(condition.key):].lstrip()
            for op in condition.operators:
                if not remainder.startswith(op):
                    continue

                remainder = remainder[len(op):].lstrip()
                self._decode(condition, op, remainder, clause)
                result.record(condition.decoder, _snapshot(condition, op, remainder))

    def _decode(self, condition: RegisteredCondition, op: str, text: str, clause: str) -> None:
        """
        Hand value text to the condition's decoder.

        Raises:
            DecodeError: Re-raised with the clause attached
        """
        try:
            condition.decoder.set(condition.key, op, text)
        except DecodeError as e:
            e.clause = clause
            logger.debug(f'Failed to decode clause {clause!r} for {condition.key!r}: {e}')
            raise

        logger.debug(f'Matched clause {clause!r} as {condition.key!r} {op!r}')


def _as_operator_set(operators: Operators) -> OperatorSet:
    if isinstance(operators, OperatorSet):
        return operators
    if isinstance(operators, str):
        return OperatorSet(operators)
    return OperatorSet(*operators)


def _snapshot(condition: RegisteredCondition, op: str, text: str) -> Match:
    decoder = condition.decoder
    if isinstance(decoder, BaseCondition):
        return decoder.as_match()
    return Match(key=condition.key, op=op, value=getattr(decoder, 'value', text))
