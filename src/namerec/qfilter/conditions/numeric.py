"""Integer, integer list and float conditions."""

import math
import re
from dataclasses import dataclass
from dataclasses import field
from typing import ClassVar

from namerec.qfilter.conditions.base import BaseCondition
from namerec.qfilter.constants import INT64_MAX
from namerec.qfilter.constants import INT64_MIN
from namerec.qfilter.constants import LIST_SEPARATOR
from namerec.qfilter.constants import ConditionKind
from namerec.qfilter.exceptions import MalformedFloatError
from namerec.qfilter.exceptions import MalformedIntegerError

_INT_PATTERN = re.compile(r'[+-]?[0-9]+')
# Digits in the largest int64 magnitude
_INT64_DIGITS = len(str(INT64_MAX))
_FLOAT_PATTERN = re.compile(
    r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
    r'|[+-]?(?:inf|infinity|nan)',
    re.IGNORECASE,
)


def parse_int64(text: str, key: str | None = None, op: str | None = None) -> int:
    """
    Parse a base-10 signed 64-bit integer literal.

    Only an optional sign followed by ASCII digits is accepted; Python's
    extras (underscores, surrounding whitespace, non-ASCII digits) are not.

    Args:
        text: Literal text
        key: Condition key for error context
        op: Operator token for error context

    Returns:
        Parsed integer

    Raises:
        MalformedIntegerError: If text is not a valid literal or is out of range
    """
    if not _INT_PATTERN.fullmatch(text):
        raise MalformedIntegerError(text, key, op)
    sign = text[0] if text[0] in '+-' else ''
    digits = text.lstrip('+-').lstrip('0') or '0'
    if len(digits) > _INT64_DIGITS:
        raise MalformedIntegerError(text, key, op, reason='value out of range')
    value = int(sign + digits)
    if not INT64_MIN <= value <= INT64_MAX:
        raise MalformedIntegerError(text, key, op, reason='value out of range')
    return value


def parse_float(text: str, key: str | None = None, op: str | None = None) -> float:
    """
    Parse a base-10 floating point literal.

    Args:
        text: Literal text, e.g. '1.5', '-2e10', 'inf', 'NaN'
        key: Condition key for error context
        op: Operator token for error context

    Returns:
        Parsed float

    Raises:
        MalformedFloatError: If text is not a valid literal or overflows
    """
    if not _FLOAT_PATTERN.fullmatch(text):
        raise MalformedFloatError(text, key, op)
    value = float(text)
    if math.isinf(value) and 'inf' not in text.lower():
        raise MalformedFloatError(text, key, op, reason='value out of range')
    return value


@dataclass(eq=False)
class IntCondition(BaseCondition):
    """Decodes the whole value as a signed 64-bit integer."""

    kind: ClassVar[ConditionKind] = ConditionKind.INT

    key: str = ''
    op: str = ''
    value: int = 0

    def decode(self, text: str, key: str | None = None, op: str | None = None) -> int:
        return parse_int64(text.strip(), key, op)


@dataclass(eq=False)
class IntListCondition(BaseCondition):
    """Decodes comma separated signed 64-bit integers, trimming each element."""

    kind: ClassVar[ConditionKind] = ConditionKind.INT_LIST

    key: str = ''
    op: str = ''
    value: list[int] = field(default_factory=list)

    def decode(self, text: str, key: str | None = None, op: str | None = None) -> list[int]:
        return [parse_int64(item.strip(), key, op) for item in text.split(LIST_SEPARATOR)]


@dataclass(eq=False)
class FloatCondition(BaseCondition):
    """Decodes the whole value as a float."""

    kind: ClassVar[ConditionKind] = ConditionKind.FLOAT

    key: str = ''
    op: str = ''
    value: float = 0.0

    def decode(self, text: str, key: str | None = None, op: str | None = None) -> float:
        return parse_float(text.strip(), key, op)
