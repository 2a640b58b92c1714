"""Constants for the query filter parser to avoid magic strings."""

from datetime import timezone
from enum import Enum


class Op(str, Enum):
    """Comparison operator tokens shipped with the parser."""

    EQUAL = '='
    NOT_EQUAL = '!='
    LESS_THAN = '<'
    LESS_THAN_OR_EQUAL = '<='
    GREATER_THAN = '>'
    GREATER_THAN_OR_EQUAL = '>='

    def __str__(self) -> str:
        return self.value


class ConditionKind(str, Enum):
    """Value kinds a registered condition can decode to."""

    TEXT = 'text'
    TEXT_LIST = 'text_list'
    INT = 'int'
    INT_LIST = 'int_list'
    FLOAT = 'float'
    BOOL = 'bool'
    TIMESTAMP = 'timestamp'


# Operator groups for easier checking
COMPARISON_OPERATORS = frozenset(Op)

# Longest tokens first, so no operator shadows a longer one it starts with
DEFAULT_OPERATORS: tuple[str, ...] = (
    Op.GREATER_THAN_OR_EQUAL.value,
    Op.LESS_THAN_OR_EQUAL.value,
    Op.NOT_EQUAL.value,
    Op.EQUAL.value,
    Op.GREATER_THAN.value,
    Op.LESS_THAN.value,
)

DEFAULT_DELIMITER = '&'
QUOTE = '"'
ESCAPE = '\\'
LIST_SEPARATOR = ','

TIMESTAMP_LAYOUT = '%Y-%m-%d %H:%M:%S'
DEFAULT_TIMEZONE = timezone.utc

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TRUE_LITERALS = frozenset({'1', 't', 'T', 'TRUE', 'true', 'True'})
FALSE_LITERALS = frozenset({'0', 'f', 'F', 'FALSE', 'false', 'False'})
