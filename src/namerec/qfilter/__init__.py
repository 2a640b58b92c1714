"""
qfilter - typed filter conditions from delimited query strings.

Declare keys, their operators and value types on a QueryParser, then
parse strings such as ``name=alice&age>=30`` into the returned sinks.
"""

from namerec.qfilter.conditions import BaseCondition
from namerec.qfilter.conditions import BoolCondition
from namerec.qfilter.conditions import FloatCondition
from namerec.qfilter.conditions import IntCondition
from namerec.qfilter.conditions import IntListCondition
from namerec.qfilter.conditions import TextCondition
from namerec.qfilter.conditions import TextListCondition
from namerec.qfilter.conditions import TimestampCondition
from namerec.qfilter.conditions import ValueDecoder
from namerec.qfilter.constants import ConditionKind
from namerec.qfilter.constants import Op
from namerec.qfilter.exceptions import AmbiguousOperatorSetError
from namerec.qfilter.exceptions import DecodeError
from namerec.qfilter.exceptions import MalformedBoolError
from namerec.qfilter.exceptions import MalformedFloatError
from namerec.qfilter.exceptions import MalformedIntegerError
from namerec.qfilter.exceptions import MalformedTimestampError
from namerec.qfilter.exceptions import QueryFilterError
from namerec.qfilter.parser import QueryParser
from namerec.qfilter.registry import ConditionRegistry
from namerec.qfilter.registry import RegisteredCondition
from namerec.qfilter.splitter import split_clauses
from namerec.qfilter.types import Match
from namerec.qfilter.types import OperatorSet
from namerec.qfilter.types import ParseResult

__version__ = '1.0'

__all__ = [
    # Parser
    'QueryParser',
    'split_clauses',
    'ConditionRegistry',
    'RegisteredCondition',
    # Types
    'Op',
    'OperatorSet',
    'ConditionKind',
    'Match',
    'ParseResult',
    # Conditions
    'ValueDecoder',
    'BaseCondition',
    'TextCondition',
    'TextListCondition',
    'IntCondition',
    'IntListCondition',
    'FloatCondition',
    'BoolCondition',
    'TimestampCondition',
    # Exceptions
    'QueryFilterError',
    'DecodeError',
    'MalformedIntegerError',
    'MalformedFloatError',
    'MalformedBoolError',
    'MalformedTimestampError',
    'AmbiguousOperatorSetError',
]
