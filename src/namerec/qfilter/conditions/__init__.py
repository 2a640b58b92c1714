"""Condition sinks (value decoders) for the query filter parser."""

from namerec.qfilter.conditions.base import BaseCondition
from namerec.qfilter.conditions.boolean import BoolCondition
from namerec.qfilter.conditions.numeric import FloatCondition
from namerec.qfilter.conditions.numeric import IntCondition
from namerec.qfilter.conditions.numeric import IntListCondition
from namerec.qfilter.conditions.protocol import ValueDecoder
from namerec.qfilter.conditions.text import TextCondition
from namerec.qfilter.conditions.text import TextListCondition
from namerec.qfilter.conditions.timestamp import TimestampCondition
from namerec.qfilter.constants import ConditionKind

CONDITION_CLASSES: dict[ConditionKind, type[BaseCondition]] = {
    ConditionKind.TEXT: TextCondition,
    ConditionKind.TEXT_LIST: TextListCondition,
    ConditionKind.INT: IntCondition,
    ConditionKind.INT_LIST: IntListCondition,
    ConditionKind.FLOAT: FloatCondition,
    ConditionKind.BOOL: BoolCondition,
    ConditionKind.TIMESTAMP: TimestampCondition,
}

__all__ = [
    'CONDITION_CLASSES',
    'BaseCondition',
    'BoolCondition',
    'FloatCondition',
    'IntCondition',
    'IntListCondition',
    'TextCondition',
    'TextListCondition',
    'TimestampCondition',
    'ValueDecoder',
]
