"""Boolean condition."""

from dataclasses import dataclass
from typing import ClassVar

from namerec.qfilter.conditions.base import BaseCondition
from namerec.qfilter.constants import FALSE_LITERALS
from namerec.qfilter.constants import TRUE_LITERALS
from namerec.qfilter.constants import ConditionKind
from namerec.qfilter.exceptions import MalformedBoolError


@dataclass(eq=False)
class BoolCondition(BaseCondition):
    """Accepts 1, t, T, TRUE, true, True and their false counterparts."""

    kind: ClassVar[ConditionKind] = ConditionKind.BOOL

    key: str = ''
    op: str = ''
    value: bool = False

    def decode(self, text: str, key: str | None = None, op: str | None = None) -> bool:
        literal = text.strip()
        if literal in TRUE_LITERALS:
            return True
        if literal in FALSE_LITERALS:
            return False
        raise MalformedBoolError(text, key, op)
