"""Text and text list conditions."""

from dataclasses import dataclass
from dataclasses import field
from typing import ClassVar

from namerec.qfilter.conditions.base import BaseCondition
from namerec.qfilter.constants import LIST_SEPARATOR
from namerec.qfilter.constants import ConditionKind


@dataclass(eq=False)
class TextCondition(BaseCondition):
    """Stores the value text verbatim."""

    kind: ClassVar[ConditionKind] = ConditionKind.TEXT

    key: str = ''
    op: str = ''
    value: str = ''

    def decode(self, text: str, key: str | None = None, op: str | None = None) -> str:
        return text


@dataclass(eq=False)
class TextListCondition(BaseCondition):
    """Splits the value on commas and trims each element; empty text gives ``['']``."""

    kind: ClassVar[ConditionKind] = ConditionKind.TEXT_LIST

    key: str = ''
    op: str = ''
    value: list[str] = field(default_factory=list)

    def decode(self, text: str, key: str | None = None, op: str | None = None) -> list[str]:
        return [item.strip() for item in text.split(LIST_SEPARATOR)]
