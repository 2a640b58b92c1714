"""Timestamp condition."""

import re
from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from datetime import tzinfo
from typing import ClassVar

from namerec.qfilter.conditions.base import BaseCondition
from namerec.qfilter.constants import DEFAULT_TIMEZONE
from namerec.qfilter.constants import TIMESTAMP_LAYOUT
from namerec.qfilter.constants import ConditionKind
from namerec.qfilter.exceptions import MalformedTimestampError

# strptime accepts single digit fields, the layout does not
_TIMESTAMP_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}')


@dataclass(eq=False)
class TimestampCondition(BaseCondition):
    """
    Decodes ``YYYY-MM-DD HH:MM:SS`` as an aware datetime.

    The wall clock time is interpreted in ``timezone``, which defaults to UTC.
    """

    kind: ClassVar[ConditionKind] = ConditionKind.TIMESTAMP

    key: str = ''
    op: str = ''
    value: datetime | None = None
    timezone: tzinfo = field(default=DEFAULT_TIMEZONE)

    def decode(self, text: str, key: str | None = None, op: str | None = None) -> datetime:
        literal = text.strip()
        if not _TIMESTAMP_PATTERN.fullmatch(literal):
            raise MalformedTimestampError(text, key, op, reason='expected YYYY-MM-DD HH:MM:SS')
        try:
            naive = datetime.strptime(literal, TIMESTAMP_LAYOUT)
        except ValueError as e:
            raise MalformedTimestampError(text, key, op, reason=str(e)) from e
        return naive.replace(tzinfo=self.timezone)
