"""Settings for the qfilter command line."""

from datetime import tzinfo
from typing import Literal
from zoneinfo import ZoneInfo
from zoneinfo import ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from namerec.qfilter.constants import DEFAULT_DELIMITER


class Settings(BaseSettings):
    """Settings loaded from QFILTER_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix='QFILTER_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    delimiter: str = DEFAULT_DELIMITER
    default_timezone: str = 'UTC'
    strict_operators: bool = False
    log_level: str = 'WARNING'
    log_stream: Literal['stderr', 'stdout'] = 'stderr'

    @field_validator('delimiter')
    @classmethod
    def _check_delimiter(cls, value: str) -> str:
        if not value:
            msg = 'delimiter must not be empty'
            raise ValueError(msg)
        return value

    @field_validator('default_timezone')
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        load_timezone(value)
        return value

    def timezone(self) -> tzinfo:
        """
        Resolve the configured default time zone.

        Returns:
            ZoneInfo for default_timezone
        """
        return load_timezone(self.default_timezone)


def load_timezone(name: str) -> tzinfo:
    """
    Load an IANA time zone by name.

    Args:
        name: Zone name, e.g. 'UTC' or 'Asia/Tokyo'

    Returns:
        ZoneInfo instance

    Raises:
        ValueError: If the zone is unknown
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        msg = f'Unknown time zone: {name!r}'
        raise ValueError(msg) from e
