"""Pytest configuration and fixtures."""

from zoneinfo import ZoneInfo

import pytest

from namerec.qfilter import Op
from namerec.qfilter import OperatorSet
from namerec.qfilter import QueryParser


@pytest.fixture
def parser() -> QueryParser:
    """Create parser splitting on '&'."""
    return QueryParser('&')


@pytest.fixture
def equal() -> OperatorSet:
    """Operator set accepting only '='."""
    return OperatorSet(Op.EQUAL)


@pytest.fixture
def comparison() -> OperatorSet:
    """All comparison operators, longest first."""
    return OperatorSet.longest_first(*Op)


@pytest.fixture
def tokyo() -> ZoneInfo:
    """Asia/Tokyo time zone."""
    return ZoneInfo('Asia/Tokyo')


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:  # noqa: ANN001
    """Keep QFILTER_* variables and stray .env files out of tests."""
    for name in ('QFILTER_DELIMITER', 'QFILTER_DEFAULT_TIMEZONE', 'QFILTER_STRICT_OPERATORS', 'QFILTER_LOG_LEVEL', 'QFILTER_LOG_STREAM'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
