"""Tests for the built-in condition sinks (value decoders)."""

import math
from datetime import datetime
from datetime import timezone

import pytest

from namerec.qfilter import BoolCondition
from namerec.qfilter import DecodeError
from namerec.qfilter import FloatCondition
from namerec.qfilter import IntCondition
from namerec.qfilter import IntListCondition
from namerec.qfilter import MalformedBoolError
from namerec.qfilter import MalformedFloatError
from namerec.qfilter import MalformedIntegerError
from namerec.qfilter import MalformedTimestampError
from namerec.qfilter import Match
from namerec.qfilter import TextCondition
from namerec.qfilter import TextListCondition
from namerec.qfilter import TimestampCondition
from namerec.qfilter import ValueDecoder


class TestZeroState:
    """Sinks that were never matched."""

    def test_defaults(self) -> None:
        """Test every sink starts with empty key, operator and zero value."""
        assert TextCondition().as_match() == Match('', '', '')
        assert TextListCondition().as_match() == Match('', '', [])
        assert IntCondition().as_match() == Match('', '', 0)
        assert IntListCondition().as_match() == Match('', '', [])
        assert FloatCondition().as_match() == Match('', '', 0.0)
        assert BoolCondition().as_match() == Match('', '', False)
        assert TimestampCondition().as_match() == Match('', '', None)

    def test_timestamp_defaults_to_utc(self) -> None:
        """Test timestamp sink interprets values in UTC by default."""
        assert TimestampCondition().timezone is timezone.utc

    def test_sinks_satisfy_protocol(self) -> None:
        """Test built-in sinks are ValueDecoders."""
        assert isinstance(IntCondition(), ValueDecoder)

    def test_sinks_compare_by_identity(self) -> None:
        """Test two fresh sinks are distinct handles."""
        assert TextCondition() != TextCondition()
        assert len({TextCondition(), TextCondition()}) == 2


class TestText:
    """Text and text list sinks."""

    def test_text_verbatim(self) -> None:
        """Test text keeps quotes and escapes as given."""
        sink = TextCondition()
        sink.set('name', '=', '"a\\&b" ')
        assert sink.as_match() == Match('name', '=', '"a\\&b" ')

    def test_text_list_trims_elements(self) -> None:
        """Test whitespace around commas is trimmed and order kept."""
        sink = TextListCondition()
        sink.set('tags', '=', 'a, b ,c')
        assert sink.value == ['a', 'b', 'c']

    def test_text_list_empty(self) -> None:
        """Test empty text decodes to a single empty element."""
        sink = TextListCondition()
        sink.set('tags', '=', '')
        assert sink.value == ['']

    def test_text_list_keeps_empty_elements(self) -> None:
        """Test empty elements between commas are kept."""
        sink = TextListCondition()
        sink.set('tags', '!=', 'a,,b')
        assert sink.value == ['a', '', 'b']
        assert sink.op == '!='

    def test_snapshot_does_not_alias_list(self) -> None:
        """Test as_match copies list values."""
        sink = TextListCondition()
        sink.set('tags', '=', 'a,b')
        match = sink.as_match()
        sink.value.append('c')
        assert match.value == ['a', 'b']


class TestIntegers:
    """Integer and integer list sinks."""

    @pytest.mark.parametrize(
        ('text', 'expected'),
        [
            ('39', 39),
            (' 39', 39),
            ('+39', 39),
            ('-39', -39),
            ('0', 0),
            ('007', 7),
            ('9223372036854775807', 2**63 - 1),
            ('-9223372036854775808', -(2**63)),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        """Test valid integer literals."""
        sink = IntCondition()
        sink.set('n', '=', text)
        assert sink.value == expected

    @pytest.mark.parametrize('text', ['39x', '', '1_000', '1 000', '3.0', '0x10', '--1', '٣'])
    def test_malformed(self, text: str) -> None:
        """Test invalid integer literals."""
        with pytest.raises(MalformedIntegerError, match='Malformed integer'):
            IntCondition().set('n', '=', text)

    @pytest.mark.parametrize('text', ['9223372036854775808', '-9223372036854775809'])
    def test_out_of_range(self, text: str) -> None:
        """Test values outside signed 64-bit range."""
        with pytest.raises(MalformedIntegerError, match='out of range'):
            IntCondition().set('n', '=', text)

    @pytest.mark.parametrize('text', ['9' * 5000, '-' + '1' * 20, '+' + '9' * 4301])
    def test_huge_literal_out_of_range(self, text: str) -> None:
        """Test literals longer than any int64 are rejected as out of range."""
        with pytest.raises(MalformedIntegerError, match='out of range') as exc_info:
            IntCondition().set('n', '=', text)
        assert exc_info.value.key == 'n'

    def test_leading_zeros_do_not_count_towards_range(self) -> None:
        """Test long zero padding still decodes."""
        sink = IntCondition()
        sink.set('n', '=', '-' + '0' * 5000 + '42')
        assert sink.value == -42

    def test_huge_list_element_out_of_range(self) -> None:
        """Test an over-long list element fails the list with a decode error."""
        with pytest.raises(MalformedIntegerError, match='out of range'):
            IntListCondition().set('numbers', '=', '1,' + '9' * 5000)

    def test_failure_leaves_sink_unchanged(self) -> None:
        """Test a failed decode does not overwrite earlier state."""
        sink = IntCondition()
        sink.set('n', '=', '5')
        with pytest.raises(DecodeError):
            sink.set('n', '<', 'five')
        assert sink.as_match() == Match('n', '=', 5)

    def test_error_context(self) -> None:
        """Test the error carries text, key and operator."""
        with pytest.raises(MalformedIntegerError) as exc_info:
            IntCondition().set('n', '>=', '39x')
        assert exc_info.value.text == '39x'
        assert exc_info.value.key == 'n'
        assert exc_info.value.operator == '>='
        assert isinstance(exc_info.value, ValueError)

    def test_list(self) -> None:
        """Test comma separated integers with uneven whitespace."""
        sink = IntListCondition()
        sink.set('numbers', '=', '11, 22,33')
        assert sink.value == [11, 22, 33]

    @pytest.mark.parametrize('text', ['1,,2', '1,x', '', '1,'])
    def test_list_malformed(self, text: str) -> None:
        """Test any invalid element fails the whole list."""
        with pytest.raises(MalformedIntegerError):
            IntListCondition().set('numbers', '=', text)


class TestFloat:
    """Float sink."""

    @pytest.mark.parametrize(
        ('text', 'expected'),
        [
            ('1.5', 1.5),
            ('-2.5e3', -2500.0),
            ('.5', 0.5),
            ('1.', 1.0),
            ('42', 42.0),
            ('+1E-2', 0.01),
            ('inf', math.inf),
            ('-Infinity', -math.inf),
        ],
    )
    def test_valid(self, text: str, expected: float) -> None:
        """Test valid float literals."""
        sink = FloatCondition()
        sink.set('x', '=', text)
        assert sink.value == expected

    def test_nan(self) -> None:
        """Test NaN literal."""
        sink = FloatCondition()
        sink.set('x', '=', 'NaN')
        assert math.isnan(sink.value)

    @pytest.mark.parametrize('text', ['1.5.2', '', '.', 'abc', '1_0', '1e', '0x1p3'])
    def test_malformed(self, text: str) -> None:
        """Test invalid float literals."""
        with pytest.raises(MalformedFloatError, match='Malformed float'):
            FloatCondition().set('x', '=', text)

    def test_overflow(self) -> None:
        """Test finite literals that overflow are rejected."""
        with pytest.raises(MalformedFloatError, match='out of range'):
            FloatCondition().set('x', '=', '1e400')


class TestBool:
    """Boolean sink."""

    @pytest.mark.parametrize('text', ['1', 't', 'T', 'TRUE', 'true', 'True', ' true '])
    def test_true(self, text: str) -> None:
        """Test true literals."""
        sink = BoolCondition()
        sink.set('b', '=', text)
        assert sink.value is True

    @pytest.mark.parametrize('text', ['0', 'f', 'F', 'FALSE', 'false', 'False'])
    def test_false(self, text: str) -> None:
        """Test false literals."""
        sink = BoolCondition()
        sink.set('b', '=', text)
        assert sink.value is False
        assert sink.key == 'b'

    @pytest.mark.parametrize('text', ['yes', 'tRuE', '2', '', 'on'])
    def test_malformed(self, text: str) -> None:
        """Test unrecognised literals."""
        with pytest.raises(MalformedBoolError, match='Malformed boolean'):
            BoolCondition().set('b', '=', text)


class TestTimestamp:
    """Timestamp sink."""

    def test_default_utc(self) -> None:
        """Test layout is interpreted in UTC without a zone."""
        sink = TimestampCondition()
        sink.set('ts', '=', '2020-12-26 14:20:33')
        assert sink.value == datetime(2020, 12, 26, 14, 20, 33, tzinfo=timezone.utc)

    def test_zone(self, tokyo) -> None:  # noqa: ANN001
        """Test wall clock time is interpreted in the given zone."""
        sink = TimestampCondition(timezone=tokyo)
        sink.set('ts', '>=', ' 2020-12-26 14:20:33')
        assert sink.value == datetime(2020, 12, 26, 14, 20, 33, tzinfo=tokyo)
        assert sink.value == datetime(2020, 12, 26, 5, 20, 33, tzinfo=timezone.utc)
        assert sink.op == '>='

    @pytest.mark.parametrize(
        'text',
        [
            '2020-12-26T14:20:33',
            '2020-12-26',
            '2020-1-2 03:04:05',
            '2020-12-26 14:20',
            '2020-12-26 14:20:33.5',
            '2020-12-26 14:20:33Z',
            '2020-02-30 00:00:00',
            '2020-12-26 24:00:00',
            '',
        ],
    )
    def test_malformed(self, text: str) -> None:
        """Test any deviation from the layout fails."""
        with pytest.raises(MalformedTimestampError, match='Malformed timestamp'):
            TimestampCondition().set('ts', '=', text)

    def test_independent_sinks_decode_identically(self, tokyo) -> None:  # noqa: ANN001
        """Test decoding the same text twice yields identical values."""
        first = TimestampCondition(timezone=tokyo)
        second = TimestampCondition(timezone=tokyo)
        first.set('ts', '=', '2021-01-01 00:00:00')
        second.set('ts', '=', '2021-01-01 00:00:00')
        assert first.as_match() == second.as_match()
