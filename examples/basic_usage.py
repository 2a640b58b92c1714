"""
Basic usage example for qfilter.

This example demonstrates:
1. Declaring typed conditions on a parser
2. Parsing a URL-style query
3. Reading results from sinks and from the returned ParseResult
4. Handling decode errors
"""

from zoneinfo import ZoneInfo

from namerec.qfilter import DecodeError
from namerec.qfilter import Op
from namerec.qfilter import OperatorSet
from namerec.qfilter import QueryParser


def main() -> None:
    """Run the example."""
    parser = QueryParser('&')
    ops = OperatorSet.longest_first(*Op)

    name = parser.text('name', ops)
    tags = parser.text_list('tags', ops)
    age = parser.int64('age', ops)
    score = parser.float64('score', ops)
    active = parser.boolean('active', ops)
    since = parser.timestamp('since', ops, timezone=ZoneInfo('Asia/Tokyo'))

    result = parser.parse('name="Smith & Sons"&tags=a, b&age>=30&score<9.5&active=t&since>=2020-12-26 14:20:33')

    print(f'name   {name.op} {name.value}')
    print(f'tags   {tags.op} {tags.value}')
    print(f'age    {age.op} {age.value}')
    print(f'score  {score.op} {score.value}')
    print(f'active {active.op} {active.value}')
    print(f'since  {since.op} {since.value.isoformat()}')
    print(f'{len(result)} conditions matched')

    # Sinks keep earlier values; the result only holds this call's matches
    result = parser.parse('age=41')
    print(f'name still {name.value!r}, matched now: {[match.key for match in result.values()]}')

    try:
        parser.parse('age=forty')
    except DecodeError as e:
        print(f'Rejected: {e} in clause {e.clause!r}')


if __name__ == '__main__':
    main()
