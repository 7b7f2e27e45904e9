__all__ = ["parse_key", "parse_keys"]

from parsita import ParseError, ParserContext, opt, reg, repsep
from parsita.util import splat
from returns import result

from ._key import DimensionKey


def first_or_none(values):
    return values[0] if values else None


def make_range(start, stop, step):
    return DimensionKey.range(start, stop, first_or_none(step))


class KeyParsers(ParserContext, whitespace=r"[ ]*"):
    integer = reg(r"[+-]?[0-9]+") > int
    bound = opt(integer) > first_or_none

    range_key = bound << ":" & bound & opt(":" >> bound) > splat(make_range)
    position_key = integer > DimensionKey.position

    key = range_key | position_key
    keys = repsep(key, ",") > tuple


def parse_key(string: str, /) -> result.Result[DimensionKey, ParseError]:
    return KeyParsers.key.parse(string)


def parse_keys(string: str, /) -> result.Result[tuple[DimensionKey, ...], ParseError]:
    return KeyParsers.keys.parse(string)
