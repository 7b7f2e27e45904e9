from ._exceptions import FieldUnspecifiedError, InvalidModeError, ModeMismatchError
from ._key import DimensionKey, GatherPayload, KeyMode, PositionPayload, RangePayload
from ._parser import parse_key, parse_keys
