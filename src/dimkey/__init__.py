from .key import (
    DimensionKey,
    FieldUnspecifiedError,
    InvalidModeError,
    KeyMode,
    ModeMismatchError,
    parse_key,
    parse_keys,
)
