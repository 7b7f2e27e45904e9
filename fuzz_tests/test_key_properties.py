import hypothesis.strategies as st
from hypothesis import given

from dimkey import DimensionKey, FieldUnspecifiedError, KeyMode, ModeMismatchError

from .strategies import bounds, keys, ranges


@given(st.integers())
def test_position_is_stored_verbatim(index):
    key = DimensionKey.position(index)

    assert key.mode == KeyMode.position
    assert key.get_position() == index


@given(bounds, bounds, bounds)
def test_range_is_stored_verbatim(start, stop, step):
    key = DimensionKey.range(start, stop, step)

    assert key.get_range() == (start, stop, step)
    for getter, value in [(key.get_start, start), (key.get_stop, stop), (key.get_step, step)]:
        try:
            assert getter() == value
        except FieldUnspecifiedError:
            assert value is None


@given(ranges, st.integers(min_value=0))
def test_resolve_fills_only_unspecified(key, size):
    start, stop, step = key.get_range()

    resolved = key.resolve_against_size(size)

    assert resolved.get_start() == (0 if start is None else start)
    assert resolved.get_stop() == (size if stop is None else stop)
    assert resolved.get_step() == (1 if step is None else step)
    assert resolved.resolve_against_size(size) == resolved


@given(keys)
def test_accessors_check_mode(key):
    accessors = {
        KeyMode.position: [key.get_position],
        KeyMode.range: [key.get_start, key.get_stop, key.get_step, key.get_range],
        KeyMode.gather: [key.get_gather_tensor],
    }

    for mode, getters in accessors.items():
        if mode == key.mode:
            continue
        for getter in getters:
            try:
                getter()
            except ModeMismatchError as e:
                assert e.actual == key.mode
            else:
                raise AssertionError(f"{getter.__name__} succeeded on {key!r}")


@given(keys)
def test_str_is_stable(key):
    assert str(key) == str(key)
    assert str(key).startswith(str(key.mode) + "(")
