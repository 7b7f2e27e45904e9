from __future__ import annotations

__all__ = ["KeyMode", "PositionPayload", "RangePayload", "GatherPayload", "DimensionKey"]

from dataclasses import dataclass
from enum import Enum
from operator import index as as_index
from typing import Any


class KeyMode(Enum):
    position = "Position"
    range = "Range"
    gather = "Gather"

    def __repr__(self) -> str:
        return f"KeyMode.{self.name}"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PositionPayload:
    index: int


@dataclass(frozen=True, slots=True)
class RangePayload:
    start: int | None
    stop: int | None
    step: int | None


@dataclass(frozen=True, slots=True, eq=False)
class GatherPayload:
    # Shared reference; the tensor is never copied or inspected
    tensor: Any

    def __eq__(self, other):
        return isinstance(other, GatherPayload) and self.tensor is other.tensor

    def __hash__(self):
        return hash(id(self.tensor))


Payload = PositionPayload | RangePayload | GatherPayload


def index_or_none(value: Any) -> int | None:
    # Arrays define __index__ but only 0-d integer arrays succeed
    try:
        return as_index(value)
    except TypeError:
        return None


def render_optional(value: int | None) -> str:
    return "None" if value is None else str(value)


@dataclass(frozen=True, slots=True)
class DimensionKey:
    """How a single dimension of a tensor is indexed.

    A key is exactly one of:

    * a position, e.g. the ``3`` in ``t[3]``,
    * a range, e.g. the ``1:-1:2`` in ``t[1:-1:2]``, where each of start, stop, and step may be
      left unspecified,
    * a gather, e.g. the ``i`` in ``t[i]`` where ``i`` is a tensor of integers.

    Construct a key with the ``position``, ``range``, or ``gather`` static methods rather than by
    passing a payload directly.
    """

    payload: Payload

    @staticmethod
    def position(index: int) -> DimensionKey:
        return DimensionKey(PositionPayload(index))

    @staticmethod
    def range(
        start: int | None = None, stop: int | None = None, step: int | None = None
    ) -> DimensionKey:
        return DimensionKey(RangePayload(start, stop, step))

    @staticmethod
    def gather(tensor: Any) -> DimensionKey:
        return DimensionKey(GatherPayload(tensor))

    @staticmethod
    def from_python(value: Any) -> DimensionKey:
        """Convert a single element of a Python ``__getitem__`` key.

        A ``slice`` becomes a range, an integer-like value becomes a position, and any other object
        is taken to be an index tensor and becomes a gather.
        """
        match value:
            case bool() | float() | str() | bytes() | None:
                raise TypeError(
                    f"Expected an integer, slice, or tensor as a key, but got {value!r}"
                )
            case _ if value is Ellipsis:
                # Ellipsis spans several dimensions, so it is not the key of any one dimension
                raise TypeError("Expected an integer, slice, or tensor as a key, but got Ellipsis")
            case slice(start=start, stop=stop, step=step):
                return DimensionKey.range(
                    *(None if field is None else as_index(field) for field in (start, stop, step))
                )
            case _:
                index = index_or_none(value)
                if index is None:
                    return DimensionKey.gather(value)
                return DimensionKey.position(index)

    @property
    def mode(self) -> KeyMode:
        match self.payload:
            case PositionPayload():
                return KeyMode.position
            case RangePayload():
                return KeyMode.range
            case GatherPayload():
                return KeyMode.gather
            case _:
                from ._exceptions import InvalidModeError

                raise InvalidModeError(self.payload)

    def _expect(self, *modes: KeyMode) -> None:
        from ._exceptions import ModeMismatchError

        actual = self.mode
        if actual not in modes:
            raise ModeMismatchError(modes, actual)

    def _range_field(self, name: str) -> int:
        from ._exceptions import FieldUnspecifiedError

        self._expect(KeyMode.range)
        value = getattr(self.payload, name)
        if value is None:
            raise FieldUnspecifiedError(name)
        return value

    def get_position(self) -> int:
        self._expect(KeyMode.position)
        return self.payload.index

    def get_start(self) -> int:
        return self._range_field("start")

    def get_stop(self) -> int:
        return self._range_field("stop")

    def get_step(self) -> int:
        return self._range_field("step")

    def get_range(self) -> tuple[int | None, int | None, int | None]:
        self._expect(KeyMode.range)
        return self.payload.start, self.payload.stop, self.payload.step

    def get_gather_tensor(self) -> Any:
        self._expect(KeyMode.gather)
        return self.payload.tensor

    def resolve_against_size(self, dim_size: int) -> DimensionKey:
        """Fill in the unspecified fields of a range key.

        An unspecified start becomes 0, an unspecified stop becomes ``dim_size``, and an
        unspecified step becomes 1. Negative values are left as they are and nothing is clamped to
        the dimension; that is up to whatever applies the key to a tensor.

        Examples:
            With a dimension of size 5, ``t[:4]`` resolves ``Range(None, 4, None)`` to
            ``Range(0, 4, 1)`` and ``t[1:]`` resolves ``Range(1, None, None)`` to
            ``Range(1, 5, 1)``.
        """
        start, stop, step = self.get_range()
        return DimensionKey.range(
            0 if start is None else start,
            dim_size if stop is None else stop,
            1 if step is None else step,
        )

    def to_python(self) -> Any:
        match self.payload:
            case PositionPayload(index):
                return index
            case RangePayload(start, stop, step):
                return slice(start, stop, step)
            case GatherPayload(tensor):
                return tensor
            case _:
                from ._exceptions import InvalidModeError

                raise InvalidModeError(self.payload)

    def deparse(self) -> str:
        """Convert the key into Python subscript syntax, e.g. ``3`` or ``1:-1:2``."""
        self._expect(KeyMode.position, KeyMode.range)
        match self.payload:
            case PositionPayload(index):
                return str(index)
            case RangePayload(start, stop, step):
                text = ("" if start is None else str(start)) + ":"
                text += "" if stop is None else str(stop)
                if step is not None:
                    text += f":{step}"
                return text

    def __str__(self):
        match self.payload:
            case PositionPayload(index):
                return f"Position({index})"
            case RangePayload(start, stop, step):
                fields = ", ".join(render_optional(field) for field in (start, stop, step))
                return f"Range({fields})"
            case GatherPayload(tensor):
                return f"Gather({tensor})"
            case _:
                from ._exceptions import InvalidModeError

                raise InvalidModeError(self.payload)

    def __repr__(self):
        match self.payload:
            case PositionPayload(index):
                return f"DimensionKey.position({index!r})"
            case RangePayload(start, stop, step):
                return f"DimensionKey.range({start!r}, {stop!r}, {step!r})"
            case GatherPayload(tensor):
                return f"DimensionKey.gather({tensor!r})"
            case _:
                return f"DimensionKey({self.payload!r})"
