"""Structural interface shared by Vector2, Vector3 and Vector4."""
from typing import Iterator, Protocol, TypeVar, runtime_checkable

V = TypeVar("V", bound="VectorLike")


@runtime_checkable
class VectorLike(Protocol):
    """
    What geometry code may rely on regardless of arity.

    The vector types do not inherit from this; they satisfy it structurally.
    """

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[float]: ...

    def __getitem__(self, index: int) -> float: ...

    def magnitude(self) -> float: ...

    def magnitude_squared(self) -> float: ...

    def normalized(self: V) -> V: ...

    def normalize(self) -> None: ...

    def dot(self: V, other: V) -> float: ...
