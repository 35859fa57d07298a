"""In-order cursors over a binary search tree.

All iterator flavours share one walk engine, ``_InOrderWalk``, which keeps
the still-to-visit spine on an explicit stack instead of recursing or
following parent links. The reverse adaptor runs the same engine with the
child roles mirrored, so descending order needs no second algorithm.

Iterators do not own the nodes they visit. Any insert, remove or clear on
the owning tree invalidates them.
"""

from typing import TypeVar, Generic, List, Optional, Any, Union

T = TypeVar('T')


class _InOrderWalk:
    def __init__(self, root: Optional[Any] = None, mirrored: bool = False) -> None:
        self.current: Optional[Any] = None
        self._stack: List[Any] = []
        self._mirrored = mirrored
        self._push_spine(root)
        self.advance()

    def _near(self, node: Any) -> Optional[Any]:
        return node.right if self._mirrored else node.left

    def _far(self, node: Any) -> Optional[Any]:
        return node.left if self._mirrored else node.right

    def _push_spine(self, node: Optional[Any]) -> None:
        while node is not None:
            self._stack.append(node)
            node = self._near(node)

    def advance(self) -> None:
        if not self._stack:
            self.current = None
            return
        self.current = self._stack.pop()
        self._push_spine(self._far(self.current))

    def at_end(self) -> bool:
        return self.current is None

    def deref(self) -> Any:
        if self.current is None:
            raise IndexError("dereference of end iterator")
        return self.current


class TreeIterator(Generic[T]):
    """Mutable in-order cursor.

    ``value`` reads or overwrites the value under the cursor. Overwriting
    must not change the value's position in the ordering; the tree does
    not re-sort.
    """

    def __init__(self, root: Optional[Any] = None, mirrored: bool = False) -> None:
        self._walk = _InOrderWalk(root, mirrored)

    @property
    def value(self) -> T:
        return self._walk.deref().value

    @value.setter
    def value(self, new_value: T) -> None:
        self._walk.deref().value = new_value

    def advance(self) -> 'TreeIterator[T]':
        self._walk.advance()
        return self

    def at_end(self) -> bool:
        return self._walk.at_end()

    def __iter__(self) -> 'TreeIterator[T]':
        return self

    def __next__(self) -> T:
        if self._walk.at_end():
            raise StopIteration
        value = self.value
        self._walk.advance()
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (TreeIterator, ConstTreeIterator)):
            return NotImplemented
        return self._walk.current is other._walk.current

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._walk.at_end():
            return "TreeIterator(end)"
        return f"TreeIterator({self.value!r})"


class ConstTreeIterator(Generic[T]):
    """Read-only in-order cursor; ``value`` cannot be assigned."""

    def __init__(self, root: Optional[Any] = None, mirrored: bool = False) -> None:
        self._walk = _InOrderWalk(root, mirrored)

    @property
    def value(self) -> T:
        return self._walk.deref().value

    def advance(self) -> 'ConstTreeIterator[T]':
        self._walk.advance()
        return self

    def at_end(self) -> bool:
        return self._walk.at_end()

    def __iter__(self) -> 'ConstTreeIterator[T]':
        return self

    def __next__(self) -> T:
        if self._walk.at_end():
            raise StopIteration
        value = self.value
        self._walk.advance()
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (TreeIterator, ConstTreeIterator)):
            return NotImplemented
        return self._walk.current is other._walk.current

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._walk.at_end():
            return "ConstTreeIterator(end)"
        return f"ConstTreeIterator({self.value!r})"


BaseIterator = Union[TreeIterator[T], ConstTreeIterator[T]]


class ReverseIterator(Generic[T]):
    """Wraps a forward or const iterator built over a mirrored walk.

    Use ``ReverseIterator.over(TreeIterator, root)`` rather than calling the
    constructor with an unmirrored iterator.
    """

    def __init__(self, base: 'BaseIterator[T]') -> None:
        self._base = base

    @classmethod
    def over(cls, iterator_type: type, root: Optional[Any] = None) -> 'ReverseIterator[T]':
        return cls(iterator_type(root, mirrored=True))

    def base(self) -> 'BaseIterator[T]':
        return self._base

    @property
    def value(self) -> T:
        return self._base.value

    @value.setter
    def value(self, new_value: T) -> None:
        self._base.value = new_value  # type: ignore[misc]

    def advance(self) -> 'ReverseIterator[T]':
        self._base.advance()
        return self

    def at_end(self) -> bool:
        return self._base.at_end()

    def __iter__(self) -> 'ReverseIterator[T]':
        return self

    def __next__(self) -> T:
        return next(self._base)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._base == other._base

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ReverseIterator({self._base!r})"
