"""Unbalanced, duplicate-free binary search tree.

Equality between trees is structural: two trees are equal only when they
hold the same values in the same shape. Trees with the same set of values
built in a different insertion order usually compare unequal.

No operation recurses, so degenerate (chain-shaped) trees of any length
are safe to copy, compare, measure and clear.
"""

import logging
from copy import deepcopy
from typing import TypeVar, Generic, List, Iterable, Iterator, Optional, Callable, Any, Tuple

from tree_iterator import TreeIterator, ConstTreeIterator, ReverseIterator

T = TypeVar('T')

logger = logging.getLogger(__name__)


class EmptyContainerError(ValueError):
    """Raised by min() and max() on a tree with no elements."""


class BinarySearchTree(Generic[T]):
    class Node:
        def __init__(self, value: T, parent: Optional['BinarySearchTree.Node'] = None) -> None:
            self.value: T = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None
            self.parent: Optional['BinarySearchTree.Node'] = parent

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0
        if values is not None:
            for value in values:
                self.insert(value)

    @classmethod
    def from_tree(cls, other: 'BinarySearchTree[T]') -> 'BinarySearchTree[T]':
        return other.copy()

    @classmethod
    def moved_from(cls, source: 'BinarySearchTree[T]') -> 'BinarySearchTree[T]':
        tree: BinarySearchTree[T] = cls()
        tree.move_from(source)
        return tree

    def insert(self, value: T) -> None:
        parent: Optional[BinarySearchTree.Node] = None
        node = self._root
        go_left = False
        while node is not None:
            parent = node
            if value < node.value:
                node = node.left
                go_left = True
            elif value > node.value:
                node = node.right
                go_left = False
            else:
                return

        new_node = BinarySearchTree.Node(value, parent)
        if parent is None:
            self._root = new_node
        elif go_left:
            parent.left = new_node
        else:
            parent.right = new_node
        self._size += 1

    def remove(self, value: T) -> None:
        node = self._find_node(self._root, value)
        if node is None:
            return

        if node.left is not None and node.right is not None:
            successor = self._find_min(node.right)
            node.value = successor.value
            node = successor

        self._unlink(node)
        self._size -= 1

    def find(self, value: T) -> bool:
        return self._find_node(self._root, value) is not None

    def min(self) -> T:
        if self._root is None:
            raise EmptyContainerError("min from empty tree")
        return self._find_min(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise EmptyContainerError("max from empty tree")
        return self._find_max(self._root).value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        if self._root is None:
            return 0
        tallest = 0
        stack: List[Tuple[BinarySearchTree.Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            tallest = max(tallest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return tallest

    def clear(self) -> None:
        released = 0
        for node in self._post_order_nodes():
            node.left = None
            node.right = None
            node.parent = None
            released += 1
        self._root = None
        self._size = 0
        logger.debug("cleared tree, released %d nodes", released)

    def in_order(self) -> List[T]:
        return list(self.cbegin())

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        return [node.value for node in self._post_order_nodes()]

    def copy(self) -> 'BinarySearchTree[T]':
        clone: BinarySearchTree[T] = type(self)()
        clone._root = self._copy_nodes(self._root)
        clone._size = self._size
        logger.debug("copied tree of %d nodes", self._size)
        return clone

    def assign(self, other: 'BinarySearchTree[T]') -> None:
        if other is self:
            return
        self.clear()
        self._root = self._copy_nodes(other._root)
        self._size = other._size
        logger.debug("assigned copy of tree with %d nodes", other._size)

    def move_from(self, source: 'BinarySearchTree[T]') -> None:
        if source is self:
            return
        self.clear()
        self._root, source._root = source._root, None
        self._size, source._size = source._size, 0
        logger.debug("moved %d nodes between trees", self._size)

    def swap(self, other: 'BinarySearchTree[T]') -> None:
        swap(self, other)

    def is_valid(self) -> bool:
        """Check ordering, the size counter and every parent link."""
        if self._root is None:
            return self._size == 0
        if self._root.parent is not None:
            return False

        count = 0
        stack: List[Tuple[BinarySearchTree.Node, Optional[BinarySearchTree.Node], Optional[BinarySearchTree.Node]]] = [
            (self._root, None, None)
        ]
        while stack:
            node, low, high = stack.pop()
            count += 1
            if low is not None and not low.value < node.value:
                return False
            if high is not None and not node.value < high.value:
                return False
            for child in (node.left, node.right):
                if child is not None and child.parent is not node:
                    return False
            if node.left is not None:
                stack.append((node.left, low, node))
            if node.right is not None:
                stack.append((node.right, node, high))
        return count == self._size

    def begin(self) -> TreeIterator[T]:
        return TreeIterator(self._root)

    def end(self) -> TreeIterator[T]:
        return TreeIterator()

    def cbegin(self) -> ConstTreeIterator[T]:
        return ConstTreeIterator(self._root)

    def cend(self) -> ConstTreeIterator[T]:
        return ConstTreeIterator()

    def rbegin(self) -> ReverseIterator[T]:
        return ReverseIterator.over(TreeIterator, self._root)

    def rend(self) -> ReverseIterator[T]:
        return ReverseIterator.over(TreeIterator)

    def crbegin(self) -> ReverseIterator[T]:
        return ReverseIterator.over(ConstTreeIterator, self._root)

    def crend(self) -> ReverseIterator[T]:
        return ReverseIterator.over(ConstTreeIterator)

    def _find_node(self, node: Optional[Node], value: T) -> Optional[Node]:
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def _unlink(self, node: Node) -> None:
        # node has at most one child; that child takes its slot
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.left = None
        node.right = None
        node.parent = None

    def _post_order_nodes(self) -> List[Node]:
        result: List[BinarySearchTree.Node] = []
        if self._root is None:
            return result
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def _copy_nodes(self, root: Optional[Node],
                    clone_value: Callable[[Any], Any] = lambda value: value) -> Optional[Node]:
        if root is None:
            return None
        new_root = BinarySearchTree.Node(clone_value(root.value))
        stack = [(root, new_root)]
        while stack:
            source, target = stack.pop()
            if source.right is not None:
                target.right = BinarySearchTree.Node(clone_value(source.right.value), target)
                stack.append((source.right, target.right))
            if source.left is not None:
                target.left = BinarySearchTree.Node(clone_value(source.left.value), target)
                stack.append((source.left, target.left))
        return new_root

    def __copy__(self) -> 'BinarySearchTree[T]':
        return self.copy()

    def __deepcopy__(self, memo: dict) -> 'BinarySearchTree[T]':
        clone: BinarySearchTree[T] = type(self)()
        memo[id(self)] = clone
        clone._root = self._copy_nodes(self._root, lambda value: deepcopy(value, memo))
        clone._size = self._size
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinarySearchTree):
            return NotImplemented
        if self._size != other._size:
            return False
        stack: List[Tuple[Optional[BinarySearchTree.Node], Optional[BinarySearchTree.Node]]] = [
            (self._root, other._root)
        ]
        while stack:
            a, b = stack.pop()
            if a is None and b is None:
                continue
            if a is None or b is None:
                return False
            if a.value != b.value:
                return False
            stack.append((a.right, b.right))
            stack.append((a.left, b.left))
        return True

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.find(value)

    def __iter__(self) -> Iterator[T]:
        return self.cbegin()

    def __reversed__(self) -> Iterator[T]:
        return self.crbegin()

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size}, height={self.height()})"


def swap(lhs: BinarySearchTree[T], rhs: BinarySearchTree[T]) -> None:
    """Exchange the contents of two trees without touching any node."""
    lhs._root, rhs._root = rhs._root, lhs._root
    lhs._size, rhs._size = rhs._size, lhs._size
    logger.debug("swapped trees of %d and %d nodes", rhs._size, lhs._size)
