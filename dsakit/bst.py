"""A binary search tree of linked nodes mapping keys to values."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_TRAVERSALS = {"D": "default", "I": "in", "P": "pre", "O": "post"}


class _Node:
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key, value) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None

    def label(self) -> str:
        return f"{self.key}:{self.value}"


class ListBST(Generic[K, V]):
    """An unbalanced binary search tree with unique keys."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._count = 0

    def _find_node(self, key) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def _replace_child(self, parent: Optional[_Node], old: _Node, new: Optional[_Node]) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def insert(self, key: K, value: V) -> bool:
        """Add a key with its value; return False if the key is already present."""
        new = _Node(key, value)
        if self._root is None:
            self._root = new
            self._count += 1
            return True
        node = self._root
        while True:
            if key == node.key:
                return False
            if key < node.key:
                if node.left is None:
                    node.left = new
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    break
                node = node.right
        self._count += 1
        return True

    def remove(self, key: K) -> bool:
        """Remove a key; return False if it was not present.

        A node with two children takes the key and value of its in-order
        successor, which is then removed from the right subtree.
        """
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and key != node.key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)
        self._count -= 1
        return True

    def find(self, key: K) -> bool:
        """Tell whether the key is present."""
        return self._find_node(key) is not None

    def get(self, key: K) -> V:
        """Return the value stored under key."""
        node = self._find_node(key)
        if node is None:
            raise KeyError("Key not found")
        return node.value

    def update(self, key: K, value: V) -> None:
        """Replace the value stored under an existing key."""
        node = self._find_node(key)
        if node is None:
            raise KeyError("Key not found")
        node.value = value

    def clear(self) -> None:
        """Remove every key."""
        self._root = None
        self._count = 0

    def is_empty(self) -> bool:
        return self._count == 0

    def find_min(self) -> K:
        """Return the smallest key."""
        if self._root is None:
            raise ValueError("BST is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.key

    def find_max(self) -> K:
        """Return the largest key."""
        if self._root is None:
            raise ValueError("BST is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.key

    def _inorder(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _preorder(self) -> Iterator[_Node]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _postorder(self) -> list[_Node]:
        order: list[_Node] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            order.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        order.reverse()
        return order

    def _render_default(self) -> str:
        if self._root is None:
            return "Empty"
        parts: list[str] = []
        work: list = [self._root]
        while work:
            item = work.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            node = item
            if node.left is None and node.right is None:
                parts.append(f"({node.label()})")
                continue
            pending: list = ["(" + node.label()]
            if node.left is not None:
                pending += [" ", node.left]
            else:
                pending.append(" ()")
            if node.right is not None:
                pending += [" ", node.right]
            pending.append(")")
            work.extend(reversed(pending))
        return "".join(parts)

    def render(self, traversal: str = "D") -> str:
        """Render the tree.

        'D' gives the nested default form, 'I', 'P' and 'O' list the entries
        in in-order, pre-order and post-order; lower case works too.
        """
        kind = _TRAVERSALS.get(traversal.upper()) if len(traversal) == 1 else None
        if kind is None:
            raise ValueError("Invalid traversal type")
        if kind == "default":
            return self._render_default()
        if kind == "in":
            nodes: Iterator[_Node] | list[_Node] = self._inorder()
        elif kind == "pre":
            nodes = self._preorder()
        else:
            nodes = self._postorder()
        return "".join(f"({node.label()}) " for node in nodes)

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield (key, value) pairs in key order."""
        for node in self._inorder():
            yield node.key, node.value

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key) -> bool:
        return self.find(key)

    def __iter__(self) -> Iterator[K]:
        for node in self._inorder():
            yield node.key