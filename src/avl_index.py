from typing import List, Optional


class _Node:
    __slots__ = ("key", "height", "left", "right")

    def __init__(self, key: int):
        self.key = key
        self.height = 1
        self.left: Optional["_Node"] = None
        self.right: Optional["_Node"] = None


def _height(node: Optional[_Node]) -> int:
    return node.height if node else 0


def _balance(node: Optional[_Node]) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _update_height(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


class AVLIndex:
    """
    Height-balanced binary search tree over case ids.

    Only keys are stored; the records themselves live in the case store.
    Every subtree is owned by its parent and the index exposes key-based
    operations only.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: int) -> bool:
        return self.contains(key)

    def insert(self, key: int) -> None:
        self._root = self._insert(self._root, key)

    def delete(self, key: int) -> None:
        self._root = self._delete(self._root, key)

    def contains(self, key: int) -> bool:
        node = self._root
        while node:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def in_order(self) -> List[int]:
        keys: List[int] = []
        self._walk(self._root, keys)
        return keys

    def height(self) -> int:
        return _height(self._root)

    def root_key(self) -> Optional[int]:
        return self._root.key if self._root else None

    def is_balanced(self) -> bool:
        return self._check(self._root) is not None

    def _insert(self, node: Optional[_Node], key: int) -> _Node:
        if node is None:
            self._size += 1
            return _Node(key)
        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node

        _update_height(node)
        bf = _balance(node)
        if bf > 1 and key < node.left.key:
            return _rotate_right(node)
        if bf < -1 and key > node.right.key:
            return _rotate_left(node)
        if bf > 1 and key > node.left.key:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if bf < -1 and key < node.right.key:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def _delete(self, node: Optional[_Node], key: int) -> Optional[_Node]:
        if node is None:
            return None
        if key < node.key:
            node.left = self._delete(node.left, key)
        elif key > node.key:
            node.right = self._delete(node.right, key)
        elif node.left is None or node.right is None:
            self._size -= 1
            return node.left or node.right
        else:
            successor = node.right
            while successor.left:
                successor = successor.left
            node.key = successor.key
            node.right = self._delete(node.right, successor.key)

        _update_height(node)
        bf = _balance(node)
        if bf > 1:
            if _balance(node.left) < 0:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if bf < -1:
            if _balance(node.right) > 0:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def _walk(self, node: Optional[_Node], out: List[int]) -> None:
        if node is None:
            return
        self._walk(node.left, out)
        out.append(node.key)
        self._walk(node.right, out)

    def _check(self, node: Optional[_Node]) -> Optional[int]:
        # height of a valid subtree, None once any invariant is broken
        if node is None:
            return 0
        left = self._check(node.left)
        right = self._check(node.right)
        if left is None or right is None:
            return None
        if abs(left - right) > 1 or node.height != 1 + max(left, right):
            return None
        if node.left and node.left.key >= node.key:
            return None
        if node.right and node.right.key <= node.key:
            return None
        return node.height
