# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""StateNode and path/url composition."""

from __future__ import annotations

from typing import Any, Iterator


class StateNode:
    """A state in a route hierarchy.

    Each node has:
    - name: The state's local name (None only for unnamed/root nodes)
    - path: Tuple of ancestor names plus own name; () for the root
    - parent: The parent StateNode (None for the root)
    - children: Child nodes in declaration order
    - options: Option mapping handed to the registry on commit
    - committed: True once the node has been registered
    - handle: Value returned by the registry on commit

    Example:
        >>> root = StateNode.root()
        >>> app = StateNode(parent=root)
        >>> app.set_name('app')
        >>> app.path
        ('app',)
    """

    __slots__ = (
        'name', 'path', '_parent', 'children', 'options',
        'committed', 'handle',
    )

    def __init__(
        self,
        name: str | None = None,
        options: dict[str, Any] | None = None,
        parent: StateNode | None = None,
    ) -> None:
        self.name: str | None = None
        self.path: tuple[str, ...] | None = None
        self._parent: StateNode | None = None
        self.children: list[StateNode] = []
        self.options: dict[str, Any] = options or {}
        self.committed = False
        self.handle: Any = None

        if parent is not None:
            self._parent = parent
            parent.children.append(self)
        self.set_name(name)

    @classmethod
    def root(cls) -> StateNode:
        """Create the synthetic root of a state tree."""
        node = cls()
        node.path = ()
        return node

    def __repr__(self) -> str:
        if self.is_root:
            return 'StateNode(<root>)'
        flag = ', committed' if self.committed else ''
        return f"StateNode({full_name(self)!r}{flag})"

    @property
    def parent(self) -> StateNode | None:
        """The parent node, or None for the root."""
        return self._parent

    @property
    def is_root(self) -> bool:
        """True for the synthetic root (empty path, no parent)."""
        return self._parent is None and self.path == ()

    def set_name(self, name: str | None) -> None:
        """Set the name and derive the path from the parent.

        A falsy name leaves the node untouched.
        """
        if not name:
            return
        self.name = name
        parent = self.parent
        parent_path = parent.path if parent is not None and parent.path else ()
        self.path = parent_path + (name,)

    def walk(self) -> Iterator[StateNode]:
        """Yield descendants depth-first, in declaration order."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def ancestors(node: StateNode | None) -> list[StateNode]:
    """Return the chain from the topmost ancestor down to `node` included."""
    chain: list[StateNode] = []
    while node is not None:
        chain.append(node)
        node = node.parent
    chain.reverse()
    return chain


def full_name(node: StateNode) -> str:
    """Return the dotted name of a node, e.g. 'app.home.list'."""
    return '.'.join(node.path or ())


def full_url(node: StateNode | None) -> str:
    """Concatenate the url option of every node from the root down.

    Unresolved urls count as ''. Ancestors must be committed for their
    generated urls to be taken into account.
    """
    return ''.join(n.options.get('url') or '' for n in ancestors(node))
