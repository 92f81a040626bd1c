# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""StateBuilder - fluent context for declaring a tree of route states."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, TYPE_CHECKING

from .commit import commit as commit_state
from .config import STATE_MAP_OPTIONS, STATE_OPTIONS
from .exceptions import (
    AlreadyCommittedError,
    InvalidAscensionError,
    RootStateError,
    StateBuilderError,
)
from .node import StateNode, full_name, full_url

if TYPE_CHECKING:
    from .provider import StateBuilderProvider

logger = logging.getLogger('genro_statebuilder')


def _snake_case(key: str) -> str:
    return re.sub(r'(?<!^)(?=[A-Z])', '_', key).lower()


# Setter name -> option key, reachable both as 'templateUrl' and 'template_url'
_SCALAR_SETTERS = {name: key for key in STATE_OPTIONS for name in (key, _snake_case(key))}
_MAP_SETTERS = {key: key for key in STATE_MAP_OPTIONS}


class StateBuilder:
    """Fluent builder context bound to one StateNode.

    Every option setter returns the same context, so calls chain. Tree
    navigation returns a new context bound to another node:

    - state(name, options): commit this state, then descend into a new child
    - done(): commit this state, then go back to the parent
    - leaf(name, options): declare a child without children, stay here
    - default() / default_child() (alias defaultChild): commit and register
      as fallback route

    Scalar setters (one per option, also in snake_case):
        template, templateUrl, templateProvider, controller,
        controllerProvider, controllerAs, url, onEnter, onExit,
        reloadOnSearch, data, abstract

    Map setters, called as key(sub_key, value):
        resolve, views, params

    Commit on descent: declaring a child commits the current state, since
    a child's generated url depends on the resolved options of its
    ancestors. Once committed a state no longer accepts option changes:
    in strict mode (default) further writes raise AlreadyCommittedError,
    otherwise they are dropped with a warning.

    Example:
        >>> provider = StateBuilderProvider(MemoryRegistry())
        >>> (provider.state('app').url('/app').abstract()
        ...     .state('home').resolve('user', load_user)
        ...         .leaf('list')
        ...         .leaf('detail', {'url': '/:id'})
        ...     .done()
        ...     .default())
    """

    __slots__ = ('_node', '_provider')

    def __init__(self, node: StateNode, provider: StateBuilderProvider) -> None:
        self._node = node
        self._provider = provider

    def __repr__(self) -> str:
        return f"StateBuilder({self._node!r})"

    def __getattr__(self, name: str) -> Callable[..., StateBuilder]:
        """Return the setter for a scalar or map option."""
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        if name in _SCALAR_SETTERS:
            return self._make_setter(_SCALAR_SETTERS[name])
        if name in _MAP_SETTERS:
            return self._make_map_setter(_MAP_SETTERS[name])
        raise AttributeError(
            f"'{type(self).__name__}' has no option '{name}'"
        )

    # ==================== Introspection ====================

    @property
    def node(self) -> StateNode:
        """The node this context is bound to."""
        return self._node

    @property
    def full_name(self) -> str:
        return full_name(self._node)

    @property
    def full_url(self) -> str:
        return full_url(self._node)

    @property
    def committed(self) -> bool:
        return self._node.committed

    @property
    def is_root(self) -> bool:
        return self._node.is_root

    # ==================== Option setters ====================

    def _spawn(self, node: StateNode) -> StateBuilder:
        return self.__class__(node, self._provider)

    def _writable(self) -> bool:
        """Check that options of the bound node may still change.

        Returns False when the write must be dropped (non-strict mode).

        Raises:
            RootStateError: If bound to the synthetic root.
            AlreadyCommittedError: If committed and the config is strict.
        """
        node = self._node
        if node.is_root:
            raise RootStateError('Cannot set options on the root state.')
        if not node.committed:
            return True
        if self._provider.config.strict:
            raise AlreadyCommittedError(
                f"State '{full_name(node)}' is already committed"
            )
        logger.warning('Ignoring change to committed state %s', full_name(node))
        return False

    def _make_setter(
        self, key: str, default: Any = None
    ) -> Callable[..., StateBuilder]:
        def setter(value: Any = None) -> StateBuilder:
            if self._writable():
                self._node.options[key] = default if value is None else value
            return self

        setter.__name__ = key
        return setter

    def _make_map_setter(self, key: str) -> Callable[[str, Any], StateBuilder]:
        def setter(sub_key: str, value: Any) -> StateBuilder:
            if self._writable():
                self._node.options.setdefault(key, {})[sub_key] = value
            return self

        setter.__name__ = key
        return setter

    def abstract(self, value: bool | None = None) -> StateBuilder:
        """Mark the state as abstract; no argument means True."""
        return self._make_setter('abstract', True)(value)

    def name(self, value: str | None) -> StateBuilder:
        """Set the state name and derive its path. Falsy values are ignored."""
        if value and self._writable():
            self._node.set_name(value)
        return self

    def options(self, options: dict[str, Any] | None) -> StateBuilder:
        """Replace the whole option mapping of the state.

        The mapping is copied, so default generation never writes back
        into the caller's dict.
        """
        if self._writable():
            self._node.options = dict(options) if options else {}
        return self

    # ==================== Commit and navigation ====================

    def commit(self) -> StateBuilder:
        """Commit the bound state now. Does nothing if already committed."""
        provider = self._provider
        commit_state(self._node, provider.config, provider.registry)
        return self

    def state(
        self, name: str | None, options: dict[str, Any] | None = None
    ) -> StateBuilder:
        """Commit the current state and descend into a new child state.

        Args:
            name: The child's local name.
            options: Initial option mapping for the child.

        Returns:
            A context bound to the child.
        """
        self.commit()
        child = StateNode(parent=self._node)
        return self._spawn(child).name(name).options(options)

    def done(self) -> StateBuilder:
        """Commit the current state and return a context on its parent.

        Raises:
            InvalidAscensionError: If called on the root context.
        """
        parent = self._node.parent
        if self._node.is_root or parent is None:
            raise InvalidAscensionError('Cannot call done() on root state.')
        self.commit()
        return self._spawn(parent)

    def leaf(
        self, name: str | None, options: dict[str, Any] | None = None
    ) -> StateBuilder:
        """Declare a child state with no children; returns this context."""
        return self.state(name, options).done()

    def _fallback(self):
        fallback = self._provider.fallback
        if fallback is None:
            raise StateBuilderError('No fallback registry configured')
        return fallback

    def default(self) -> StateBuilder:
        """Commit and register this state's url as the fallback route."""
        fallback = self._fallback()
        self.commit()
        url = full_url(self._node)

        if self._provider.config.debug:
            logger.debug('Redirect: -> %s', url)

        fallback.register_default(url)
        return self

    def default_child(self) -> StateBuilder:
        """Commit and redirect the parent's url to this state's url.

        Raises:
            InvalidAscensionError: If the state has no parent.
        """
        fallback = self._fallback()
        parent = self._node.parent
        if parent is None:
            raise InvalidAscensionError('Cannot call default_child() on root state.')
        self.commit()
        parent_url = full_url(parent)
        url = parent_url + (self._node.options.get('url') or '')

        if self._provider.config.debug:
            logger.debug('Redirect: %s -> %s', parent_url, url)

        fallback.register_redirect(parent_url, url)
        return self

    defaultChild = default_child
