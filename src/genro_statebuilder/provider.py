# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""StateBuilderProvider - host-facing entry point of the state builder."""

from __future__ import annotations

from typing import Any, Iterator

from .builder import StateBuilder
from .config import BuilderConfig
from .node import StateNode, full_name
from .registry import StateRegistry, UrlFallback


class StateBuilderProvider:
    """Owns a state tree together with its config and registries.

    The provider holds the synthetic root of the tree: every declared
    state hangs below it and stays alive as long as the provider does.
    Configure first, then declare:

    Example:
        >>> registry = MemoryRegistry()
        >>> provider = StateBuilderProvider(registry)
        >>> provider.configure('templatePath', 'views/')
        >>> provider.state('app').url('/app').leaf('home').default()
        >>> registry['app.home']['templateUrl']
        'views/app.home.html'
        >>> registry.default_url
        '/app'
    """

    __slots__ = ('config', 'registry', 'fallback', '_root')

    def __init__(
        self,
        registry: StateRegistry,
        fallback: UrlFallback | None = None,
        config: BuilderConfig | None = None,
    ) -> None:
        """Initialize a StateBuilderProvider.

        Args:
            registry: Receives every committed state.
            fallback: Receives default() and default_child() routes.
                Defaults to `registry` when it implements UrlFallback.
            config: Default generators and settings. A fresh
                BuilderConfig is created if None.
        """
        if fallback is None and isinstance(registry, UrlFallback):
            fallback = registry
        self.config = config if config is not None else BuilderConfig()
        self.registry = registry
        self.fallback = fallback
        self._root = StateNode.root()

    def configure(self, key: str, value: Any) -> StateBuilderProvider:
        """Set a generator or setting on the config (see BuilderConfig)."""
        self.config.configure(key, value)
        return self

    def root(self) -> StateBuilder:
        """Return a builder context bound to the synthetic root."""
        return StateBuilder(self._root, self)

    def state(
        self, name: str | None, options: dict[str, Any] | None = None
    ) -> StateBuilder:
        """Declare a top-level state and return its builder context."""
        return self.root().state(name, options)

    declare = state

    def walk(self) -> Iterator[tuple[str, StateNode]]:
        """Yield (full_name, node) for every declared state, depth-first.

        States never given a name are skipped.
        """
        for node in self._root.walk():
            if not node.path:
                continue
            yield full_name(node), node


def declare(
    name: str | None,
    options: dict[str, Any] | None = None,
    *,
    registry: StateRegistry,
    fallback: UrlFallback | None = None,
    config: BuilderConfig | None = None,
) -> StateBuilder:
    """Declare a top-level state on a new provider.

    Shortcut for StateBuilderProvider(registry, fallback, config).state(name, options).
    """
    provider = StateBuilderProvider(registry, fallback=fallback, config=config)
    return provider.state(name, options)
