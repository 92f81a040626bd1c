# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Registry boundaries and an in-memory implementation.

The builder talks to the host application through two protocols:

- StateRegistry.register(full_name, options) -> handle
    Called exactly once per committed state.
- UrlFallback.register_default(url) / register_redirect(from_url, to_url)
    Called by default() and default_child().

MemoryRegistry implements both and records everything it receives.

Example:
    >>> registry = MemoryRegistry()
    >>> registry.register('app', {'url': '/app'})
    RegisteredState(name='app', options={'url': '/app'})
    >>> registry.register_default('/app')
    >>> registry.default_url
    '/app'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from .exceptions import DuplicateStateError


@runtime_checkable
class StateRegistry(Protocol):
    """Stores committed states under their fully-qualified name."""

    def register(self, full_name: str, options: dict[str, Any]) -> Any:
        ...


@runtime_checkable
class UrlFallback(Protocol):
    """Receives the fallback route and conditional redirects."""

    def register_default(self, url: str) -> None:
        ...

    def register_redirect(self, from_url: str, to_url: str) -> None:
        ...


@dataclass(frozen=True)
class RegisteredState:
    """Handle returned by MemoryRegistry.register()."""

    name: str
    options: dict[str, Any]


@dataclass
class MemoryRegistry:
    """In-memory StateRegistry and UrlFallback.

    Attributes:
        replace: If True (default) a repeated name overwrites the previous
            state; if False it raises DuplicateStateError.
        states: Registered options by full name, in registration order.
        default_url: Last url passed to register_default(), or None.
        redirects: (from_url, to_url) pairs in registration order.
    """

    replace: bool = True
    states: dict[str, dict[str, Any]] = field(default_factory=dict)
    default_url: str | None = None
    redirects: list[tuple[str, str]] = field(default_factory=list)

    def register(self, full_name: str, options: dict[str, Any]) -> RegisteredState:
        if not self.replace and full_name in self.states:
            raise DuplicateStateError(f"State '{full_name}' is already registered")
        self.states[full_name] = options
        return RegisteredState(full_name, options)

    def register_default(self, url: str) -> None:
        self.default_url = url

    def register_redirect(self, from_url: str, to_url: str) -> None:
        self.redirects.append((from_url, to_url))

    def __contains__(self, full_name: str) -> bool:
        return full_name in self.states

    def __getitem__(self, full_name: str) -> dict[str, Any]:
        return self.states[full_name]

    def __len__(self) -> int:
        return len(self.states)
