# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-StateBuilder - Fluent declaration of hierarchical route states.

Declare nested states without spelling out fully-qualified names, urls,
template paths or controllers: they are derived from each state's position
in the tree, and explicit options always win.
"""

__version__ = "0.1.0"

from .builder import StateBuilder
from .config import BuilderConfig
from .exceptions import (
    AlreadyCommittedError,
    DuplicateStateError,
    InvalidAscensionError,
    MissingNameError,
    RootStateError,
    StateBuilderError,
)
from .node import StateNode, ancestors, full_name, full_url
from .provider import StateBuilderProvider, declare
from .registry import MemoryRegistry, RegisteredState, StateRegistry, UrlFallback

__all__ = [
    # Core classes
    "StateBuilder",
    "StateBuilderProvider",
    "StateNode",
    "BuilderConfig",
    "declare",
    # Path composition
    "ancestors",
    "full_name",
    "full_url",
    # Registries
    "StateRegistry",
    "UrlFallback",
    "MemoryRegistry",
    "RegisteredState",
    # Exceptions
    "StateBuilderError",
    "MissingNameError",
    "InvalidAscensionError",
    "AlreadyCommittedError",
    "RootStateError",
    "DuplicateStateError",
]
