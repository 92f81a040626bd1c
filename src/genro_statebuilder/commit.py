# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Commit protocol - resolve default options and register a state once."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import STATE_MAP_OPTIONS
from .exceptions import MissingNameError
from .node import full_name

if TYPE_CHECKING:
    from .config import BuilderConfig
    from .node import StateNode
    from .registry import StateRegistry

logger = logging.getLogger('genro_statebuilder')


def _generate_option(node: StateNode, key: str, config: BuilderConfig) -> None:
    if node.options.get(key) is None:
        value = config.generate(key, node)
        if value is not None:
            node.options[key] = value


def commit(
    node: StateNode | None,
    config: BuilderConfig,
    registry: StateRegistry,
) -> None:
    """Finalize the options of `node` and hand them to the registry.

    Resolution order:
        1. url, unless already set
        2. controller, unless set or controllerProvider is set
        3. templateUrl, unless set or template/templateProvider is set

    The registry receives a copy of the options, map options (resolve,
    views, params) included: writes made to the node afterwards never
    reach the registered state. Committing the synthetic root or an
    already committed node does nothing.

    Raises:
        MissingNameError: If the node was never given a name.
    """
    if node is None or node.committed or node.is_root:
        return
    if not node.path:
        raise MissingNameError('State must have a name.')
    name = full_name(node)
    options = node.options

    _generate_option(node, 'url', config)
    if not options.get('controllerProvider'):
        _generate_option(node, 'controller', config)
    if not options.get('template') and not options.get('templateProvider'):
        _generate_option(node, 'templateUrl', config)

    registered = {
        key: dict(value) if key in STATE_MAP_OPTIONS and isinstance(value, dict) else value
        for key, value in options.items()
    }
    node.handle = registry.register(name, registered)
    node.committed = True

    if config.debug:
        logger.debug('Create state: %s %r', name, options)
