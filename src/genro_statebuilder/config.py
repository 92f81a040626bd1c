# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BuilderConfig - default option generators and global switches.

A BuilderConfig holds, per option key, a function computing the
conventional value of that option from a node's position in the tree,
plus the settings read at commit time.

Built-in generators:
    - url: '/' + last path segment ('app.home' -> '/home')
    - templateUrl: template_path + dotted path + '.html'
    - controller: dotted path

Example:
    >>> config = BuilderConfig()
    >>> config.configure('templatePath', 'views/').configure('debug', True)
    >>> config.configure('controller', lambda node: node.name.title() + 'Ctrl')
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import StateNode

Generator = Callable[['StateNode'], Any]


def default_url(node: StateNode) -> str:
    return '/' + node.path[-1]


def default_controller(node: StateNode) -> str:
    return '.'.join(node.path)


# Setting keys accepted by configure(), mapped to BuilderConfig attributes
_SETTINGS = {
    'debug': 'debug',
    'strict': 'strict',
    'templatePath': 'template_path',
    'templatePathPrefix': 'template_path',
}

GENERATED_OPTIONS = ('url', 'templateUrl', 'controller')
STATE_OPTIONS = (
    'template', 'templateUrl', 'templateProvider',
    'controller', 'controllerProvider', 'controllerAs',
    'url', 'onEnter', 'onExit', 'reloadOnSearch', 'data',
)
STATE_MAP_OPTIONS = ('resolve', 'views', 'params')


@dataclass
class BuilderConfig:
    """Default option generators and settings shared by a builder tree.

    Attributes:
        debug: Log every created state and redirect at DEBUG level.
        template_path: Prefix of generated templateUrl values.
        strict: Raise AlreadyCommittedError on writes to committed states.
            When False the write is dropped and a warning is logged.
        generators: Option key -> function computing its default value.
        extra: Any other configured key. Not used by the builder.
    """

    debug: bool = False
    template_path: str = 'app/states/'
    strict: bool = True
    generators: dict[str, Generator] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        builtins: dict[str, Generator] = {
            'url': default_url,
            'templateUrl': self._default_template_url,
            'controller': default_controller,
        }
        builtins.update(self.generators)
        self.generators = builtins

    def _default_template_url(self, node: StateNode) -> str:
        return self.template_path + '.'.join(node.path) + '.html'

    def configure(self, key: str, value: Any) -> BuilderConfig:
        """Set a generator or a global setting.

        Args:
            key: One of 'url', 'templateUrl', 'controller' to replace a
                generator; 'debug', 'strict', 'templatePath' or
                'templatePathPrefix' for a setting. Other keys are kept
                in `extra`.
            value: The generator function or the setting value.

        Returns:
            self, for chaining.
        """
        if key in GENERATED_OPTIONS:
            self.generators[key] = value
        elif key in _SETTINGS:
            setattr(self, _SETTINGS[key], value)
        else:
            self.extra[key] = value
        return self

    def generate(self, key: str, node: StateNode) -> Any:
        """Compute the default value of option `key` for `node`.

        Returns None if no generator is configured for the key.
        """
        generator = self.generators.get(key)
        if generator is None:
            return None
        return generator(node)
