# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""App states - Example declaration of a small application's route states.

A didactic example showing convention-based defaults, explicit overrides
and fallback routes.
"""

from __future__ import annotations

import logging

from genro_statebuilder import MemoryRegistry, StateBuilderProvider


def load_user(user_id):
    return {'id': user_id}


def build_states(registry: MemoryRegistry) -> StateBuilderProvider:
    """Declare the application states into `registry`.

    Resulting states:
        app                  /app            (abstract)
        app.users            /app/users      (fallback route)
        app.users.list       /app/users/list (default child of users)
        app.users.detail     /app/users/:id
        app.about            /app/about      (inline template)
    """
    provider = StateBuilderProvider(registry)
    provider.configure('templatePath', 'views/').configure('debug', True)

    (provider.state('app').url('/app').abstract()
        .state('users')
            .resolve('session', 'loadSession')
            .state('list').default_child().done()
            .state('detail', {'url': '/:id'}).resolve('user', load_user).done()
            .default()
        .done()
        .state('about').template('<h1>About</h1>').controller_as('vm')
        .done()
    )
    return provider


def print_states(provider: StateBuilderProvider, registry: MemoryRegistry) -> None:
    """Print the declared states for debugging."""
    print("=" * 60)
    print("STATES")
    print("=" * 60)
    for name, node in provider.walk():
        options = registry[name]
        print(f"{name:<20} {options.get('url', ''):<10} {options.get('templateUrl', '-')}")
    print(f"redirects: {registry.redirects}")


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    registry = MemoryRegistry()
    print_states(build_states(registry), registry)
