# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""StateBuilder exceptions."""

from __future__ import annotations


class StateBuilderError(Exception):
    """Base exception for StateBuilder errors."""

    pass


class MissingNameError(StateBuilderError):
    """Raised when a state without a name is committed."""

    pass


class InvalidAscensionError(StateBuilderError):
    """Raised when navigating above the root state."""

    pass


class AlreadyCommittedError(StateBuilderError):
    """Raised when options are changed on a state already committed."""

    pass


class RootStateError(StateBuilderError):
    """Raised when options are set on the synthetic root state."""

    pass


class DuplicateStateError(StateBuilderError):
    """Raised when a registry refuses a state name already registered."""

    pass
