"""
Scope factory.

Converts a generic canary scope, as received with a canary execution
request, into the OpenTSDB scope used for query building.
"""

import logging
from typing import Optional

from .scope import CanaryScope, OpentsdbCanaryScope, SCOPE_KEY_KEY, DEFAULT_SCOPE_KEY

logger = logging.getLogger("opentsdb_canary.canary")


def build_scope(canary_scope: CanaryScope, scope_key: Optional[str] = None) -> OpentsdbCanaryScope:
    """
    Build an OpentsdbCanaryScope from a generic canary scope.

    Args:
        canary_scope: Scope from the canary execution request
        scope_key: Explicit scope tag name, overrides the ``_scope_key`` param

    Returns:
        OpenTSDB scope carrying the scope window and extended params
    """
    params = dict(canary_scope.extended_scope_params)

    if scope_key is None:
        scope_key = params.get(SCOPE_KEY_KEY)
    if not scope_key:
        logger.debug(f"No {SCOPE_KEY_KEY} for scope '{canary_scope.scope}', using '{DEFAULT_SCOPE_KEY}'")
        scope_key = DEFAULT_SCOPE_KEY

    return OpentsdbCanaryScope(
        scope=canary_scope.scope,
        location=canary_scope.location,
        start=canary_scope.start,
        end=canary_scope.end,
        step=canary_scope.step,
        extended_scope_params=params,
        scope_key=scope_key,
    )
