"""
Canary scope handling for OpenTSDB queries.
"""

from .scope import CanaryScope, OpentsdbCanaryScope, SCOPE_KEY_KEY, DEFAULT_SCOPE_KEY
from .scope_factory import build_scope

__all__ = [
    'CanaryScope',
    'OpentsdbCanaryScope',
    'SCOPE_KEY_KEY',
    'DEFAULT_SCOPE_KEY',
    'build_scope',
]
