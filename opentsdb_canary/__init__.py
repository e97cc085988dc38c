"""
opentsdb-canary

OpenTSDB query building for canary analysis:
- metrics: TagPair and OpentsdbQueryBuilder
- canary: canary scopes and the scope factory
- query_config: per-metric query config and query rendering
- mock: put-line formatting for mock metric data
"""

from .metrics import TagPair, OpentsdbQueryBuilder
from .canary import CanaryScope, OpentsdbCanaryScope, SCOPE_KEY_KEY, DEFAULT_SCOPE_KEY, build_scope
from .query_config import OpentsdbCanaryMetricSetQueryConfig, build_query, build_query_params
from .mock import OpentsdbMetricProvider, scope_tags

__all__ = [
    # Query building
    'TagPair',
    'OpentsdbQueryBuilder',

    # Scopes
    'CanaryScope',
    'OpentsdbCanaryScope',
    'SCOPE_KEY_KEY',
    'DEFAULT_SCOPE_KEY',
    'build_scope',

    # Metric query config
    'OpentsdbCanaryMetricSetQueryConfig',
    'build_query',
    'build_query_params',

    # Mock data
    'OpentsdbMetricProvider',
    'scope_tags',
]
