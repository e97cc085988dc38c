"""
Mock metric data for local OpenTSDB testing.
"""

from .metric_provider import OpentsdbMetricProvider, scope_tags

__all__ = [
    'OpentsdbMetricProvider',
    'scope_tags',
]
