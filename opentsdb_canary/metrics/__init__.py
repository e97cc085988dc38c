"""
OpenTSDB metric query building.
"""

from .tag_pair import TagPair
from .query_builder import OpentsdbQueryBuilder

__all__ = [
    'TagPair',
    'OpentsdbQueryBuilder',
]
