"""
OpenTSDB query builder.

Renders a metric query in OpenTSDB's query mini-language:

    aggregator[:downsample][:rate]:metric{tag1=v1,...,scopeKey=scope,extra1=v1,...}

No escaping is performed; callers must pass identifiers that are already
legal OpenTSDB metric names, tag keys and tag values.
"""

import logging
from typing import List, Optional

from .tag_pair import TagPair
from ..canary.scope import OpentsdbCanaryScope

logger = logging.getLogger("opentsdb_canary.metrics")


class OpentsdbQueryBuilder:
    """
    Accumulates query parameters and renders the OpenTSDB query string.

    Tag pairs are rendered in the order added, followed by the scope's own
    key/value and then its extended params (minus ``_scope_key``).
    """

    def __init__(self, metric_name: str, aggregator: str, downsample: str, rate: bool):
        self.metric_name = metric_name
        self.aggregator = aggregator
        self.downsample = downsample
        self.rate = rate
        self.tag_pairs: List[TagPair] = []
        self.scope: Optional[OpentsdbCanaryScope] = None

    @classmethod
    def create(cls, metric_name: str, aggregator: str, downsample: str = "",
               rate: bool = False) -> "OpentsdbQueryBuilder":
        return cls(metric_name, aggregator, downsample, rate)

    def with_tag_pair(self, tag_pair: TagPair) -> "OpentsdbQueryBuilder":
        self.tag_pairs.append(tag_pair)
        return self

    def with_scope(self, scope: OpentsdbCanaryScope) -> "OpentsdbQueryBuilder":
        # Last write wins
        self.scope = scope
        return self

    def _filters(self) -> List[str]:
        filters = [tag_pair.render() for tag_pair in self.tag_pairs]

        if self.scope is None:
            logger.debug(f"No scope attached to query for {self.metric_name}")
            return filters

        filters.append(TagPair(self.scope.scope_key, self.scope.scope).render())
        filters.extend(TagPair(key, value).render() for key, value in self.scope.filter_params())
        return filters

    def build(self) -> str:
        """Render the query string. Pure, may be called repeatedly."""
        program = self.aggregator
        if self.downsample:
            program += f":{self.downsample}"
        if self.rate:
            program += ":rate"
        program += f":{self.metric_name}"

        query = program + "{" + ",".join(self._filters()) + "}"
        logger.debug(f"Built OpenTSDB query: {query}")
        return query
