"""
Metric set query configuration.

Describes one metric of a canary config and turns it, together with a
canary scope, into an OpenTSDB query. Inputs are validated here so the
builder itself can stay a plain formatter.
"""

import logging
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from .canary.scope import OpentsdbCanaryScope
from .metrics.query_builder import OpentsdbQueryBuilder
from .metrics.tag_pair import TagPair

logger = logging.getLogger("opentsdb_canary.query")


class OpentsdbCanaryMetricSetQueryConfig(BaseModel):
    metric_name: str = Field(..., min_length=1)
    aggregator: str = Field("sum", min_length=1)
    downsample: str = ""
    rate: bool = False
    tags: List[TagPair] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def stringify_tag_values(cls, tags):
        # YAML reads unquoted values such as `value: 400` as numbers
        if not isinstance(tags, list):
            return tags
        return [
            {**tag, "value": str(tag["value"])}
            if isinstance(tag, dict) and type(tag.get("value")) in (int, float) else tag
            for tag in tags
        ]


def build_query(query_config: OpentsdbCanaryMetricSetQueryConfig, scope: OpentsdbCanaryScope) -> str:
    """
    Render the OpenTSDB query for a metric under the given scope.

    Args:
        query_config: Metric name, aggregator, downsample, rate and tags
        scope: Control or experiment scope

    Returns:
        Query string, e.g. ``sum:rate:request.count{app=cms,version=1.0.0}``
    """
    builder = OpentsdbQueryBuilder.create(
        query_config.metric_name,
        query_config.aggregator,
        query_config.downsample,
        query_config.rate,
    )
    for tag_pair in query_config.tags:
        builder.with_tag_pair(tag_pair)
    builder.with_scope(scope)

    return builder.build()


def build_query_params(query_config: OpentsdbCanaryMetricSetQueryConfig,
                       scope: OpentsdbCanaryScope) -> Dict[str, Any]:
    """
    Build the ``/api/query`` parameters for the scope's time window.

    Returns:
        Dict with ``start`` and ``end`` in epoch seconds and the ``m`` query

    Raises:
        ValueError: if the scope has no start or end time
    """
    if scope.start is None or scope.end is None:
        raise ValueError(f"Scope '{scope.scope}' has no start/end time")

    params = {
        "start": int(scope.start.timestamp()),
        "end": int(scope.end.timestamp()),
        "m": build_query(query_config, scope),
    }
    logger.debug(f"Query params for {query_config.metric_name}: {params}")
    return params
