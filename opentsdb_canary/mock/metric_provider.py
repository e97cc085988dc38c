"""
Mock metric provider.

Produces OpenTSDB telnet-style ``put`` lines with random values, used to
feed a local OpenTSDB with data for a control or experiment scope.
"""

import random
import time
from typing import Dict, Optional


def scope_tags(scope: str, extra_tags: Optional[Dict[str, str]] = None) -> str:
    """Space separated tag string: ``scope=<scope> k1=v1 ...``"""
    tags = {"scope": scope}
    if extra_tags:
        tags.update(extra_tags)
    return " ".join(f"{key}={value}" for key, value in tags.items())


class OpentsdbMetricProvider:
    """Random metric values within [min_value, max_value)"""

    def __init__(self, min_value: int, max_value: int, metric_name: str, tags: str,
                 rng: Optional[random.Random] = None):
        if max_value <= min_value:
            raise ValueError(f"max_value ({max_value}) must be greater than min_value ({min_value})")
        self.min_value = min_value
        self.max_value = max_value
        self.metric_name = metric_name
        self.tags = tags
        self._rng = rng or random.Random()

    def format_put(self, value: int, timestamp: Optional[int] = None) -> str:
        if timestamp is None:
            timestamp = int(time.time())
        return f"put {self.metric_name} {timestamp} {value} {self.tags}"

    def get_random_metric_within_range(self, timestamp: Optional[int] = None) -> str:
        value = self._rng.randrange(self.min_value, self.max_value)
        return self.format_put(value, timestamp)
