"""
Tag pair value type.

A single literal OpenTSDB tag filter, rendered as ``key=value``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TagPair:
    """Literal metric-filter tag"""
    key: str
    value: str

    def render(self) -> str:
        return f"{self.key}={self.value}"
