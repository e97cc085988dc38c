"""
Canary scope models.

A canary scope identifies one side (control or experiment) of a canary
comparison. The OpenTSDB flavour adds the tag name under which the scope
value is filtered.
"""

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

# Extended scope parameter naming the scope tag; metadata, never a filter
SCOPE_KEY_KEY = "_scope_key"
DEFAULT_SCOPE_KEY = "scope"


class CanaryScope(BaseModel):
    scope: str
    location: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    step: Optional[int] = None
    extended_scope_params: Dict[str, str] = Field(default_factory=dict)


class OpentsdbCanaryScope(CanaryScope):
    scope_key: str = DEFAULT_SCOPE_KEY

    def filter_params(self) -> List[Tuple[str, str]]:
        """Extended params rendered as query filters, in mapping order."""
        return [(key, value) for key, value in self.extended_scope_params.items()
                if key != SCOPE_KEY_KEY]
