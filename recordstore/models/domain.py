"""Domain types - internal representation (framework-agnostic)."""

from enum import Enum
from typing import Any, Dict

Record = Dict[str, Any]


class IdStrategy(str, Enum):
    """How a repository assigns record identifiers."""
    POSITIONAL = "positional"
    SEQUENTIAL = "sequential"
