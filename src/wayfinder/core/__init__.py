"""Core graph functionality."""

from .exceptions import (
    ConfigurationError,
    DuplicateVertexError,
    GraphOperationError,
    InvalidWeightError,
    UnknownVertexError,
    UnreachableTargetError,
)
from .config import GraphConfig, VertexOrder, load_config
from .types import GraphProtocol
from .graph import (
    INFINITY,
    AlgorithmEvent,
    BaseObserver,
    Edge,
    GraphAlgorithmObserver,
    LoggingObserver,
    RecordingObserver,
    SearchResult,
    ShortestPathResult,
    WeightedGraph,
)

__all__ = [
    "INFINITY",
    "AlgorithmEvent",
    "BaseObserver",
    "ConfigurationError",
    "DuplicateVertexError",
    "Edge",
    "GraphAlgorithmObserver",
    "GraphConfig",
    "GraphOperationError",
    "GraphProtocol",
    "InvalidWeightError",
    "LoggingObserver",
    "RecordingObserver",
    "SearchResult",
    "ShortestPathResult",
    "UnknownVertexError",
    "UnreachableTargetError",
    "VertexOrder",
    "WeightedGraph",
    "load_config",
]
