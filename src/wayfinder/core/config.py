"""
Configuration for graph algorithms.

This module defines the settings that control deterministic ordering inside the
algorithms and event logging. Configuration can be built directly, from a
dictionary, from a JSON string, or from a JSON file referenced as ``@path``.

Dictionary input is validated against a JSON schema before use.

Example:
    >>> config = load_config('{"tie_break": "sorted"}')
    >>> config.tie_break
    <VertexOrder.SORTED: 'sorted'>
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Hashable, Iterable, List, TypeVar, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class VertexOrder(Enum):
    """How vertices are ordered when the algorithms need a deterministic order."""

    INSERTION = "insertion"
    SORTED = "sorted"

    def arrange(self, vertices: Iterable[T]) -> List[T]:
        """
        Arrange vertices in this order.

        Args:
            vertices: Vertices in insertion order

        Returns:
            List of vertices, sorted if this order is SORTED

        Raises:
            ConfigurationError: If SORTED is used on vertices that cannot be compared
        """
        if self is VertexOrder.INSERTION:
            return list(vertices)
        try:
            return sorted(vertices)  # type: ignore[type-var]
        except TypeError as e:
            raise ConfigurationError(f"Vertices cannot be sorted: {e}") from e


CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "tie_break": {"type": "string", "enum": [order.value for order in VertexOrder]},
        "neighbor_order": {"type": "string", "enum": [order.value for order in VertexOrder]},
        "log_events": {"type": "boolean"},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class GraphConfig:
    """
    Settings for a weighted graph and its algorithms.

    Attributes:
        tie_break (VertexOrder): Order used to pick among equal-cost vertices
            in the shortest-path computation. The first vertex in this order wins.
        neighbor_order (VertexOrder): Order in which a search pushes the
            neighbors of a visited vertex onto its frontier
        log_events (bool): Log every dispatched algorithm event at DEBUG level
    """

    tie_break: VertexOrder = VertexOrder.INSERTION
    neighbor_order: VertexOrder = VertexOrder.INSERTION
    log_events: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GraphConfig":
        """
        Build a configuration from a dictionary.

        Args:
            data: Mapping of setting names to JSON values

        Returns:
            GraphConfig: The validated configuration

        Raises:
            ConfigurationError: If the data does not match the schema
        """
        try:
            json_validate(instance=data, schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph configuration: {e.message}") from e

        return cls(
            tie_break=VertexOrder(data.get("tie_break", VertexOrder.INSERTION.value)),
            neighbor_order=VertexOrder(data.get("neighbor_order", VertexOrder.INSERTION.value)),
            log_events=data.get("log_events", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            "tie_break": self.tie_break.value,
            "neighbor_order": self.neighbor_order.value,
            "log_events": self.log_events,
        }


def load_config(source: Union[GraphConfig, Dict[str, Any], str, None] = None) -> GraphConfig:
    """
    Load a configuration from any supported source.

    Args:
        source: An existing GraphConfig, a dictionary, a JSON string, a file
            path prefixed with '@', or None for the defaults

    Returns:
        GraphConfig: The loaded configuration

    Raises:
        ConfigurationError: If the JSON is invalid, the file is missing, or the
            settings fail validation
    """
    if source is None:
        return GraphConfig()
    if isinstance(source, GraphConfig):
        return source
    if isinstance(source, dict):
        return GraphConfig.from_dict(source)

    if source.startswith("@"):
        path = Path(source[1:])
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
        logger.debug("Loaded graph configuration from %s", path)
    else:
        text = source

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON configuration: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError("Graph configuration must be a JSON object")
    return GraphConfig.from_dict(data)
