"""List transformation nodes."""

from jam_nodes.transform.filter_items import FilterInput, FilterOutput, filter_node
from jam_nodes.transform.map_items import MapInput, MapOutput, map_node

__all__ = [
    "FilterInput",
    "FilterOutput",
    "MapInput",
    "MapOutput",
    "filter_node",
    "map_node",
]
