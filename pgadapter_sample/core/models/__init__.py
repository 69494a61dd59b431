"""Value objects shared by the services and the HTTP server."""

from .read_options import (
    DirectedReadOptions,
    ExcludeReplicas,
    IncludeReplicas,
    ReplicaSelection,
    ReplicaType,
    TimestampBound,
    TimestampBoundMode,
)

__all__ = [
    "DirectedReadOptions",
    "ExcludeReplicas",
    "IncludeReplicas",
    "ReplicaSelection",
    "ReplicaType",
    "TimestampBound",
    "TimestampBoundMode",
]
