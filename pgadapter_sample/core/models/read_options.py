"""Read options for read-only transactions on Cloud Spanner.

PGAdapter exposes Spanner's timestamp bounds and directed reads as session
variables. The models here validate the options and render them in the form
PGAdapter accepts:

- ``spanner.read_only_staleness`` takes a timestamp bound, e.g.
  ``read_timestamp 2024-01-01T10:00:00.000000Z`` or ``exact_staleness 10s``.
- ``spanner.directed_read`` takes the protobuf JSON encoding of
  ``DirectedReadOptions``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from pgadapter_sample.errors import InvalidReadOptionsError

# Spanner rejects more replica selections than this in one request.
MAX_REPLICA_SELECTIONS = 10


class TimestampBoundMode(str, Enum):
    """Timestamp bound modes that are valid for a read-only transaction."""

    STRONG = "strong"
    READ_TIMESTAMP = "read_timestamp"
    EXACT_STALENESS = "exact_staleness"


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _format_duration(value: timedelta) -> str:
    micros = value // timedelta(microseconds=1)
    if micros % 1_000_000 == 0:
        return f"{micros // 1_000_000}s"
    if micros % 1_000 == 0:
        return f"{micros // 1_000}ms"
    return f"{micros}us"


@dataclass(frozen=True)
class TimestampBound:
    """Timestamp bound of a read-only transaction.

    Use the constructors instead of instantiating directly::

        TimestampBound.read_timestamp(datetime.now(timezone.utc))
        TimestampBound.exact_staleness(timedelta(seconds=10))
    """

    mode: TimestampBoundMode
    timestamp: Optional[datetime] = None
    staleness: Optional[timedelta] = None

    @classmethod
    def strong(cls) -> TimestampBound:
        return cls(TimestampBoundMode.STRONG)

    @classmethod
    def read_timestamp(cls, timestamp: datetime) -> TimestampBound:
        """Read at an exact timestamp. The timestamp must be timezone-aware."""
        if timestamp.tzinfo is None or timestamp.utcoffset() is None:
            raise InvalidReadOptionsError(f"Read timestamp must be timezone-aware, got {timestamp.isoformat()}")
        return cls(TimestampBoundMode.READ_TIMESTAMP, timestamp=timestamp)

    @classmethod
    def exact_staleness(cls, staleness: timedelta) -> TimestampBound:
        """Read at a timestamp exactly ``staleness`` in the past."""
        if staleness < timedelta(0):
            raise InvalidReadOptionsError(f"Staleness must not be negative, got {staleness}")
        return cls(TimestampBoundMode.EXACT_STALENESS, staleness=staleness)

    def to_staleness_value(self) -> str:
        """Render the value of ``spanner.read_only_staleness``."""
        if self.mode is TimestampBoundMode.READ_TIMESTAMP:
            return f"{self.mode.value} {_format_timestamp(self.timestamp)}"
        if self.mode is TimestampBoundMode.EXACT_STALENESS:
            return f"{self.mode.value} {_format_duration(self.staleness)}"
        return self.mode.value


class ReplicaType(str, Enum):
    """Replica types that can be selected by a directed read."""

    READ_WRITE = "READ_WRITE"
    READ_ONLY = "READ_ONLY"


class _ProtoJsonModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ReplicaSelection(_ProtoJsonModel):
    """Selects replicas by location, by type, or both."""

    location: Optional[str] = Field(default=None, description="Replica location, e.g. us-east1")
    type: Optional[ReplicaType] = Field(default=None, description="Replica type")


class IncludeReplicas(_ProtoJsonModel):
    """Replicas that should serve the read, in order of preference."""

    replica_selections: List[ReplicaSelection] = Field(default_factory=list, max_length=MAX_REPLICA_SELECTIONS)
    auto_failover_disabled: Optional[bool] = Field(
        default=None, description="Do not fall back to other replicas when the selected ones are unavailable"
    )


class ExcludeReplicas(_ProtoJsonModel):
    """Replicas that must not serve the read."""

    replica_selections: List[ReplicaSelection] = Field(default_factory=list, max_length=MAX_REPLICA_SELECTIONS)


class DirectedReadOptions(_ProtoJsonModel):
    """Directed read options; exactly one of include or exclude replicas is set."""

    include_replicas: Optional[IncludeReplicas] = None
    exclude_replicas: Optional[ExcludeReplicas] = None

    @model_validator(mode="after")
    def _check_exactly_one(self) -> DirectedReadOptions:
        if (self.include_replicas is None) == (self.exclude_replicas is None):
            raise InvalidReadOptionsError("Exactly one of include_replicas or exclude_replicas must be set")
        return self

    @classmethod
    def include_replica_types(cls, *replica_types: ReplicaType) -> DirectedReadOptions:
        """Build options that include replicas of the given types."""
        return cls(
            include_replicas=IncludeReplicas(
                replica_selections=[ReplicaSelection(type=replica_type) for replica_type in replica_types]
            )
        )

    def to_json(self) -> str:
        """Render the protobuf JSON form accepted by ``spanner.directed_read``."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
