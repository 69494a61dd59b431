"""
Concerts API Endpoints.

Lists concerts with a strong read by default. A read timestamp or an exact
staleness turns the request into a stale read, and a replica type directs
the read to replicas of that type.
"""

from datetime import datetime, timedelta
from typing import List, Optional

from fastapi import APIRouter, Query

from pgadapter_sample.application import find_all_concerts
from pgadapter_sample.core.models import DirectedReadOptions, ReplicaType, TimestampBound
from pgadapter_sample.errors import InvalidReadOptionsError
from pgadapter_sample.server.schemas import ConcertRead
from pgadapter_sample.server.services.deps import ContextDep

router = APIRouter()


def build_timestamp_bound(
    read_timestamp: Optional[datetime], exact_staleness_seconds: Optional[float]
) -> Optional[TimestampBound]:
    if read_timestamp is not None and exact_staleness_seconds is not None:
        raise InvalidReadOptionsError("read_timestamp and exact_staleness_seconds are mutually exclusive")
    if read_timestamp is not None:
        return TimestampBound.read_timestamp(read_timestamp)
    if exact_staleness_seconds is not None:
        return TimestampBound.exact_staleness(timedelta(seconds=exact_staleness_seconds))
    return None


@router.get(
    "",
    response_model=List[ConcertRead],
    summary="List Concerts",
    description="List all concerts, optionally as a stale read and/or a directed read.",
    responses={422: {"description": "Invalid combination of read options"}},
)
async def list_concerts(
    context: ContextDep,
    read_timestamp: Optional[datetime] = Query(default=None, description="Read at this timezone-aware timestamp"),
    exact_staleness_seconds: Optional[float] = Query(
        default=None, ge=0, description="Read at a timestamp this many seconds in the past"
    ),
    replica_type: Optional[ReplicaType] = Query(default=None, description="Only read from replicas of this type"),
) -> List[ConcertRead]:
    """
    List concerts.

    Without read options the concerts are read with a strong read. Otherwise
    they are read in a read-only transaction with the requested timestamp
    bound and directed read options.
    """
    timestamp_bound = build_timestamp_bound(read_timestamp, exact_staleness_seconds)
    directed_read_options = (
        DirectedReadOptions.include_replica_types(replica_type) if replica_type is not None else None
    )
    if timestamp_bound is None and directed_read_options is None:
        concerts = await context.concerts.find_all_concerts()
    else:
        concerts = await context.read_only_transactions.execute(
            find_all_concerts,
            timestamp_bound=timestamp_bound,
            directed_read_options=directed_read_options,
        )
    return [ConcertRead.model_validate(concert) for concert in concerts]
