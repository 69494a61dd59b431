"""
Singers API Endpoints.

Lists singers and their albums using a read-only transaction.
"""

from typing import List

from fastapi import APIRouter, Query

from pgadapter_sample.server.schemas import SingerRead
from pgadapter_sample.server.services.deps import ContextDep

router = APIRouter()


@router.get(
    "",
    response_model=List[SingerRead],
    summary="List Singers",
    description="List singers whose last name starts with the given prefix, with their albums.",
)
async def list_singers(
    context: ContextDep,
    prefix: str = Query(default="", max_length=200, description="Case-sensitive last name prefix"),
) -> List[SingerRead]:
    singers = await context.singers.find_singers_with_last_name_starting_with(prefix)
    return [SingerRead.model_validate(singer) for singer in singers]
