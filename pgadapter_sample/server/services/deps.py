"""
Sample Context Dependency.

Provides the sample context created by the application lifespan to API endpoints.
"""

from typing import Annotated

from fastapi import Depends, Request

from pgadapter_sample.application import SampleContext


def get_context(request: Request) -> SampleContext:
    return request.app.state.context


ContextDep = Annotated[SampleContext, Depends(get_context)]
