"""FastAPI router for the business profile."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from bizinsight.business.dependencies import get_profile_store
from bizinsight.business.schemas import (
    BusinessProfile,
    BusinessProfileUpdate,
    FinancialSummary,
)
from bizinsight.business.service import ProfileStore, summarize
from bizinsight.utils.logger import logger

router = APIRouter(prefix="/profile", tags=["Business Profile"])


@router.get("", response_model=BusinessProfile)
async def get_profile(
    store: Annotated[ProfileStore, Depends(get_profile_store)],
) -> BusinessProfile:
    """Return the current business profile."""
    return store.get()


@router.put("", response_model=BusinessProfile)
async def replace_profile(
    profile: BusinessProfile,
    store: Annotated[ProfileStore, Depends(get_profile_store)],
) -> BusinessProfile:
    """Replace the whole business profile."""
    return store.replace(profile)


@router.patch("", response_model=BusinessProfile)
async def update_profile(
    changes: BusinessProfileUpdate,
    store: Annotated[ProfileStore, Depends(get_profile_store)],
) -> BusinessProfile:
    """
    Edit individual profile fields.

    Raises:
        HTTPException: 422 if the edited profile fails validation
    """
    try:
        return store.update(changes)
    except ValidationError as e:
        logger.warning("Rejected profile update", error=str(e))
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False),
        )


@router.get("/summary", response_model=FinancialSummary)
async def get_summary(
    store: Annotated[ProfileStore, Depends(get_profile_store)],
) -> FinancialSummary:
    """Net profit and chart data for the current profile."""
    return summarize(store.get())
