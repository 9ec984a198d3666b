"""
People Search API Router.

Endpoint for searching the organization directory by person name.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from core.database import DBSession
from core.schemas import PeopleSearchResponse
from services.people_search import search_people

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/people", tags=["People"])


@router.get(
    "",
    response_model=PeopleSearchResponse,
    summary="Search people by name",
    description="Return people whose name contains the search term, with their department.",
)
async def search(
    db: DBSession,
    search: Annotated[
        str,
        Query(max_length=255, description="Name substring (at most 255 characters); empty returns everyone"),
    ] = "",
) -> PeopleSearchResponse:
    """
    Search people by name substring.

    Raises:
        HTTPException 503: If the directory database is missing or unreachable.
        HTTPException 500: On any other database error.
    """
    try:
        results = await search_people(db, search)
    except OperationalError as e:
        logger.error(f"Directory database unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Directory database is unavailable",
        )
    except SQLAlchemyError as e:
        logger.exception(f"Error searching people: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search people",
        )

    return PeopleSearchResponse(results=results)
