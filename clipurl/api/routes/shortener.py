from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from clipurl.api import schemas
from clipurl.api.dependencies import get_alias_resolver
from clipurl.db.session import get_db
from clipurl.services.exceptions import AliasConflictError, LinkCreationError
from clipurl.services.resolver import AliasResolver

router = APIRouter(tags=["shortener"])


@router.post(
    "/shorten",
    response_model=schemas.ShortenResponse,
    status_code=status.HTTP_200_OK,
    responses={
        409: {"model": schemas.ErrorResponse, "description": "Alias already taken"}
    }
)
async def shorten_url(
    payload: schemas.ShortenRequest,
    db: AsyncSession = Depends(get_db),
    resolver: AliasResolver = Depends(get_alias_resolver),
):
    try:
        short_url = await resolver.create(
            db=db,
            original_url=payload.original_url,
            short_code=payload.custom_alias,
        )
    except AliasConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except LinkCreationError as e:
        logger.error("Short link creation failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to create short link")
    return schemas.ShortenResponse(short_url=short_url)
