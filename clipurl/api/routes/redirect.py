"""Short code redirection endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import RedirectResponse

from clipurl.api import schemas
from clipurl.api.dependencies import get_redirector
from clipurl.db.session import get_db
from clipurl.services.exceptions import LinkNotFoundError
from clipurl.services.redirector import Redirector

router = APIRouter(tags=["redirect"])


@router.get(
    "/{code}",
    response_class=RedirectResponse,
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    responses={
        404: {"model": schemas.ErrorResponse, "description": "Unknown short code"}
    }
)
async def redirect_to_original_url(
    code: str,
    db: AsyncSession = Depends(get_db),
    redirector: Redirector = Depends(get_redirector),
):
    """Redirect to the destination stored for ``code``."""
    try:
        original_url = await redirector.resolve(db, code)
    except LinkNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return RedirectResponse(url=original_url)
