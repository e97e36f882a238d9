"""
Catch-all route for requests that match no other endpoint.

This router must be included last.  It answers every method on every
path, which also turns "method not allowed" on a known path into the
same 404 as an unknown path.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def endpoint_not_found(path: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "Endpoint not found"})
