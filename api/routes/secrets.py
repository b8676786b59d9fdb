"""
Secret resolution API endpoints.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_secret_source
from schemas.secrets import (
    ErrorResponse,
    ResolvedReference,
    ResolveRequest,
    ResolveResponse,
    ResolverStatusResponse,
)
from services.errors import SecretSourceError
from services.secret_source import GcpSecretManagerSecretSource

router = APIRouter(prefix="/secrets", tags=["secrets"])


@router.post(
    "/resolve",
    response_model=ResolveResponse,
    responses={502: {"model": ErrorResponse}},
)
def resolve_references(
    request: ResolveRequest,
    source: GcpSecretManagerSecretSource = Depends(get_secret_source),
):
    """
    Resolve a batch of references within the current pass.

    References without the configured prefix come back with found=false.
    The first unrecoverable failure aborts the whole batch.
    """
    results = []
    for reference in request.references:
        try:
            value = source.reveal(reference)
        except SecretSourceError as e:
            return JSONResponse(
                status_code=502,
                content=ErrorResponse(kind=e.kind, detail=str(e)).model_dump(mode="json"),
            )

        results.append(
            ResolvedReference(reference=reference, found=value is not None, value=value)
        )

    return ResolveResponse(results=results)


@router.get("/status", response_model=ResolverStatusResponse)
async def resolver_status(
    source: GcpSecretManagerSecretSource = Depends(get_secret_source),
):
    """Current prefix and the backend paths cached in this pass (never values)."""
    return ResolverStatusResponse(prefix=source.prefix, cached_paths=source.cached_paths())


@router.post("/reload", response_model=ResolverStatusResponse)
def reload_resolver(
    source: GcpSecretManagerSecretSource = Depends(get_secret_source),
):
    """Start a new resolution pass: re-read the prefix and discard cached values."""
    source.init()
    return ResolverStatusResponse(prefix=source.prefix, cached_paths=source.cached_paths())
