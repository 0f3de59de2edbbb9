"""
Secret release API routes.

Provides endpoints for content buyers:
- POST /decrypt - Release the content key/IV after purchase verification
- POST /ping - Pre-flight check that an IPID is configured
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from gardien.application.use_cases.check_secret_configured import (
    CheckSecretConfigured,
)
from gardien.application.use_cases.release_secret import ReleaseSecret
from gardien.di.dependencies import get_check_secret_configured, get_release_secret
from gardien.infrastructure.monitoring import get_logger
from gardien.presentation.schemas.decrypt_schemas import (
    DecryptRequest,
    DecryptResponse,
    PingRequest,
    PingResponse,
)

logger = get_logger(__name__)

router = APIRouter(tags=["Decrypt"])


@router.post(
    "/decrypt",
    response_model=DecryptResponse,
    status_code=status.HTTP_200_OK,
    summary="Release content secret",
    description="Verify buyer signature and on-chain purchase, then return key/IV",
)
async def decrypt(
    request: DecryptRequest,
    use_case: ReleaseSecret = Depends(get_release_secret),
) -> DecryptResponse:
    """
    Release the decryption secret for purchased content.

    Flow:
    1. Validate request fields and IPID configuration
    2. Verify buyer signature
    3. Derive listing and purchase PDAs
    4. Check purchase account on ledger
    5. Return key/IV

    Domain errors are mapped to HTTP responses by the global handler.
    """
    result = await use_case.execute(
        buyer_public_key=request.buyerPublicKey,
        signature=request.signature,
        message=request.message,
        ipid=request.ipid,
    )

    return DecryptResponse(key=result.secret.key, iv=result.secret.iv)


@router.post(
    "/ping",
    response_model=PingResponse,
    status_code=status.HTTP_200_OK,
    summary="Check IPID configuration",
    description="Pre-flight check that the key service knows this IPID",
)
async def ping(
    request: PingRequest,
    use_case: CheckSecretConfigured = Depends(get_check_secret_configured),
):
    """Return success if a secret is configured for the IPID."""
    if use_case.execute(request.ipid or ""):
        return PingResponse(success=True)

    logger.info(f"Key service not configured for IPID {request.ipid}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": f"Key service not configured for IPID {request.ipid}",
            "code": "NOT_CONFIGURED",
        },
    )
