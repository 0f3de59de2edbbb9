"""
Health check API routes.
"""

from fastapi import APIRouter, status

from gardien.di.container import get_container

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """
    Service health.

    Reports secret store size and ledger configuration. Does not call the
    ledger, so a slow RPC node never fails the probe.
    """
    container = get_container()
    settings = container.settings

    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "components": {
            "secret_store": {
                "status": "healthy",
                "configured_ipids": container.secret_store.count(),
            },
            "ledger": {
                "rpc_configured": bool(settings.SOLANA_RPC_URL),
                "commitment": settings.SOLANA_COMMITMENT,
                "program_id": settings.PROGRAM_ID,
            },
            "admin_auth": settings.ADMIN_AUTH_MODE,
        },
    }
