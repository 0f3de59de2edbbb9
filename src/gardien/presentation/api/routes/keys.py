"""
Admin key management API routes.

Provides endpoints for operators:
- GET /keys - List configured IPIDs and secrets
- POST /keys/add - Add or replace a secret
- DELETE /keys/delete/{ipid} - Remove a secret

All endpoints are gated by the configured admin auth mode.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from gardien.application.use_cases.manage_secrets import (
    AddSecret,
    DeleteSecret,
    ListSecrets,
)
from gardien.di.dependencies import (
    get_add_secret,
    get_delete_secret,
    get_list_secrets,
    require_admin,
)
from gardien.presentation.schemas.key_schemas import (
    AddKeyRequest,
    KeyEntry,
    KeyMutationResponse,
)

router = APIRouter(
    prefix="/keys",
    tags=["Keys"],
    dependencies=[Depends(require_admin)],
)


@router.get(
    "",
    response_model=List[KeyEntry],
    status_code=status.HTTP_200_OK,
    summary="List secrets",
)
async def list_keys(
    use_case: ListSecrets = Depends(get_list_secrets),
) -> List[KeyEntry]:
    """List every configured IPID with its key and IV."""
    secrets = use_case.execute()
    return [
        KeyEntry(ipid=ipid, key=secret.key, iv=secret.iv)
        for ipid, secret in sorted(secrets.items())
    ]


@router.post(
    "/add",
    response_model=KeyMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add secret",
    description="Add or replace a secret; omit key and iv to generate one",
)
async def add_key(
    request: AddKeyRequest,
    use_case: AddSecret = Depends(get_add_secret),
) -> KeyMutationResponse:
    """Store a secret for an IPID."""
    use_case.execute(ipid=request.ipid, key=request.key, iv=request.iv)
    return KeyMutationResponse(success=True, ipid=request.ipid)


@router.delete(
    "/delete/{ipid}",
    response_model=KeyMutationResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete secret",
)
async def delete_key(
    ipid: str,
    use_case: DeleteSecret = Depends(get_delete_secret),
) -> KeyMutationResponse:
    """Remove the secret for an IPID."""
    use_case.execute(ipid)
    return KeyMutationResponse(success=True, ipid=ipid)
