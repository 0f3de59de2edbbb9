"""
Admin key management API schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field


class KeyEntry(BaseModel):
    """One configured IPID and its secret."""

    ipid: str
    key: str
    iv: str


class AddKeyRequest(BaseModel):
    """Request to add or replace a secret. Omit key and iv to generate."""

    ipid: Optional[str] = Field(None, description="Content identifier")
    key: Optional[str] = Field(None, description="Content key")
    iv: Optional[str] = Field(None, description="Content IV")


class KeyMutationResponse(BaseModel):
    """Result of an admin mutation."""

    success: bool = Field(default=True)
    ipid: str
