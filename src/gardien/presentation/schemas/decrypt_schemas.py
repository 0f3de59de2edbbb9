"""
Secret release API schemas.

Fields are optional at the schema level so that a missing field is
reported by the use case as 400, not as a 422 validation error.
"""

from typing import Optional

from pydantic import BaseModel, Field

# ================================================================
# Decrypt Schemas
# ================================================================


class DecryptRequest(BaseModel):
    """Request to release the secret for purchased content."""

    buyerPublicKey: Optional[str] = Field(
        None,
        description="Buyer wallet address (base58)",
        examples=["kshy5yns5FGGXcFVfjT2fTzVsQLFnbZzL9zuh1ZKR2y"],
    )
    signature: Optional[str] = Field(
        None, description="Signature over message (base58 encoded)"
    )
    message: Optional[str] = Field(None, description="Original message that was signed")
    ipid: Optional[str] = Field(None, description="Content identifier")


class DecryptResponse(BaseModel):
    """Released content secret."""

    key: str = Field(..., description="Content decryption key")
    iv: str = Field(..., description="Content initialization vector")


# ================================================================
# Ping Schemas
# ================================================================


class PingRequest(BaseModel):
    """Pre-flight check for an IPID."""

    ipid: Optional[str] = Field(None, description="Content identifier")


class PingResponse(BaseModel):
    """Pre-flight success."""

    success: bool = Field(default=True)
