from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class StageType(str, Enum):
    """Cipher stages available to the pipeline."""

    SUBSTITUTION = "substitution"
    TRANSPOSITION = "transposition"


class CipherDirection(str, Enum):
    """Direction in which the pipeline is applied."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ============================================================================
# Key Schemas
# ============================================================================


class KeyParameters(BaseModel):
    """Transposition parameters derived from a key."""

    model_config = ConfigDict(from_attributes=True)

    key_length: int = Field(ge=1)
    block_size: int = Field(ge=3, le=9)
    digest: int = Field(ge=0)
    rotation: int = Field(ge=0)


class StageInfo(BaseModel):
    """Description of a registered cipher stage."""

    stage_type: StageType
    name: str
    description: str


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    text: str
    key: str


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str
    key: str


class KeyInspectRequest(BaseModel):
    """Request schema for /keys/inspect endpoint."""

    key: str


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    key_parameters: KeyParameters
    explanation: str


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    key_parameters: KeyParameters
    explanation: str


class StagesResponse(BaseModel):
    """Response schema for /stages endpoint."""

    stages: list[StageInfo]


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
