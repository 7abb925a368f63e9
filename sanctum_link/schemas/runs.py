from pydantic import BaseModel, Field
from typing import List
from sanctum_link.models.enums import ReturnType

class RequestConfig(BaseModel):
    source: str
    args: List[str] = Field(default_factory=list)
    expected_return_type: ReturnType = ReturnType.BYTES

class RunRequest(BaseModel):
    source: str
    args: List[str] = Field(default_factory=list)

class RunResponse(BaseModel):
    success: bool
    source: str
    encoded: str  # 0x-prefixed hex of the ABI bytes
    types: List[str]
    expected_return_type: ReturnType

class SourceInfo(BaseModel):
    name: str
    resource_kind: str
    encoder: str
    expected_return_type: ReturnType
    description: str = ""
