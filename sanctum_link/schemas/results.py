from pydantic import BaseModel
from typing import Any, List, Literal, Optional, Union
from sanctum_link.models.enums import ReturnType

class PipelineSuccess(BaseModel):
    status: Literal["SUCCESS"] = "SUCCESS"
    source: str
    encoded: bytes
    types: List[str]
    expected_return_type: ReturnType = ReturnType.BYTES

    @property
    def ok(self) -> bool:
        return True

class PipelineFailure(BaseModel):
    status: Literal["FAILED"] = "FAILED"
    source: str
    code: str
    message: str
    retryable: bool = False
    details: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return False

PipelineResult = Union[PipelineSuccess, PipelineFailure]
