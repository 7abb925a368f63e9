from pydantic import BaseModel, Field, model_validator
from typing import Any, List, Optional

class HttpResponse(BaseModel):
    """Result of the single outbound GET: an error marker or the JSON payload."""
    error: Optional[Any] = None
    data: Any = None

class EncodingSpec(BaseModel):
    types: List[str] = Field(default_factory=list)
    values: List[Any] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_aligned(self):
        if len(self.types) != len(self.values):
            raise ValueError(f"{len(self.types)} ABI types for {len(self.values)} values")
        return self

    def push(self, abi_type: str, value: Any):
        # types and values only ever grow together
        self.types.append(abi_type)
        self.values.append(value)

    def __len__(self) -> int:
        return len(self.types)
