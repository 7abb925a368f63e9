from enum import Enum

class ReturnType(str, Enum):
    UINT256 = "uint256"
    INT256 = "int256"
    STRING = "string"
    BYTES = "bytes"

class EncoderVariant(str, Enum):
    FLAT_RECORD = "flat_record"
    KEYED_MAP = "keyed_map"
    CONDITIONAL_DISCLOSURE = "conditional_disclosure"