"""ABI layouts for the data-source scripts.

Each encoder turns the identity argument plus the upstream JSON payload into an
EncodingSpec. ``encode_spec`` then produces the tuple encoding with eth_abi.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Sequence, Tuple

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError, EncodingError as AbiEncodingError

from sanctum_link.config import KYC_STAGE0_FIELD, VERIFIED_FLAG
from sanctum_link.models.enums import EncoderVariant
from sanctum_link.schemas.envelopes import EncodingSpec
from sanctum_link.services.errors import EncodingError

UINT256_MAX = 2**256 - 1
MAX_SAFE_FLOAT_INT = 2**53 - 1


def to_uint256(value: Any, field: str) -> int:
    """Strict integer coercion. Decimal strings, blanks and booleans are rejected."""
    if isinstance(value, bool) or value is None:
        raise EncodingError(f"{field} is not numeric: {value!r}")
    if isinstance(value, int):
        n = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise EncodingError(f"{field} is not an integer: {value!r}")
        if abs(value) > MAX_SAFE_FLOAT_INT:
            raise EncodingError(f"{field} is not a safe integer: {value!r}")
        n = int(value)
    elif isinstance(value, str):
        digits = value.strip()
        # plain ASCII digits only, no "1_000" or non-Latin numerals
        if not (digits.isascii() and digits.isdigit()):
            raise EncodingError(f"{field} is not an integer: {value!r}")
        n = int(digits, 10)
    else:
        raise EncodingError(f"{field} has unsupported type {type(value).__name__}")

    if n < 0 or n > UINT256_MAX:
        raise EncodingError(f"{field} out of uint256 range: {n}")
    return n


def _field(data: Any, key: str) -> Any:
    if not isinstance(data, Mapping):
        raise EncodingError(f"Expected an object with '{key}', got {type(data).__name__}")
    if key not in data:
        raise EncodingError(f"Missing field '{key}'")
    return data[key]


def encode_flat_record(identifier: str, data: Any) -> EncodingSpec:
    return EncodingSpec(
        types=["uint256", "uint256", "uint256", "string"],
        values=[
            to_uint256(identifier, "identifier"),
            to_uint256(_field(data, "price"), "price"),
            to_uint256(_field(data, "stock"), "stock"),
            _field(data, "description"),
        ],
    )


def encode_keyed_map(identity: str, data: Any) -> EncodingSpec:
    stage = _field(data, KYC_STAGE0_FIELD)
    if not isinstance(stage, Mapping):
        raise EncodingError(f"'{KYC_STAGE0_FIELD}' must be an object, got {type(stage).__name__}")

    spec = EncodingSpec(types=["string"], values=[identity])
    for key in stage:
        spec.push("string", stage[key])
    return spec


def _disclosed_field(record: Mapping) -> str:
    for key in record:
        if key != VERIFIED_FLAG:
            return key
    raise EncodingError(f"Record has no field besides '{VERIFIED_FLAG}'")


def disclose(identity: str, records: Sequence[Any]) -> EncodingSpec:
    spec = EncodingSpec(types=["string"], values=[identity])
    for i, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise EncodingError(f"Record {i} is not an object")
        key = _disclosed_field(record)
        # unverified fields keep their slot as ""
        spec.push("string", record[key] if record.get(VERIFIED_FLAG) else "")
    return spec


def encode_conditional_disclosure(identity: str, data: Any) -> EncodingSpec:
    records = _field(data, identity)
    if not isinstance(records, list):
        raise EncodingError(f"Records for '{identity}' must be an array, got {type(records).__name__}")
    return disclose(identity, records)


ENCODERS: Dict[str, Callable[[str, Any], EncodingSpec]] = {
    EncoderVariant.FLAT_RECORD.value: encode_flat_record,
    EncoderVariant.KEYED_MAP.value: encode_keyed_map,
    EncoderVariant.CONDITIONAL_DISCLOSURE.value: encode_conditional_disclosure,
}


def encode_spec(spec: EncodingSpec) -> bytes:
    if len(spec.types) != len(spec.values):
        raise EncodingError("ABI type list and value list differ in length",
                            {"types": len(spec.types), "values": len(spec.values)})
    try:
        return bytes(encode(spec.types, spec.values))
    except (AbiEncodingError, TypeError, ValueError) as e:
        raise EncodingError(f"ABI encoding failed: {e}")


def decode_result(types: List[str], encoded: bytes) -> Tuple[Any, ...]:
    try:
        return tuple(decode(types, encoded))
    except DecodingError as e:
        raise EncodingError(f"ABI decoding failed: {e}")
