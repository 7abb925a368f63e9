import os
from dotenv import load_dotenv

load_dotenv()

# Upstream data API (product + identity records)
API_BASE_URL = os.getenv("API_BASE_URL", "https://sanctum-link-worker.danny-b41.workers.dev")

HTTP_CONNECT_TIMEOUT_S = float(os.getenv("HTTP_CONNECT_TIMEOUT_S", "3.0"))
HTTP_READ_TIMEOUT_S = float(os.getenv("HTTP_READ_TIMEOUT_S", "30.0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "console")  # "console" or "json"

# Field names inside identity payloads
KYC_STAGE0_FIELD = "kycVerifiedStage0"
VERIFIED_FLAG = "verifiedOnChain"

# Data-source scripts. "encoder" selects the ABI layout in encoder_service.
SOURCES = {
    "product_information": {
        "resource_kind": "product",
        "encoder": "flat_record",
        "expected_return_type": "bytes",
        "description": "Product price, stock and description for a product id",
    },
    "kyc_verified_stage0": {
        "resource_kind": "identity",
        "encoder": "keyed_map",
        "expected_return_type": "bytes",
        "description": "Every stage-0 KYC field for an identity token",
    },
    "kyc_disclosure": {
        "resource_kind": "identity",
        "encoder": "conditional_disclosure",
        "expected_return_type": "bytes",
        "description": "Identity fields, redacted unless verified on chain",
    },
}

# Which source the CLI simulates when none is given
REQUEST_SOURCE = os.getenv("REQUEST_SOURCE", "product_information")
REQUEST_ARGS = [a for a in os.getenv("REQUEST_ARGS", "1").split(",") if a != ""]
