import time
import structlog
from typing import Any, Dict, List, Sequence
from sanctum_link.config import API_BASE_URL, SOURCES
from sanctum_link.models.enums import ReturnType
from sanctum_link.schemas.envelopes import EncodingSpec, HttpResponse
from sanctum_link.schemas.results import PipelineFailure, PipelineResult, PipelineSuccess
from sanctum_link.services.encoder_service import ENCODERS, encode_spec
from sanctum_link.services.errors import InvalidArgumentsError, PipelineError, TransportError
from sanctum_link.services.http_service_client import HTTPServiceClient

logger = structlog.get_logger().bind(component="pipeline")

class PipelineService:
    """Fetch -> validate -> encode for one data-source script.

    Every call is independent: no state survives between invocations.
    """

    def __init__(self, client: HTTPServiceClient, base_url: str = API_BASE_URL):
        self.client = client
        self.base_url = base_url.rstrip("/")

    def source_conf(self, source_name: str) -> Dict[str, Any]:
        conf = SOURCES.get(source_name)
        if not conf:
            raise PipelineError("UNKNOWN_SOURCE", f"No config for {source_name}", False)
        return conf

    def parse_args(self, args: Sequence[str]) -> str:
        if not args:
            raise InvalidArgumentsError("args[0] is required")
        first = args[0]
        if not isinstance(first, str) or first == "":
            raise InvalidArgumentsError("args[0] must be a non-empty string", {"args": list(args)})
        return first

    def build_url(self, resource_kind: str, identifier: str) -> str:
        return f"{self.base_url}/api/v1/{resource_kind}/{identifier}"

    def fetch(self, url: str) -> HttpResponse:
        return self.client.get(url)

    def has_error(self, res: HttpResponse) -> bool:
        # containers count as errors even when empty; falsy scalars do not
        if isinstance(res.error, (dict, list)):
            return True
        return bool(res.error)

    def validate(self, res: HttpResponse) -> Any:
        if self.has_error(res):
            logger.error("request_failed", error=res.error)
            raise TransportError(res.error)
        # payload shape is checked by the encoder, not here
        return res.data

    def encode(self, encoder_name: str, identifier: str, data: Any) -> EncodingSpec:
        return ENCODERS[encoder_name](identifier, data)

    def execute(self, source_name: str, args: Sequence[str]) -> PipelineSuccess:
        conf = self.source_conf(source_name)
        identifier = self.parse_args(args)

        url = self.build_url(conf["resource_kind"], identifier)
        logger.info("pipeline_start", source=source_name, url=url)

        t0 = time.time()
        res = self.fetch(url)
        fetch_ms = int((time.time() - t0) * 1000)

        data = self.validate(res)
        spec = self.encode(conf["encoder"], identifier, data)
        encoded = encode_spec(spec)

        logger.info("pipeline_encoded", source=source_name, fields=len(spec),
                    size=len(encoded), fetch_ms=fetch_ms)
        return PipelineSuccess(
            source=source_name,
            encoded=encoded,
            types=list(spec.types),
            expected_return_type=ReturnType(conf.get("expected_return_type", "bytes")),
        )

    def run(self, source_name: str, args: List[str]) -> PipelineResult:
        try:
            return self.execute(source_name, args)
        except PipelineError as e:
            return PipelineFailure(
                source=source_name,
                code=e.code,
                message=str(e),
                retryable=e.retryable,
                details=e.details,
            )
