from fastapi import APIRouter, Depends, HTTPException

from sanctum_link.config import SOURCES
from sanctum_link.schemas.runs import RunRequest, RunResponse, SourceInfo
from sanctum_link.services.http_service_client import HTTPServiceClient
from sanctum_link.services.pipeline_service import PipelineService

router = APIRouter()

# failure code -> HTTP status
STATUS_BY_CODE = {
    "UNKNOWN_SOURCE": 404,
    "INVALID_ARGS": 400,
    "REQUEST_FAILED": 502,
    "ENCODING_ERROR": 422,
}

def get_pipeline() -> PipelineService:
    return PipelineService(HTTPServiceClient())

@router.get("/sources")
def list_sources():
    return [SourceInfo(name=name, **conf) for name, conf in SOURCES.items()]

@router.post("/requests", response_model=RunResponse)
def run_request(req: RunRequest, pipeline: PipelineService = Depends(get_pipeline)):
    result = pipeline.run(req.source, req.args)
    if not result.ok:
        raise HTTPException(
            STATUS_BY_CODE.get(result.code, 500),
            {"code": result.code, "message": result.message},
        )

    return RunResponse(
        success=True,
        source=result.source,
        encoded="0x" + result.encoded.hex(),
        types=result.types,
        expected_return_type=result.expected_return_type,
    )
