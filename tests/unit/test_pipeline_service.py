import pytest
from unittest.mock import MagicMock
from eth_abi import decode

from sanctum_link.models.enums import ReturnType
from sanctum_link.schemas.envelopes import HttpResponse
from sanctum_link.services.errors import InvalidArgumentsError, PipelineError, TransportError
from sanctum_link.services.pipeline_service import PipelineService

def make_pipeline(response: HttpResponse) -> PipelineService:
    client = MagicMock()
    client.get.return_value = response
    return PipelineService(client, base_url="https://api.example.test/")

def test_product_request_success():
    pipeline = make_pipeline(HttpResponse(data={"price": "250", "stock": "4", "description": "Lamp"}))

    result = pipeline.run("product_information", ["42"])

    assert result.ok
    assert result.expected_return_type == ReturnType.BYTES
    assert decode(result.types, result.encoded) == (42, 250, 4, "Lamp")
    pipeline.client.get.assert_called_once_with("https://api.example.test/api/v1/product/42")

def test_identity_sources_hit_identity_resource():
    pipeline = make_pipeline(HttpResponse(data={"kycVerifiedStage0": {"a": "x", "b": "y"}}))

    result = pipeline.run("kyc_verified_stage0", ["ID1"])

    assert result.ok
    assert decode(result.types, result.encoded) == ("ID1", "x", "y")
    pipeline.client.get.assert_called_once_with("https://api.example.test/api/v1/identity/ID1")

def test_disclosure_request_success():
    records = [{"name": "Alice", "verifiedOnChain": True}, {"age": "30", "verifiedOnChain": False}]
    pipeline = make_pipeline(HttpResponse(data={"ID1": records}))

    result = pipeline.run("kyc_disclosure", ["ID1"])

    assert result.ok
    assert decode(result.types, result.encoded) == ("ID1", "Alice", "")

def test_error_marker_fails_without_encoding(mocker):
    encoder = mocker.patch("sanctum_link.services.pipeline_service.encode_spec")
    pipeline = make_pipeline(HttpResponse(error={"code": "SERVICE_HTTP_ERROR", "status_code": 500}))

    result = pipeline.run("product_information", ["1"])

    assert not result.ok
    assert result.code == "REQUEST_FAILED"
    assert result.message == "Request failed"
    assert result.retryable is False
    encoder.assert_not_called()

@pytest.mark.parametrize("error", [{}, [], True, "timeout", {"code": "X"}])
def test_any_error_marker_fails(error):
    pipeline = make_pipeline(HttpResponse(error=error, data={"price": 1, "stock": 1, "description": "x"}))
    result = pipeline.run("product_information", ["1"])
    assert result.code == "REQUEST_FAILED"

@pytest.mark.parametrize("error", [None, False, 0, ""])
def test_falsy_scalar_error_is_no_error(error):
    pipeline = make_pipeline(HttpResponse(error=error, data={"price": 1, "stock": 1, "description": "x"}))
    assert pipeline.run("product_information", ["1"]).ok

def test_execute_raises_transport_error():
    pipeline = make_pipeline(HttpResponse(error=True, data={"price": 1, "stock": 1, "description": "x"}))
    with pytest.raises(TransportError, match="Request failed"):
        pipeline.execute("product_information", ["1"])

def test_malformed_payload_fails_in_encode_stage():
    pipeline = make_pipeline(HttpResponse(data={"price": "19.99", "stock": 1, "description": "x"}))

    result = pipeline.run("product_information", ["1"])

    assert not result.ok
    assert result.code == "ENCODING_ERROR"

def test_missing_payload_field_fails_in_encode_stage():
    pipeline = make_pipeline(HttpResponse(data={}))
    result = pipeline.run("kyc_verified_stage0", ["ID1"])
    assert result.code == "ENCODING_ERROR"

@pytest.mark.parametrize("args", [[], [""]])
def test_first_arg_required(args):
    pipeline = make_pipeline(HttpResponse(data={}))

    with pytest.raises(InvalidArgumentsError):
        pipeline.execute("product_information", args)
    pipeline.client.get.assert_not_called()

def test_extra_args_ignored():
    pipeline = make_pipeline(HttpResponse(data={"price": 1, "stock": 2, "description": "d"}))
    assert pipeline.run("product_information", ["3", "ignored"]).ok

def test_unknown_source():
    pipeline = make_pipeline(HttpResponse(data={}))

    with pytest.raises(PipelineError) as exc:
        pipeline.execute("nope", ["1"])
    assert exc.value.code == "UNKNOWN_SOURCE"

    result = pipeline.run("nope", ["1"])
    assert result.status == "FAILED"

def test_one_fetch_per_invocation():
    pipeline = make_pipeline(HttpResponse(data={"price": 1, "stock": 2, "description": "d"}))

    first = pipeline.run("product_information", ["5"])
    second = pipeline.run("product_information", ["5"])

    assert pipeline.client.get.call_count == 2
    assert first.encoded == second.encoded
