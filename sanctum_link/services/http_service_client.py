import requests
import structlog
from typing import Any, Dict, Optional
from sanctum_link.config import HTTP_CONNECT_TIMEOUT_S, HTTP_READ_TIMEOUT_S
from sanctum_link.schemas.envelopes import HttpResponse

logger = structlog.get_logger().bind(component="http_client")

class HTTPServiceClient:
    """GET-only client that reports failures in HttpResponse.error instead of raising."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests

    def _error(self, code: str, message: str, status_code: Optional[int] = None, details: Any = None) -> Dict[str, Any]:
        err = {"code": code, "message": message}
        if status_code is not None:
            err["status_code"] = status_code
        if details is not None:
            err["details"] = details
        return err

    def _parse_error(self, resp: requests.Response) -> Dict[str, Any]:
        try:
            body = resp.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            err = body["error"]
            return self._error(
                err.get("code", "SERVICE_ERROR"),
                err.get("message", f"HTTP {resp.status_code}"),
                resp.status_code,
                err,
            )

        return self._error(
            "SERVICE_HTTP_ERROR",
            f"Service returned HTTP {resp.status_code}",
            resp.status_code,
            body if isinstance(body, (dict, list)) else None,
        )

    def get(self, url: str) -> HttpResponse:
        timeout = (HTTP_CONNECT_TIMEOUT_S, HTTP_READ_TIMEOUT_S)

        try:
            resp = self.session.get(url, timeout=timeout)
        except requests.Timeout as e:
            return HttpResponse(error=self._error("SERVICE_TIMEOUT", str(e)))
        except requests.RequestException as e:
            return HttpResponse(error=self._error("SERVICE_UNREACHABLE", str(e)))

        if resp.status_code < 200 or resp.status_code >= 300:
            return HttpResponse(error=self._parse_error(resp))

        try:
            data = resp.json()
        except ValueError:
            return HttpResponse(error=self._error("BAD_RESPONSE", "Service returned non-JSON", resp.status_code))

        logger.debug("http_get_ok", url=url, status_code=resp.status_code)
        return HttpResponse(data=data)
