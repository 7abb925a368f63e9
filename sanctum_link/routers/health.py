from fastapi import APIRouter
import requests
from sanctum_link.config import API_BASE_URL, HTTP_CONNECT_TIMEOUT_S

router = APIRouter()

@router.get("/health")
def health():
    return {"ok": True}

@router.get("/health/upstream")
def health_upstream():
    try:
        r = requests.get(API_BASE_URL, timeout=(HTTP_CONNECT_TIMEOUT_S, 2))
        # any HTTP answer means the host is reachable
        return {"url": API_BASE_URL, "ok": r.status_code < 500, "status_code": r.status_code}
    except requests.RequestException as e:
        return {"url": API_BASE_URL, "ok": False, "error": str(e)}
