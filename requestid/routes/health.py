from fastapi import APIRouter

from requestid import __version__
from requestid.settings import settings

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/v1/health")
def health_v1():
    return {"ok": True, "version": __version__, "app": settings.app_name}
