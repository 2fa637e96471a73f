"""Service-level routes outside the ``/api`` prefix."""

from __future__ import annotations

from fastapi import APIRouter

from lutorlandia.api.deps import StorageDep

router = APIRouter()


@router.get("/health")
async def health(storage: StorageDep) -> dict[str, object]:
    return {"status": "ok", "storage": storage.backend_name}
