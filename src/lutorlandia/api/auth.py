"""Operator login backed by a signed session cookie."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, status
from starlette.concurrency import run_in_threadpool

from lutorlandia.api.deps import SESSION_USER_KEY, OperatorDep, StorageDep
from lutorlandia.schemas import LoginRequest, UserRead
from lutorlandia.security import verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=UserRead)
async def login(payload: LoginRequest, request: Request, storage: StorageDep) -> UserRead:
    user = storage.get_user_by_username(payload.username)
    valid = user is not None and await run_in_threadpool(
        verify_password, payload.password, user.password_hash
    )
    if not valid:
        logger.warning("failed login for %r", payload.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid credentials")
    request.session.clear()
    request.session[SESSION_USER_KEY] = user.id
    logger.info("operator %r logged in", user.username)
    return UserRead.model_validate(user)


@router.post("/logout")
async def logout(request: Request) -> dict[str, str]:
    request.session.clear()
    return {"status": "ok"}


@router.get("/user", response_model=UserRead)
async def current_user(operator: OperatorDep) -> UserRead:
    return UserRead(id=operator.id, username=operator.username)
