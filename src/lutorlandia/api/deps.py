"""Request dependencies shared by the route modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from lutorlandia.api.runtime import ApiState
from lutorlandia.interfaces import IStorage

SESSION_USER_KEY = "user_id"


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


def get_storage(state: ApiStateDep) -> IStorage:
    return state.storage


StorageDep = Annotated[IStorage, Depends(get_storage)]


@dataclass(frozen=True, slots=True)
class Operator:
    """The authenticated staff account behind the current request."""

    id: int
    username: str


def current_operator(request: Request, storage: StorageDep) -> Operator | None:
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None
    user = storage.get_user(int(user_id))
    if user is None:
        # Account vanished, e.g. the in-memory store was rebuilt
        request.session.clear()
        return None
    return Operator(id=user.id, username=user.username)


def require_operator(
    operator: Annotated[Operator | None, Depends(current_operator)],
) -> Operator:
    if operator is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="not authenticated")
    return operator


OperatorDep = Annotated[Operator, Depends(require_operator)]
