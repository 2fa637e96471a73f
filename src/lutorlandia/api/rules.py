"""Rule categories and the ordered rules inside them."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response, status

from lutorlandia.api.deps import OperatorDep, StorageDep
from lutorlandia.interfaces import IStorage
from lutorlandia.schemas import (
    RuleCategoryCreate,
    RuleCategoryRead,
    RuleCategoryUpdate,
    RuleCreate,
    RuleRead,
    RuleUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["rules"])


def _require_category(storage: IStorage, category_id: int) -> RuleCategoryRead:
    category = storage.get_rule_category(category_id)
    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="rule category not found"
        )
    return category


def _rule_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="rule not found")


@router.get("/categories", response_model=list[RuleCategoryRead])
async def list_categories(storage: StorageDep) -> list[RuleCategoryRead]:
    return storage.list_rule_categories()


@router.post(
    "/categories", response_model=RuleCategoryRead, status_code=status.HTTP_201_CREATED
)
async def create_category(
    payload: RuleCategoryCreate, storage: StorageDep, operator: OperatorDep
) -> RuleCategoryRead:
    return storage.create_rule_category(payload)


@router.get("/categories/{category_id}", response_model=RuleCategoryRead)
async def get_category(category_id: int, storage: StorageDep) -> RuleCategoryRead:
    return _require_category(storage, category_id)


@router.put("/categories/{category_id}", response_model=RuleCategoryRead)
async def update_category(
    category_id: int,
    payload: RuleCategoryUpdate,
    storage: StorageDep,
    operator: OperatorDep,
) -> RuleCategoryRead:
    category = storage.update_rule_category(category_id, payload)
    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="rule category not found"
        )
    return category


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int, storage: StorageDep, operator: OperatorDep
) -> Response:
    if not storage.delete_rule_category(category_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="rule category not found"
        )
    logger.info("%s deleted rule category %s and its rules", operator.username, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/categories/{category_id}/rules", response_model=list[RuleRead])
async def list_category_rules(category_id: int, storage: StorageDep) -> list[RuleRead]:
    _require_category(storage, category_id)
    return storage.list_rules(category_id)


@router.post("/rules", response_model=RuleRead, status_code=status.HTTP_201_CREATED)
async def create_rule(payload: RuleCreate, storage: StorageDep, operator: OperatorDep) -> RuleRead:
    _require_category(storage, payload.category_id)
    return storage.create_rule(payload)


@router.get("/rules/{rule_id}", response_model=RuleRead)
async def get_rule(rule_id: int, storage: StorageDep) -> RuleRead:
    rule = storage.get_rule(rule_id)
    if rule is None:
        raise _rule_not_found()
    return rule


@router.put("/rules/{rule_id}", response_model=RuleRead)
async def update_rule(
    rule_id: int, payload: RuleUpdate, storage: StorageDep, operator: OperatorDep
) -> RuleRead:
    if payload.category_id is not None:
        _require_category(storage, payload.category_id)
    rule = storage.update_rule(rule_id, payload)
    if rule is None:
        raise _rule_not_found()
    return rule


@router.delete("/rules/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_rule(rule_id: int, storage: StorageDep, operator: OperatorDep) -> Response:
    if not storage.delete_rule(rule_id):
        raise _rule_not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
