"""Schemas for rule categories and rules.

Create payloads carry no ``order``: storage assigns it. Update payloads may
set it explicitly.
"""

from pydantic import Field

from .base import ApiModel, TimestampedRecord, UpdateModel


class RuleCategoryCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(...)


class RuleCategoryUpdate(UpdateModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    order: int | None = Field(None, ge=0)


class RuleCategoryRead(TimestampedRecord):
    name: str
    description: str
    order: int


class RuleCreate(ApiModel):
    category_id: int = Field(..., description="Owning category")
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(...)


class RuleUpdate(UpdateModel):
    category_id: int | None = None
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    order: int | None = Field(None, ge=0)


class RuleRead(TimestampedRecord):
    category_id: int
    title: str
    description: str
    order: int
