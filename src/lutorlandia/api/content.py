"""Staff roster, announcements and server status snapshots."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response, status

from lutorlandia.api.deps import OperatorDep, StorageDep
from lutorlandia.schemas import (
    AnnouncementCreate,
    AnnouncementRead,
    AnnouncementUpdate,
    ServerStatusCreate,
    ServerStatusRead,
    StaffMemberCreate,
    StaffMemberRead,
    StaffMemberUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["content"])


def _not_found(what: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} not found")


# Staff


@router.get("/staff", response_model=list[StaffMemberRead])
async def list_staff(storage: StorageDep) -> list[StaffMemberRead]:
    return storage.list_staff_members()


@router.post("/staff", response_model=StaffMemberRead, status_code=status.HTTP_201_CREATED)
async def create_staff(
    payload: StaffMemberCreate, storage: StorageDep, operator: OperatorDep
) -> StaffMemberRead:
    member = storage.create_staff_member(payload)
    logger.info("%s added staff member %s (%s)", operator.username, member.id, member.name)
    return member


@router.get("/staff/{member_id}", response_model=StaffMemberRead)
async def get_staff(member_id: int, storage: StorageDep) -> StaffMemberRead:
    member = storage.get_staff_member(member_id)
    if member is None:
        raise _not_found("staff member")
    return member


@router.put("/staff/{member_id}", response_model=StaffMemberRead)
async def update_staff(
    member_id: int, payload: StaffMemberUpdate, storage: StorageDep, operator: OperatorDep
) -> StaffMemberRead:
    member = storage.update_staff_member(member_id, payload)
    if member is None:
        raise _not_found("staff member")
    return member


@router.delete("/staff/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_staff(member_id: int, storage: StorageDep, operator: OperatorDep) -> Response:
    if not storage.delete_staff_member(member_id):
        raise _not_found("staff member")
    logger.info("%s removed staff member %s", operator.username, member_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Announcements


@router.get("/announcements", response_model=list[AnnouncementRead])
async def list_announcements(storage: StorageDep) -> list[AnnouncementRead]:
    return storage.list_announcements()


@router.post(
    "/announcements", response_model=AnnouncementRead, status_code=status.HTTP_201_CREATED
)
async def create_announcement(
    payload: AnnouncementCreate, storage: StorageDep, operator: OperatorDep
) -> AnnouncementRead:
    announcement = storage.create_announcement(payload)
    logger.info("%s published announcement %s", operator.username, announcement.id)
    return announcement


@router.get("/announcements/{announcement_id}", response_model=AnnouncementRead)
async def get_announcement(announcement_id: int, storage: StorageDep) -> AnnouncementRead:
    announcement = storage.get_announcement(announcement_id)
    if announcement is None:
        raise _not_found("announcement")
    return announcement


@router.put("/announcements/{announcement_id}", response_model=AnnouncementRead)
async def update_announcement(
    announcement_id: int,
    payload: AnnouncementUpdate,
    storage: StorageDep,
    operator: OperatorDep,
) -> AnnouncementRead:
    announcement = storage.update_announcement(announcement_id, payload)
    if announcement is None:
        raise _not_found("announcement")
    return announcement


@router.delete("/announcements/{announcement_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_announcement(
    announcement_id: int, storage: StorageDep, operator: OperatorDep
) -> Response:
    if not storage.delete_announcement(announcement_id):
        raise _not_found("announcement")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Server status


@router.get("/server-status", response_model=ServerStatusRead)
async def latest_server_status(storage: StorageDep) -> ServerStatusRead:
    snapshot = storage.latest_server_status()
    if snapshot is None:
        raise _not_found("server status")
    return snapshot


@router.post(
    "/server-status", response_model=ServerStatusRead, status_code=status.HTTP_201_CREATED
)
async def record_server_status(
    payload: ServerStatusCreate, storage: StorageDep, operator: OperatorDep
) -> ServerStatusRead:
    return storage.record_server_status(payload)
