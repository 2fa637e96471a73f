"""Public bug submission and the operator review workflow."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response, status

from lutorlandia.api.deps import OperatorDep, StorageDep
from lutorlandia.schemas import BugReportCreate, BugReportRead, BugReportUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bugs", tags=["bugs"])

# Older clients POST the transitions, newer ones PUT them
TRANSITION_METHODS = ["PUT", "POST"]


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="bug report not found")


@router.get("", response_model=list[BugReportRead])
async def list_bug_reports(storage: StorageDep) -> list[BugReportRead]:
    return storage.list_bug_reports()


@router.post("", response_model=BugReportRead, status_code=status.HTTP_201_CREATED)
async def submit_bug_report(payload: BugReportCreate, storage: StorageDep) -> BugReportRead:
    report = storage.create_bug_report(payload)
    logger.info("bug report %s submitted by %s", report.id, report.username)
    return report


@router.get("/pending", response_model=list[BugReportRead])
async def list_pending(storage: StorageDep) -> list[BugReportRead]:
    return storage.list_pending_bug_reports()


@router.get("/validated", response_model=list[BugReportRead])
async def list_validated(storage: StorageDep) -> list[BugReportRead]:
    return storage.list_validated_bug_reports()


@router.get("/{report_id}", response_model=BugReportRead)
async def get_bug_report(report_id: int, storage: StorageDep) -> BugReportRead:
    report = storage.get_bug_report(report_id)
    if report is None:
        raise _not_found()
    return report


@router.put("/{report_id}", response_model=BugReportRead)
async def update_bug_report(
    report_id: int, payload: BugReportUpdate, storage: StorageDep, operator: OperatorDep
) -> BugReportRead:
    report = storage.update_bug_report(report_id, payload)
    if report is None:
        raise _not_found()
    return report


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bug_report(report_id: int, storage: StorageDep, operator: OperatorDep) -> Response:
    if not storage.delete_bug_report(report_id):
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.api_route("/{report_id}/validate", methods=TRANSITION_METHODS, response_model=BugReportRead)
async def validate_bug_report(
    report_id: int, storage: StorageDep, operator: OperatorDep
) -> BugReportRead:
    report = storage.validate_bug_report(report_id)
    if report is None:
        raise _not_found()
    logger.info("%s validated bug report %s", operator.username, report_id)
    return report


@router.api_route("/{report_id}/reject", methods=TRANSITION_METHODS, response_model=BugReportRead)
async def reject_bug_report(
    report_id: int, storage: StorageDep, operator: OperatorDep
) -> BugReportRead:
    report = storage.reject_bug_report(report_id)
    if report is None:
        raise _not_found()
    logger.info("%s rejected bug report %s", operator.username, report_id)
    return report


@router.api_route("/{report_id}/resolve", methods=TRANSITION_METHODS, response_model=BugReportRead)
async def resolve_bug_report(
    report_id: int, storage: StorageDep, operator: OperatorDep
) -> BugReportRead:
    report = storage.resolve_bug_report(report_id)
    if report is None:
        raise _not_found()
    logger.info("%s resolved bug report %s", operator.username, report_id)
    return report
