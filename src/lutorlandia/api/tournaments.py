"""Tournaments with their podiums, sign-up form and registrations."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response, status

from lutorlandia.api.bugs import TRANSITION_METHODS
from lutorlandia.api.deps import OperatorDep, StorageDep
from lutorlandia.interfaces import IStorage
from lutorlandia.schemas import (
    FormFieldCreate,
    FormFieldRead,
    FormFieldUpdate,
    PodiumCreate,
    PodiumRead,
    PodiumUpdate,
    RegistrationCreate,
    RegistrationRead,
    TournamentCreate,
    TournamentRead,
    TournamentUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tournaments"])


def _not_found(what: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} not found")


def _require_tournament(storage: IStorage, tournament_id: int) -> TournamentRead:
    tournament = storage.get_tournament(tournament_id)
    if tournament is None:
        raise _not_found("tournament")
    return tournament


@router.get("/tournaments", response_model=list[TournamentRead])
async def list_tournaments(storage: StorageDep) -> list[TournamentRead]:
    return storage.list_tournaments()


@router.post("/tournaments", response_model=TournamentRead, status_code=status.HTTP_201_CREATED)
async def create_tournament(
    payload: TournamentCreate, storage: StorageDep, operator: OperatorDep
) -> TournamentRead:
    tournament = storage.create_tournament(payload)
    logger.info("%s created tournament %s", operator.username, tournament.id)
    return tournament


@router.get("/tournaments/{tournament_id}", response_model=TournamentRead)
async def get_tournament(tournament_id: int, storage: StorageDep) -> TournamentRead:
    return _require_tournament(storage, tournament_id)


@router.put("/tournaments/{tournament_id}", response_model=TournamentRead)
async def update_tournament(
    tournament_id: int, payload: TournamentUpdate, storage: StorageDep, operator: OperatorDep
) -> TournamentRead:
    tournament = storage.update_tournament(tournament_id, payload)
    if tournament is None:
        raise _not_found("tournament")
    return tournament


@router.delete("/tournaments/{tournament_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tournament(
    tournament_id: int, storage: StorageDep, operator: OperatorDep
) -> Response:
    if not storage.delete_tournament(tournament_id):
        raise _not_found("tournament")
    logger.info("%s deleted tournament %s", operator.username, tournament_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Podiums


@router.get("/tournaments/{tournament_id}/podiums", response_model=list[PodiumRead])
async def list_podiums(tournament_id: int, storage: StorageDep) -> list[PodiumRead]:
    _require_tournament(storage, tournament_id)
    return storage.list_podiums(tournament_id)


@router.post(
    "/tournaments/{tournament_id}/podiums",
    response_model=PodiumRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_podium(
    tournament_id: int, payload: PodiumCreate, storage: StorageDep, operator: OperatorDep
) -> PodiumRead:
    _require_tournament(storage, tournament_id)
    return storage.create_podium(tournament_id, payload)


@router.put("/podiums/{podium_id}", response_model=PodiumRead)
async def update_podium(
    podium_id: int, payload: PodiumUpdate, storage: StorageDep, operator: OperatorDep
) -> PodiumRead:
    podium = storage.update_podium(podium_id, payload)
    if podium is None:
        raise _not_found("podium")
    return podium


@router.delete("/podiums/{podium_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_podium(podium_id: int, storage: StorageDep, operator: OperatorDep) -> Response:
    if not storage.delete_podium(podium_id):
        raise _not_found("podium")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Registration form


@router.get("/tournaments/{tournament_id}/fields", response_model=list[FormFieldRead])
async def list_form_fields(tournament_id: int, storage: StorageDep) -> list[FormFieldRead]:
    _require_tournament(storage, tournament_id)
    return storage.list_form_fields(tournament_id)


@router.post(
    "/tournaments/{tournament_id}/fields",
    response_model=FormFieldRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_form_field(
    tournament_id: int, payload: FormFieldCreate, storage: StorageDep, operator: OperatorDep
) -> FormFieldRead:
    _require_tournament(storage, tournament_id)
    return storage.create_form_field(tournament_id, payload)


@router.put("/fields/{field_id}", response_model=FormFieldRead)
async def update_form_field(
    field_id: int, payload: FormFieldUpdate, storage: StorageDep, operator: OperatorDep
) -> FormFieldRead:
    field = storage.update_form_field(field_id, payload)
    if field is None:
        raise _not_found("form field")
    return field


@router.delete("/fields/{field_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_form_field(field_id: int, storage: StorageDep, operator: OperatorDep) -> Response:
    if not storage.delete_form_field(field_id):
        raise _not_found("form field")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Registrations


@router.get(
    "/tournaments/{tournament_id}/registrations", response_model=list[RegistrationRead]
)
async def list_registrations(
    tournament_id: int, storage: StorageDep, operator: OperatorDep
) -> list[RegistrationRead]:
    _require_tournament(storage, tournament_id)
    return storage.list_registrations(tournament_id)


@router.post(
    "/tournaments/{tournament_id}/registrations",
    response_model=RegistrationRead,
    status_code=status.HTTP_201_CREATED,
)
async def register_player(
    tournament_id: int, payload: RegistrationCreate, storage: StorageDep
) -> RegistrationRead:
    _require_tournament(storage, tournament_id)
    registration = storage.create_registration(tournament_id, payload)
    logger.info(
        "%s registered for tournament %s", registration.player_username, tournament_id
    )
    return registration


@router.api_route(
    "/registrations/{registration_id}/approve",
    methods=TRANSITION_METHODS,
    response_model=RegistrationRead,
)
async def approve_registration(
    registration_id: int, storage: StorageDep, operator: OperatorDep
) -> RegistrationRead:
    registration = storage.approve_registration(registration_id)
    if registration is None:
        raise _not_found("registration")
    logger.info("%s approved registration %s", operator.username, registration_id)
    return registration


@router.api_route(
    "/registrations/{registration_id}/reject",
    methods=TRANSITION_METHODS,
    response_model=RegistrationRead,
)
async def reject_registration(
    registration_id: int, storage: StorageDep, operator: OperatorDep
) -> RegistrationRead:
    registration = storage.reject_registration(registration_id)
    if registration is None:
        raise _not_found("registration")
    logger.info("%s rejected registration %s", operator.username, registration_id)
    return registration


@router.delete("/registrations/{registration_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_registration(
    registration_id: int, storage: StorageDep, operator: OperatorDep
) -> Response:
    if not storage.delete_registration(registration_id):
        raise _not_found("registration")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
