"""Integration tests for the FastAPI layer.

Each test drives the full application (session middleware, error handlers
and routes) against both storage backends.
"""

from __future__ import annotations

import base64
import json

import pytest
from httpx import ASGITransport, AsyncClient
from itsdangerous import TimestampSigner

from lutorlandia.api.app import SESSION_COOKIE, create_app
from lutorlandia.api.runtime import ApiState
from lutorlandia.config import Settings
from lutorlandia.factory import ensure_operator
from lutorlandia.repository import MemoryStorage

OPERATOR = {"username": "lutorlandia", "password": "hunter22"}

BUG = {
    "username": "Steve",
    "rank": "VIP",
    "gameMode": "SURVIVAL",
    "title": "Door glitch",
    "description": "Doors close by themselves near spawn",
    "priority": "MEDIA",
}

TOURNAMENT = {
    "title": "Copa PvP",
    "description": "Eliminación directa",
    "date": "2026-11-02",
    "time": "18:00",
    "gameMode": "FACTIONS",
    "maxParticipants": 32,
    "prizes": "Rango MVP",
    "bannerImage": "https://cdn.example/banner.png",
}


def _make_app(storage, **overrides):
    settings = Settings(_env_file=None, admin_password=OPERATOR["password"], **overrides)
    ensure_operator(storage, settings)

    def factory() -> ApiState:
        return ApiState(settings=settings, storage=storage)

    app = create_app(state_factory=factory, settings=settings)
    transport = ASGITransport(app=app)
    return app, transport


async def _login(client: AsyncClient) -> None:
    response = await client.post("/api/login", json=OPERATOR)
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_health_reports_backend(storage):
    app, transport = _make_app(storage)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "storage": storage.backend_name}


@pytest.mark.asyncio
async def test_login_session_lifecycle(storage):
    app, transport = _make_app(storage)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.get("/api/user")
        assert response.status_code == 401
        assert response.json() == {"error": "not authenticated"}

        response = await client.post(
            "/api/login", json={"username": "lutorlandia", "password": "wrong"}
        )
        assert response.status_code == 401
        assert response.json() == {"error": "invalid credentials"}

        response = await client.post("/api/login", json=OPERATOR)
        assert response.status_code == 200
        user = response.json()
        assert user["username"] == "lutorlandia"
        assert "password" not in user
        assert "passwordHash" not in user

        response = await client.get("/api/user")
        assert response.status_code == 200
        assert response.json()["id"] == user["id"]

        response = await client.post("/api/logout")
        assert response.status_code == 200

        response = await client.get("/api/user")
        assert response.status_code == 401


@pytest.mark.asyncio
async def test_mutations_require_operator(storage):
    app, transport = _make_app(storage)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.post("/api/categories", json={"name": "Chat", "description": ""})
        assert response.status_code == 401

        # Auth is checked before the body is validated
        response = await client.post("/api/staff", json={})
        assert response.status_code == 401

        report_id = (await client.post("/api/bugs", json=BUG)).json()["id"]
        response = await client.put(f"/api/bugs/{report_id}/validate")
        assert response.status_code == 401

        # Public reads stay open
        response = await client.get("/api/staff")
        assert response.status_code == 200
        assert response.json() == []


@pytest.mark.asyncio
async def test_staff_crud(storage):
    app, transport = _make_app(storage)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        await _login(client)

        response = await client.post(
            "/api/staff",
            json={
                "name": "Notch",
                "role": "Fundador",
                "roleLabel": "OWNER",
                "description": "Creó el servidor",
                "avatar": "https://mc-heads.net/avatar/Notch",
            },
        )
        assert response.status_code == 201
        member = response.json()
        assert member["roleLabel"] == "OWNER"
        assert "createdAt" in member

        response = await client.put(f"/api/staff/{member['id']}", json={"roleLabel": "ADMIN"})
        assert response.status_code == 200
        assert response.json()["roleLabel"] == "ADMIN"
        assert response.json()["name"] == "Notch"

        response = await client.get("/api/staff")
        assert [m["id"] for m in response.json()] == [member["id"]]

        response = await client.delete(f"/api/staff/{member['id']}")
        assert response.status_code == 204
        assert response.content == b""

        response = await client.get(f"/api/staff/{member['id']}")
        assert response.status_code == 404
        assert response.json() == {"error": "staff member not found"}


@pytest.mark.asyncio
async def test_invalid_input_is_400(storage):
    app, transport = _make_app(storage)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.post("/api/bugs", json={**BUG, "priority": "URGENTE"})
        assert response.status_code == 400
        payload = response.json()
        assert payload["error"] == "Invalid request"
        assert any(detail["loc"][-1] == "priority" for detail in payload["details"])

        response = await client.post("/api/bugs", json={"username": "Steve"})
        assert response.status_code == 400

        response = await client.get("/api/bugs/not-a-number")
        assert response.status_code == 400

        response = await client.get("/api/nowhere")
        assert response.status_code == 404
        assert "error" in response.json()


@pytest.mark.asyncio
async def test_bug_review_workflow(storage):
    app, transport = _make_app(storage)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        # Submitted status is ignored; every report starts pending
        response = await client.post("/api/bugs", json={**BUG, "status": "RESUELTO"})
        assert response.status_code == 201
        report = response.json()
        assert report["status"] == "PENDIENTE"
        assert report["validatedAt"] is None

        await _login(client)

        pending = (await client.get("/api/bugs/pending")).json()
        assert [r["id"] for r in pending] == [report["id"]]

        response = await client.put(f"/api/bugs/{report['id']}/validate")
        assert response.status_code == 200
        assert response.json()["status"] == "VALIDADO"
        assert response.json()["validatedAt"] is not None

        validated = (await client.get("/api/bugs/validated")).json()
        assert [r["id"] for r in validated] == [report["id"]]

        # Older clients POST the transition
        response = await client.post(f"/api/bugs/{report['id']}/resolve")
        assert response.status_code == 200
        assert response.json()["status"] == "RESUELTO"

        response = await client.put(f"/api/bugs/{report['id']}/reject")
        assert response.status_code == 409
        assert "cannot move from RESUELTO to RECHAZADO" in response.json()["error"]

        response = await client.put("/api/bugs/9999/validate")
        assert response.status_code == 404


@pytest.mark.asyncio
async def test_rejected_bug_cannot_be_resolved(storage):
    app, transport = _make_app(storage)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        report_id = (await client.post("/api/bugs", json=BUG)).json()["id"]
        await _login(client)

        response = await client.post(f"/api/bugs/{report_id}/reject")
        assert response.status_code == 200
        assert response.json()["status"] == "RECHAZADO"

        response = await client.put(f"/api/bugs/{report_id}/resolve")
        assert response.status_code == 409

        response = await client.get(f"/api/bugs/{report_id}")
        assert response.json()["status"] == "RECHAZADO"


@pytest.mark.asyncio
async def test_rules_under_categories(storage):
    app, transport = _make_app(storage)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        await _login(client)

        general = (
            await client.post("/api/categories", json={"name": "Generales", "description": ""})
        ).json()
        chat = (
            await client.post("/api/categories", json={"name": "Chat", "description": ""})
        ).json()
        assert (general["order"], chat["order"]) == (0, 1)

        response = await client.post(
            "/api/rules",
            json={"categoryId": 9999, "title": "Huérfana", "description": ""},
        )
        assert response.status_code == 404
        assert response.json() == {"error": "rule category not found"}

        for title in ("Respeto", "Sin hacks"):
            response = await client.post(
                "/api/rules",
                json={"categoryId": general["id"], "title": title, "description": "..."},
            )
            assert response.status_code == 201

        rules = (await client.get(f"/api/categories/{general['id']}/rules")).json()
        assert [(r["title"], r["order"]) for r in rules] == [("Respeto", 0), ("Sin hacks", 1)]

        response = await client.delete(f"/api/categories/{general['id']}")
        assert response.status_code == 204

        response = await client.get(f"/api/rules/{rules[0]['id']}")
        assert response.status_code == 404
        response = await client.get(f"/api/categories/{general['id']}/rules")
        assert response.status_code == 404

        response = await client.delete(f"/api/categories/{general['id']}")
        assert response.status_code == 404


@pytest.mark.asyncio
async def test_tournament_registration_flow(storage):
    app, transport = _make_app(storage)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        await _login(client)
        response = await client.post("/api/tournaments", json=TOURNAMENT)
        assert response.status_code == 201
        tournament = response.json()
        assert tournament["status"] == "PRÓXIMO"
        tid = tournament["id"]

        field = (
            await client.post(
                f"/api/tournaments/{tid}/fields", json={"label": "Nick", "fieldType": "text"}
            )
        ).json()
        assert field["order"] == 0
        assert field["required"] is True

        podium = await client.post(
            f"/api/tournaments/{tid}/podiums",
            json={"playerUsername": "Alex", "position": 1, "prize": "1000 monedas"},
        )
        assert podium.status_code == 201

        await client.post("/api/logout")

        response = await client.post(
            f"/api/tournaments/{tid}/registrations",
            json={"playerUsername": "Steve", "formData": {"Nick": "Steve"}},
        )
        assert response.status_code == 201
        registration = response.json()
        assert registration["status"] == "PENDIENTE"

        response = await client.post(
            "/api/tournaments/9999/registrations", json={"playerUsername": "Steve"}
        )
        assert response.status_code == 404

        response = await client.get(f"/api/tournaments/{tid}/registrations")
        assert response.status_code == 401

        await _login(client)
        response = await client.put(f"/api/registrations/{registration['id']}/approve")
        assert response.status_code == 200
        assert response.json()["status"] == "APROBADO"

        response = await client.post(f"/api/registrations/{registration['id']}/reject")
        assert response.status_code == 409

        response = await client.delete(f"/api/tournaments/{tid}")
        assert response.status_code == 204

        response = await client.get(f"/api/tournaments/{tid}/podiums")
        assert response.status_code == 404
        response = await client.put(f"/api/fields/{field['id']}", json={"label": "Otro"})
        assert response.status_code == 404
        response = await client.delete(f"/api/registrations/{registration['id']}")
        assert response.status_code == 404


@pytest.mark.asyncio
async def test_server_status_snapshots(storage):
    app, transport = _make_app(storage)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.get("/api/server-status")
        assert response.status_code == 404

        await _login(client)
        response = await client.post(
            "/api/server-status",
            json={"online": True, "players": {"online": 12, "max": 100}, "version": "1.20.4"},
        )
        assert response.status_code == 201

        response = await client.get("/api/server-status")
        assert response.status_code == 200
        snapshot = response.json()
        assert snapshot["online"] is True
        assert snapshot["players"] == {"online": 12, "max": 100}


class _BrokenStorage(MemoryStorage):
    def list_announcements(self):
        raise RuntimeError("disk on fire")


@pytest.mark.asyncio
async def test_unhandled_errors_become_json_500():
    app, transport = _make_app(_BrokenStorage())

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        response = await client.get("/api/announcements")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

        response = await client.get("/health")
        assert response.status_code == 200


def _signed_session(secret: str, payload: dict) -> dict[str, str]:
    """Cookie header carrying ``payload`` signed the way SessionMiddleware signs it."""
    data = base64.b64encode(json.dumps(payload).encode("utf-8"))
    cookie = TimestampSigner(secret).sign(data).decode("utf-8")
    return {"Cookie": f"{SESSION_COOKIE}={cookie}"}


@pytest.mark.asyncio
@pytest.mark.parametrize("configured_secret", [None, "a-long-operator-chosen-secret"])
async def test_session_cookie_signed_with_other_key_is_rejected(configured_secret):
    storage = MemoryStorage()
    app, transport = _make_app(storage, session_secret=configured_secret)
    operator = storage.get_user_by_username(OPERATOR["username"])

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        forged = _signed_session("change-me", {"user_id": operator.id})
        response = await client.post(
            "/api/categories", json={"name": "pwn", "description": ""}, headers=forged
        )
        assert response.status_code == 401
        assert storage.list_rule_categories() == []

        if configured_secret is not None:
            genuine = _signed_session(configured_secret, {"user_id": operator.id})
            response = await client.get("/api/user", headers=genuine)
            assert response.status_code == 200
            assert response.json()["username"] == OPERATOR["username"]


@pytest.mark.asyncio
async def test_client_supplied_order_is_ignored_on_create(storage):
    app, transport = _make_app(storage)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        await _login(client)

        orders = []
        for name in ("Generales", "Chat"):
            response = await client.post(
                "/api/categories", json={"name": name, "description": "", "order": 99}
            )
            assert response.status_code == 201
            orders.append(response.json()["order"])
        assert orders == [0, 1]

        category_id = (await client.get("/api/categories")).json()[0]["id"]
        orders = []
        for title in ("Respeto", "Sin hacks"):
            response = await client.post(
                "/api/rules",
                json={"categoryId": category_id, "title": title, "description": "", "order": 99},
            )
            assert response.status_code == 201
            orders.append(response.json()["order"])
        assert orders == [0, 1]


@pytest.mark.asyncio
async def test_moving_rule_appends_to_target_category(storage):
    app, transport = _make_app(storage)

    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=transport, base_url="http://test") as client,
    ):
        await _login(client)
        source, target = [
            (await client.post("/api/categories", json={"name": name, "description": ""})).json()
            for name in ("A", "B")
        ]
        await client.post(
            "/api/rules", json={"categoryId": target["id"], "title": "b0", "description": ""}
        )
        moved = (
            await client.post(
                "/api/rules", json={"categoryId": source["id"], "title": "a0", "description": ""}
            )
        ).json()

        response = await client.put(f"/api/rules/{moved['id']}", json={"categoryId": target["id"]})
        assert response.status_code == 200
        assert response.json()["order"] == 1

        rules = (await client.get(f"/api/categories/{target['id']}/rules")).json()
        assert [(r["title"], r["order"]) for r in rules] == [("b0", 0), ("a0", 1)]

        response = await client.put(f"/api/rules/{moved['id']}", json={"categoryId": 9999})
        assert response.status_code == 404
