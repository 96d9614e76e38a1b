"""Delete Schedule — DELETE /schedule?email=&id= with background deletion.

Invariants:
    - DELETE returns 200 with empty data before the row is removed
    - Row is gone once the background task has run
    - Non-owner gets 403 and the row survives; unknown id gets 404

Design Decisions:
    - Background tasks run inside the ASGI call under httpx's test transport,
      so DB state can be asserted after the response
"""

from sqlalchemy.exc import OperationalError

import jadwal.services.background_mutations as background_module
from jadwal.infrastructure.database import DatabaseSessionManager


async def _day_counts(client, email):
    res = await client.get("/schedule", params={"email": email})
    return res.json()["data"]


async def test_delete_returns_200_with_empty_data(client, seed_user, seed_schedule):
    res = await client.delete(
        "/schedule", params={"email": seed_user.email, "id": seed_schedule.id},
    )
    assert res.status_code == 200
    assert res.json() == {"status": "Success", "message": "Success", "data": {}}


async def test_delete_removes_row_in_background(client, seed_user, seed_schedule):
    await client.delete(
        "/schedule", params={"email": seed_user.email, "id": seed_schedule.id},
    )
    counts = await _day_counts(client, seed_user.email)
    assert counts["monday"] == 0


async def test_delete_by_other_user_is_forbidden(
    client, seed_schedule, other_user, seed_user,
):
    res = await client.delete(
        "/schedule", params={"email": other_user.email, "id": seed_schedule.id},
    )
    assert res.status_code == 403
    assert res.json() == {"status": "Forbidden", "message": "Access denied!"}

    counts = await _day_counts(client, seed_user.email)
    assert counts["monday"] == 1


async def test_delete_nonexistent_schedule_is_404(client, seed_user):
    res = await client.delete(
        "/schedule", params={"email": seed_user.email, "id": 999},
    )
    assert res.status_code == 404
    assert res.json() == {
        "status": "Not Found", "message": "Schedule with ID 999 Not Found",
    }


async def test_delete_without_id_is_404_for_id_zero(client, seed_user):
    res = await client.delete("/schedule", params={"email": seed_user.email})
    assert res.status_code == 404
    assert res.json()["message"] == "Schedule with ID 0 Not Found"


async def test_delete_non_integer_id_reads_as_zero(client, seed_user):
    res = await client.delete(
        "/schedule", params={"email": seed_user.email, "id": "abc"},
    )
    assert res.status_code == 404
    assert res.json() == {
        "status": "Not Found", "message": "Schedule with ID 0 Not Found",
    }


async def test_delete_non_integer_id_does_not_preempt_email_check(client):
    res = await client.delete("/schedule", params={"email": "x", "id": "abc"})
    assert res.status_code == 400
    assert res.json() == {"status": "Bad Request", "message": "Invalid email"}


async def test_delete_id_beyond_int64_reads_as_zero(client, seed_user):
    res = await client.delete(
        "/schedule",
        params={"email": seed_user.email, "id": "99999999999999999999"},
    )
    assert res.status_code == 404
    assert res.json()["message"] == "Schedule with ID 0 Not Found"


async def test_delete_id_beyond_column_range_is_404(client, seed_user):
    res = await client.delete(
        "/schedule", params={"email": seed_user.email, "id": "3000000000"},
    )
    assert res.status_code == 404
    assert res.json() == {
        "status": "Not Found", "message": "Schedule with ID 3000000000 Not Found",
    }


async def test_delete_unknown_user_is_404(client, seed_schedule):
    res = await client.delete(
        "/schedule", params={"email": "ghost@mail.com", "id": seed_schedule.id},
    )
    assert res.status_code == 404
    assert res.json()["message"] == "Email is not found"


async def test_delete_requires_email(client, seed_schedule):
    res = await client.delete("/schedule", params={"id": seed_schedule.id})
    assert res.status_code == 400
    assert res.json()["message"] == "Email is required"


async def test_delete_succeeds_even_when_background_delete_fails(
    client, seed_user, seed_schedule, monkeypatch, caplog,
):
    """Fire-and-forget: the response never reflects the mutation outcome."""
    from unittest.mock import AsyncMock, MagicMock

    broken_session = AsyncMock()
    broken_session.execute.side_effect = OperationalError(
        "DELETE", {}, Exception("disk I/O error"),
    )
    broken = DatabaseSessionManager.__new__(DatabaseSessionManager)
    broken._session_factory = MagicMock(return_value=broken_session)
    monkeypatch.setattr(background_module, "get_db_manager", lambda: broken)

    res = await client.delete(
        "/schedule", params={"email": seed_user.email, "id": seed_schedule.id},
    )
    assert res.status_code == 200

    counts = await _day_counts(client, seed_user.email)
    assert counts["monday"] == 1
    assert any(
        getattr(r, "schedule_id", None) == seed_schedule.id
        and r.levelname == "ERROR"
        for r in caplog.records
    )
