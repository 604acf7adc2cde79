from conftest import bearer, column


async def _board(client, headers, week_date="2026-10-22"):
    resp = await client.get("/taskboard", params={"weekDate": week_date}, headers=headers)
    assert resp.status_code == 200
    return resp.json()


async def _task(client, headers, board_id, title, category="PRODUCTIVITY_ORGANIZATION"):
    resp = await client.post(
        "/tasks",
        json={"taskBoardId": board_id, "title": title, "category": category},
        headers=headers,
    )
    assert resp.status_code == 200, resp.text
    return resp.json()


async def test_requires_authentication(client):
    resp = await client.get("/taskboard")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized"}

    resp = await client.post("/tasks/reorder", json={}, headers={"Authorization": "Bearer nope"})
    assert resp.status_code == 401


async def test_board_is_created_once_per_week(client, auth_headers):
    first = await _board(client, auth_headers, "2026-10-22")
    assert first["weekStartDate"] == "2026-10-19"
    assert first["weekEndDate"] == "2026-10-25"
    assert first["formattedDateRange"] == "Oct 19, 2026 - Oct 25, 2026"
    assert first["tasks"] == []

    sunday = await _board(client, auth_headers, "2026-10-25T21:00:00")
    assert sunday["id"] == first["id"]

    next_week = await _board(client, auth_headers, "2026-10-26")
    assert next_week["id"] != first["id"]


async def test_board_rejects_bad_week_date(client, auth_headers):
    resp = await client.get("/taskboard", params={"weekDate": "next tuesday"}, headers=auth_headers)
    assert resp.status_code == 400
    assert "weekDate" in resp.json()["error"]


async def test_create_task_enters_todo_at_end(client, auth_headers):
    board = await _board(client, auth_headers)

    first = await _task(client, auth_headers, board["id"], "Walk")
    second = await _task(client, auth_headers, board["id"], "Call mum", "SOCIAL_RELATIONSHIPS")

    assert (first["status"], first["order"]) == ("TODO", 0)
    assert (second["status"], second["order"]) == ("TODO", 1)
    assert second["category"] == "SOCIAL_RELATIONSHIPS"

    resp = await client.get("/tasks", params={"taskBoardId": board["id"]}, headers=auth_headers)
    assert [t["title"] for t in resp.json()] == ["Walk", "Call mum"]


async def test_create_task_validation(client, auth_headers, other_user):
    board = await _board(client, auth_headers)

    resp = await client.post("/tasks", json={"taskBoardId": board["id"], "category": "WELLNESS_SELFCARE"}, headers=auth_headers)
    assert resp.status_code == 400
    assert "title" in resp.json()["error"]

    resp = await client.post(
        "/tasks",
        json={"taskBoardId": board["id"], "title": "Nap", "category": "SLEEPING"},
        headers=auth_headers,
    )
    assert resp.status_code == 400

    resp = await client.post(
        "/tasks",
        json={"taskBoardId": board["id"], "title": "Nap", "category": "WELLNESS_SELFCARE"},
        headers=bearer(other_user),
    )
    assert resp.status_code == 404
    assert resp.json() == {"error": "Task board not found or access denied"}


async def test_edit_task_keeps_position(client, auth_headers):
    board = await _board(client, auth_headers)
    task = await _task(client, auth_headers, board["id"], "Stretch")

    resp = await client.put(
        f"/tasks/{task['id']}",
        json={"title": "Stretch 10 min", "description": "after lunch", "status": "DONE", "order": 5},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "Stretch 10 min"
    assert body["description"] == "after lunch"
    assert (body["status"], body["order"]) == ("TODO", 0)
    assert body["category"] == "PRODUCTIVITY_ORGANIZATION"


async def test_get_task_ownership(client, auth_headers, other_user):
    board = await _board(client, auth_headers)
    task = await _task(client, auth_headers, board["id"], "Journal")

    resp = await client.get(f"/tasks/{task['id']}", headers=auth_headers)
    assert resp.json()["title"] == "Journal"

    resp = await client.get(f"/tasks/{task['id']}", headers=bearer(other_user))
    assert resp.status_code == 403
    assert resp.json() == {"error": "Access denied"}

    resp = await client.get("/tasks/9999", headers=auth_headers)
    assert resp.status_code == 404


async def test_delete_reindexes_column(client, auth_headers, db):
    board = await _board(client, auth_headers)
    await _task(client, auth_headers, board["id"], "A")
    b = await _task(client, auth_headers, board["id"], "B")
    await _task(client, auth_headers, board["id"], "C")

    resp = await client.delete(f"/tasks/{b['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    assert await column(db, board["id"], "TODO") == [("A", 0), ("C", 1)]


async def test_reorder_across_columns(client, auth_headers, db):
    board = await _board(client, auth_headers)
    a = await _task(client, auth_headers, board["id"], "A")
    await _task(client, auth_headers, board["id"], "B")

    resp = await client.post(
        "/tasks/reorder",
        json={
            "taskId": a["id"],
            "sourceStatus": "TODO",
            "destinationStatus": "IN_PROGRESS",
            "sourceIndex": 0,
            "destinationIndex": 0,
        },
        headers=auth_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert {(t["title"], t["status"], t["order"]) for t in body["tasks"]} == {
        ("A", "IN_PROGRESS", 0),
        ("B", "TODO", 0),
    }

    board_view = await _board(client, auth_headers)
    assert len(board_view["tasks"]) == 2


async def test_reorder_rejects_bad_payloads(client, auth_headers, other_user):
    board = await _board(client, auth_headers)
    a = await _task(client, auth_headers, board["id"], "A")
    move = {
        "taskId": a["id"],
        "sourceStatus": "TODO",
        "destinationStatus": "DONE",
        "sourceIndex": 0,
        "destinationIndex": 0,
    }

    resp = await client.post("/tasks/reorder", json={"taskId": a["id"]}, headers=auth_headers)
    assert resp.status_code == 400

    resp = await client.post("/tasks/reorder", json={**move, "destinationStatus": "LATER"}, headers=auth_headers)
    assert resp.status_code == 400

    resp = await client.post("/tasks/reorder", json={**move, "destinationIndex": -1}, headers=auth_headers)
    assert resp.status_code == 400

    resp = await client.post("/tasks/reorder", json={**move, "taskId": 9999}, headers=auth_headers)
    assert resp.status_code == 404

    resp = await client.post("/tasks/reorder", json=move, headers=bearer(other_user))
    assert resp.status_code == 403
