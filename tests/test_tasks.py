def _add(client, user_id, title, priority="low", details=""):
    r = client.post("/home", json={"user": user_id, "work": title, "dropvalue": priority, "details": details})
    assert r.status_code == 201
    return r.json()


def test_add_then_delete_round_trip(client, register):
    user_id = register()

    data = _add(client, user_id, "Buy milk", priority="high")
    assert data["message"] == "Task inserted successfully"
    assert len(data["tasksAfterAdd"]) == 1
    task = data["tasksAfterAdd"][0]
    assert task["title"] == "Buy milk"
    assert set(task) == {"title", "id"}

    r = client.post("/delete", json={"userId": user_id, "id": task["id"]})
    assert r.status_code == 201
    assert r.json() == {"tasksAfterDelete": [], "message": "Task Deleted successfully"}

    r = client.post("/gettasks", json={"userId": user_id})
    assert r.json() == {"tasksfirst": []}


def test_new_task_is_appended_in_id_order(client, register):
    user_id = register()
    _add(client, user_id, "first")
    _add(client, user_id, "second")
    tasks = _add(client, user_id, "third")["tasksAfterAdd"]

    assert [t["title"] for t in tasks] == ["first", "second", "third"]
    ids = [t["id"] for t in tasks]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_gettasks_only_returns_own_tasks_sorted_by_id(client, register):
    alice = register("alice@x.com")
    bob = register("bob@x.com")

    _add(client, alice, "a1", priority="high")
    _add(client, bob, "b1")
    _add(client, alice, "a2", priority="low")

    r = client.post("/gettasks", json={"userId": alice})
    assert r.status_code == 201
    tasks = r.json()["tasksfirst"]
    assert [(t["title"], t["priority"]) for t in tasks] == [("a1", "high"), ("a2", "low")]
    assert tasks[0]["id"] < tasks[1]["id"]

    r = client.post("/gettasks", json={"userId": bob})
    assert [t["title"] for t in r.json()["tasksfirst"]] == ["b1"]


def test_gettasks_empty_for_unknown_user(client):
    r = client.post("/gettasks", json={"userId": 999})
    assert r.status_code == 201
    assert r.json() == {"tasksfirst": []}


def test_details_set_on_add_then_updated(client, register):
    user_id = register()
    task_id = _add(client, user_id, "Write report", details="draft")["tasksAfterAdd"][0]["id"]

    r = client.post("/getdetails", json={"taskId": task_id})
    assert r.status_code == 201
    assert r.json() == {"taskdetails": [{"taskdetails": "draft", "title": "Write report"}]}

    for _ in range(2):
        r = client.post("/updatetaskdetails", json={"taskId": task_id, "details": "final version"})
        assert r.status_code == 201
        assert r.json() == {"message": "Task details updated successfully"}

    r = client.post("/getdetails", json={"taskId": task_id})
    assert r.json()["taskdetails"] == [{"taskdetails": "final version", "title": "Write report"}]


def test_update_details_for_missing_task_still_succeeds(client):
    for _ in range(2):
        r = client.post("/updatetaskdetails", json={"taskId": 12345, "details": "anything"})
        assert r.status_code == 201

    r = client.post("/getdetails", json={"taskId": 12345})
    assert r.status_code == 201
    assert r.json() == {"taskdetails": []}


def test_add_task_without_details(client, register):
    user_id = register()
    r = client.post("/home", json={"user": user_id, "work": "No details", "dropvalue": "medium"})
    assert r.status_code == 201
    task_id = r.json()["tasksAfterAdd"][0]["id"]

    r = client.post("/getdetails", json={"taskId": task_id})
    assert r.json()["taskdetails"] == [{"taskdetails": "", "title": "No details"}]


def test_edit_task(client, register):
    user_id = register()
    task_id = _add(client, user_id, "old title", priority="low")["tasksAfterAdd"][0]["id"]

    r = client.post(
        "/edit",
        json={"editedTitle": "new title", "id": task_id, "userId": user_id, "editedpriority": "high"},
    )
    assert r.status_code == 201
    assert r.json() == {
        "tasksAfterEdit": [{"title": "new title", "id": task_id}],
        "message": "Task Edited successfully",
    }

    r = client.post("/gettasks", json={"userId": user_id})
    assert r.json()["tasksfirst"] == [{"title": "new title", "id": task_id, "priority": "high"}]


def test_edit_and_delete_are_scoped_to_owner(client, register):
    alice = register("alice@x.com")
    mallory = register("mallory@x.com")
    task_id = _add(client, alice, "private", priority="high")["tasksAfterAdd"][0]["id"]

    r = client.post(
        "/edit",
        json={"editedTitle": "hacked", "id": task_id, "userId": mallory, "editedpriority": "low"},
    )
    assert r.status_code == 201
    assert r.json()["tasksAfterEdit"] == []

    r = client.post("/delete", json={"userId": mallory, "id": task_id})
    assert r.status_code == 201
    assert r.json()["tasksAfterDelete"] == []

    r = client.post("/gettasks", json={"userId": alice})
    assert r.json()["tasksfirst"] == [{"title": "private", "id": task_id, "priority": "high"}]


def test_delete_keeps_other_tasks(client, register):
    user_id = register()
    _add(client, user_id, "keep")
    doomed = _add(client, user_id, "drop")["tasksAfterAdd"][-1]["id"]

    r = client.post("/delete", json={"userId": user_id, "id": doomed})
    assert [t["title"] for t in r.json()["tasksAfterDelete"]] == ["keep"]


def test_invalid_body_is_a_client_error(client):
    r = client.post("/gettasks", json={"userId": "not-a-number"})
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid request body"

    r = client.post("/delete", json={"userId": 1})
    assert r.status_code == 400
