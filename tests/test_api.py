"""Tests for the /todo HTTP surface."""

from sqlmodel import SQLModel


def _add(client, account="alice", **fields):
    response = client.post(f"/todo/{account}/add", json=fields)
    assert response.status_code == 200
    return response


def _ids(client, account="alice"):
    response = client.get(f"/todo/{account}")
    return [t["id"] for t in response.json()] if response.status_code == 200 else []


def _error(response):
    return response.json()["error"]["message"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestAdd:
    def test_add_then_list(self, client):
        response = client.post(
            "/todo/alice/add",
            json={"title": "Buy milk", "item_priority": 3, "category": "shopping"},
        )
        assert response.status_code == 200
        assert response.json() == {"status": "Success", "info": "Title 'Buy milk' added"}

        response = client.get("/todo/alice")
        assert response.status_code == 200
        [item] = response.json()
        assert item["title"] == "Buy milk"
        assert item["active"] is True
        assert item["acct_name"] == "alice"
        assert item["item_priority"] == 3
        assert item["category"] == "shopping"
        assert item["body"] == ""
        assert item["publish_date"]

    def test_add_ignores_client_controlled_fields(self, client):
        _add(
            client,
            title="Sneaky",
            id=999,
            active=False,
            acct_name="bob",
            publish_date="2001-01-01T00:00:00",
        )
        [item] = client.get("/todo/alice").json()
        assert item["id"] != 999
        assert item["active"] is True
        assert item["acct_name"] == "alice"
        assert not item["publish_date"].startswith("2001")
        assert client.get("/todo/bob").status_code == 204

    def test_add_invalid_json(self, client):
        response = client.post(
            "/todo/alice/add",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert _error(response).startswith("Failed to decode body")

    def test_add_wrong_type(self, client):
        response = client.post("/todo/alice/add", json={"title": "x", "item_priority": "high"})
        assert response.status_code == 400
        assert "item_priority" in _error(response)


class TestGet:
    def test_empty_list_is_204(self, client):
        response = client.get("/todo/alice")
        assert response.status_code == 204
        assert response.content == b""

    def test_cross_account_isolation(self, client):
        _add(client, "alice", title="Alice only")
        assert client.get("/todo/bob").status_code == 204
        todo_id = _ids(client, "alice")[0]
        assert client.get(f"/todo/bob/id/{todo_id}").status_code == 204

    def test_active_filter(self, client):
        _add(client, title="one")
        _add(client, title="two")
        first, second = _ids(client)
        client.post(f"/todo/alice/cactive/{first}", json={"active": False})

        response = client.get("/todo/alice/active/false")
        assert [t["id"] for t in response.json()] == [first]
        response = client.get("/todo/alice/active/true")
        assert [t["id"] for t in response.json()] == [second]

    def test_active_malformed_is_400(self, client):
        response = client.get("/todo/alice/active/maybe")
        assert response.status_code == 400
        assert "error" in response.json()

    def test_highs(self, client):
        _add(client, title="urgent", item_priority=1)
        _add(client, title="later", item_priority=5)
        _add(client, title="someday")

        response = client.get("/todo/alice/highs/3")
        assert [t["title"] for t in response.json()] == ["urgent"]

    def test_highs_zero_returns_unprioritized(self, client):
        _add(client, title="urgent", item_priority=1)
        _add(client, title="someday")

        response = client.get("/todo/alice/highs/0")
        assert response.status_code == 200
        items = response.json()
        assert [t["title"] for t in items] == ["someday"]
        assert all(t["item_priority"] == 0 for t in items)

    def test_highs_malformed_is_400(self, client):
        response = client.get("/todo/alice/highs/abc")
        assert response.status_code == 400

    def test_category(self, client):
        _add(client, title="Buy milk", category="shopping")
        _add(client, title="Fix sink", category="house")

        response = client.get("/todo/alice/cat/shopping")
        assert [t["title"] for t in response.json()] == ["Buy milk"]
        assert client.get("/todo/alice/cat/garden").status_code == 204

    def test_by_id(self, client):
        _add(client, title="Buy milk")
        todo_id = _ids(client)[0]

        response = client.get(f"/todo/alice/id/{todo_id}")
        assert response.status_code == 200
        assert response.json()["title"] == "Buy milk"
        assert client.get(f"/todo/alice/id/{todo_id + 100}").status_code == 204

    def test_by_id_malformed_is_400(self, client):
        response = client.get("/todo/alice/id/one")
        assert response.status_code == 400


class TestUpdate:
    def test_change_title(self, client):
        _add(client, title="Buy milk")
        todo_id = _ids(client)[0]

        response = client.post(f"/todo/alice/ctitle/{todo_id}", json={"title": "Buy oat milk"})
        assert response.status_code == 200
        assert response.json() == {
            "status": "Success",
            "info": f"Title changed to 'Buy oat milk' for id {todo_id}",
        }
        assert client.get(f"/todo/alice/id/{todo_id}").json()["title"] == "Buy oat milk"

    def test_change_priority(self, client):
        _add(client, title="Buy milk", item_priority=3)
        todo_id = _ids(client)[0]

        response = client.post(f"/todo/alice/cpri/{todo_id}", json={"item_priority": 1})
        assert response.status_code == 200
        assert response.json()["info"] == f"Priority changed to 1 for id {todo_id}"
        assert client.get(f"/todo/alice/id/{todo_id}").json()["item_priority"] == 1

    def test_change_active(self, client):
        _add(client, title="Buy milk")
        todo_id = _ids(client)[0]

        response = client.post(f"/todo/alice/cactive/{todo_id}", json={"active": False})
        assert response.status_code == 200
        assert response.json()["info"] == f"Active changed to 'false' for id {todo_id}"
        assert client.get(f"/todo/alice/id/{todo_id}").json()["active"] is False

    def test_change_missing_id_is_400(self, client):
        response = client.post("/todo/alice/ctitle/42", json={"title": "x"})
        assert response.status_code == 400
        assert _error(response) == "ID does not exist"

    def test_change_other_account_is_400(self, client):
        _add(client, "alice", title="Buy milk")
        todo_id = _ids(client, "alice")[0]

        response = client.post(f"/todo/bob/cpri/{todo_id}", json={"item_priority": 1})
        assert response.status_code == 400
        assert client.get(f"/todo/alice/id/{todo_id}").json()["item_priority"] == 0

    def test_change_malformed_id_is_400(self, client):
        response = client.post("/todo/alice/ctitle/abc", json={"title": "x"})
        assert response.status_code == 400

    def test_change_missing_body_field_is_400(self, client):
        _add(client, title="Buy milk")
        todo_id = _ids(client)[0]

        response = client.post(f"/todo/alice/cactive/{todo_id}", json={})
        assert response.status_code == 400
        assert _error(response).startswith("Failed to decode body")


class TestDelete:
    def test_remove_by_title(self, client):
        _add(client, title="dup")
        _add(client, title="dup")
        _add(client, title="keep")

        response = client.request("DELETE", "/todo/alice/rmtitle", json={"title": "dup"})
        assert response.status_code == 200
        assert response.json() == {"status": "Success", "info": "Todos with 'dup' title removed"}
        assert [t["title"] for t in client.get("/todo/alice").json()] == ["keep"]

    def test_remove_by_priority_is_idempotent(self, client):
        _add(client, title="a", item_priority=2)

        for _ in range(2):
            response = client.request("DELETE", "/todo/alice/rmpri", json={"item_priority": 2})
            assert response.status_code == 200
            assert response.json()["info"] == "Todos with '2' priority removed"
        assert client.get("/todo/alice").status_code == 204

    def test_remove_inactive_scoped_to_account(self, client):
        _add(client, "alice", title="done")
        _add(client, "alice", title="todo")
        _add(client, "bob", title="bob done")
        alice_done = _ids(client, "alice")[0]
        bob_done = _ids(client, "bob")[0]
        client.post(f"/todo/alice/cactive/{alice_done}", json={"active": False})
        client.post(f"/todo/bob/cactive/{bob_done}", json={"active": False})

        response = client.request("DELETE", "/todo/alice/rminactive")
        assert response.status_code == 200
        assert response.json()["info"] == "Inactive todos removed"
        assert [t["title"] for t in client.get("/todo/alice").json()] == ["todo"]
        assert [t["title"] for t in client.get("/todo/bob").json()] == ["bob done"]

    def test_remove_by_id(self, client):
        _add(client, title="a")
        todo_id = _ids(client)[0]

        response = client.request("DELETE", "/todo/alice/rmid", json={"id": todo_id})
        assert response.status_code == 200
        assert response.json()["info"] == f"Todo with '{todo_id}' id removed"
        assert client.get(f"/todo/alice/id/{todo_id}").status_code == 204

    def test_remove_without_body_is_400(self, client):
        response = client.request("DELETE", "/todo/alice/rmtitle")
        assert response.status_code == 400


class TestRouting:
    def test_unknown_sub_operation_is_400(self, client):
        response = client.get("/todo/alice/bogus/1")
        assert response.status_code == 400
        assert _error(response) == "Bad Request"

    def test_missing_argument_is_400(self, client):
        assert client.get("/todo/alice/highs").status_code == 400

    def test_unsupported_method_is_400(self, client):
        response = client.put("/todo/alice", json={})
        assert response.status_code == 400
        assert "error" in response.json()

    def test_wrong_method_for_route_is_400(self, client):
        assert client.get("/todo/alice/add").status_code == 400

    def test_unknown_path_outside_todo_is_404(self, client):
        assert client.get("/nonexistent").status_code == 404


class TestStoreFailure:
    def test_database_error_is_500(self, client, db_engine):
        SQLModel.metadata.drop_all(db_engine)

        response = client.get("/todo/alice")
        assert response.status_code == 500
        assert _error(response).startswith("Database error:")

    def test_database_error_on_insert_is_500(self, client, db_engine):
        SQLModel.metadata.drop_all(db_engine)

        response = client.post("/todo/alice/add", json={"title": "x"})
        assert response.status_code == 500


class TestIntegerBounds:
    TOO_BIG = 10**30

    def test_highs_beyond_bigint_is_400(self, client):
        response = client.get("/todo/alice/highs/99999999999999999999999")
        assert response.status_code == 400
        assert "priority" in _error(response)

    def test_highs_negative_is_400(self, client):
        assert client.get("/todo/alice/highs/-1").status_code == 400

    def test_id_beyond_bigint_is_400(self, client):
        response = client.get(f"/todo/alice/id/{self.TOO_BIG}")
        assert response.status_code == 400
        assert "error" in response.json()

    def test_change_id_beyond_bigint_is_400(self, client):
        for route, body in (
            ("ctitle", {"title": "x"}),
            ("cpri", {"item_priority": 1}),
            ("cactive", {"active": True}),
        ):
            response = client.post(f"/todo/alice/{route}/{self.TOO_BIG}", json=body)
            assert response.status_code == 400
            assert "error" in response.json()

    def test_add_priority_beyond_bigint_is_400(self, client):
        response = client.post("/todo/alice/add", json={"title": "x", "item_priority": self.TOO_BIG})
        assert response.status_code == 400
        assert _error(response).startswith("Failed to decode body")
        assert client.get("/todo/alice").status_code == 204

    def test_change_priority_beyond_bigint_is_400(self, client):
        _add(client, title="Buy milk")
        todo_id = _ids(client)[0]

        response = client.post(f"/todo/alice/cpri/{todo_id}", json={"item_priority": self.TOO_BIG})
        assert response.status_code == 400
        assert _error(response).startswith("Failed to decode body")

    def test_remove_by_id_beyond_bigint_is_400(self, client):
        response = client.request("DELETE", "/todo/alice/rmid", json={"id": self.TOO_BIG})
        assert response.status_code == 400
        assert _error(response).startswith("Failed to decode body")

    def test_remove_by_priority_beyond_bigint_is_400(self, client):
        response = client.request("DELETE", "/todo/alice/rmpri", json={"item_priority": -self.TOO_BIG})
        assert response.status_code == 400
        assert _error(response).startswith("Failed to decode body")


class TestEmptySegments:
    def test_trailing_slash_lists_without_redirect(self, client):
        _add(client, title="Buy milk")

        response = client.get("/todo/alice/", follow_redirects=False)
        assert response.status_code == 200
        assert [t["title"] for t in response.json()] == ["Buy milk"]

    def test_trailing_slash_on_delete(self, client):
        _add(client, title="done")
        todo_id = _ids(client)[0]
        client.post(f"/todo/alice/cactive/{todo_id}", json={"active": False})

        response = client.request("DELETE", "/todo/alice/rminactive/", follow_redirects=False)
        assert response.status_code == 200
        assert response.json()["info"] == "Inactive todos removed"
        assert client.get("/todo/alice").status_code == 204

    def test_doubled_slashes_are_collapsed(self, client):
        _add(client, title="Buy milk", item_priority=2)

        response = client.get("/todo//alice//highs/3", follow_redirects=False)
        assert response.status_code == 200
        assert [t["title"] for t in response.json()] == ["Buy milk"]
