"""
➡️ But : Client HTTP minimal de l'API todo (tests de fumée).

TodoClient : une méthode par route, retourne la réponse httpx brute.

run() : scénario complet (ajout, lectures filtrées, modifications, suppressions)
qui journalise chaque réponse. Lancé par scripts/smoke.py contre un serveur réel,
ou avec le TestClient de FastAPI dans les tests.
"""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class TodoClient:
    def __init__(self, http: httpx.Client, account: str):
        self.http = http
        self.account = account

    def _path(self, *segments: Any) -> str:
        return "/".join(["/todo", self.account, *(str(s) for s in segments)])

    # ---------- GET ----------
    def get_todos(self) -> httpx.Response:
        return self.http.get(self._path())

    def get_actives(self, active: bool = True) -> httpx.Response:
        return self.http.get(self._path("active", "true" if active else "false"))

    def get_by_priority(self, priority: int) -> httpx.Response:
        return self.http.get(self._path("highs", priority))

    def get_by_category(self, category: str) -> httpx.Response:
        return self.http.get(self._path("cat", category))

    def get_by_id(self, todo_id: int) -> httpx.Response:
        return self.http.get(self._path("id", todo_id))

    # ---------- POST ----------
    def add(
        self,
        title: str,
        *,
        body: str = "",
        category: str = "",
        item_priority: int = 0,
    ) -> httpx.Response:
        payload = {"title": title, "body": body, "category": category, "item_priority": item_priority}
        return self.http.post(self._path("add"), json=payload)

    def change_title(self, todo_id: int, title: str) -> httpx.Response:
        return self.http.post(self._path("ctitle", todo_id), json={"title": title})

    def change_priority(self, todo_id: int, priority: int) -> httpx.Response:
        return self.http.post(self._path("cpri", todo_id), json={"item_priority": priority})

    def change_active(self, todo_id: int, active: bool) -> httpx.Response:
        return self.http.post(self._path("cactive", todo_id), json={"active": active})

    # ---------- DELETE ----------
    def remove_by_title(self, title: str) -> httpx.Response:
        return self.http.request("DELETE", self._path("rmtitle"), json={"title": title})

    def remove_by_priority(self, priority: int) -> httpx.Response:
        return self.http.request("DELETE", self._path("rmpri"), json={"item_priority": priority})

    def remove_inactive(self) -> httpx.Response:
        return self.http.request("DELETE", self._path("rminactive"))

    def remove_by_id(self, todo_id: int) -> httpx.Response:
        return self.http.request("DELETE", self._path("rmid"), json={"id": todo_id})


def _log(label: str, response: httpx.Response) -> httpx.Response:
    logger.info("%s -> %s %s", label, response.status_code, response.text)
    return response


def _first_id(response: httpx.Response) -> Optional[int]:
    if response.status_code != 200:
        return None
    items = response.json()
    return items[0]["id"] if items else None


def run(http: httpx.Client, account: str) -> list[httpx.Response]:
    """Exécute le scénario de fumée ; retourne les réponses dans l'ordre."""
    client = TodoClient(http, account)
    responses = [
        _log("add", client.add("Buy milk", body="2 litres", category="shopping", item_priority=3)),
        _log("add", client.add("Call plumber", category="house", item_priority=1)),
        _log("add", client.add("Read a book", category="leisure")),
    ]

    listing = _log("get todos", client.get_todos())
    responses.append(listing)
    todo_id = _first_id(listing)

    responses += [
        _log("get actives", client.get_actives(True)),
        _log("get highs", client.get_by_priority(2)),
        _log("get non priority", client.get_by_priority(0)),
        _log("get category", client.get_by_category("shopping")),
    ]

    if todo_id is not None:
        responses += [
            _log("get id", client.get_by_id(todo_id)),
            _log("change title", client.change_title(todo_id, "Buy oat milk")),
            _log("change priority", client.change_priority(todo_id, 2)),
            _log("change active", client.change_active(todo_id, False)),
        ]

    responses += [
        _log("remove inactive", client.remove_inactive()),
        _log("remove title", client.remove_by_title("Read a book")),
        _log("remove priority", client.remove_by_priority(1)),
    ]
    if todo_id is not None:
        responses.append(_log("remove id", client.remove_by_id(todo_id)))
    return responses
