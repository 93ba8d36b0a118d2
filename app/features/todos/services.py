"""
➡️ But : Contenir la logique métier des todos : un appel repository par requête, messages de statut.

TodoService :
- lectures filtrées (la priorité 0 n'est jamais un seuil : on bascule sur les todos sans priorité),
- commandes (ajout, modifications champ par champ, suppressions en masse) qui retournent un ListStatus.

Les erreurs (TodoNotFoundError, SQLAlchemyError) ne sont pas traitées ici : elles
remontent jusqu'aux handlers d'exceptions de l'API.
"""

import logging
from typing import Optional, Sequence

from app.db.models.todos import Todo
from app.db.repositories.todos import TodoNotFoundError, TodoRepository
from app.features.todos.schemas import (
    ListStatus,
    TodoActiveIn,
    TodoCreateIn,
    TodoIdIn,
    TodoPriorityIn,
    TodoTitleIn,
)

__all__ = ["TodoService", "TodoNotFoundError"]

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    # --------------- Queries ---------------
    def list(self, acct_name: str) -> Sequence[Todo]:
        return self.repo.select_all(acct_name=acct_name)

    def list_by_active(self, acct_name: str, active: bool) -> Sequence[Todo]:
        return self.repo.select_by_active(active, acct_name=acct_name)

    def list_by_priority(self, acct_name: str, priority: int) -> Sequence[Todo]:
        if priority == 0:
            return self.repo.select_non_priority(acct_name=acct_name)
        return self.repo.select_by_priority(priority, acct_name=acct_name)

    def list_by_category(self, acct_name: str, category: str) -> Sequence[Todo]:
        return self.repo.select_by_category(category, acct_name=acct_name)

    def get(self, acct_name: str, todo_id: int) -> Optional[Todo]:
        return self.repo.select_by_id(todo_id, acct_name=acct_name)

    # --------------- Commands ---------------
    def add(self, acct_name: str, payload: TodoCreateIn) -> ListStatus:
        todo = self.repo.insert(acct_name=acct_name, **payload.model_dump())
        logger.debug("Todo %s added for %s", todo.id, acct_name)
        return ListStatus(info=f"Title '{payload.title}' added")

    def change_title(self, acct_name: str, todo_id: int, payload: TodoTitleIn) -> ListStatus:
        self.repo.update_title(todo_id, payload.title, acct_name=acct_name)
        return ListStatus(info=f"Title changed to '{payload.title}' for id {todo_id}")

    def change_priority(self, acct_name: str, todo_id: int, payload: TodoPriorityIn) -> ListStatus:
        self.repo.update_priority(todo_id, payload.item_priority, acct_name=acct_name)
        return ListStatus(info=f"Priority changed to {payload.item_priority} for id {todo_id}")

    def change_active(self, acct_name: str, todo_id: int, payload: TodoActiveIn) -> ListStatus:
        self.repo.update_active(todo_id, payload.active, acct_name=acct_name)
        active = "true" if payload.active else "false"
        return ListStatus(info=f"Active changed to '{active}' for id {todo_id}")

    def remove_by_title(self, acct_name: str, payload: TodoTitleIn) -> ListStatus:
        count = self.repo.delete_by_title(payload.title, acct_name=acct_name)
        logger.info("Removed %d todo(s) titled %r for %s", count, payload.title, acct_name)
        return ListStatus(info=f"Todos with '{payload.title}' title removed")

    def remove_by_priority(self, acct_name: str, payload: TodoPriorityIn) -> ListStatus:
        count = self.repo.delete_by_priority(payload.item_priority, acct_name=acct_name)
        logger.info("Removed %d todo(s) with priority %d for %s", count, payload.item_priority, acct_name)
        return ListStatus(info=f"Todos with '{payload.item_priority}' priority removed")

    def remove_inactive(self, acct_name: str) -> ListStatus:
        count = self.repo.delete_inactive(acct_name=acct_name)
        logger.info("Removed %d inactive todo(s) for %s", count, acct_name)
        return ListStatus(info="Inactive todos removed")

    def remove_by_id(self, acct_name: str, payload: TodoIdIn) -> ListStatus:
        count = self.repo.delete_by_id(payload.id, acct_name=acct_name)
        logger.info("Removed %d todo(s) with id %d for %s", count, payload.id, acct_name)
        return ListStatus(info=f"Todo with '{payload.id}' id removed")
