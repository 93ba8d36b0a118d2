"""
➡️ But : Encapsuler toutes les opérations SQL sur la table `Todos`.

Chaque méthode correspond à une forme de requête et prend le compte
(`acct_name`) en paramètre obligatoire : aucune requête de lecture, mise à jour
ou suppression ne sort du périmètre d'un compte.

🔹 Mises à jour :

Vérification d'existence (id + compte) puis UPDATE, dans la même transaction.
Si la ligne n'existe pas : rollback, TodoNotFoundError, et aucun UPDATE émis.
"""

from typing import Any, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from app.db.models.todos import Todo
from app.db.repositories.base import BaseRepository


class TodoNotFoundError(LookupError):
    """Aucun todo avec cet id pour ce compte."""


class TodoRepository(BaseRepository[Todo]):
    model = Todo

    # ---------- INSERT ----------

    def insert(
        self,
        *,
        acct_name: str,
        title: str = "",
        body: str = "",
        category: str = "",
        item_priority: int = 0,
    ) -> Todo:
        return self.create(
            acct_name=acct_name,
            title=title,
            body=body,
            category=category,
            item_priority=item_priority,
            active=True,
        )

    # ---------- SELECT ----------

    def select_all(self, *, acct_name: str) -> Sequence[Todo]:
        return self._all(Todo.acct_name == acct_name)

    def select_by_active(self, active: bool, *, acct_name: str) -> Sequence[Todo]:
        return self._all(Todo.active == active, Todo.acct_name == acct_name)

    def select_by_priority(self, priority: int, *, acct_name: str) -> Sequence[Todo]:
        """Todos de priorité <= seuil ; la priorité 0 ("non définie") est exclue."""
        return self._all(
            Todo.item_priority != 0,
            Todo.item_priority <= priority,
            Todo.acct_name == acct_name,
        )

    def select_non_priority(self, *, acct_name: str) -> Sequence[Todo]:
        return self._all(Todo.item_priority == 0, Todo.acct_name == acct_name)

    def select_by_category(self, category: str, *, acct_name: str) -> Sequence[Todo]:
        return self._all(Todo.category == category, Todo.acct_name == acct_name)

    def select_by_id(self, todo_id: int, *, acct_name: str) -> Optional[Todo]:
        return self._first(Todo.id == todo_id, Todo.acct_name == acct_name)

    # ---------- DELETE ----------

    def delete_by_title(self, title: str, *, acct_name: str) -> int:
        return self._delete_where(Todo.title == title, Todo.acct_name == acct_name)

    def delete_by_priority(self, priority: int, *, acct_name: str) -> int:
        return self._delete_where(Todo.item_priority == priority, Todo.acct_name == acct_name)

    def delete_inactive(self, *, acct_name: str) -> int:
        return self._delete_where(Todo.active == False, Todo.acct_name == acct_name)  # noqa: E712

    def delete_by_id(self, todo_id: int, *, acct_name: str) -> int:
        return self._delete_where(Todo.id == todo_id, Todo.acct_name == acct_name)

    # ---------- UPDATE ----------

    def update_title(self, todo_id: int, title: str, *, acct_name: str) -> None:
        self._update_existing(todo_id, acct_name, title=title)

    def update_priority(self, todo_id: int, priority: int, *, acct_name: str) -> None:
        self._update_existing(todo_id, acct_name, item_priority=priority)

    def update_active(self, todo_id: int, active: bool, *, acct_name: str) -> None:
        self._update_existing(todo_id, acct_name, active=active)

    def _update_existing(self, todo_id: int, acct_name: str, **values: Any) -> None:
        criteria = (Todo.id == todo_id, Todo.acct_name == acct_name)
        try:
            if not self._exists(*criteria, lock=True):
                self.session.rollback()
                raise TodoNotFoundError("ID does not exist")
            self._update_where(values, *criteria)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
