"""
➡️ But : Centraliser les dépendances réutilisables des routes.

get_todo_repository() : crée un TodoRepository à partir d'une session DB.

get_todo_service() : crée un TodoService à partir du repository.
"""

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_session
from app.db.repositories.todos import TodoRepository
from app.features.todos.services import TodoService


# -----------------------------
# Todos
# -----------------------------
def get_todo_repository(session: Session = Depends(get_session)) -> TodoRepository:
    return TodoRepository(session)


def get_todo_service(repo: TodoRepository = Depends(get_todo_repository)) -> TodoService:
    return TodoService(repo)
