"""
➡️ But : Définir la table `Todos` (ORM).

Une ligne = un élément de todo-list, rattaché à un compte (`acct_name`).

Les noms de colonnes sont aussi les noms JSON exposés par l'API
(acct_name, title, body, category, item_priority, publish_date, active, id).

🔹 Règles :

id : attribué par la base, jamais par le client.

publish_date : fixé à l'insertion, jamais modifié ensuite.

active : vrai à la création.

item_priority : 0 = "pas de priorité" (plus petit = plus important).
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Todo(SQLModel, table=True):
    __tablename__ = "Todos"
    __table_args__ = (
        CheckConstraint("acct_name <> ''", name="ck_todos_acct_name_not_empty"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    acct_name: str = Field(index=True, nullable=False)
    title: str = Field(default="", index=True)
    body: str = Field(default="")
    category: str = Field(default="", index=True)
    item_priority: int = Field(default=0, index=True)
    publish_date: datetime = Field(default_factory=utcnow, nullable=False)
    active: bool = Field(default=True, nullable=False)
