"""
➡️ But : Définir les formats d'entrée/sortie de l'API todo (couche validation).

TodoCreateIn → corps de POST /todo/{acct}/add

TodoTitleIn / TodoPriorityIn / TodoActiveIn → corps des POST de modification (un seul champ)

TodoTitleIn / TodoPriorityIn / TodoIdIn → filtres des DELETE

TodoOut → un todo en réponse

ListStatus → enveloppe de statut des commandes

ErrorOut → enveloppe d'erreur {"error": {"message": ...}}

Les champs inconnus (ex : id, active, publish_date envoyés par le client) sont ignorés.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field as PydField

# Bornes d'un BIGINT : au-delà, le driver SQL lève OverflowError
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


# ---------- IN ----------

class TodoCreateIn(BaseModel):
    title: str = PydField("", examples=["Buy milk"])
    body: str = ""
    category: str = PydField("", examples=["shopping"])
    item_priority: int = PydField(0, ge=INT64_MIN, le=INT64_MAX, description="0 = pas de priorité ; plus petit = plus important")


class TodoTitleIn(BaseModel):
    title: str = PydField(..., examples=["Buy oat milk"])


class TodoPriorityIn(BaseModel):
    item_priority: int = PydField(..., ge=INT64_MIN, le=INT64_MAX, examples=[2])


class TodoActiveIn(BaseModel):
    active: bool = PydField(..., examples=[False])


class TodoIdIn(BaseModel):
    id: int = PydField(..., ge=1, le=INT64_MAX, examples=[4])


# ---------- OUT ----------

class TodoOut(BaseModel):
    acct_name: str
    title: str
    body: str
    category: str
    item_priority: int
    publish_date: Optional[datetime] = None
    active: bool
    id: int

    model_config = {"from_attributes": True}


class ListStatus(BaseModel):
    status: str = "Success"
    info: str


class ErrorMessage(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: ErrorMessage
