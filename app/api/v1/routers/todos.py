"""
➡️ But : Définir les endpoints de l'API todo.

Table de routage déclarative (méthode, gabarit de chemin) → handler.
Les segments typés du chemin (booléen, entier) sont extraits et validés par FastAPI :
un segment invalide produit un 400 avant tout accès à la base.

Lectures : 200 + liste (ou objet) JSON, 204 sans contenu si rien ne correspond.
Commandes : 200 + enveloppe {"status": "Success", "info": ...}.

Les routes ne contiennent ni SQL ni logique métier.
"""

from typing import Union

from fastapi import APIRouter, Depends, Path, Response, status

from app.api.v1.dependencies import get_todo_service
from app.features.todos.schemas import (
    INT64_MAX,
    ErrorOut,
    ListStatus,
    TodoActiveIn,
    TodoCreateIn,
    TodoIdIn,
    TodoOut,
    TodoPriorityIn,
    TodoTitleIn,
)
from app.features.todos.services import TodoService

router = APIRouter(
    prefix="/todo/{acct_name}",
    tags=["todos"],
    responses={
        400: {"model": ErrorOut, "description": "Requête mal formée ou id inexistant"},
        500: {"model": ErrorOut, "description": "Erreur base de données"},
    },
)

EMPTY_RESPONSE = {204: {"description": "Aucun todo ne correspond"}}


def _items_or_empty(items) -> Union[list[TodoOut], Response]:
    if not items:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [TodoOut.model_validate(i) for i in items]


# ---------- GET ----------

@router.get(
    "",
    summary="Lister les todos d'un compte",
    response_model=list[TodoOut],
    responses=EMPTY_RESPONSE,
)
def get_todos(acct_name: str, svc: TodoService = Depends(get_todo_service)):
    return _items_or_empty(svc.list(acct_name))


@router.get(
    "/active/{active}",
    summary="Lister les todos actifs (ou inactifs)",
    response_model=list[TodoOut],
    responses=EMPTY_RESPONSE,
)
def get_actives(acct_name: str, active: bool, svc: TodoService = Depends(get_todo_service)):
    return _items_or_empty(svc.list_by_active(acct_name, active))


@router.get(
    "/highs/{priority}",
    summary="Lister les todos de priorité <= n",
    description="Avec n = 0, retourne les todos sans priorité.",
    response_model=list[TodoOut],
    responses=EMPTY_RESPONSE,
)
def get_by_priority(
    acct_name: str,
    priority: int = Path(..., ge=0, le=INT64_MAX),
    svc: TodoService = Depends(get_todo_service),
):
    return _items_or_empty(svc.list_by_priority(acct_name, priority))


@router.get(
    "/cat/{category}",
    summary="Lister les todos d'une catégorie",
    response_model=list[TodoOut],
    responses=EMPTY_RESPONSE,
)
def get_by_category(acct_name: str, category: str, svc: TodoService = Depends(get_todo_service)):
    return _items_or_empty(svc.list_by_category(acct_name, category))


@router.get(
    "/id/{todo_id}",
    summary="Récupérer un todo",
    response_model=TodoOut,
    responses=EMPTY_RESPONSE,
)
def get_by_id(
    acct_name: str,
    todo_id: int = Path(..., ge=1, le=INT64_MAX),
    svc: TodoService = Depends(get_todo_service),
):
    todo = svc.get(acct_name, todo_id)
    if todo is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return TodoOut.model_validate(todo)


# ---------- POST ----------

@router.post("/add", summary="Ajouter un todo", response_model=ListStatus)
def add_todo(acct_name: str, payload: TodoCreateIn, svc: TodoService = Depends(get_todo_service)):
    return svc.add(acct_name, payload)


@router.post("/ctitle/{todo_id}", summary="Changer le titre", response_model=ListStatus)
def change_title(
    acct_name: str,
    payload: TodoTitleIn,
    todo_id: int = Path(..., ge=1, le=INT64_MAX),
    svc: TodoService = Depends(get_todo_service),
):
    return svc.change_title(acct_name, todo_id, payload)


@router.post("/cpri/{todo_id}", summary="Changer la priorité", response_model=ListStatus)
def change_priority(
    acct_name: str,
    payload: TodoPriorityIn,
    todo_id: int = Path(..., ge=1, le=INT64_MAX),
    svc: TodoService = Depends(get_todo_service),
):
    return svc.change_priority(acct_name, todo_id, payload)


@router.post("/cactive/{todo_id}", summary="Activer / désactiver", response_model=ListStatus)
def change_active(
    acct_name: str,
    payload: TodoActiveIn,
    todo_id: int = Path(..., ge=1, le=INT64_MAX),
    svc: TodoService = Depends(get_todo_service),
):
    return svc.change_active(acct_name, todo_id, payload)


# ---------- DELETE ----------

@router.delete("/rmtitle", summary="Supprimer par titre", response_model=ListStatus)
def remove_by_title(acct_name: str, payload: TodoTitleIn, svc: TodoService = Depends(get_todo_service)):
    return svc.remove_by_title(acct_name, payload)


@router.delete("/rmpri", summary="Supprimer par priorité", response_model=ListStatus)
def remove_by_priority(acct_name: str, payload: TodoPriorityIn, svc: TodoService = Depends(get_todo_service)):
    return svc.remove_by_priority(acct_name, payload)


@router.delete("/rminactive", summary="Supprimer les todos inactifs", response_model=ListStatus)
def remove_inactive(acct_name: str, svc: TodoService = Depends(get_todo_service)):
    return svc.remove_inactive(acct_name)


@router.delete("/rmid", summary="Supprimer par id", response_model=ListStatus)
def remove_by_id(acct_name: str, payload: TodoIdIn, svc: TodoService = Depends(get_todo_service)):
    return svc.remove_by_id(acct_name, payload)
