import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from sqlmodel import Session

from app.db.repositories.todos import TodoRepository

logger = logging.getLogger(__name__)

TODO_FIELDS = ("title", "body", "category", "item_priority")


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Todos
# -----------------------------
def seed_todos(session: Session, data: Dict[str, Any]) -> int:
    """
    Insère les entrées `todos:` du YAML.
    Chaque entrée doit avoir un `acct_name` non vide ; les autres champs sont optionnels.
    Retourne le nombre de todos insérés.
    """
    todos_yaml: List[Dict[str, Any]] = data.get("todos") or []
    repo = TodoRepository(session)

    count = 0
    for i, entry in enumerate(todos_yaml):
        acct_name = entry.get("acct_name")
        if not acct_name:
            raise ValueError(f"Entrée todo invalide à l'index {i} : acct_name manquant.")
        fields = {k: entry[k] for k in TODO_FIELDS if k in entry}
        repo.insert(acct_name=str(acct_name), **fields)
        count += 1

    logger.info("Seed: %d todo(s) insérés", count)
    return count


def seed_all(session: Session, seed_path: str | Path) -> int:
    data = load_seed_yaml(seed_path)
    return seed_todos(session, data)
