from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, select

# Type générique pour le modèle (Todo, ...)
ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """
    Repository de base : traduit des filtres typés en requêtes paramétrées.

    👉 Ne contient aucune logique métier.
    👉 Ne journalise rien : les erreurs SQL remontent telles quelles à l'appelant
       (après rollback de la session).
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def _all(self, *criteria: Any) -> Sequence[ModelT]:
        """Tous les enregistrements correspondant aux critères, triés par id."""
        statement = select(self.model).where(*criteria).order_by(self.model.id)
        try:
            return self.session.exec(statement).all()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def _first(self, *criteria: Any) -> Optional[ModelT]:
        statement = select(self.model).where(*criteria)
        try:
            return self.session.exec(statement).first()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def _exists(self, *criteria: Any, lock: bool = False) -> bool:
        """
        Vérifie l'existence d'au moins une ligne.
        lock=True pose un verrou de ligne (SELECT ... FOR UPDATE) jusqu'à la fin
        de la transaction en cours ; SQLite l'ignore.
        """
        statement = select(self.model.id).where(*criteria)
        if lock:
            statement = statement.with_for_update()
        return self.session.exec(statement).first() is not None

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """Crée et persiste un nouvel enregistrement."""
        entity = self.model(**fields)
        self.session.add(entity)
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        self.session.refresh(entity)
        return entity

    # ---------- UPDATE ----------

    def _update_where(self, values: dict[str, Any], *criteria: Any) -> int:
        """UPDATE en masse, sans commit. Retourne le nombre de lignes touchées."""
        statement = update(self.model).where(*criteria).values(**values)
        return self.session.exec(statement).rowcount

    # ---------- DELETE ----------

    def _delete_where(self, *criteria: Any) -> int:
        """
        DELETE en masse + commit.
        Retourne le nombre de lignes supprimées (0 n'est pas une erreur).
        """
        statement = (
            delete(self.model)
            .where(*criteria)
            .execution_options(synchronize_session=False)
        )
        try:
            count = self.session.exec(statement).rowcount
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return count
