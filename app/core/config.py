"""
➡️ But : Centraliser tous les paramètres configurables (nom d'app, écoute HTTP, URL de la base, logs...)

Utilise pydantic-settings pour charger automatiquement les variables d'environnement (.env, variables système…).

Fournit un objet settings unique, lu une seule fois au démarrage :

from app.core.config import settings
print(settings.DATABASE_URL)
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Todo-Back"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # HTTP
    # -----------------------------
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "todos.db"  # fichier SQLite
    # Pour MySQL/Postgres, définis DATABASE_URL dans l'env.
    # ex: mysql+pymysql://root:root@db:3306/sys
    DATABASE_URL: Optional[str] = None
    SQL_ECHO: Optional[bool] = None  # auto selon ENV si None

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "DEBUG"

    # -----------------------------
    # Client de test (scripts/smoke.py)
    # -----------------------------
    SMOKE_BASE_URL: str = "http://localhost:8080"
    SMOKE_ACCOUNT: str = "jpw"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context):  # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")

        # echo SQL seulement en dev si non spécifié
        if self.SQL_ECHO is None:
            object.__setattr__(self, "SQL_ECHO", self.ENV == "dev")


# Instance globale importable partout
settings = Settings()
