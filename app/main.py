"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l'instance FastAPI (app).

Configure :

les logs,

CORS,

titre, version, tags,

la traduction des erreurs en enveloppe JSON,

schéma OpenAPI personnalisé.

Inclut le router /todo/{acct_name}.

Initialise la base au démarrage (@app.on_event("startup")).

Point unique d'exécution : python -m app.main (ou uvicorn app.main:app).
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging import setup_logging
from app.core.middleware import NormalizePathMiddleware
from app.core.openapi import custom_openapi
from app.db.session import init_db

from app.api.v1.errors import register_exception_handlers
from app.api.v1.routers import todos

import uvicorn

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    openapi_tags=[
        {"name": "todos", "description": "Opérations sur la todo-list d'un compte"},
        {"name": "health", "description": "État du service"},
    ],
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

# Segments vides ignorés sous /todo (pas de redirection 307)
app.add_middleware(NormalizePathMiddleware, prefix="/todo")

register_exception_handlers(app)

# Routers
app.include_router(todos.router)

# Génération du schéma OpenAPI custom
app.openapi = lambda: custom_openapi(app)


@app.get("/health", tags=["health"])
def health():
    return {"status": "healthy", "service": settings.APP_NAME}


# Démarrage
@app.on_event("startup")
def on_startup():
    logger.info("Starting %s (env=%s)", settings.APP_NAME, settings.ENV)
    init_db()


if __name__ == "__main__":
    logger.info("Starting API on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=(settings.ENV == "dev"),
    )
