"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) complète le schéma généré par FastAPI avec les conventions de l'API todo.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API todo-list par compte.\n\n"
            "### Conventions\n"
            "- Toutes les routes sont préfixées par `/todo/{acct_name}`.\n"
            "- Lecture sans résultat : `204 No Content`.\n"
            "- Commandes : `{\"status\": \"Success\", \"info\": ...}`.\n"
            "- Erreurs : `{\"error\": {\"message\": ...}}` (400 requête, 500 base).\n"
            "- `item_priority` : 0 = pas de priorité, plus petit = plus important.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
