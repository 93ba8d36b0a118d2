"""
➡️ But : Normaliser les chemins /todo/... avant le routage.

Les segments vides sont ignorés : `/todo/alice/` et `/todo//alice` sont servis
comme `/todo/alice`, sans redirection.
"""

from starlette.types import ASGIApp, Receive, Scope, Send


class NormalizePathMiddleware:
    def __init__(self, app: ASGIApp, prefix: str = "/todo"):
        self.app = app
        self.prefix = prefix

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = scope["path"]
            if path == self.prefix or path.startswith(self.prefix + "/"):
                normalized = "/" + "/".join(s for s in path.split("/") if s)
                if normalized != path:
                    scope = dict(scope, path=normalized)
                    scope.pop("raw_path", None)
        await self.app(scope, receive, send)
