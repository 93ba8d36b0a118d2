"""
➡️ But : Configurer les logs de l'application (module `logging` standard).

Format texte, horodatage complet, sans couleurs. Chaque module récupère son
logger avec `logging.getLogger(__name__)`.
"""

import logging

LOG_FORMAT = "time=%(asctime)s level=%(levelname)s logger=%(name)s msg=%(message)s"


def setup_logging(level: str | int = logging.INFO) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
