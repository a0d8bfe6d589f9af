"""
Dataclasses pour la configuration.
"""
from dataclasses import dataclass
from typing import Dict, Any, Optional

from ..core.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_CONNECT_TIMEOUT,
)


@dataclass
class Settings:
    """Configuration globale de l'application."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    # None: pas de timeout de lecture, le stream vit tant que la connexion vit
    upstream_timeout: Optional[float] = None
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "Settings":
        """Crée une instance depuis la configuration chargée."""
        from .loader import get_server_config

        server = get_server_config(config)
        timeout = server["upstream_timeout"]
        return cls(
            host=server["host"],
            port=server["port"],
            log_level=server["log_level"],
            upstream_timeout=float(timeout) if timeout is not None else None,
            connect_timeout=server["connect_timeout"]
        )


def get_settings() -> Settings:
    """Retourne les réglages issus de la configuration en cache."""
    from .loader import get_config

    return Settings.from_config(get_config())
