"""src.chat_proxy.config.loader

Chargement de la configuration TOML et lecture des credentials.

Note d'architecture:
- Les clés API ne sont jamais lues depuis le TOML: uniquement depuis
  l'environnement du process, au moment de l'appel.
- Le fichier TOML est optionnel et ne porte que les réglages serveur.
"""
import os
import re
from pathlib import Path
from typing import Dict, Any, Optional

from ..core.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_CONNECT_TIMEOUT,
    PROVIDER_ENV_VARS,
)
from ..core.exceptions import ConfigurationError

# Cache global de configuration
_config_cache: Optional[Dict[str, Any]] = None

_ENV_VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')


def _expand_env_vars(obj: Any) -> Any:
    """
    Récursivement étend les variables d'environnement ${VAR} dans la config.

    Args:
        obj: Valeur à traiter (str, dict, list)

    Returns:
        Valeur avec variables d'environnement expansées
    """
    if isinstance(obj, str):
        def replace_env_var(match):
            var_name = match.group(1)
            return os.environ.get(var_name, match.group(0))
        return _ENV_VAR_PATTERN.sub(replace_env_var, obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    return obj


def _clear_config_cache():
    """Vide le cache de configuration."""
    global _config_cache
    _config_cache = None


def _default_config_path() -> str:
    # Structure: project/src/chat_proxy/config/loader.py
    current_file = os.path.abspath(__file__)
    project_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(current_file))))
    return os.path.join(project_dir, "config.toml")


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            message=f"Fichier de configuration invalide: {path} ({e})",
            config_key="config_path"
        )


def load_config(config_path: str = None) -> Dict[str, Any]:
    """
    Charge la configuration depuis config.toml.

    Ordre de résolution du chemin: argument, puis $CHAT_PROXY_CONFIG,
    puis config.toml à la racine du projet. Seul un chemin explicite
    absent est une erreur; sans fichier, la config est vide (défauts).

    Args:
        config_path: Chemin vers le fichier config (optionnel)

    Returns:
        Dictionnaire de configuration

    Raises:
        ConfigurationError: Si le fichier demandé n'existe pas ou est invalide
    """
    global _config_cache

    if _config_cache is not None:
        return _config_cache

    explicit = config_path or os.environ.get(CONFIG_ENV_VAR)
    path = Path(explicit or _default_config_path())

    if not path.exists():
        if explicit:
            raise ConfigurationError(
                message=f"Fichier de configuration non trouvé: {path}",
                config_key="config_path"
            )
        _config_cache = {}
        return _config_cache

    _config_cache = _expand_env_vars(_read_toml(path))
    return _config_cache


def reload_config(config_path: str = None) -> Dict[str, Any]:
    """
    Recharge la configuration depuis le fichier.

    Returns:
        Nouvelle configuration chargée
    """
    _clear_config_cache()
    return load_config(config_path)


def get_config() -> Dict[str, Any]:
    """
    Retourne la configuration en cache.

    Returns:
        Configuration actuelle
    """
    if _config_cache is None:
        return load_config()
    return _config_cache


def get_server_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extrait la section [server] avec ses valeurs par défaut.

    Args:
        config: Configuration chargée

    Returns:
        Configuration serveur
    """
    server = config.get("server", {})
    upstream = config.get("upstream", {})
    return {
        "host": server.get("host", DEFAULT_HOST),
        "port": int(server.get("port", DEFAULT_PORT)),
        "log_level": str(server.get("log_level", DEFAULT_LOG_LEVEL)).lower(),
        "upstream_timeout": upstream.get("timeout"),
        "connect_timeout": float(upstream.get("connect_timeout", DEFAULT_CONNECT_TIMEOUT)),
    }


def get_credential(provider: str) -> Optional[str]:
    """
    Lit la clé API d'un provider dans l'environnement.

    Une variable vide est traitée comme absente.

    Args:
        provider: Clé du provider ("deepseek", "openai", ...)

    Returns:
        La clé API ou None
    """
    env_var = PROVIDER_ENV_VARS[provider]
    return os.environ.get(env_var) or None


def get_configured_providers() -> Dict[str, bool]:
    """Retourne, pour chaque provider, si sa clé API est définie."""
    return {
        provider: get_credential(provider) is not None
        for provider in PROVIDER_ENV_VARS
    }
