"""
Exceptions personnalisées pour Chat Proxy.

Chaque exception porte le code HTTP renvoyé au client: la route
convertit directement en `{"error": message}`.
"""
from typing import Optional


class ChatProxyError(Exception):
    """Exception de base pour toutes les erreurs du proxy."""

    status_code = 500

    def __init__(self, message: str, code: str = None, details: dict = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code or "unknown_error"
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code

    def __str__(self):
        if self.details:
            return f"[{self.code}] {self.message} - Détails: {self.details}"
        return f"[{self.code}] {self.message}"


class ConfigurationError(ChatProxyError):
    """Erreur de configuration (fichier manquant, valeur invalide)."""

    def __init__(self, message: str, config_key: str = None):
        super().__init__(
            message=message,
            code="config_error",
            details={"key": config_key} if config_key else {}
        )


class BadRequestError(ChatProxyError):
    """Champs obligatoires absents de la requête."""

    status_code = 400

    def __init__(self, message: str = "Missing model or messages"):
        super().__init__(message=message, code="bad_request")


class UnknownModelError(ChatProxyError):
    """Identifiant de modèle sans adapter."""

    status_code = 400

    def __init__(self, model: str = None):
        super().__init__(
            message="Unknown model",
            code="unknown_model",
            details={"model": model} if model else {}
        )


class MissingCredentialError(ChatProxyError):
    """Provider sélectionné mais clé API absente de l'environnement."""

    def __init__(self, provider: str, env_var: str):
        super().__init__(
            message=f"{env_var} not set in environment",
            code="missing_credential",
            details={"provider": provider, "env_var": env_var}
        )
        self.provider = provider
        self.env_var = env_var


class UpstreamError(ChatProxyError):
    """Réponse non-2xx d'un provider, remontée telle quelle."""

    def __init__(self, message: str, status_code: int, provider: str = None):
        super().__init__(
            message=message,
            code="upstream_error",
            details={"provider": provider} if provider else {},
            status_code=status_code
        )
