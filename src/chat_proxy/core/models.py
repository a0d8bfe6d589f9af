"""
Dataclasses métier pour Chat Proxy.
"""
from dataclasses import dataclass
from typing import List, Optional, Dict, Any

from .exceptions import BadRequestError, ChatProxyError

# {"role": "system" | "user" | "assistant", "content": str}
# Gardé en dict: les adapters pass-through renvoient le message tel quel.
ChatMessage = Dict[str, Any]


@dataclass
class ChatRequest:
    """Requête entrante POST /api/ai."""
    model: Optional[str]
    messages: Optional[List[ChatMessage]]

    @classmethod
    def from_dict(cls, data: Any) -> "ChatRequest":
        """
        Parse le body JSON de la requête.

        Les champs sont validés au dispatch. Un body `null` est une erreur
        interne (500); tout autre body non-objet n'a ni model ni messages (400).

        Raises:
            ChatProxyError: Si le body est `null`
            BadRequestError: Si le body n'est pas un objet JSON
        """
        if data is None:
            raise ChatProxyError("Request body is null", code="invalid_body")
        if not isinstance(data, dict):
            raise BadRequestError()
        return cls(model=data.get("model"), messages=data.get("messages"))


@dataclass
class UpstreamRequest:
    """Descripteur de la requête HTTP vers le provider."""
    url: str
    headers: Dict[str, str]
    body: Dict[str, Any]
    provider: str
    check_status: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convertit en dictionnaire (headers d'auth masqués)."""
        return {
            "url": self.url,
            "provider": self.provider,
            "headers": sorted(self.headers),
            "body": self.body,
        }


@dataclass
class ModelDescriptor:
    """Entrée de la liste des modèles sélectionnables."""
    value: str
    label: str
    disabled: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convertit le descripteur en dictionnaire."""
        return {
            "value": self.value,
            "label": self.label,
            "disabled": self.disabled
        }
