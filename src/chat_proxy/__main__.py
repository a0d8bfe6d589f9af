"""
Point d'entrée pour `python -m chat_proxy`.
"""
import argparse
import logging

import uvicorn

from .config.settings import get_settings


def main():
    """Fonction principale."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Chat Proxy")
    parser.add_argument("--host", default=settings.host, help=f"Host (défaut: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port (défaut: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Activer le reload auto")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["critical", "error", "warning", "info", "debug"],
        help=f"Niveau de log (défaut: {settings.log_level})"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

    print(f"🚀 Démarrage de Chat Proxy sur {args.host}:{args.port}")

    uvicorn.run(
        "chat_proxy.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level
    )


if __name__ == "__main__":
    main()
