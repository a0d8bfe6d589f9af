"""
Constantes globales pour Chat Proxy.
"""

# ============================================================================
# CONFIGURATION PAR DÉFAUT
# ============================================================================
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "info"
DEFAULT_CONNECT_TIMEOUT = 10.0
CONFIG_ENV_VAR = "CHAT_PROXY_CONFIG"

# ============================================================================
# CREDENTIALS (une variable d'environnement par provider)
# ============================================================================
PROVIDER_ENV_VARS = {
    "deepseek": "DEEPSEEK_API_KEY",
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "claude": "CLAUDE_API_KEY",
    "nebius": "NEBIUS_API_KEY",
}

# ============================================================================
# ENDPOINTS UPSTREAM
# ============================================================================
DEEPSEEK_URL = "https://api.deepseek.com/chat/completions"
OPENAI_URL = "https://api.openai.com/v1/chat/completions"
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com"
NEBIUS_URL = "https://api.studio.nebius.com/v1/chat/completions"
CLAUDE_URL = "https://api.anthropic.com/v1/messages"

OPENAI_MODEL = "gpt-4o-mini"
NEBIUS_MODEL = "deepseek-ai/DeepSeek-V3-0324"
CLAUDE_MODEL = "claude-3-7-sonnet-20250219"
CLAUDE_MAX_TOKENS = 2048
ANTHROPIC_VERSION = "2023-06-01"

DEEPSEEK_CHAT_TEMPERATURE = 0.7

# ============================================================================
# RÉPONSES
# ============================================================================
DEFAULT_STREAM_CONTENT_TYPE = "application/octet-stream"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
