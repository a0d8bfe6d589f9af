"""
Chat Proxy: façade HTTP de streaming vers plusieurs providers LLM.
"""

__version__ = "1.0.0"
