"""AI provider implementations."""
from .base import AIProvider
from .chatgpt import ChatGPTProvider
from .claude import ClaudeProvider
from .gemini import GeminiProvider
from .factory import create_provider

__all__ = ['AIProvider', 'ChatGPTProvider', 'ClaudeProvider', 'GeminiProvider', 'create_provider']
