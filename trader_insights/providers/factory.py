import logging

from .base import AIProvider
from .chatgpt import ChatGPTProvider
from .claude import ClaudeProvider
from .gemini import GeminiProvider
from ..config import Settings
from ..exceptions import ProviderError

logger = logging.getLogger(__name__)


def create_provider(settings: Settings) -> AIProvider:
    """
    Build the AI provider named by ``settings.ai_provider``.
    
    A missing API key is only warned about here; the provider itself
    raises ProviderError when called, so rankings still run.
    """
    name = settings.ai_provider.lower()
    
    if name == 'bedrock':
        try:
            import boto3
            bedrock_client = boto3.client('bedrock-runtime')
        except Exception as e:
            raise ProviderError(f"Error connecting to Bedrock: {e}") from e
        return ClaudeProvider(bedrock_client, model_id=settings.bedrock_model_id)
    
    if name == 'chatgpt':
        if not settings.openai_api_key:
            logger.warning("OPENAI_API_KEY is not set - strategy explanations will fail")
        return ChatGPTProvider(settings.openai_api_key, model=settings.openai_model)
    
    if name == 'gemini':
        if not settings.gemini_api_key:
            logger.warning("GEMINI_API_KEY is not set - strategy explanations will fail")
        return GeminiProvider(settings.gemini_api_key, model=settings.gemini_model)
    
    raise ProviderError(f"Unknown AI_PROVIDER '{settings.ai_provider}' (expected gemini, chatgpt or bedrock)")
