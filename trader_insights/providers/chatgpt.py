import requests
from typing import Optional

from .base import AIProvider
from ..exceptions import ProviderError


class ChatGPTProvider(AIProvider):
    """ChatGPT provider implementation."""
    
    API_URL = "https://api.openai.com/v1/chat/completions"
    
    def __init__(self, api_key: Optional[str], model: str = "gpt-4o-mini", timeout: float = 60):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
    
    def get_name(self) -> str:
        return f"ChatGPT ({self.model})"
    
    def generate(self, prompt: str) -> str:
        """
        Send the prompt as a single user message to ChatGPT.
        
        Args:
            prompt: Full prompt text
        
        Returns:
            Message content of the first choice ('' if empty)
        
        Raises:
            ProviderError: on network errors or non-2xx responses
        """
        if not self.api_key:
            raise ProviderError("OPENAI_API_KEY is not set")
        
        try:
            response = requests.post(
                self.API_URL,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json"
                },
                json={
                    "model": self.model,
                    "messages": [{"role": "user", "content": prompt}]
                },
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise ProviderError(f"Error calling ChatGPT: {e}") from e
        
        if not response.ok:
            raise ProviderError(f"API Error: {response.status_code} - {response.text[:200]}")
        
        try:
            body = response.json()
        except ValueError as e:
            raise ProviderError("ChatGPT returned invalid JSON") from e

        if not isinstance(body, dict):
            raise ProviderError("ChatGPT returned an unexpected response body")
        choices = body.get('choices') or []
        if not isinstance(choices, list):
            raise ProviderError("ChatGPT returned a malformed choice list")
        if not choices:
            return ''
        message = choices[0].get('message') if isinstance(choices[0], dict) else None
        if not isinstance(message, dict):
            raise ProviderError("ChatGPT returned a choice without a message")
        return message.get('content') or ''
