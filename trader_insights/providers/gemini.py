import requests
from typing import Optional

from .base import AIProvider
from ..exceptions import ProviderError


class GeminiProvider(AIProvider):
    """Google Gemini provider implementation (REST generateContent)."""
    
    API_URL = "https://generativelanguage.googleapis.com/v1beta/models"
    
    def __init__(self, api_key: Optional[str], model: str = "gemini-2.5-flash", timeout: float = 60):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
    
    def get_name(self) -> str:
        return f"Gemini ({self.model})"
    
    def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise ProviderError("GEMINI_API_KEY is not set")
        
        try:
            response = requests.post(
                f"{self.API_URL}/{self.model}:generateContent",
                headers={
                    "x-goog-api-key": self.api_key,
                    "Content-Type": "application/json"
                },
                json={
                    "contents": [{"role": "user", "parts": [{"text": prompt}]}]
                },
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise ProviderError(f"Error calling Gemini: {e}") from e
        
        if not response.ok:
            raise ProviderError(f"Gemini API Error: {response.status_code} - {response.text[:200]}")
        
        try:
            body = response.json()
        except ValueError as e:
            raise ProviderError("Gemini returned invalid JSON") from e
        
        if not isinstance(body, dict):
            raise ProviderError("Gemini returned an unexpected response body")

        # Concatenate the text parts of the first candidate
        candidates = body.get('candidates') or []
        if not isinstance(candidates, list):
            raise ProviderError("Gemini returned a malformed candidate list")
        if not candidates:
            return ''
        if not isinstance(candidates[0], dict):
            raise ProviderError("Gemini returned a malformed candidate")
        content = candidates[0].get('content')
        parts = (content.get('parts') if isinstance(content, dict) else None) or []
        return ''.join(part.get('text', '') for part in parts if isinstance(part, dict))
