"""Application settings loaded from the environment."""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


class Settings(BaseModel):
    """Runtime settings for the analyzer and its web server."""
    ai_provider: str = Field(default="gemini", description="Text generation backend (gemini, chatgpt, bedrock)")
    gemini_api_key: Optional[str] = Field(default=None, description="Google Gemini API key")
    gemini_model: str = Field(default="gemini-2.5-flash", description="Gemini model name")
    openai_api_key: Optional[str] = Field(default=None, description="OpenAI API key")
    openai_model: str = Field(default="gpt-4o-mini", description="OpenAI chat model name")
    bedrock_model_id: str = Field(
        default="us.anthropic.claude-3-5-sonnet-20241022-v2:0",
        description="Claude model id on AWS Bedrock"
    )
    gamma_api_url: str = Field(default="https://gamma-api.polymarket.com", description="Market listing API")
    data_api_url: str = Field(default="https://data-api.polymarket.com", description="Holders and trades API")
    request_timeout: float = Field(default=10.0, description="HTTP timeout in seconds")
    host: str = Field(default="0.0.0.0", description="Web server bind address")
    port: int = Field(default=5000, description="Web server port")
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables"""
        return cls(
            ai_provider=os.getenv("AI_PROVIDER", "gemini").lower(),
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            bedrock_model_id=os.getenv("BEDROCK_MODEL_ID", "us.anthropic.claude-3-5-sonnet-20241022-v2:0"),
            gamma_api_url=os.getenv("GAMMA_API_URL", "https://gamma-api.polymarket.com"),
            data_api_url=os.getenv("DATA_API_URL", "https://data-api.polymarket.com"),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "10")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
