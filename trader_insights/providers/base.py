from abc import ABC, abstractmethod


class AIProvider(ABC):
    """Abstract base class for AI providers."""
    
    @abstractmethod
    def generate(self, prompt: str) -> str:
        """
        Send a single-turn prompt and return the generated text.
        
        Implementations make exactly one attempt and raise ProviderError
        on any failure.
        """
        pass
    
    @abstractmethod
    def get_name(self) -> str:
        """Get provider name."""
        pass
