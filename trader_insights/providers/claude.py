import json

from .base import AIProvider
from ..exceptions import ProviderError


class ClaudeProvider(AIProvider):
    """Claude provider implementation via AWS Bedrock."""
    
    def __init__(self, bedrock_client, model_id: str = "us.anthropic.claude-3-5-sonnet-20241022-v2:0",
                 max_tokens: int = 1024):
        self.bedrock_client = bedrock_client
        self.model_id = model_id
        self.max_tokens = max_tokens
    
    def get_name(self) -> str:
        return f"Claude via AWS Bedrock ({self.model_id})"
    
    def generate(self, prompt: str) -> str:
        """
        Send the prompt to Claude via AWS Bedrock.
        
        Returns:
            Concatenated text blocks of the response
        
        Raises:
            ProviderError: if the Bedrock call fails or the body is unreadable
        """
        request_body = {
            "anthropic_version": "bedrock-2023-05-31",
            "max_tokens": self.max_tokens,
            "messages": [
                {"role": "user", "content": [{"type": "text", "text": prompt}]}
            ]
        }
        
        try:
            response = self.bedrock_client.invoke_model(
                modelId=self.model_id,
                body=json.dumps(request_body)
            )
            response_body = json.loads(response['body'].read())
        except Exception as e:
            raise ProviderError(f"Error calling Bedrock: {e}") from e
        
        return ''.join(
            block.get('text', '')
            for block in response_body.get('content', [])
            if block.get('type') == 'text'
        )
