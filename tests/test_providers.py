"""Tests for the AI provider implementations and provider selection."""

import io
import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from conftest import make_response
from trader_insights.config import Settings
from trader_insights.exceptions import ProviderError
from trader_insights.providers import (
    ChatGPTProvider,
    ClaudeProvider,
    GeminiProvider,
    create_provider,
)

POST = "requests.post"


class TestGeminiProvider:

    def test_sends_single_user_turn(self):
        body = {"candidates": [{"content": {"parts": [{"text": "Buys "}, {"text": "dips."}]}}]}
        with patch(POST, return_value=make_response(200, body)) as mock_post:
            text = GeminiProvider("key", model="gemini-2.5-flash").generate("hello")

        assert text == "Buys dips."
        args, kwargs = mock_post.call_args
        assert args[0].endswith("/models/gemini-2.5-flash:generateContent")
        assert kwargs["headers"]["x-goog-api-key"] == "key"
        assert kwargs["json"] == {"contents": [{"role": "user", "parts": [{"text": "hello"}]}]}

    def test_no_candidates_gives_empty_text(self):
        with patch(POST, return_value=make_response(200, {"candidates": []})):
            assert GeminiProvider("key").generate("hello") == ""

    @pytest.mark.parametrize("body", [
        ["not", "an", "object"],
        {"candidates": "oops"},
        {"candidates": ["oops"]},
    ])
    def test_unexpected_body_raises_provider_error(self, body):
        with patch(POST, return_value=make_response(200, body)):
            with pytest.raises(ProviderError):
                GeminiProvider("key").generate("hello")

    def test_http_error_raises_once(self):
        with patch(POST, return_value=make_response(429, {"error": "quota"})) as mock_post:
            with pytest.raises(ProviderError):
                GeminiProvider("key").generate("hello")
        assert mock_post.call_count == 1

    def test_missing_key_raises_without_request(self):
        with patch(POST) as mock_post:
            with pytest.raises(ProviderError):
                GeminiProvider(None).generate("hello")
        mock_post.assert_not_called()

    def test_network_error(self):
        with patch(POST, side_effect=requests.Timeout("slow")):
            with pytest.raises(ProviderError):
                GeminiProvider("key").generate("hello")


class TestChatGPTProvider:

    def test_returns_first_choice_content(self):
        body = {"choices": [{"message": {"role": "assistant", "content": "Scalps sports."}}]}
        with patch(POST, return_value=make_response(200, body)) as mock_post:
            text = ChatGPTProvider("sk-test").generate("hello")

        assert text == "Scalps sports."
        kwargs = mock_post.call_args.kwargs
        assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
        assert kwargs["json"]["messages"] == [{"role": "user", "content": "hello"}]
        assert kwargs["json"]["model"] == "gpt-4o-mini"

    def test_server_error_is_not_retried(self):
        with patch(POST, return_value=make_response(500)) as mock_post:
            with pytest.raises(ProviderError):
                ChatGPTProvider("sk-test").generate("hello")
        assert mock_post.call_count == 1

    @pytest.mark.parametrize("body", [
        ["not", "an", "object"],
        {"choices": {"0": "x"}},
        {"choices": ["oops"]},
        {"choices": [{"message": "oops"}]},
    ])
    def test_unexpected_body_raises_provider_error(self, body):
        with patch(POST, return_value=make_response(200, body)):
            with pytest.raises(ProviderError):
                ChatGPTProvider("sk-test").generate("hello")

    def test_no_choices_gives_empty_text(self):
        with patch(POST, return_value=make_response(200, {"choices": []})):
            assert ChatGPTProvider("sk-test").generate("hello") == ""


class TestClaudeProvider:

    def test_invokes_bedrock_and_joins_text_blocks(self):
        client = MagicMock()
        client.invoke_model.return_value = {"body": io.BytesIO(json.dumps({
            "content": [{"type": "text", "text": "Fades "}, {"type": "text", "text": "longshots."}]
        }).encode())}

        text = ClaudeProvider(client, model_id="claude-test").generate("hello")

        assert text == "Fades longshots."
        kwargs = client.invoke_model.call_args.kwargs
        assert kwargs["modelId"] == "claude-test"
        request_body = json.loads(kwargs["body"])
        assert request_body["messages"][0]["content"][0]["text"] == "hello"

    def test_bedrock_failure_raises_provider_error(self):
        client = MagicMock()
        client.invoke_model.side_effect = RuntimeError("throttled")

        with pytest.raises(ProviderError):
            ClaudeProvider(client).generate("hello")


class TestCreateProvider:

    def test_gemini_is_default(self):
        provider = create_provider(Settings(gemini_api_key="g"))
        assert isinstance(provider, GeminiProvider)
        assert provider.api_key == "g"

    def test_chatgpt(self):
        provider = create_provider(Settings(ai_provider="chatgpt", openai_api_key="o", openai_model="gpt-x"))
        assert isinstance(provider, ChatGPTProvider)
        assert provider.model == "gpt-x"

    def test_bedrock(self):
        with patch("boto3.client") as mock_client:
            provider = create_provider(Settings(ai_provider="bedrock"))
        mock_client.assert_called_once_with("bedrock-runtime")
        assert isinstance(provider, ClaudeProvider)

    def test_missing_key_still_builds_provider(self):
        assert isinstance(create_provider(Settings(gemini_api_key=None)), GeminiProvider)

    def test_unknown_provider(self):
        with pytest.raises(ProviderError):
            create_provider(Settings(ai_provider="llama"))
