from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from callsheet.extraction.exceptions import ExtractionError, ExtractionNetworkError
from callsheet.extraction.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _call(adapter: OpenAIClientAdapter, user_content: object = "user") -> str:
    return adapter.create_chat_completion(
        model="m",
        temperature=0.1,
        system_prompt="system",
        user_content=user_content,  # type: ignore[arg-type]
        json_schema={"type": "object"},
    )


def _make_adapter(mock_client: MagicMock) -> OpenAIClientAdapter:
    with patch(
        "callsheet.extraction.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        return OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response('{"ok": true}')
        adapter = _make_adapter(mock_client)

        assert _call(adapter) == '{"ok": true}'

    def test_requests_strict_json_schema(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        adapter = _make_adapter(mock_client)

        _call(adapter)

        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {
            "type": "json_schema",
            "json_schema": {
                "name": "extraction_result",
                "strict": True,
                "schema": {"type": "object"},
            },
        }
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}

    def test_passes_multimodal_content_through(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        adapter = _make_adapter(mock_client)
        parts = [{"type": "image_url", "image_url": {"url": "data:image/png;base64,AA"}}]

        _call(adapter, parts)

        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages[1] == {"role": "user", "content": parts}

    def test_passes_connection_settings(self) -> None:
        with patch("callsheet.extraction.openai_client_adapter.openai.OpenAI") as mock_openai:
            OpenAIClientAdapter(api_key="k", timeout_seconds=12, base_url="http://localhost:11434/v1")
        mock_openai.assert_called_once_with(
            api_key="k",
            timeout=12,
            base_url="http://localhost:11434/v1",
        )

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        adapter = _make_adapter(mock_client)

        with pytest.raises(ExtractionError, match="empty response"):
            _call(adapter)

    def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        response = MagicMock()
        response.choices = []
        mock_client.chat.completions.create.return_value = response
        adapter = _make_adapter(mock_client)

        with pytest.raises(ExtractionError, match="no choices"):
            _call(adapter)

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        adapter = _make_adapter(mock_client)

        with pytest.raises(ExtractionNetworkError, match="network error"):
            _call(adapter)

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        adapter = _make_adapter(mock_client)

        with pytest.raises(ExtractionNetworkError, match="network error"):
            _call(adapter)

    def test_raises_network_error_on_rate_limit(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.RateLimitError(
            message="slow down",
            response=httpx.Response(429, request=httpx.Request("POST", "https://api.openai.com")),
            body=None,
        )
        adapter = _make_adapter(mock_client)

        with pytest.raises(ExtractionNetworkError, match="rate limit"):
            _call(adapter)

    def test_raises_plain_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="bad schema",
            request=MagicMock(),
            body=None,
        )
        adapter = _make_adapter(mock_client)

        with pytest.raises(ExtractionError, match="API error") as exc_info:
            _call(adapter)
        assert not isinstance(exc_info.value, ExtractionNetworkError)
