"""
Tests for the Fireworks completion client with the LLM patched out.
"""

from unittest.mock import MagicMock, patch

import pytest

from app.infrastructure.implementation.fireworks_client import (
    FireworksCompletionClient,
)
from app.infrastructure.interfaces.completion_client import (
    CompletionUnavailableError,
)

MODULE = "app.infrastructure.implementation.fireworks_client"


class TestFireworksCompletionClient:
    """Construction, invocation and error wrapping."""

    def test_missing_api_key_is_unavailable(self):
        client = FireworksCompletionClient(api_key="")

        with pytest.raises(CompletionUnavailableError):
            client.complete("system", "user")

    def test_complete_combines_prompts_and_sets_timeout(self):
        llm = MagicMock()
        llm.invoke.return_value = '{"insights": [], "recommendations": []}'

        with patch(f"{MODULE}.Fireworks", return_value=llm) as fireworks:
            client = FireworksCompletionClient(api_key="key", timeout=7, max_tokens=99)
            result = client.complete("  Be helpful.  ", "Analyze this")

        assert result == '{"insights": [], "recommendations": []}'
        kwargs = fireworks.call_args.kwargs
        assert kwargs["timeout"] == 7
        assert kwargs["max_tokens"] == 99
        prompt = llm.invoke.call_args.args[0]
        assert prompt.startswith("Be helpful.\n\nAnalyze this")

    def test_llm_is_built_once(self):
        llm = MagicMock()
        llm.invoke.return_value = "ok"

        with patch(f"{MODULE}.Fireworks", return_value=llm) as fireworks:
            client = FireworksCompletionClient(api_key="key")
            client.complete("s", "u")
            client.complete("s", "u")

        assert fireworks.call_count == 1

    def test_transport_errors_are_wrapped(self):
        llm = MagicMock()
        llm.invoke.side_effect = TimeoutError("read timed out")

        with patch(f"{MODULE}.Fireworks", return_value=llm):
            client = FireworksCompletionClient(api_key="key")
            with pytest.raises(CompletionUnavailableError) as exc_info:
                client.complete("s", "u")

        assert isinstance(exc_info.value.original_error, TimeoutError)
