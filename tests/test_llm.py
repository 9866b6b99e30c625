"""Tests for onboard/llm.py — fence stripping and availability conversion."""
from unittest.mock import AsyncMock, patch

import pytest

from onboard.config import settings
from onboard.llm import strip_code_fence, convert_availability, AVAILABILITY_PROMPT


class TestStripCodeFence:
    def test_json_fence(self):
        assert strip_code_fence('```json\n{"0": []}\n```') == '{"0": []}'

    def test_no_fence_untouched(self):
        assert strip_code_fence('{"0": []}') == '{"0": []}'

    def test_fence_followed_by_newline_kept(self):
        # The closing fence is only removed when it ends the reply
        assert strip_code_fence('```json\n{"1": [[9, 17]]}\n```\n') == '{"1": [[9, 17]]}\n```\n'

    def test_plain_fence_without_language_kept(self):
        # Only a ```json opener is stripped
        assert strip_code_fence('```\n{}\n```') == '```\n{}'

    def test_not_json_passes_through(self):
        assert strip_code_fence("Mondays 9 to 5") == "Mondays 9 to 5"

    def test_inner_fences_untouched(self):
        raw = '```json\na ``` b\n```'
        assert strip_code_fence(raw) == "a ``` b"


class TestConvertAvailability:
    @pytest.mark.asyncio
    async def test_returns_stripped_reply(self, llm_client):
        with patch("onboard.llm._get_client", return_value=llm_client):
            result = await convert_availability("Mondays 9am to 5pm")
        assert result.startswith('{"0": []')
        assert "```" not in result

    @pytest.mark.asyncio
    async def test_prompt_embeds_text(self, llm_client):
        with patch("onboard.llm._get_client", return_value=llm_client):
            await convert_availability("weekends only")
        kwargs = llm_client.chat.completions.create.call_args.kwargs
        content = kwargs["messages"][0]["content"]
        assert content.endswith('"weekends only"')
        assert "Sunday 0-index" in content
        assert kwargs["model"] == settings.availability_model

    @pytest.mark.asyncio
    async def test_invalid_json_stored_verbatim(self, make_llm):
        client = make_llm("sorry, I can't do that")
        with patch("onboard.llm._get_client", return_value=client):
            result = await convert_availability("???")
        assert result == "sorry, I can't do that"

    @pytest.mark.asyncio
    async def test_empty_reply(self, make_llm):
        client = make_llm(None)
        with patch("onboard.llm._get_client", return_value=client):
            assert await convert_availability("x") == ""

    @pytest.mark.asyncio
    async def test_errors_propagate(self):
        client = AsyncMock()
        client.chat.completions.create = AsyncMock(side_effect=RuntimeError("quota"))
        with patch("onboard.llm._get_client", return_value=client):
            with pytest.raises(RuntimeError, match="quota"):
                await convert_availability("x")

    def test_prompt_placeholder(self):
        assert "{availability}" in AVAILABILITY_PROMPT
