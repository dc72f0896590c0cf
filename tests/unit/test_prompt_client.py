"""Unit tests for the Gemini prompt generation client."""

import base64
from unittest.mock import AsyncMock, Mock, patch

import pytest

from imageprompt.core.config import ImagePromptConfig
from imageprompt.core.exceptions import (
    ConfigurationError,
    GenerationEmptyResponseError,
    GenerationError,
    GenerationServiceError,
    GenerationUnknownError,
)
from imageprompt.core.prompt_client import PROMPT_INSTRUCTION, PromptGenerationClient

IMAGE_BYTES = b"\x89PNG\r\n\x1a\nfake-image-data"
IMAGE_BASE64 = base64.b64encode(IMAGE_BYTES).decode("ascii")


@pytest.fixture
def genai_client():
    """Mock genai.Client with an async generate_content."""
    client = Mock()
    client.aio.models.generate_content = AsyncMock(return_value=Mock(text="A prompt"))
    return client


@pytest.fixture
def prompt_client(genai_client):
    return PromptGenerationClient(model_id="gemini-test", client=genai_client)


class TestFromConfig:
    """Tests for building the client from configuration."""

    def test_missing_api_key_raises(self, preview_dir):
        """Test that startup fails without a credential."""
        settings = ImagePromptConfig(_env_file=None, api_key=None, preview_dir=preview_dir)

        with pytest.raises(ConfigurationError, match="API_KEY"):
            PromptGenerationClient.from_config(settings)

    def test_blank_api_key_raises(self, preview_dir):
        settings = ImagePromptConfig(_env_file=None, api_key="   ", preview_dir=preview_dir)

        with pytest.raises(ConfigurationError):
            PromptGenerationClient.from_config(settings)

    def test_builds_client_with_key_and_model(self, test_config):
        with patch("imageprompt.core.prompt_client.genai") as mock_genai:
            client = PromptGenerationClient.from_config(test_config)

        mock_genai.Client.assert_called_once_with(api_key="test-key")
        assert client.model_id == "gemini-test"


class TestBuildContents:
    """Tests for request construction."""

    def test_image_part_then_instruction(self, prompt_client):
        contents = prompt_client.build_contents(IMAGE_BASE64, "image/png")

        assert len(contents) == 2
        assert contents[0].inline_data.data == IMAGE_BYTES
        assert contents[0].inline_data.mime_type == "image/png"
        assert contents[1].text == PROMPT_INSTRUCTION

    def test_instruction_covers_visual_details(self):
        for detail in ("composition", "colors", "lighting", "subject matter", "mood"):
            assert detail in PROMPT_INSTRUCTION
        assert "concise but evocative" in PROMPT_INSTRUCTION


class TestGenerate:
    """Tests for generate."""

    @pytest.mark.asyncio
    async def test_returns_trimmed_text(self, prompt_client, genai_client):
        genai_client.aio.models.generate_content.return_value = Mock(
            text="\n  A weathered red barn under a stormy sky  \n"
        )

        result = await prompt_client.generate(IMAGE_BASE64, "image/png")

        assert result == "A weathered red barn under a stormy sky"

    @pytest.mark.asyncio
    async def test_sends_single_request(self, prompt_client, genai_client):
        await prompt_client.generate(IMAGE_BASE64, "image/jpeg")

        genai_client.aio.models.generate_content.assert_awaited_once()
        kwargs = genai_client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert kwargs["contents"][0].inline_data.mime_type == "image/jpeg"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, "", "   \n"])
    async def test_empty_response(self, prompt_client, genai_client, text):
        genai_client.aio.models.generate_content.return_value = Mock(text=text)

        with pytest.raises(GenerationEmptyResponseError) as exc_info:
            await prompt_client.generate(IMAGE_BASE64, "image/png")

        assert str(exc_info.value) == "Gemini API Error: The API response was empty or invalid."

    @pytest.mark.asyncio
    async def test_missing_response(self, prompt_client, genai_client):
        genai_client.aio.models.generate_content.return_value = None

        with pytest.raises(GenerationEmptyResponseError):
            await prompt_client.generate(IMAGE_BASE64, "image/png")

    @pytest.mark.asyncio
    async def test_service_error_wraps_message(self, prompt_client, genai_client):
        genai_client.aio.models.generate_content.side_effect = RuntimeError("quota exceeded")

        with pytest.raises(GenerationServiceError) as exc_info:
            await prompt_client.generate(IMAGE_BASE64, "image/png")

        assert str(exc_info.value) == "Gemini API Error: quota exceeded"
        assert exc_info.value.detail == "quota exceeded"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_error_without_message_is_unknown(self, prompt_client, genai_client):
        genai_client.aio.models.generate_content.side_effect = RuntimeError()

        with pytest.raises(GenerationUnknownError) as exc_info:
            await prompt_client.generate(IMAGE_BASE64, "image/png")

        assert "unknown error" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_invalid_base64_is_service_error(self, prompt_client, genai_client):
        with pytest.raises(GenerationServiceError):
            await prompt_client.generate("not base64!", "image/png")

        genai_client.aio.models.generate_content.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_all_failures_are_generation_errors(self, prompt_client, genai_client):
        genai_client.aio.models.generate_content.side_effect = ConnectionError("reset by peer")

        with pytest.raises(GenerationError):
            await prompt_client.generate(IMAGE_BASE64, "image/png")
