"""
Google Gemini client — LLM wrapper for zero-result query suggestions.
"""
import logging

import google.generativeai as genai

logger = logging.getLogger(__name__)


class GeminiClient:
    """Thin wrapper around the Google Generative AI SDK."""

    def __init__(self, api_key: str, model: str = "gemini-2.0-flash", max_output_tokens: int = 60):
        genai.configure(api_key=api_key)
        self._model = genai.GenerativeModel(model)
        self._model_name = model
        self._generation_config = genai.GenerationConfig(max_output_tokens=max_output_tokens)
        logger.info(f"GeminiClient initialised with model={model}")

    async def generate(self, prompt: str) -> str:
        """Generate text content from a prompt.

        Uses the SDK's async call so a caller-side timeout cancels the
        request instead of leaving it running.

        Args:
            prompt: The full prompt to send to Gemini.

        Returns:
            The generated text response.
        """
        response = await self._model.generate_content_async(
            prompt, generation_config=self._generation_config
        )
        return response.text
