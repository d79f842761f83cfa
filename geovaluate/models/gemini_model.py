"""Google Gemini-backed text model (google-genai SDK)."""

from __future__ import annotations

from google import genai

from .base import TextModel
from ..core.errors import ConfigurationError, ModelInvocationError


class GeminiModel(TextModel):
    name = "gemini"

    def __init__(self, api_key: str | None, model: str | None):
        if not api_key:
            raise ConfigurationError("GEMINI_API_KEY missing from settings")
        if not model:
            raise ConfigurationError("GEMINI_MODEL missing from settings")
        self.model = model
        # Explicit client instead of process-wide genai.configure()
        self.client = genai.Client(api_key=api_key)

    def generate(self, prompt: str) -> str:
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as exc:
            raise ModelInvocationError("Error invoking Gemini API") from exc

        text = response.text
        if not text:
            raise ModelInvocationError("Gemini returned an empty response")
        return text
