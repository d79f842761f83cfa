"""OpenAI-backed text model."""

from __future__ import annotations

from openai import OpenAI

from .base import TextModel
from ..core.errors import ConfigurationError, ModelInvocationError


class OpenAIModel(TextModel):
    name = "openai"

    def __init__(self, api_key: str | None, model: str | None):
        if not api_key:
            raise ConfigurationError("OPENAI_API_KEY missing from settings")
        if not model:
            raise ConfigurationError("OPENAI_MODEL missing from settings")
        self.model = model
        self.client = OpenAI(api_key=api_key)

    def generate(self, prompt: str) -> str:
        """Send ``prompt`` as a single user turn and return the reply text.

        Parameters
        ----------
        prompt: str
            Fully rendered prompt.

        Returns
        -------
        str
            Raw message content, possibly wrapped in markdown fences.
        """
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": "Return only valid JSON."},
                    {"role": "user", "content": prompt},
                ],
                temperature=0,
            )
        except Exception as exc:
            raise ModelInvocationError("Error invoking OpenAI API") from exc

        content = completion.choices[0].message.content
        if content is None:
            raise ModelInvocationError("OpenAI returned an empty message")
        return content
