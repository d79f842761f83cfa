from .base import TextModel
from .gemini_model import GeminiModel
from .openai_model import OpenAIModel
from .mock_model import MockModel
from ..core.config import Settings
from ..core.errors import ConfigurationError

def build_model(settings: Settings) -> TextModel:
    """
    Factory picks the model provider from settings.
    Raises ConfigurationError when the provider is unknown or its key is missing.
    """
    provider = settings.MODEL_PROVIDER.lower()
    if provider == "gemini":
        return GeminiModel(settings.GEMINI_API_KEY, settings.GEMINI_MODEL)
    if provider == "openai":
        return OpenAIModel(settings.OPENAI_API_KEY, settings.OPENAI_MODEL)
    if provider == "mock":
        return MockModel()
    raise ConfigurationError(f"Unknown MODEL_PROVIDER: {settings.MODEL_PROVIDER!r}")
