class GeoValuateError(Exception):
    """Base class for failures inside the analysis pipeline."""

class ConfigurationError(GeoValuateError):
    """Provider settings are missing or unusable (e.g. no API key)."""

class ModelInvocationError(GeoValuateError):
    """The generative model call itself failed."""

class ModelResponseError(GeoValuateError):
    """The model replied, but not with JSON matching the expected schema."""
