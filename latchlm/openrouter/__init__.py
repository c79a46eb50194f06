"""OpenRouter provider package."""

from .client import Openrouter, OpenrouterBuilder
from .models import OpenrouterModel
from .response import OpenrouterResponse

__all__ = ["Openrouter", "OpenrouterBuilder", "OpenrouterModel", "OpenrouterResponse"]
