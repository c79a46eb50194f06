"""
OpenAI provider package.

Exports:
- Openai: client for the Responses API
- OpenaiBuilder: validating builder for ``Openai``
- OpenaiModel: static model catalog
"""

from .client import Openai, OpenaiBuilder
from .models import OpenaiModel
from .response import OpenaiResponse

__all__ = ["Openai", "OpenaiBuilder", "OpenaiModel", "OpenaiResponse"]
