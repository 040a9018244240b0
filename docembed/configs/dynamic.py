"""
Call-time configuration lookup.

The embedder reads the deployment name through this protocol on every
request, so configuration can change without rebuilding the embedder.

Dependencies: pydantic_settings (via AzureOpenAISettings)
System role: Injected configuration capability
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from docembed.configs.azure_openai import AzureOpenAISettings

AZURE_OPENAI_EMBEDDING_NAME_KEY = "azure_openai_embedding_name"

_AZURE_OPENAI_PREFIX = "azure_openai_"


@runtime_checkable
class DynamicConfiguration(Protocol):
    """Key/value configuration source read at call time."""

    def get(self, key: str) -> str | None:
        """Return the value for key, or None when unset."""
        ...


class EnvironmentConfiguration:
    """
    Resolve keys from a freshly loaded AzureOpenAISettings.

    Keys use the ``azure_openai_<field>`` form, e.g.
    ``azure_openai_embedding_name`` maps to AZURE_OPENAI_EMBEDDING_NAME.
    """

    def get(self, key: str) -> str | None:
        if not key.startswith(_AZURE_OPENAI_PREFIX):
            return None
        field = key[len(_AZURE_OPENAI_PREFIX):]
        settings = AzureOpenAISettings()
        value = getattr(settings, field, None)
        return None if value is None else str(value)


class MappingConfiguration:
    """Configuration backed by a plain mapping."""

    def __init__(self, values: Mapping[str, str | None] | None = None) -> None:
        self._values = values if values is not None else {}

    def get(self, key: str) -> str | None:
        return self._values.get(key)
