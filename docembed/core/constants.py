"""
Shared constants for the chunk-and-embed pipeline.

MAX_CHUNK_SIZE is a character ceiling. Azure OpenAI embedding models accept
8191 tokens per input, and English averages about four characters per token,
so 4000 characters leaves ample room for token-dense text.
"""

MAX_CHUNK_SIZE = 4000

DEFAULT_TIMEOUT_SECONDS = 7.0
DEFAULT_RETRY_BUDGET = 3
DEFAULT_RETRY_DELAY_SECONDS = 2.0
