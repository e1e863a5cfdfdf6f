"""llm_helpers.py
Functions to help with initiating a LLMClient class
"""

from typing import Optional

from skill_screener.exceptions import LLMConfigError
from skill_screener.screen_classes.judge.llm.llm_client import LLMClient

def initialize_llm_if_available(
    llm_client: Optional[LLMClient] = None,
    provider: Optional[str] = None,
    model: Optional[str] = None,
) -> Optional[LLMClient]:
    """
    Return a ready-to-use LLMClient, or None when no credentials are configured.

    Logic flow:
        1. If an existing `llm_client` is provided validates that it is an instance of `LLMClient`,
        initializes it if needed and returns it.
        2. Otherwise tries to build a new LLMClient from the environment. A missing API key
        (`LLMConfigError`) means the LLM is unavailable and returns `None`.

    Args:
        llm_client (Optional[LLMClient]): Existing LLM client instance to use or validate.
        provider (Optional[str]): Provider for a new client.
        model (Optional[str]): Model for a new client.

    Returns:
        Optional[LLMClient]: An initialized LLMClient instance, or None if not configured.

    Raises:
        TypeError: If `llm_client` is provided but not an instance of `LLMClient`.
        LLMInitializationError: If credentials exist but the client cannot be created.
    """
    if llm_client is not None:
        if not isinstance(llm_client, LLMClient):
            raise TypeError("Provided llm_client must be an instance of LLMClient.")
        if llm_client.client is None:
            llm_client.initialize_client()
        return llm_client

    try:
        llm_client = LLMClient(provider=provider, model=model, function_name="judge_resume")
    except LLMConfigError:
        return None

    llm_client.initialize_client()

    return llm_client
