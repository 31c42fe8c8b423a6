"""
Anthropic Claude AI provider implementation.

Example:
    from common.ai import ClaudeProvider

    claude = ClaudeProvider(api_key="your-api-key")
    response = await claude.chat(
        message="自己紹介文を改善してください",
        system_prompt="You are a helpful assistant.",
    )
"""

import logging
from typing import Optional, List, Dict, Any

from anthropic import AsyncAnthropic

from common.ai.base import AIProvider

logger = logging.getLogger(__name__)


class ClaudeProvider(AIProvider):
    """Anthropic Claude AI provider using the async SDK client."""

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-5-20250929",
        max_retries: int = 0,
        timeout: float = 60.0,
    ):
        """
        Initialize Claude provider.

        Args:
            api_key: Anthropic API key
            model: Model to use
            max_retries: Number of SDK retries for failed requests
            timeout: Request timeout in seconds
        """
        self.client = AsyncAnthropic(
            api_key=api_key,
            max_retries=max_retries,
            timeout=timeout,
        )
        self.model = model

    async def chat(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, str]]] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> str:
        """Send message and get response from Claude."""
        messages = list(conversation_history) if conversation_history else []
        messages.append({"role": "user", "content": message})

        params: Dict[str, Any] = {
            "model": kwargs.get("model", self.model),
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": messages,
        }

        if system_prompt:
            params["system"] = system_prompt

        for key in ["stop_sequences", "top_p", "top_k"]:
            if key in kwargs:
                params[key] = kwargs[key]

        logger.debug(f"Claude request: model={params['model']}, max_tokens={max_tokens}")
        response = await self.client.messages.create(**params)

        # Concatenate text blocks; other block types are ignored
        return "".join(
            block.text for block in response.content if getattr(block, "type", "text") == "text"
        )
