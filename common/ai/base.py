"""
Abstract AI provider interface.

Defines the contract that LLM providers implement, so services can be
tested with a mock provider and the backing model can be swapped.

Example:
    from common.ai import AIProvider, ClaudeProvider

    def get_ai_provider(settings) -> AIProvider:
        return ClaudeProvider(api_key=settings.CLAUDE_API_KEY)
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any


class AIProvider(ABC):
    """Abstract AI provider interface."""

    @abstractmethod
    async def chat(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, str]]] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> str:
        """
        Send a message and get a response.

        Args:
            message: The user's message
            system_prompt: Optional system instructions
            conversation_history: Previous messages in the conversation
                Format: [{"role": "user"|"assistant", "content": "..."}]
            max_tokens: Maximum tokens in the response
            temperature: Sampling temperature (0-1)
            **kwargs: Provider-specific options

        Returns:
            The AI's response text
        """
        pass
