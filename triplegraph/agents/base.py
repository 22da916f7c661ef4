"""
Base agent class for LLM calls.

Supports multiple LLM providers through LiteLLM.
"""

from abc import ABC, abstractmethod
from typing import Any

import litellm


# Default model - can use any LiteLLM supported model
# Examples:
#   - "gemini/gemini-2.0-flash" (Google Gemini 2.0 Flash)
#   - "claude-sonnet-4-20250514" (Anthropic Claude)
#   - "gpt-4o" (OpenAI GPT-4)
DEFAULT_MODEL = "gemini/gemini-2.0-flash"


class BaseAgent(ABC):
    """
    Base class for single-prompt agents.

    Subclasses build the user prompt and parse the response text. Errors
    raised by the model call are not caught here; callers decide how to
    isolate them.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 1024,
        temperature: float = 0.0,
        **kwargs: Any,
    ) -> None:
        """
        Initialize agent.

        Args:
            model: LiteLLM model identifier (e.g., "gemini/gemini-2.0-flash")
            max_tokens: Max tokens in response
            temperature: Sampling temperature
            **kwargs: Additional arguments for litellm.completion
        """
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.extra_params = kwargs

    @abstractmethod
    def format_input(self, **kwargs: Any) -> str:
        """Format input data into a user prompt."""
        pass

    @abstractmethod
    def parse_output(self, response: str, **kwargs: Any) -> Any:
        """Parse LLM response into structured output."""
        pass

    def complete(self, prompt: str) -> str:
        """
        Send a single user prompt and return the response text.

        Args:
            prompt: User prompt

        Returns:
            Raw response text (empty string if the model returned no content)
        """
        response = litellm.completion(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            **self.extra_params,
        )
        return response.choices[0].message.content or ""

    def execute(self, **kwargs: Any) -> Any:
        """
        Execute the agent: format, call the model, parse.

        Args:
            **kwargs: Input data for the agent

        Returns:
            Parsed output
        """
        prompt = self.format_input(**kwargs)
        response_text = self.complete(prompt)
        return self.parse_output(response_text, **kwargs)
