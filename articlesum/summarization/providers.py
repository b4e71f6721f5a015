"""Generative provider abstraction for summary generation."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx
from huggingface_hub import InferenceClient
from huggingface_hub.errors import GenerationError, HfHubHTTPError

from articlesum.config import SummarizationSettings
from articlesum.errors import ContentValidationError, ProviderError

logger = logging.getLogger(__name__)

DEFAULT_OPENAI_BASE = "https://api.openai.com"


class SummaryProvider(ABC):
    """Abstract base class for summary providers.

    Providers handle the model call (prompt in -> text out). Any failure,
    including an empty completion, is raised as ProviderError. An empty
    prompt is rejected with ContentValidationError before any call.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for identification."""
        pass

    def summarize(self, prompt: str) -> str:
        """Generate a summary for the given prompt.

        Args:
            prompt: Complete instruction prompt

        Returns:
            Generated text, stripped

        Raises:
            ContentValidationError: Empty prompt
            ProviderError: Provider failure or empty output
        """
        if not prompt or not prompt.strip():
            raise ContentValidationError("Prompt cannot be empty")

        logger.info(
            "Generating summary",
            extra={"provider": self.name, "prompt_length": len(prompt)},
        )
        text = self._generate(prompt)
        if not text or not text.strip():
            raise ProviderError(
                f"No summary generated by provider {self.name}", provider=self.name
            )

        summary = text.strip()
        logger.info(
            "Summary generated",
            extra={"provider": self.name, "summary_length": len(summary)},
        )
        return summary

    @abstractmethod
    def _generate(self, prompt: str) -> Optional[str]:
        """Perform the provider call and return raw text."""
        pass

    def close(self) -> None:
        """Release network resources."""


class OpenAIProvider(SummaryProvider):
    """OpenAI-compatible chat completions provider."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_OPENAI_BASE,
        model: str = "gpt-4o-mini",
        temperature: float = 0.3,
        max_tokens: int = 400,
        timeout: float = 60.0,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: API key; calls fail with ProviderError when missing
            base_url: API base URL (without ``/v1``)
            model: Model name
            temperature: Sampling temperature
            max_tokens: Max tokens in response
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx client
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client = client or httpx.Client(timeout=timeout)

    @property
    def name(self) -> str:
        return "openai"

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _generate(self, prompt: str) -> Optional[str]:
        if not self.api_key:
            raise ProviderError("OpenAI API key is not configured", provider=self.name)

        result = self._post(
            "/v1/chat/completions",
            {
                "model": self.model,
                "messages": [{"role": "user", "content": prompt}],
                "temperature": self.temperature,
                "max_tokens": self.max_tokens,
            },
        )
        try:
            return result["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(
                f"Malformed completion response: {e}", provider=self.name
            ) from e

    def _post(self, path: str, payload: Dict[str, Any]) -> Any:
        try:
            response = self._client.post(
                f"{self.base_url}{path}", headers=self._headers(), json=payload
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Provider API error",
                extra={
                    "provider": self.name,
                    "status": e.response.status_code,
                    "body": e.response.text[:500],
                },
            )
            raise ProviderError(
                f"{self.name} API error: {e.response.status_code}",
                provider=self.name,
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                "Provider request failed",
                extra={"provider": self.name, "error": str(e)},
            )
            raise ProviderError(f"{self.name} request failed: {e}", provider=self.name) from e

    def close(self) -> None:
        self._client.close()


class HuggingFaceProvider(SummaryProvider):
    """HuggingFace Text Generation Inference (TGI) provider."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        max_new_tokens: int = 400,
        temperature: float = 0.3,
        timeout: float = 60.0,
        client: Optional[InferenceClient] = None,
    ):
        """Initialize HuggingFace TGI provider.

        Args:
            base_url: TGI endpoint URL (a trailing /v1 is dropped)
            api_key: Optional API token
            max_new_tokens: Generation length cap
            temperature: Sampling temperature
            timeout: Request timeout in seconds
            client: Optional preconfigured inference client
        """
        base = base_url.strip().rstrip("/")
        if base.endswith("/v1"):
            base = base[:-3]
        self.base_url = base
        self.max_new_tokens = max_new_tokens
        self.temperature = temperature
        token = api_key if api_key and api_key != "-" else None
        self._client = client or InferenceClient(model=self.base_url, token=token, timeout=timeout)

    @property
    def name(self) -> str:
        return "huggingface"

    def _generate(self, prompt: str) -> Optional[str]:
        try:
            return self._client.text_generation(
                prompt,
                max_new_tokens=self.max_new_tokens,
                temperature=self.temperature,
            )
        except (GenerationError, HfHubHTTPError, httpx.HTTPError, OSError) as e:
            logger.error(
                "Provider request failed",
                extra={"provider": self.name, "error": str(e)},
            )
            raise ProviderError(f"{self.name} request failed: {e}", provider=self.name) from e


def create_summary_provider(settings: SummarizationSettings) -> SummaryProvider:
    """Create the configured provider.

    Raises:
        ValueError: Unknown provider name or missing required setting
    """
    if settings.provider == "openai":
        return OpenAIProvider(
            api_key=settings.api_key_value(),
            base_url=settings.api_base or DEFAULT_OPENAI_BASE,
            model=settings.model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            timeout=settings.timeout,
        )
    if settings.provider == "huggingface":
        if not settings.api_base:
            raise ValueError("HuggingFace provider requires SUMMARIZATION__API_BASE")
        return HuggingFaceProvider(
            base_url=settings.api_base,
            api_key=settings.api_key_value(),
            max_new_tokens=settings.max_tokens,
            temperature=settings.temperature,
            timeout=settings.timeout,
        )
    raise ValueError(f"Unknown summary provider: {settings.provider}")
