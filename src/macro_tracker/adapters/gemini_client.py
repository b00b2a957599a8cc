"""Gemini client for macro estimation."""

from dataclasses import dataclass

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from macro_tracker.services.estimation import (
    EstimationAuthError,
    EstimationUpstreamError,
    EstimatorClient,
)

_AUTH_STATUS_CODES = (401, 403)


@dataclass
class GeminiEstimatorClient(EstimatorClient):
    """Estimator backed by the Gemini generate_content API."""

    client: genai.Client
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "GeminiEstimatorClient":
        """Create a Gemini estimator client."""
        return cls(client=genai.Client(api_key=api_key), model=model)

    async def generate(self, *, system_prompt: str, user_prompt: str) -> str:
        """Run a deterministic JSON-mode completion and return its text."""
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=user_prompt,
                config=genai_types.GenerateContentConfig(
                    system_instruction=system_prompt,
                    temperature=0,
                    top_k=1,
                    response_mime_type="application/json",
                ),
            )
        except genai_errors.APIError as exc:
            if _is_auth_error(exc):
                raise EstimationAuthError("Gemini rejected the API key") from exc
            raise EstimationUpstreamError(f"Gemini request failed: {exc}") from exc
        return response.text or ""

    async def close(self) -> None:
        """Release the async transport."""
        await self.client.aio.aclose()


def _is_auth_error(exc: genai_errors.APIError) -> bool:
    if exc.code in _AUTH_STATUS_CODES:
        return True
    return "api key" in str(exc.message or exc).lower()
