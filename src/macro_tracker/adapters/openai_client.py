"""OpenAI chat completions client for macro estimation."""

from dataclasses import dataclass

import openai
from openai import AsyncOpenAI

from macro_tracker.services.estimation import (
    EstimationAuthError,
    EstimationUpstreamError,
    EstimatorClient,
)


@dataclass
class OpenAIEstimatorClient(EstimatorClient):
    """Estimator backed by OpenAI chat completions in JSON mode."""

    client: AsyncOpenAI
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "OpenAIEstimatorClient":
        """Create an OpenAI estimator client."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model)

    async def generate(self, *, system_prompt: str, user_prompt: str) -> str:
        """Call chat completions with temperature 0 and return the message text."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=0,
                response_format={"type": "json_object"},
            )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            raise EstimationAuthError("OpenAI rejected the API key") from exc
        except openai.APIError as exc:
            raise EstimationUpstreamError(f"OpenAI request failed: {exc}") from exc
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
