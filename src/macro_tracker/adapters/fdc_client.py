"""USDA FoodData Central API client."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

import httpx

DEFAULT_DATA_TYPES = ("Branded", "Foundation", "SR Legacy")
MACRO_NUTRIENT_NUMBERS = "203,204,205,208"


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def search_foods(
        self,
        query: str,
        page_size: int = 25,
        data_types: Sequence[str] = DEFAULT_DATA_TYPES,
    ) -> dict[str, object]:
        """Search foods by query and return raw API data."""

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food by FDC id and return raw API data."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def search_foods(
        self,
        query: str,
        page_size: int = 25,
        data_types: Sequence[str] = DEFAULT_DATA_TYPES,
    ) -> dict[str, object]:
        """Search foods by query, generic data types first."""
        response = await self.http_client.post(
            f"{self.base_url}/foods/search",
            params={"api_key": self.api_key},
            json={
                "query": query,
                "dataType": list(data_types),
                "pageSize": page_size,
                "pageNumber": 1,
                "sortBy": "dataType.keyword",
                "sortOrder": "asc",
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food by FDC id with its macro nutrients."""
        response = await self.http_client.get(
            f"{self.base_url}/food/{fdc_id}",
            params={
                "api_key": self.api_key,
                "format": "full",
                "nutrients": MACRO_NUTRIENT_NUMBERS,
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
