"""
Portfolio REST API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from avanza.models import parse_model
from avanza.models.positions import PositionsResponse

if TYPE_CHECKING:
    from avanza.client import AsyncAvanza

POSITIONS_PATH = "/_mobile/account/positions"


class PortfolioAPI:
    def __init__(self, client: AsyncAvanza):
        self._client = client

    async def positions(self) -> PositionsResponse:
        """Positions across all accounts. Requires authentication."""
        data = await self._client.authenticated_request(POSITIONS_PATH)
        return parse_model(PositionsResponse, data)
