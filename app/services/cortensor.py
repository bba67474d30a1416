"""Client for the Cortensor Router API.

Every read here degrades instead of raising: a failed status read yields
``None``, a failed list read yields ``[]``, and the network summary falls back
to demo data when the live network reports no miners.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx
from pydantic import ValidationError

from app.core.config import settings
from app.schemas.catalog import CatalogEntry
from app.schemas.network import (
    CompletionRequest,
    CompletionResponse,
    Miner,
    NetworkStatusSummary,
    RouterStatus,
    Session,
)

logger = logging.getLogger(__name__)


DEMO_STATUS = "demo"

RECOMMENDATION_PROMPT = """You are a helpful assistant for CortexHub, an app catalog for Cortensor-powered applications.

Available apps:
{app_list}

User query: "{query}"

Based on the user's query, recommend the most relevant app(s) and explain why. Be concise and helpful."""


def get_mock_network_stats() -> NetworkStatusSummary:
    """Synthetic summary shown when live data is unavailable"""
    return NetworkStatusSummary(
        is_online=True,
        miner_count=45,
        session_count=12,
        status=DEMO_STATUS,
    )


def should_use_demo(summary: NetworkStatusSummary) -> bool:
    return summary.miner_count == 0


def build_recommendation_prompt(query: str, apps: Sequence[CatalogEntry]) -> str:
    app_list = "\n".join(f"- {a.name}: {a.description} ({a.category})" for a in apps)
    return RECOMMENDATION_PROMPT.format(app_list=app_list, query=query)


class CortensorClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.CORTENSOR_ROUTER_URL).rstrip("/")
        self.api_key = api_key or settings.CORTENSOR_API_KEY
        self.timeout = timeout if timeout is not None else settings.CORTENSOR_TIMEOUT_SECONDS
        # Swappable so tests can stub the Router with httpx.MockTransport
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _client(self, timeout: Optional[float] = None) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=httpx.Timeout(timeout if timeout is not None else self.timeout),
            transport=self.transport,
        )

    async def _get_json(self, path: str, what: str) -> Optional[Any]:
        try:
            async with self._client() as client:
                resp = await client.get(path)
            if not resp.is_success:
                logger.warning(f"Router {what} unavailable: HTTP {resp.status_code}")
                return None
            return resp.json()
        except Exception as e:
            logger.warning(f"Failed to fetch router {what}: {e}")
            return None

    async def get_network_status(self) -> Optional[RouterStatus]:
        data = await self._get_json("/api/v1/status", "status")
        if not isinstance(data, dict):
            return None
        try:
            return RouterStatus.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Malformed router status: {e}")
            return None

    @staticmethod
    def _parse_items(data: List[Any], model, what: str) -> List[Any]:
        # A malformed item still counts; it becomes an empty placeholder.
        items = []
        for item in data:
            try:
                items.append(model.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Malformed item in router {what}: {e.error_count()} error(s)")
                items.append(model.model_construct())
        return items

    async def get_miners(self) -> List[Miner]:
        data = await self._get_json("/api/v1/miners", "miners list")
        if not isinstance(data, list):
            return []
        return self._parse_items(data, Miner, "miners list")

    async def get_sessions(self) -> List[Session]:
        data = await self._get_json("/api/v1/sessions", "sessions list")
        if not isinstance(data, list):
            return []
        return self._parse_items(data, Session, "sessions list")

    async def get_app_recommendation(
        self,
        query: str,
        apps: Sequence[CatalogEntry],
        session_id: Optional[int] = None,
    ) -> Optional[CompletionResponse]:
        """Ask the Router to pick the apps that best fit ``query``.

        Returns None when the completion cannot be obtained.
        """
        if session_id is None:
            session_id = settings.DEFAULT_SESSION_ID
        payload = CompletionRequest(
            prompt=build_recommendation_prompt(query, apps),
            stream=False,
            timeout=settings.COMPLETION_TIMEOUT_SECONDS,
        )
        try:
            # Leave headroom over the completion timeout the Router enforces
            async with self._client(timeout=payload.timeout + self.timeout) as client:
                resp = await client.post(f"/api/v1/completions/{session_id}", json=payload.model_dump())
            if not resp.is_success:
                logger.warning(f"Completion request failed: HTTP {resp.status_code}")
                return None
            return CompletionResponse.model_validate(resp.json())
        except Exception as e:
            logger.warning(f"Failed to get recommendation: {e}")
            return None

    async def get_network_stats(self) -> NetworkStatusSummary:
        status, miners, sessions = await asyncio.gather(
            self.get_network_status(),
            self.get_miners(),
            self.get_sessions(),
        )
        is_online = status is not None and (status.status == "ok" or status.health == "healthy")
        return NetworkStatusSummary(
            is_online=is_online,
            miner_count=len(miners),
            session_count=len(sessions),
            status=(status.status if status is not None else None) or "unknown",
        )

    async def resolve_network_stats(self) -> NetworkStatusSummary:
        """Live summary, or the demo summary when the network looks unreachable."""
        try:
            summary = await self.get_network_stats()
        except Exception as e:
            logger.warning(f"Network stats aggregation failed, using demo data: {e}")
            return get_mock_network_stats()
        if should_use_demo(summary):
            logger.info("Router reports no miners, using demo network stats")
            return get_mock_network_stats()
        return summary


cortensor_client = CortensorClient()
