"""Remotive job-listing client with a short-lived in-memory cache."""

from __future__ import annotations

import logging
import time

import httpx
from pydantic import ValidationError

from resubuild_ai.models.jobs import JobPost

logger = logging.getLogger(__name__)

REMOTIVE_API_URL = "https://remotive.com/api/remote-jobs"


class JobSearchClient:
    """Fetches the public remote-jobs listing once and filters it locally.

    The listing is refetched when the cache is empty or older than
    ``cache_minutes``.
    """

    def __init__(
        self,
        api_url: str = REMOTIVE_API_URL,
        cache_minutes: int = 5,
        max_results: int = 50,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.api_url = api_url
        self.cache_seconds = cache_minutes * 60
        self.max_results = max_results
        self._http = http_client
        self._cached: list[JobPost] = []
        self._fetched_at: float = 0.0
        self._fetch_count: int = 0

    async def _fetch(self) -> list[JobPost]:
        logger.info("Fetching job listings: %s", self.api_url)
        self._fetch_count += 1
        if self._http is not None:
            response = await self._http.get(self.api_url)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(self.api_url)
        response.raise_for_status()
        listings: list[JobPost] = []
        for item in response.json().get("jobs", []):
            if not isinstance(item, dict):
                continue
            try:
                listings.append(JobPost.model_validate(item))
            except ValidationError:
                logger.warning("Skipping invalid job listing: %r", item.get("id"))
        return listings

    async def _listing(self) -> list[JobPost]:
        now = time.monotonic()
        if not self._cached or now - self._fetched_at > self.cache_seconds:
            self._cached = await self._fetch()
            self._fetched_at = now
        return self._cached

    async def search(self, query: str = "", location: str = "") -> list[JobPost]:
        """Return up to ``max_results`` listings matching query and location.

        Returns an empty list when the listing cannot be fetched.
        """
        try:
            results = await self._listing()
        except (httpx.HTTPError, ValueError):
            logger.error("Error fetching jobs", exc_info=True)
            return []

        if query:
            q = query.lower()
            results = [
                job for job in results
                if q in job.title.lower()
                or q in job.company_name.lower()
                or q in job.category.lower()
            ]

        if location:
            loc = location.lower()
            results = [
                job for job in results
                if loc in job.candidate_required_location.lower()
            ]

        return results[: self.max_results]

    def clear_cache(self) -> None:
        self._cached = []
        self._fetched_at = 0.0

    def get_fetch_count(self) -> int:
        """Return accumulated fetch count and reset the counter."""
        count = self._fetch_count
        self._fetch_count = 0
        return count
