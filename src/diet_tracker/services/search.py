"""Unified food search across custom, curated and USDA sources."""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum

from diet_tracker.domain.foods import FoodSearchResult, SourceTag
from diet_tracker.errors import DietTrackerError
from diet_tracker.services.sources import FoodSource

_logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2

_FAILURE_MESSAGES = {
    SourceTag.USDA: "Failed to search USDA foods",
    SourceTag.CURATED: "Failed to search Indian foods",
    SourceTag.CUSTOM: "Failed to search custom foods",
}


class SearchMode(Enum):
    """Which sources a search consults."""

    ALL = "all"
    USDA = "usda"
    CURATED = "curated"
    CUSTOM = "custom"


@dataclass(frozen=True)
class SearchOutcome:
    """Search results plus a user-facing error for single-source failures."""

    results: list[FoodSearchResult] = field(default_factory=list)
    error: str | None = None


@dataclass
class SearchService:
    """Fan a query out to the food sources and merge the answers.

    Merged results keep a fixed priority order: custom, then curated, then
    USDA. The service is stateless; callers debounce their own input.
    """

    custom_source: FoodSource
    curated_source: FoodSource
    usda_source: FoodSource
    min_query_length: int = MIN_QUERY_LENGTH

    async def search(
        self,
        query: str | None,
        mode: SearchMode = SearchMode.ALL,
        user_id: int | None = None,
    ) -> SearchOutcome:
        """Search the sources selected by ``mode``."""
        cleaned = (query or "").strip()
        if len(cleaned) < self.min_query_length:
            return SearchOutcome()

        if mode is SearchMode.ALL:
            batches = await asyncio.gather(
                *(
                    self._search_source(source, cleaned, user_id)
                    for source in self._sources_by_priority()
                )
            )
            return SearchOutcome(
                results=[result for results, _ in batches for result in results]
            )

        results, error = await self._search_source(
            self._source_for(mode), cleaned, user_id
        )
        return SearchOutcome(results=results, error=error)

    def _sources_by_priority(self) -> tuple[FoodSource, ...]:
        return (self.custom_source, self.curated_source, self.usda_source)

    def _source_for(self, mode: SearchMode) -> FoodSource:
        return {
            SearchMode.USDA: self.usda_source,
            SearchMode.CURATED: self.curated_source,
            SearchMode.CUSTOM: self.custom_source,
        }[mode]

    async def _search_source(
        self, source: FoodSource, query: str, user_id: int | None
    ) -> tuple[list[FoodSearchResult], str | None]:
        """Run one source; a failure yields no results and an error message."""
        try:
            return await source.search(query, user_id), None
        except DietTrackerError as exc:
            _logger.warning(
                "Food search failed: source=%s query=%s error=%s",
                source.tag.value,
                query,
                exc.message,
            )
            return [], exc.message
        except Exception:
            _logger.exception(
                "Food search failed: source=%s query=%s", source.tag.value, query
            )
            return [], _FAILURE_MESSAGES[source.tag]
