# src/kubepulse/collectors/base_collector.py
"""
This module defines the abstract base class for the namespace collectors.
Both the pod inventory and the pod usage listings share the same paging
contract, which is implemented once here.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

# A page fetcher takes (limit, continue_token) and returns (items, next_token).
PageFetcher = Callable[[int, Optional[str]], Awaitable[Tuple[List[Any], Optional[str]]]]


class BaseCollector(ABC):
    """
    Abstract Base Class for all namespace collectors.
    """

    #: Used in log messages.
    resource_name: str = "resources"

    def __init__(self, page_size: int = 100):
        self.page_size = page_size

    @abstractmethod
    async def collect(self, namespace: str) -> List[Any]:
        """
        Fetch every object of this collector's kind in the namespace and
        return them as Pydantic models.
        """
        pass

    async def _paginate(self, fetch_page: PageFetcher) -> List[Any]:
        """
        Requests pages sequentially until the continuation token is empty.

        A failing page stops the pagination; the items gathered from the
        previous pages are returned.
        """
        items: List[Any] = []
        token: Optional[str] = None
        page = 0

        while True:
            page += 1
            try:
                page_items, token = await fetch_page(self.page_size, token)
            except Exception as e:
                logger.error(f"Failed to list {self.resource_name} (page {page}): {e}")
                break

            items.extend(page_items)
            if not token:
                break

        logger.debug(f"Listed {len(items)} {self.resource_name} in {page} page(s).")
        return items

    async def close(self):
        """
        Clean up resources (e.g., close API clients).
        """
        pass
