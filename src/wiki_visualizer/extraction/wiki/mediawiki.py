# ABOUTME: MediaWiki API page source provider built on httpx
# ABOUTME: Fetches the latest revision's wikitext, retrying only transport failures with tenacity

from typing import Any

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from wiki_visualizer.config import Config, get_config
from wiki_visualizer.core.errors import FetchError, PageNotFoundError
from wiki_visualizer.utils.logging import get_logger, log_api_call


class MediaWikiPageSource:
    """Fetch raw page markup through ``api.php?action=query&prop=revisions``."""

    def __init__(self, client: httpx.AsyncClient | None = None, config: Config | None = None):
        self.config = config or get_config()
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": self.config.user_agent},
            timeout=self.config.request_timeout,
        )
        self.logger = get_logger(__name__)

    def api_url(self, project: str) -> str:
        return f"{self.config.api_scheme}://{project}/w/api.php"

    async def fetch(self, page: str, project: str) -> str:
        """Return the wikitext of ``page`` on ``project``."""
        try:
            payload = await self._query(page, project)
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Could not get contents from MediaWiki api on {project}: HTTP {e.response.status_code}"
            ) from e
        except httpx.TransportError as e:
            raise FetchError(f"Could not get contents from MediaWiki api on {project}: {e}") from e
        except ValueError as e:
            raise FetchError(f"MediaWiki api on {project} returned a response that is not JSON") from e

        content = self._page_content(payload, page, project)
        self.logger.info("Fetched page source", page=page, project=project, content_length=len(content))
        return content

    @log_api_call("mediawiki")
    async def _query(self, page: str, project: str) -> dict[str, Any]:
        params = {
            "action": "query",
            "prop": "revisions",
            "titles": page,
            "rvprop": "content",
            "rvslots": "main",
            "format": "json",
            "formatversion": "2",
        }
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.config.fetch_attempts),
            wait=wait_exponential(multiplier=0.5, max=4),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        ):
            with attempt:
                response = await self.http_client.get(self.api_url(project), params=params)
                response.raise_for_status()
                return response.json()
        raise FetchError(f"Could not get contents from MediaWiki api on {project}")  # pragma: no cover

    @staticmethod
    def _page_content(payload: dict[str, Any], page: str, project: str) -> str:
        if "query" not in payload:
            error = payload.get("error", {})
            raise FetchError(f"MediaWiki api on {project} answered: {error.get('info', 'no query result')}")

        pages = payload["query"].get("pages") or []
        if not pages or pages[0].get("missing") or pages[0].get("invalid"):
            raise PageNotFoundError(page, project)

        revisions = pages[0].get("revisions") or []
        if not revisions:
            raise PageNotFoundError(page, project)

        revision = revisions[0]
        slot = revision.get("slots", {}).get("main", revision)
        content = slot.get("content")
        if content is None:
            raise FetchError(f"Revision of [[{page}]] on {project} has no content")
        return content

    async def close(self) -> None:
        await self.http_client.aclose()
