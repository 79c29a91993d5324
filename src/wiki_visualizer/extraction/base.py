# ABOUTME: Protocol for page source providers that return a wiki page's raw markup
# ABOUTME: The extraction pipeline only needs text; transport is the provider's concern

from typing import Protocol


class PageSourceProvider(Protocol):
    """Protocol for fetching the raw wikitext of a page."""

    async def fetch(self, page: str, project: str) -> str:
        """Fetch the current wikitext of ``page`` on ``project``.

        Args:
            page: Page title, spaces already replaced by underscores
            project: Project host, e.g. en.wikipedia.org

        Returns:
            The page's raw markup

        Raises:
            FetchError: If the markup cannot be retrieved
            PageNotFoundError: If the page does not exist
        """
        ...

    async def close(self) -> None: ...


def project_domain(project: str) -> str:
    """Return the domain of a project host: ``en.wikipedia.org`` -> ``wikipedia.org``."""
    _, _, domain = project.partition(".")
    return domain
