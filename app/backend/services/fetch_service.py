"""
Remote file fetching using httpx.

Downloads the PDF a caller points at into an in-memory buffer.
"""

import logging

import httpx

from ..config import get_settings
from ..errors import UpstreamFetchError

logger = logging.getLogger(__name__)


class FileFetchService:
    """
    Service for downloading remote files.

    A fresh ``httpx.AsyncClient`` is opened per fetch so requests share no
    connection state. Transport errors (DNS, connect, invalid URL) are not
    caught here and propagate to the caller.
    """

    def __init__(
        self,
        timeout: float | None = None,
        follow_redirects: bool = True,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the fetch service.

        Args:
            timeout: Seconds allowed for the request. None disables the timeout.
            follow_redirects: Whether to follow upstream redirects.
            user_agent: Optional User-Agent header for outbound requests.
            transport: Custom httpx transport (e.g. ``httpx.MockTransport`` in tests).
        """
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.user_agent = user_agent
        self.transport = transport

    def _build_client(self) -> httpx.AsyncClient:
        headers = {"User-Agent": self.user_agent} if self.user_agent else None
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=self.follow_redirects,
            headers=headers,
            transport=self.transport,
        )

    async def fetch(self, url: str) -> bytes:
        """
        Download a remote file.

        Args:
            url: Absolute URL of the file.

        Returns:
            The complete response body.

        Raises:
            UpstreamFetchError: If the server answers with a non-2xx status.
            httpx.HTTPError: If the request itself fails.
        """
        logger.info("Fetching file from %s", url)

        async with self._build_client() as client:
            async with client.stream("GET", url) as response:
                if not response.is_success:
                    logger.warning(
                        "Upstream rejected fetch of %s with status %d",
                        url,
                        response.status_code,
                    )
                    raise UpstreamFetchError(url, response.status_code)

                content = await response.aread()

        logger.info("Fetched %d byte(s) from %s", len(content), url)
        return content


# Singleton instance for convenience
_fetch_service: FileFetchService | None = None


def get_fetch_service() -> FileFetchService:
    """Get or create the fetch service singleton from application settings."""
    global _fetch_service
    if _fetch_service is None:
        settings = get_settings()
        _fetch_service = FileFetchService(
            timeout=settings.fetch_timeout,
            follow_redirects=settings.fetch_follow_redirects,
            user_agent=settings.fetch_user_agent,
        )
    return _fetch_service
