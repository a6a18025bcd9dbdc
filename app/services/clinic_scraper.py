import logging

import httpx

from app.exceptions.custom import FetchError, NetworkError, ScrapeError
from app.extractors.clinic_info import extract_clinic_info
from app.schemas.clinic import ScrapeResult

logger = logging.getLogger(__name__)

_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"


def normalize_url(website_url: str) -> str:
    """Prefix https:// when the user left out the scheme."""
    url = website_url.strip()
    if url.lower().startswith(("http://", "https://")):
        return url
    return f"https://{url}"


class ClinicScraperService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        user_agent: str,
        accept_language: str,
        timeout: float = 10.0,
        max_body_bytes: int = 2 * 1024 * 1024,
    ):
        self._client = client
        self._timeout = timeout
        self._max_body_bytes = max_body_bytes
        self._headers = {
            "User-Agent": user_agent,
            "Accept": _ACCEPT,
            "Accept-Language": accept_language,
        }

    async def fetch(self, url: str) -> str:
        """Single GET following redirects. Raises FetchError or NetworkError."""
        try:
            resp = await self._client.get(
                url,
                follow_redirects=True,
                timeout=self._timeout,
                headers=self._headers,
            )
        except httpx.InvalidURL as exc:
            raise FetchError(f"Invalid URL: {exc}") from exc
        except httpx.HTTPError as exc:
            raise NetworkError(str(exc) or type(exc).__name__) from exc

        if not resp.is_success:
            raise FetchError(f"HTTP {resp.status_code}", status_code=resp.status_code)

        if len(resp.content) > self._max_body_bytes:
            raise FetchError(
                f"Response too large ({len(resp.content)} bytes)",
                status_code=resp.status_code,
            )

        return resp.text

    async def scrape(self, website_url: str) -> ScrapeResult:
        """Scrape a clinic website. Fetch failures come back as an empty result with `error` set."""
        url = normalize_url(website_url)
        logger.info("Scraping clinic website %s", url)
        try:
            html = await self.fetch(url)
        except ScrapeError as exc:
            logger.warning("Could not fetch %s: %s", url, exc.message)
            return ScrapeResult(error=exc.message)

        info = extract_clinic_info(html)
        return ScrapeResult(**info.model_dump())
