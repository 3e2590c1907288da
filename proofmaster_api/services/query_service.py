"""
Query proxy service.

Forwards a natural-language math query to the Wolfram|Alpha short-answer
endpoint, keeping the app id on the server. An upstream miss is a normal
outcome (result null plus an error line); only missing input, missing
configuration and transport failures are errors.
"""

from typing import Optional

import requests

from ..core.config import Settings
from ..core.errors import MissingQueryError, QueryNotConfiguredError, UpstreamProxyError
from ..core.logging import get_logger
from ..models.schemas import QueryResponse

logger = get_logger(__name__)


class QueryService:
    """
    Service for proxied math-engine queries.

    Args:
        settings: Supplies the app id, upstream URL, units and timeout
        http: requests.Session (or compatible) used for the upstream call
    """

    def __init__(self, settings: Settings, http: Optional[requests.Session] = None):
        self.settings = settings
        self.http = http or requests.Session()

    @property
    def configured(self) -> bool:
        return bool(self.settings.WOLFRAM_APP_ID)

    def cache_headers(self) -> dict[str, str]:
        """Headers sent with a successful answer"""
        return {
            "Cache-Control": f"s-maxage={self.settings.QUERY_CACHE_SECONDS}, stale-while-revalidate",
            "Access-Control-Allow-Origin": "*",
        }

    def query(self, q: Optional[str]) -> QueryResponse:
        """
        Ask the upstream engine.

        Args:
            q: Query text as received

        Returns:
            QueryResponse with result text, or result None and an error line
            when the engine had no answer

        Raises:
            MissingQueryError: q is absent or blank
            QueryNotConfiguredError: No app id configured
            UpstreamProxyError: The upstream exchange raised, in transport or
                while reading the response
        """
        if q is None or not q.strip():
            raise MissingQueryError()
        if not self.configured:
            logger.error("Query proxy called without WOLFRAM_APP_ID")
            raise QueryNotConfiguredError()

        params = {
            "appid": self.settings.WOLFRAM_APP_ID,
            "i": q.strip(),
            "units": self.settings.WOLFRAM_UNITS,
        }
        try:
            response = self.http.get(
                self.settings.WOLFRAM_API_URL,
                params=params,
                timeout=self.settings.UPSTREAM_TIMEOUT_S,
            )
            if not response.ok:
                logger.info(
                    "Upstream returned no result",
                    extra_data={"query": q.strip(), "status_code": response.status_code}
                )
                return QueryResponse(result=None, error=f'Wolfram returned no result for: "{q}"')
            text = response.text
        except requests.RequestException as e:
            logger.error(
                "Upstream query failed",
                extra_data={"query": q.strip(), "error": str(e)}
            )
            raise UpstreamProxyError(str(e))
        except Exception as e:
            logger.exception(
                "Upstream exchange raised",
                extra_data={"query": q.strip(), "error": str(e)}
            )
            raise UpstreamProxyError(str(e))

        logger.info("Upstream answered", extra_data={"query": q.strip()})
        return QueryResponse(result=text)


# Factory function for dependency injection
def get_query_service(settings: Settings, http: Optional[requests.Session] = None) -> QueryService:
    """Create query service instance"""
    return QueryService(settings, http)
