"""
Client side of the math-engine query proxy.

QueryClient calls the service's /api/query endpoint and folds every outcome
(answer, upstream miss, transport failure) into a QueryOutcome. Its ResultSlot
keeps only the newest response when several queries are in flight, so a slow
earlier answer can never overwrite a later one.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional
from urllib.parse import quote_plus

import requests
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

QUERY_PATH = "/api/query"
WEB_URL = "https://www.wolframalpha.com/input?i="
NO_RESULT = "No result from Wolfram Alpha."
DEFAULT_TIMEOUT_S = 30


class QueryOutcome(BaseModel):
    """Exactly one of result or error is set"""
    model_config = ConfigDict(frozen=True)

    result: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


def web_url(text: str) -> str:
    """Public Wolfram|Alpha page for a query."""
    return WEB_URL + quote_plus(text)


class ResultSlot:
    """
    Holds the outcome of the most recent query.

    Each request takes a ticket from begin(); resolve() only accepts the
    outcome for the newest ticket and discards anything older.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._latest = 0
        self.outcome: Optional[QueryOutcome] = None

    def begin(self) -> int:
        with self._lock:
            self._latest += 1
            self.outcome = None
            return self._latest

    def resolve(self, ticket: int, outcome: Optional[QueryOutcome]) -> bool:
        """Store outcome if ticket is still current; returns whether it was kept."""
        with self._lock:
            if ticket != self._latest:
                logger.debug("discarding stale query response %d (latest %d)", ticket, self._latest)
                return False
            self.outcome = outcome
            return True


class QueryClient:
    """
    Ask the proxy a question.

    Every answered request goes through slot, so client.latest always
    reflects the newest query even when calls overlap.

    Args:
        base_url: Root URL of the ProofMaster service
        session: requests.Session (or compatible) used for the call
        timeout: Seconds to wait for the proxy
        slot: Where the newest outcome is kept; a fresh ResultSlot by default
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_S,
        slot: Optional[ResultSlot] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.slot = slot or ResultSlot()

    @property
    def latest(self) -> Optional[QueryOutcome]:
        """Outcome of the newest query, None while it is still pending"""
        return self.slot.outcome

    def ask(self, text: str) -> Optional[QueryOutcome]:
        """
        Send one query.

        The outcome is stored in the slot unless a newer ask started while
        this one was in flight.

        Returns:
            None for blank text (no request is made, the slot is untouched),
            otherwise this request's QueryOutcome
        """
        if not text or not text.strip():
            return None
        ticket = self.slot.begin()
        outcome = self._fetch(text.strip())
        self.slot.resolve(ticket, outcome)
        return outcome

    def _fetch(self, text: str) -> QueryOutcome:
        try:
            response = self.session.get(
                self.base_url + QUERY_PATH,
                params={"q": text},
                timeout=self.timeout,
            )
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("query proxy call failed: %s", exc)
            return QueryOutcome(error=f"Proxy error: {exc}")

        if not isinstance(data, dict):
            return QueryOutcome(error=NO_RESULT)
        if data.get("error"):
            return QueryOutcome(error=data["error"])
        if not data.get("result"):
            return QueryOutcome(error=NO_RESULT)
        return QueryOutcome(result=data["result"])
