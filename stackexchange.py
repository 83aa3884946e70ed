from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from config import Settings, get_settings
from errors import DecodeError, StatusError, TransportError
from models import Answer, Question


logger = logging.getLogger(__name__)


def _build_session(user_agent: str) -> requests.Session:
    session = requests.Session()
    # One attempt per request; a failure is final for this run
    retry = Retry(total=0, raise_on_status=False)
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({
        "User-Agent": user_agent,
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
    })
    return session


def _error_detail(resp: requests.Response) -> Optional[str]:
    try:
        payload = resp.json()
    except ValueError:
        return None
    if isinstance(payload, dict):
        return payload.get("error_message")
    return None


class StackExchangeClient:
    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None) -> None:
        self.settings = settings or get_settings()
        self._session = session or _build_session(self.settings.user_agent)

    def _get_items(self, path: str, params: Dict[str, Any]) -> List[Any]:
        url = f"{self.settings.api_url}{path}"
        params = {**params, "site": self.settings.site, "filter": "withbody"}
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self._session.get(url, params=params, timeout=self.settings.timeout)
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        if not 200 <= resp.status_code < 300:
            raise StatusError(resp.status_code, _error_detail(resp))

        try:
            payload = resp.json()
        except ValueError as e:
            raise DecodeError(f"invalid JSON from {path}: {e}") from e
        if not isinstance(payload, dict) or not isinstance(payload.get("items"), list):
            raise DecodeError(f"response from {path} has no 'items' list")

        if "quota_remaining" in payload:
            logger.debug("API quota remaining: %s", payload["quota_remaining"])
        return payload["items"]

    def search(self, query: str, limit: int = 10) -> List[Question]:
        """Questions matching `query`, most relevant first, capped at `limit`."""
        items = self._get_items(
            "/search/advanced",
            {"order": "desc", "sort": "relevance", "q": query},
        )
        return [Question.from_api(item) for item in items[: max(limit, 0)]]

    def get_answers(self, question_id: int) -> List[Answer]:
        """Answers to a question, highest score first."""
        items = self._get_items(
            f"/questions/{question_id}/answers",
            {"order": "desc", "sort": "votes"},
        )
        return [Answer.from_api(item) for item in items]
