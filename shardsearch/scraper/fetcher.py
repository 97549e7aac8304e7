"""HTTP retrieval with explicit, bounded redirect following.

``httpx`` is used with ``follow_redirects=False`` so that every hop goes
through :func:`resolve_redirect_url` and the same method, headers and body
are replayed for GET and form-POST alike.
"""

from __future__ import annotations

import logging
import re
from typing import Mapping
from urllib.parse import urlsplit

import httpx

from shardsearch.config import settings
from shardsearch.errors import FetchError, HTTPRequestError, TooManyRedirectsError
from shardsearch.scraper.models import RawPage

logger = logging.getLogger(__name__)

_SUPPORTED_METHODS = frozenset({"GET", "POST"})
_SLASH_RUNS = re.compile(r"/+")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def resolve_redirect_url(current_url: str, location: str) -> str:
    """Resolve a ``Location`` header against the URL that produced it.

    Absolute locations are returned verbatim, ``/``-prefixed ones are joined
    to the current scheme and host, anything else replaces the last segment
    of the current path.
    """
    if location.startswith(("http://", "https://")):
        return location

    parts = urlsplit(current_url)
    origin = f"{parts.scheme}://{parts.netloc}"
    if location.startswith("/"):
        return f"{origin}{location}"

    base_path = parts.path
    if "/" in base_path:
        base_path = base_path[: base_path.rindex("/")]
    resolved_path = _SLASH_RUNS.sub("/", f"{base_path}/{location}")
    return f"{origin}{resolved_path}"


def _is_redirect(response: httpx.Response) -> bool:
    return 300 <= response.status_code < 400 and "location" in response.headers


def _build_headers(headers: Mapping[str, str] | None, user_agent: str) -> httpx.Headers:
    request_headers = httpx.Headers(headers or {})
    request_headers["User-Agent"] = user_agent
    if "accept" not in request_headers:
        request_headers["Accept"] = "text/html"
    return request_headers


def _raise_for_status(page: RawPage) -> RawPage:
    if not 200 <= page.status_code < 300:
        raise HTTPRequestError(page.status_code, page.url)
    return page


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def request(
    method: str,
    url: str,
    *,
    user_agent: str | None = None,
    headers: Mapping[str, str] | None = None,
    body: str | None = None,
    max_redirects: int | None = None,
) -> RawPage:
    """Issue *method* against *url*, following redirects by hand.

    A redirect back to an already visited URL ends the chain and the
    redirect response itself is returned.

    Raises:
        ValueError: If *method* is neither GET nor POST.
        TooManyRedirectsError: If the chain needs more than *max_redirects*
            requests (the first one counts).
        FetchError: On connection errors, timeouts or malformed URLs.
    """
    method = method.upper()
    if method not in _SUPPORTED_METHODS:
        raise ValueError(f"Unsupported HTTP method: {method}")

    budget = settings.max_redirects if max_redirects is None else max_redirects
    request_headers = _build_headers(headers, user_agent or settings.user_agent)
    current_url = url
    visited = {current_url}

    with httpx.Client(timeout=settings.request_timeout, follow_redirects=False) as client:
        # every request, the first included, spends one unit of the budget
        while budget > 0:
            budget -= 1
            try:
                response = client.request(
                    method, current_url, headers=request_headers, content=body
                )
            except httpx.HTTPError as exc:
                raise FetchError(f"{method} {current_url} failed: {exc}", current_url) from exc
            except httpx.InvalidURL as exc:
                raise FetchError(f"Invalid URL {current_url!r}: {exc}", current_url) from exc

            logger.debug("%s %s -> %d", method, current_url, response.status_code)
            page = RawPage(url=current_url, html=response.text, status_code=response.status_code)

            if not _is_redirect(response):
                return page

            next_url = resolve_redirect_url(current_url, response.headers["location"])
            if next_url in visited:
                logger.debug("redirect loop back to %s, stopping", next_url)
                return page

            visited.add(next_url)
            current_url = next_url

    raise TooManyRedirectsError(current_url)


def get(
    url: str,
    *,
    user_agent: str | None = None,
    max_redirects: int | None = None,
) -> str:
    """GET *url* and return the body of the final 2xx response.

    Raises:
        HTTPRequestError: If the chain ends on a non-2xx status.
    """
    page = request("GET", url, user_agent=user_agent, max_redirects=max_redirects)
    return _raise_for_status(page).html


def post_form(
    url: str,
    form_data: str,
    *,
    user_agent: str | None = None,
    max_redirects: int | None = None,
) -> str:
    """POST the pre-encoded *form_data* to *url* and return the final body."""
    page = request(
        "POST",
        url,
        user_agent=user_agent,
        headers={"Content-Type": FORM_CONTENT_TYPE},
        body=form_data,
        max_redirects=max_redirects,
    )
    return _raise_for_status(page).html
