"""
Session counter endpoint — counts one hit for the caller's session and
echoes the running total as plain text.

  GET /incr?session_id=<id>
"""
import logging
from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from affinity.services.session_counter import SessionCounterStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sessions"])


def get_store(request: Request) -> SessionCounterStore:
    return request.app.state.session_store


def first_query_value(query_string: bytes, name: str) -> str:
    """Return the first value of ``name`` in a raw query string, or ``""``.

    Bytes that are not valid UTF-8 are kept as surrogate escapes, so two
    different byte sequences never collapse onto the same key.
    """
    pairs = parse_qsl(
        query_string.decode("utf-8", "surrogateescape"),
        keep_blank_values=True,
        encoding="utf-8",
        errors="surrogateescape",
    )
    for key, value in pairs:
        if key == name:
            return value
    return ""


# Plain ``def`` so FastAPI dispatches it on the worker thread pool.
@router.get("/incr", response_class=PlainTextResponse)
def increment_session(
    request: Request,
    store: SessionCounterStore = Depends(get_store),
) -> PlainTextResponse:
    """Increment the counter for ``session_id`` and return ``session=…, count=…``.

    A missing ``session_id`` is counted under the empty identifier.  If the
    parameter is repeated, the first value is used.  The identifier is
    echoed back with its original bytes.
    """
    session_id = first_query_value(request.scope["query_string"], "session_id")

    count = store.increment_and_get(session_id)
    logger.debug("session %r now at %d", session_id, count)

    body = f": session={session_id}, count={count}\n"
    return PlainTextResponse(body.encode("utf-8", "surrogateescape"))
