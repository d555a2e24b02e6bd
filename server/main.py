"""FastAPI host for decoding NMEA sentences over HTTP and WebSocket.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Clients ``POST /decode`` a JSON body ``{"sentence": "$GPGGA,...*hh"}`` and
receive the decoded message as JSON. Every successfully decoded message is
also pushed to WebSocket subscribers on ``ws://<host>:8000/ws``.
"""

import asyncio
import logging

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from nmeadecode import parse
from server.formatters import format_error, format_message
from server.framing import unframe_sentence

logger = logging.getLogger(__name__)

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0
_JSON_MEDIA_TYPE = "application/json"
_subscribers: list[asyncio.Queue[str]] = []


class DecodeRequest(BaseModel):
    sentence: str


def _enqueue(queue: asyncio.Queue[str], message: str) -> None:
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


def _broadcast(message: str, subscribers: list[asyncio.Queue[str]]) -> None:
    for queue in list(subscribers):
        _enqueue(queue, message)


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


app = FastAPI(title="nmeadecode")


@app.post("/decode")
async def decode_sentence(request: DecodeRequest) -> Response:
    """Decode one framed sentence.

    Returns 200 with the decoded message, 400 when the checksum does not
    match, and 422 with the error code when the sentence does not decode.
    """
    sentence = unframe_sentence(request.sentence)
    if sentence is None:
        logger.debug("Checksum mismatch: %r", request.sentence)
        return JSONResponse(
            status_code=400,
            content={"type": "error", "error": "bad_checksum"},
        )

    result = parse(sentence)
    if result.message is None:
        return Response(
            content=format_error(result.error),
            status_code=422,
            media_type=_JSON_MEDIA_TYPE,
        )

    message = format_message(result.message)
    _broadcast(message, _subscribers)
    return Response(content=message, media_type=_JSON_MEDIA_TYPE)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream decoded messages as JSON to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so slow clients do
    not stall decoding. The connection closes with code 1001 if no message
    arrives within ``_TIMEOUT_SECONDS``.
    """
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    _subscribers.append(queue)
    try:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        _subscribers.remove(queue)
