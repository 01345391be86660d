"""Song identification endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from dependencies import get_handler
from handlers import HandlerResponse, IdentifyRequestHandler

router = APIRouter(tags=["identify"])

HandlerDep = Annotated[IdentifyRequestHandler, Depends(get_handler)]

# Every method reaches the handler so that it alone decides on 405 and preflight.
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _to_response(result: HandlerResponse) -> Response:
    if result.body is None:
        return Response(status_code=result.status_code, headers=result.headers)
    return JSONResponse(
        status_code=result.status_code,
        content=result.body,
        headers=result.headers,
    )


@router.api_route("/identify", methods=ROUTED_METHODS)
async def identify(request: Request, handler: HandlerDep) -> Response:
    """
    Identifies the song in an uploaded audio sample.

    Expects a multipart/form-data body with the sample in an `audio` field.
    """
    body = await request.body()
    result = await run_in_threadpool(
        handler.handle, request.method, request.headers, body
    )
    return _to_response(result)
