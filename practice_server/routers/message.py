from urllib.parse import unquote

from fastapi import APIRouter, HTTPException, Request, status
from loguru import logger

from practice_server.schema import MessageResponse


router = APIRouter(prefix="/message", tags=["message"])


def _raw_id(request: Request) -> str:
    """Get the id from the undecoded request path.

    Starlette decodes the path before routing, which turns an encoded slash
    into a separator. The id has to be cut out of the raw path instead.
    """
    raw_path: bytes | None = request.scope.get("raw_path")
    if raw_path is None:
        # servers may omit raw_path, then only the decoded path is available
        segment = request.path_params["id"]
    else:
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
        segment = path.partition("/message/")[2]
    if not segment or "/" in segment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return segment if raw_path is None else unquote(segment)


@router.get("/{id:path}")
async def get_message(request: Request) -> MessageResponse:
    message_id = _raw_id(request)
    logger.info(f"Looking up message with id {message_id}")
    return MessageResponse(msg=f"Message with an id of {message_id} found")
