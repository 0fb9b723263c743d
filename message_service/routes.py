import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from .errors import NotFoundError, ValidationError
from .schemas import ErrorEnvelope, MessageCreate, MessageEnvelope, MessageListEnvelope
from .storage import MessageStore

logger = logging.getLogger("uvicorn")

router = APIRouter()


def get_store(request: Request) -> MessageStore:
    return request.app.state.store


def error_response(status_code: int, message: str, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(message=message, error=error).model_dump(),
    )


@router.post(
    path="/message/",
    tags=["API Messages"],
    status_code=status.HTTP_201_CREATED,
    response_model=MessageEnvelope,
    responses={400: {"model": ErrorEnvelope}},
)
async def post_message(data: MessageCreate, store: MessageStore = Depends(get_store)):
    try:
        message = store.create(data.content, data.author)
    except ValidationError as error:
        logger.info(f"[Message API] Rejected post: {error.detail}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body", error.detail)

    return MessageEnvelope(message="Message posted successfully", data=message)


@router.get(path="/message/", tags=["API Messages"], response_model=MessageListEnvelope)
async def list_messages(store: MessageStore = Depends(get_store)):
    return MessageListEnvelope(message="Messages retrieved successfully", data=store.get_all())


@router.get(
    path="/message/{message_id}",
    tags=["API Messages"],
    response_model=MessageEnvelope,
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}},
)
async def get_message(message_id: str, store: MessageStore = Depends(get_store)):
    try:
        message = store.get(message_id)
    except ValidationError as error:
        return error_response(status.HTTP_400_BAD_REQUEST, "Message ID is required", error.detail)
    except NotFoundError as error:
        return error_response(status.HTTP_404_NOT_FOUND, "Message not found", error.detail)

    return MessageEnvelope(message="Message found", data=message)


@router.get("/health")
async def health_check(store: MessageStore = Depends(get_store)):
    return {"status": "Healthy", "messages": len(store)}
