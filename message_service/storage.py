import logging
import threading
import uuid

from datetime import datetime
from typing import Iterable, Optional

from .errors import NotFoundError, ValidationError
from .schemas import Message

logger = logging.getLogger("uvicorn")


class MessageStore:
    """
    Thread-safe, append-only in-memory message storage.
    """

    def __init__(self, messages: Optional[Iterable[Message]] = None):
        """
        Args:
            messages (Iterable[Message], optional): Records to seed the store with, kept in order.
        """
        self._messages: list[Message] = list(messages or [])
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def create(self, content: str, author: str) -> Message:
        """
        Builds a new message and appends it to the end of the log.

        Args:
            content (str): The message text.
            author (str): Who posted the message.

        Returns:
            Message: The stored record with its generated ID and timestamp.

        Raises:
            ValidationError: If content or author is missing or empty.
        """
        if not content:
            raise ValidationError("Field 'content' is required")
        if not author:
            raise ValidationError("Field 'author' is required")

        message = Message(
            id=str(uuid.uuid4()),
            content=content,
            author=author,
            time=datetime.now().astimezone().isoformat(timespec="seconds"),
        )

        with self._lock:
            self._messages.append(message)
            total = len(self._messages)

        logger.info(f"[Message Store] Stored ID={message.id} from '{author}' ({total} total)")
        return message

    def get_all(self) -> list[Message]:
        """
        Returns a snapshot of all messages in insertion order.
        """
        with self._lock:
            return list(self._messages)

    def get(self, message_id: str) -> Message:
        """
        Looks up a message by its exact ID.

        Raises:
            ValidationError: If the ID is empty.
            NotFoundError: If no message has this ID.
        """
        if not message_id:
            raise ValidationError("No message ID provided in URL path")

        with self._lock:
            for message in self._messages:
                if message.id == message_id:
                    return message

        logger.warning(f"[Message Store] No message with ID={message_id}")
        raise NotFoundError("No message found with the specified ID")
