from pydantic import BaseModel, ConfigDict, Field
from typing import List


class MessageCreate(BaseModel):
    content: str = Field(min_length=1)
    author: str = Field(min_length=1)


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    content: str
    author: str
    time: str


class MessageEnvelope(BaseModel):
    message: str
    data: Message


class MessageListEnvelope(BaseModel):
    message: str
    data: List[Message]


class ErrorEnvelope(BaseModel):
    message: str
    error: str
