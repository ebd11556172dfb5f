from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class ChatRequest(BaseModel):
    """Request body shared by /chat-completion and /gemini-stream."""

    model_config = ConfigDict(frozen=True)

    model: str
    messages: List[Message] = Field(min_length=1)
    stream: bool = False

    def to_json(self) -> str:
        # "stream" is only sent when it is switched on
        exclude = None if self.stream else {"stream"}
        return self.model_dump_json(exclude=exclude)


def user_request(model: str, content: str) -> ChatRequest:
    return ChatRequest(model=model, messages=[Message(role="user", content=content)])
