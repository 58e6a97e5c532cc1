from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

Role = Literal["user", "assistant", "system"]
ProviderName = Literal["openai", "anthropic", "perplexity"]


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(min_length=1)
    provider: Optional[ProviderName] = None
    model: Optional[str] = None


class ChatResponse(BaseModel):
    reply: str


class ErrorResponse(BaseModel):
    error: str
