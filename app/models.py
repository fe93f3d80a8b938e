from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional


class Card(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    en: str = ""
    img: str = ""
    desc: str = ""
    text: str = ""
    keywords: List[str] = Field(default_factory=list)

class ReadingRequest(BaseModel):
    # Untyped; the reading route checks each field and reports its own error kind.
    shuffleId: Optional[Any] = None
    question: Optional[Any] = None
    picks: Optional[Any] = None

class ShuffleResponse(BaseModel):
    shuffleId: str
    pool: List[int]

class RenderedCard(BaseModel):
    name: str
    en: str
    img: str
    voice: str
    desc: str

class ReadingResult(BaseModel):
    cards: List[RenderedCard]
    closing: str

class ErrorResponse(BaseModel):
    error: str
    kind: str
