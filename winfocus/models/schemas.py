"""
Goal: Pydantic models shared by the engine, the CLI and the local agent.
Core values (WindowRecord, ScoredCandidate, ResolutionResult) are frozen snapshots;
the request/response shapes below them are the agent's stable contracts.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Strategy = Literal["handle", "embedded", "pattern", "none"]


class WindowRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    handle: int


class ScoredCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    handle: int
    score: int

    @property
    def display(self) -> str:
        """Title with quotes doubled, then the handle in parentheses: `It''s (42)`."""
        return f"{self.title.replace(chr(39), chr(39) * 2)} ({self.handle})"


class ResolutionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    handle: Optional[int] = None
    strategy: Strategy = "none"

    @property
    def found(self) -> bool:
        return self.handle is not None


NOT_FOUND = ResolutionResult()


# ---- Agent request/response shapes ------------------------------------------

class HealthResponse(BaseModel):
    status: str
    name: str
    version: str
    port: int

class PingResponse(BaseModel):
    pong: str
    token_last4: str

class WindowListResponse(BaseModel):
    windows: List[WindowRecord] = []

class ResolveRequest(BaseModel):
    query: str
    strict: bool = False

class ResolveResponse(BaseModel):
    found: bool
    handle: Optional[int] = None
    strategy: Strategy = "none"
    error: Optional[str] = None

class CompleteRequest(BaseModel):
    partial: str = ""
    limit: Optional[int] = Field(None, ge=0)

class CompletionItem(BaseModel):
    display: str
    handle: int
    score: int

class CompleteResponse(BaseModel):
    partial: str
    items: List[CompletionItem] = []

class FocusRequest(BaseModel):
    query: str

class FocusResponse(BaseModel):
    ok: bool
    handle: Optional[int] = None
    strategy: Strategy = "none"
