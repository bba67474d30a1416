from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Optional, Union
from datetime import datetime


class RouterStatus(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: Optional[str] = None
    health: Optional[str] = None
    version: Optional[str] = None


# Miners and sessions only matter for their count, so every field is optional.
class Miner(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    address: Optional[str] = None
    status: Optional[str] = None
    model: Optional[str] = None


class Session(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    status: Optional[str] = None
    tasks: Any = None


class CompletionRequest(BaseModel):
    prompt: str
    stream: bool = False
    timeout: int = 60


class CompletionResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    response: str
    task_id: Optional[Union[int, str]] = None
    miner_id: Optional[str] = None


class NetworkStatusSummary(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    is_online: bool
    miner_count: int = Field(..., ge=0)
    session_count: int = Field(..., ge=0)
    status: str


class NetworkStatsSnapshot(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_loading: bool
    stats: Optional[NetworkStatusSummary] = None
    refreshed_at: Optional[datetime] = None


class RecommendationRequest(BaseModel):
    query: str = Field(..., min_length=1, description="What the visitor is looking for")
    category: str = Field(default="all", description="Restrict candidate apps to a category")
    session_id: Optional[int] = Field(default=None, alias="sessionId")

    model_config = ConfigDict(populate_by_name=True)


class RecommendationResponse(BaseModel):
    query: str
    available: bool
    recommendation: Optional[CompletionResponse] = None
