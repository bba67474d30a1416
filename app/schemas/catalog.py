from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from enum import Enum


DEFAULT_GRADIENT = "from-purple-500 via-pink-500 to-orange-500"

# Category filter value meaning "no category restriction"
ALL_CATEGORIES = "all"


class AppStatus(str, Enum):
    LIVE = "live"
    BETA = "beta"
    COMING_SOON = "coming-soon"


STATUS_LABELS = {
    AppStatus.LIVE: "Live",
    AppStatus.BETA: "Beta",
    AppStatus.COMING_SOON: "Coming Soon",
}


class CatalogEntry(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    name: str
    author: str
    description: str
    tags: List[str] = Field(default_factory=list)
    category: str
    status: AppStatus
    author_url: Optional[str] = None
    url: Optional[str] = None
    github: Optional[str] = None
    long_description: Optional[str] = None
    gradient: Optional[str] = None
    screenshot: Optional[str] = None
    tech_stack: List[str] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)
    date_added: Optional[str] = None

    def display_gradient(self) -> str:
        return self.gradient or DEFAULT_GRADIENT

    def status_label(self) -> str:
        return STATUS_LABELS[self.status]


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Lowercase slug used as the filter key")
    name: str
    icon: str = ""


class AppRegistry(BaseModel):
    apps: List[CatalogEntry] = Field(default_factory=list)
    categories: List[Category] = Field(default_factory=list)


class AppListResponse(BaseModel):
    total: int
    query: str
    category: str
    apps: List[CatalogEntry]


class AppDetailResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    app: CatalogEntry
    gradient: str
    status_label: str
    related: List[CatalogEntry]


class StaticParam(BaseModel):
    id: str
