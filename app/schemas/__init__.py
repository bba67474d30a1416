from .catalog import AppStatus, CatalogEntry, Category, AppRegistry, AppListResponse, AppDetailResponse, StaticParam
from .network import (
    RouterStatus,
    Miner,
    Session,
    CompletionRequest,
    CompletionResponse,
    NetworkStatusSummary,
    NetworkStatsSnapshot,
    RecommendationRequest,
    RecommendationResponse,
)
from .submission import AppSubmission, SubmissionResponse, SUBMISSION_CATEGORIES

__all__ = [
    "AppStatus",
    "CatalogEntry",
    "Category",
    "AppRegistry",
    "AppListResponse",
    "AppDetailResponse",
    "StaticParam",
    "RouterStatus",
    "Miner",
    "Session",
    "CompletionRequest",
    "CompletionResponse",
    "NetworkStatusSummary",
    "NetworkStatsSnapshot",
    "RecommendationRequest",
    "RecommendationResponse",
    "AppSubmission",
    "SubmissionResponse",
    "SUBMISSION_CATEGORIES",
]
