"""Pydantic DTOs for every request and response body the service speaks."""

from .base import WireModel
from .chat import (
    Role,
    FunctionCall,
    ToolCall,
    FunctionDefinition,
    Tool,
    ResponseFormat,
    Message,
    ChatRequest,
    Usage,
    Choice,
    ChatResponse,
    ChunkDelta,
    ChunkChoice,
    ChatStreamChunk,
)
from .catalog import (
    Model,
    ModelList,
    EmbeddingRequest,
    EmbeddingData,
    EmbeddingUsage,
    EmbeddingResponse,
    HealthResponse,
    ReadyResponse,
)
from .documents import (
    DocumentUploadRequest,
    DocumentResponse,
    DocumentListResponse,
    DocumentDeleteResponse,
    SearchRequest,
    SearchResult,
    SearchResponse,
)
from .conversations import (
    Conversation,
    ConversationListResponse,
    ConversationTurn,
    ConversationDetail,
    ConversationSearchResult,
    ConversationSearchResponse,
    ConversationDeleteResponse,
    FeedbackRequest,
    FeedbackResponse,
    UserProfile,
    ProfileUpdateRequest,
)
from .knowledge import (
    KnowledgeNode,
    KnowledgeEdge,
    KnowledgeGraphResponse,
    Fact,
    FactListResponse,
    FactCreateRequest,
    FactUpdateRequest,
)
from .stats import (
    CognitiveStatsResponse,
    UsageByModel,
    UsageResponse,
    UsageRecord,
    UsageRecentResponse,
    CacheStatsResponse,
)
from ..base.errors_parts.envelope import ErrorDetail, ErrorResponse

__all__ = [
    "WireModel",
    "Role",
    "FunctionCall",
    "ToolCall",
    "FunctionDefinition",
    "Tool",
    "ResponseFormat",
    "Message",
    "ChatRequest",
    "Usage",
    "Choice",
    "ChatResponse",
    "ChunkDelta",
    "ChunkChoice",
    "ChatStreamChunk",
    "Model",
    "ModelList",
    "EmbeddingRequest",
    "EmbeddingData",
    "EmbeddingUsage",
    "EmbeddingResponse",
    "HealthResponse",
    "ReadyResponse",
    "DocumentUploadRequest",
    "DocumentResponse",
    "DocumentListResponse",
    "DocumentDeleteResponse",
    "SearchRequest",
    "SearchResult",
    "SearchResponse",
    "Conversation",
    "ConversationListResponse",
    "ConversationTurn",
    "ConversationDetail",
    "ConversationSearchResult",
    "ConversationSearchResponse",
    "ConversationDeleteResponse",
    "FeedbackRequest",
    "FeedbackResponse",
    "UserProfile",
    "ProfileUpdateRequest",
    "KnowledgeNode",
    "KnowledgeEdge",
    "KnowledgeGraphResponse",
    "Fact",
    "FactListResponse",
    "FactCreateRequest",
    "FactUpdateRequest",
    "CognitiveStatsResponse",
    "UsageByModel",
    "UsageResponse",
    "UsageRecord",
    "UsageRecentResponse",
    "CacheStatsResponse",
    "ErrorDetail",
    "ErrorResponse",
]
