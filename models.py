"""Pydantic models for the Raysurfer API."""

from typing import Optional, List, Dict

from pydantic import BaseModel, Field

from config import PREFER_COMPLETE, USE_AI_VOTING, PATTERNS_MIN_THUMBS_UP


# ─── Request Models ─────────────────────────────────────────

class SearchRequest(BaseModel):
    """Body for /api/retrieve/search."""
    task: str = Field(..., description="Task description to search for.")
    top_k: int = Field(5, description="Number of results to return.")
    min_verdict_score: float = Field(0.3, description="Minimum verdict score threshold.")
    prefer_complete: bool = PREFER_COMPLETE


class FileWritten(BaseModel):
    """A single file produced by an execution."""
    path: str = Field(..., description="File path (e.g. 'src/utils.ts')")
    content: str = Field(..., description="Full file content")


class UploadRequest(BaseModel):
    """Body for /api/store/execution-result."""
    task: str
    file_written: FileWritten
    succeeded: bool = True
    use_raysurfer_ai_voting: bool = USE_AI_VOTING


class VoteRequest(BaseModel):
    """Body for /api/store/cache-usage.

    ``succeeded`` carries the vote direction: True is an upvote.
    """
    code_block_id: str
    code_block_name: str
    code_block_description: str
    succeeded: bool = True
    task: str


class PatternsRequest(BaseModel):
    """Body for /api/retrieve/task-patterns."""
    task: Optional[str] = None
    min_thumbs_up: int = PATTERNS_MIN_THUMBS_UP
    top_k: int = 10


# ─── Response Models ────────────────────────────────────────

class CodeBlock(BaseModel):
    id: str
    name: str
    description: str = ""
    source: str = ""
    entrypoint: str = ""
    language: str = ""
    dependencies: Dict[str, str] = Field(default_factory=dict)


class SearchMatch(BaseModel):
    """A ranked code block. Scores are computed server-side."""
    code_block: CodeBlock
    combined_score: float = 0.0
    vector_score: float = 0.0
    verdict_score: float = 0.0
    error_resilience: float = 0.0
    thumbs_up: int = 0
    thumbs_down: int = 0
    filename: str = ""
    language: str = ""


class SearchResponse(BaseModel):
    # Order is the server's ranking; never re-sort.
    matches: List[SearchMatch] = Field(default_factory=list)
    total_found: int = 0
    cache_hit: bool = False


class UploadResponse(BaseModel):
    success: bool
    code_blocks_stored: Optional[int] = 0
    message: str = ""
    status_url: Optional[str] = None


class VoteResponse(BaseModel):
    """Vote receipt. ``vote_pending`` means accepted but not yet applied to scoring."""
    success: bool
    vote_pending: Optional[bool] = None
    message: str = ""


class PatternItem(BaseModel):
    task_pattern: str
    code_block_id: str
    code_block_name: str
    thumbs_up: int = 0
    thumbs_down: int = 0
    verdict_score: float = 0.0


class PatternsResponse(BaseModel):
    patterns: List[PatternItem] = Field(default_factory=list)
