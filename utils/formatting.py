"""Render Raysurfer API responses as plain text for the host model."""

from models import PatternsResponse, SearchResponse, UploadResponse, VoteResponse


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def format_search_results(data: SearchResponse) -> str:
    """Format search matches, keeping the server's ranking order."""
    if not data.matches:
        return f"No cached code found (searched {data.total_found} total snippets)."

    count = len(data.matches)
    cache_hit = "true" if data.cache_hit else "false"
    lines = [
        f"Found {count} {_plural(count, 'match', 'matches')} ({data.total_found} total, cache_hit={cache_hit}):",
        "",
    ]

    for i, m in enumerate(data.matches, start=1):
        cb = m.code_block
        lines.append(f"--- Match {i} ---")
        lines.append(f"ID: {cb.id}")
        lines.append(f"Name: {cb.name}")
        lines.append(f"Description: {cb.description}")
        lines.append(f"Language: {m.language}")
        lines.append(f"File: {m.filename}")
        lines.append(
            f"Score: {m.combined_score:.3f} (vector={m.vector_score:.3f}, verdict={m.verdict_score:.3f})"
        )
        lines.append(f"Votes: +{m.thumbs_up} / -{m.thumbs_down}")
        if cb.dependencies:
            deps = ", ".join(f"{name}@{version}" for name, version in cb.dependencies.items())
            lines.append(f"Dependencies: {deps}")
        lines.append(f"Entrypoint: {cb.entrypoint}")
        lines.append("")
        lines.append(f"```{cb.language}")
        lines.append(cb.source)
        lines.append("```")
        lines.append("")

    return "\n".join(lines)


def format_upload_result(data: UploadResponse) -> str:
    stored = data.code_blocks_stored or 0
    outcome = "successful" if data.success else "failed"
    text = f"Upload {outcome}: {stored} {_plural(stored, 'code block', 'code blocks')} stored. {data.message}"
    if data.status_url:
        text += f" Status: {data.status_url}"
    return text


def format_vote_result(data: VoteResponse, code_block_id: str, up: bool) -> str:
    vote_type = "Upvote" if up else "Downvote"
    pending = " (pending, not yet applied to ranking)" if data.vote_pending else ""
    return f"{vote_type} recorded for {code_block_id}{pending}. {data.message}"


def format_patterns(data: PatternsResponse) -> str:
    """Format proven patterns as a bulleted list."""
    if not data.patterns:
        return "No proven patterns found."

    count = len(data.patterns)
    lines = [f"Found {count} proven {_plural(count, 'pattern', 'patterns')}:", ""]

    for p in data.patterns:
        lines.append(f'- "{p.task_pattern}"')
        lines.append(f"  Code: {p.code_block_name} ({p.code_block_id})")
        lines.append(f"  Votes: +{p.thumbs_up} / -{p.thumbs_down}, verdict={p.verdict_score:.2f}")
        lines.append("")

    return "\n".join(lines)
