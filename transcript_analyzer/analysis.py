# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""LLM transcript analysis.

Builds the analysis prompt from parsed entries, calls the model in JSON mode,
checks the shape of the answer and adds metadata computed locally (duration,
word count, processing time).
"""

import time
from datetime import datetime, timezone
from typing import Any, Sequence, cast

from openai.types.chat import ChatCompletionMessageParam

from transcript_analyzer.ai_llm import MissingCredentialsError, ai_conversation_json
from transcript_analyzer.config import AnalysisConfig
from transcript_analyzer.transcripts.base import ErrorCode, TranscriptEntry
from transcript_analyzer.transcripts.stats import calculate_duration, count_words


ENTITY_TYPES = ("speaker", "organization", "location", "other")


class AnalysisError(RuntimeError):
    """Raised when the analysis cannot be produced."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.API_REQUEST_FAILED) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


_SYSTEM_PROMPT = (
    "You are an assistant that analyzes interview and meeting transcripts. "
    "Always answer with a single JSON object and nothing else."
)

_INSTRUCTIONS = """
ANALYSIS REQUIREMENTS:

1. SUMMARY: Provide a concise overview focusing on:
   - Main topics discussed and key outcomes
   - Overall tone and communication dynamics
   - Interview flow and participant engagement levels
   - Key decisions or conclusions reached

2. HIGHLIGHTS: Identify positive, valuable, or successful moments including:
   - Strong responses or insightful comments
   - Good rapport building or connection moments
   - Clear explanations or demonstrations of expertise
   - Successful problem-solving or creative thinking
   - Assign relevance scores (0-10) and include timestamps

3. LOWLIGHTS: Identify concerning areas, weaker moments, or improvement opportunities:
   - Communication breakdowns or misunderstandings
   - Awkward pauses, interruptions, or flow issues
   - Unclear responses or lack of specificity
   - Missed opportunities or incomplete answers
   - Technical difficulties or external disruptions
   - Categorize by type: 'communication', 'technical', 'content', 'tone', 'flow'

4. NAMED ENTITIES: Identify and analyze participants:
   - For speakers: Use "Interviewer", "Candidate", "Speaker 1", "Speaker 2", etc.
   - Include organizations, companies, technologies, or locations mentioned
   - Provide context for each mention

IMPORTANT GUIDELINES:
- Use exact timestamps from the transcript (HH:MM:SS format)
- Be specific and actionable in your analysis
- Maintain professional objectivity while noting subjective elements like tone

REQUIRED JSON OUTPUT FORMAT:
{
  "summary": "A comprehensive summary as a single string",
  "highlights": [
    {"content": "Description of the highlight", "timestamp": "HH:MM:SS", "relevanceScore": 8}
  ],
  "lowlights": [
    {"content": "Description of the issue", "timestamp": "HH:MM:SS", "issueType": "communication|technical|content|tone|flow"}
  ],
  "namedEntities": [
    {
      "name": "Entity name (e.g., Interviewer, Candidate, Company Name)",
      "type": "speaker|organization|location|other",
      "mentions": [
        {"content": "The specific mention or quote", "timestamp": "HH:MM:SS", "context": "Context around this mention"}
      ]
    }
  ]
}

Please return ONLY the JSON response with no additional text or formatting.
""".strip()


def format_transcript(entries: Sequence[TranscriptEntry]) -> str:
    return "\n".join(f"[{e.timestamp}] {e.section}: {e.content}" for e in entries)


def build_analysis_prompt(entries: Sequence[TranscriptEntry]) -> str:
    """Return the user prompt for the given entries."""

    return (
        "You are analyzing an interview or conversation transcript. Please provide "
        "structured insights with special attention to tone, communication dynamics, "
        "and interview-specific patterns:\n\n"
        f"TRANSCRIPT:\n{format_transcript(entries)}\n\n"
        f"{_INSTRUCTIONS}"
    )


def build_messages(entries: Sequence[TranscriptEntry]) -> list[ChatCompletionMessageParam]:
    return [
        {"role": "system", "content": _SYSTEM_PROMPT},
        {"role": "user", "content": build_analysis_prompt(entries)},
    ]


def _optional_str(record: dict[str, Any], key: str) -> bool:
    return record.get(key) is None or isinstance(record.get(key), str)


def is_highlight_item(obj: object) -> bool:
    if not isinstance(obj, dict):
        return False
    score = obj.get("relevanceScore")
    return (
        isinstance(obj.get("content"), str)
        and _optional_str(obj, "timestamp")
        and (score is None or (isinstance(score, (int, float)) and not isinstance(score, bool)))
    )


def is_lowlight_item(obj: object) -> bool:
    if not isinstance(obj, dict):
        return False
    return (
        isinstance(obj.get("content"), str)
        and isinstance(obj.get("issueType"), str)
        and _optional_str(obj, "timestamp")
    )


def is_entity_mention(obj: object) -> bool:
    if not isinstance(obj, dict):
        return False
    return (
        isinstance(obj.get("content"), str)
        and isinstance(obj.get("context"), str)
        and _optional_str(obj, "timestamp")
    )


def is_named_entity(obj: object) -> bool:
    if not isinstance(obj, dict):
        return False
    mentions = obj.get("mentions")
    return (
        isinstance(obj.get("name"), str)
        and obj.get("type") in ENTITY_TYPES
        and isinstance(mentions, list)
        and all(is_entity_mention(m) for m in mentions)
    )


def check_analysis_payload(payload: object) -> list[str]:
    """
    Check the model answer against the expected structure.

    Args:
        payload:
            Parsed JSON answer.

    Returns:
        A list of problems. Empty if the payload is usable.
    """

    if not isinstance(payload, dict):
        return ["response is not a JSON object"]

    problems: list[str] = []
    if not isinstance(payload.get("summary"), str):
        problems.append("'summary' must be a string")

    checks = (
        ("highlights", is_highlight_item),
        ("lowlights", is_lowlight_item),
        ("namedEntities", is_named_entity),
    )
    for key, guard in checks:
        value = payload.get(key, [])
        if not isinstance(value, list):
            problems.append(f"'{key}' must be a list")
            continue
        bad = [idx for idx, item in enumerate(value, start=1) if not guard(item)]
        if bad:
            problems.append(f"invalid '{key}' item(s) at position(s): {', '.join(str(i) for i in bad)}")

    return problems


def classify_error(message: str) -> ErrorCode:
    """Map an LLM/API error message to an error code."""

    lowered = message.lower()
    if "quota" in lowered or "rate limit" in lowered or "429" in lowered:
        return ErrorCode.RATE_LIMIT_EXCEEDED
    if "api key" in lowered or "api_key" in lowered:
        return ErrorCode.API_KEY_MISSING
    if "network" in lowered or "connection" in lowered or "fetch" in lowered:
        return ErrorCode.NETWORK_ERROR
    return ErrorCode.API_REQUEST_FAILED


def build_analysis_result(
    payload: dict[str, Any],
    entries: Sequence[TranscriptEntry],
    *,
    processed_at: datetime | None = None,
) -> dict[str, Any]:
    """
    Combine the model answer with locally computed metadata.

    Named entities receive generated ids of the form `entity-<index>-<ms>`.
    """

    now = processed_at or datetime.now(timezone.utc)
    stamp = int(time.time() * 1000)

    entities = [
        {**entity, "id": f"entity-{idx}-{stamp}"}
        for idx, entity in enumerate(payload.get("namedEntities") or [])
    ]

    return {
        "summary": payload.get("summary", ""),
        "highlights": list(payload.get("highlights") or []),
        "lowlights": list(payload.get("lowlights") or []),
        "namedEntities": entities,
        "transcriptEntries": [e.as_dict() for e in entries],
        "metadata": {
            "totalDuration": calculate_duration(entries) or "00:00:00",
            "wordCount": count_words(entries),
            "processedAt": now.isoformat(),
        },
    }


async def analyze_transcript(
    entries: Sequence[TranscriptEntry],
    settings: AnalysisConfig | None = None,
) -> dict[str, Any]:
    """
    Run the LLM analysis for parsed entries.

    Args:
        entries:
            Parsed transcript entries.
        settings:
            Optional model settings.

    Returns:
        The analysis result mapping (summary, highlights, lowlights,
        namedEntities, transcriptEntries, metadata).

    Raises:
        AnalysisError:
            If the transcript is empty, credentials are missing, the API call
            fails, or the answer does not have the expected structure.
    """

    if not entries:
        raise AnalysisError("Transcript cannot be empty", ErrorCode.PARSING_ERROR)

    cfg = settings or AnalysisConfig()

    try:
        payload = await ai_conversation_json(
            build_messages(entries),
            temperature=cfg.temperature,
            max_tokens=cfg.max_output_tokens,
        )
    except MissingCredentialsError as exc:
        raise AnalysisError(str(exc), ErrorCode.API_KEY_MISSING) from exc

    if isinstance(payload, dict) and "_error" in payload:
        message = str(payload.get("_error") or "Unknown error")
        raise AnalysisError(message, classify_error(message))

    problems = check_analysis_payload(payload)
    if problems:
        raise AnalysisError("Unexpected analysis response: " + "; ".join(problems))

    return build_analysis_result(cast(dict[str, Any], payload), entries)
