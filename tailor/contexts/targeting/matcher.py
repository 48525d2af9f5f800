"""
Job Matching

Scores resume items against a job description with a remote language model.

Two variants:
- score_items(): every bullet and leadership entry, scores only (CLI)
- analyze_job(): bounded resume summary, keywords, scores and suggested items,
  with every returned id validated against the resume (API)
"""

import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tailor.contexts.content import Resume
from tailor.contexts.targeting.logger import _log_debug, _log_info, log_analysis_result
from tailor.contexts.targeting.prompts import build_analysis_prompt, build_matching_prompt
from tailor.exceptions import ResponseParseError
from tailor.utils.llm import LLMProvider, extract_json_object, get_provider

MIN_SCORE = 0.0
MAX_SCORE = 100.0


@dataclass
class MatchResult:
    """Relevance scores by item id (0-100)."""

    scores: Dict[str, float] = field(default_factory=dict)


@dataclass
class JobAnalysis:
    """Full analysis returned to the front-end."""

    keywords: List[str] = field(default_factory=list)
    scores: Dict[str, float] = field(default_factory=dict)
    suggested_items: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keywords": self.keywords,
            "scores": self.scores,
            "suggested_items": self.suggested_items,
        }


def _parse_scores(value: Any) -> Dict[str, float]:
    """Validate a scores mapping, clamping each score to [0, 100]."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ResponseParseError("'scores' must be a JSON object")

    scores = {}
    for item_id, score in value.items():
        # bool is a Number subclass but never a valid score
        if isinstance(score, bool) or not isinstance(score, numbers.Real):
            raise ResponseParseError(f"score for '{item_id}' is not a number: {score!r}")
        scores[str(item_id)] = min(MAX_SCORE, max(MIN_SCORE, float(score)))
    return scores


def _parse_string_list(value: Any, key: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ResponseParseError(f"'{key}' must be a JSON array")
    return [str(item) for item in value]


def score_items(
    resume: Resume,
    job_description: str,
    provider: Optional[LLMProvider] = None,
) -> MatchResult:
    """
    Score every bullet and leadership entry against a job description.

    Args:
        resume: Loaded resume
        job_description: Job posting text
        provider: LLM provider (default: get_provider())

    Returns:
        MatchResult with scores keyed by item id

    Raises:
        MissingCredentialError: If no provider was given and the API key is unset
        MatchServiceError: If the request fails or the reply cannot be parsed
    """
    provider = provider or get_provider()
    prompt = build_matching_prompt(resume, job_description)

    _log_info(f"Scoring {len(resume.get_all_items())} items with {provider.name}")
    _log_debug(f"  Prompt length: {len(prompt)} characters")

    response = provider.generate(prompt)
    data = extract_json_object(response.content)

    return MatchResult(scores=_parse_scores(data.get("scores")))


def analyze_job(
    resume: Resume,
    job_title: str,
    company: str,
    job_description: str,
    provider: Optional[LLMProvider] = None,
) -> JobAnalysis:
    """
    Analyze a job posting: keywords, item scores, and suggested items.

    Returned scores and suggested items only ever contain ids from
    resume.collect_item_ids(); anything else the model invents is dropped.

    Raises:
        MissingCredentialError: If no provider was given and the API key is unset
        MatchServiceError: If the request fails or the reply cannot be parsed
    """
    provider = provider or get_provider()
    item_ids = resume.collect_item_ids()
    prompt = build_analysis_prompt(resume, job_title, company, job_description, item_ids)

    _log_info(f"Analyzing job '{job_title}' at '{company}' with {provider.name}")
    _log_debug(f"  Prompt length: {len(prompt)} characters, {len(item_ids)} known ids")

    response = provider.generate(prompt)
    data = extract_json_object(response.content, strip_fences=True)

    known_ids = set(item_ids)
    scores = _parse_scores(data.get("scores"))
    suggested = _parse_string_list(data.get("suggested_items"), "suggested_items")

    analysis = JobAnalysis(
        keywords=_parse_string_list(data.get("keywords"), "keywords"),
        scores={item_id: score for item_id, score in scores.items() if item_id in known_ids},
        suggested_items=[item_id for item_id in suggested if item_id in known_ids],
    )
    log_analysis_result(
        analysis,
        dropped_scores=len(scores) - len(analysis.scores),
        dropped_suggestions=len(suggested) - len(analysis.suggested_items),
    )
    return analysis
