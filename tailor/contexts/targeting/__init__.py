"""
Targeting Context

Responsibilities:
- Serializes resume items into scoring prompts
- Calls the remote language model
- Validates scores and suggested items against the resume

Owns: Job description matching
Never: Renders or compiles documents
"""

from tailor.contexts.targeting.matcher import JobAnalysis, MatchResult, analyze_job, score_items
from tailor.contexts.targeting.prompts import build_analysis_prompt, build_matching_prompt

__all__ = [
    "JobAnalysis",
    "MatchResult",
    "analyze_job",
    "score_items",
    "build_analysis_prompt",
    "build_matching_prompt",
]
