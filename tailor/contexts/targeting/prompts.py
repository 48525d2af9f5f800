"""Prompt builders for scoring resume items against a job description."""

from typing import List

from tailor.contexts.content import Resume
from tailor.utils.text_processing import truncate_suffix

SCORING_RUBRIC = """\
- 90-100: Highly relevant, directly addresses key requirements
- 70-89: Relevant, demonstrates related skills
- 50-69: Somewhat relevant, transferable skills
- 30-49: Tangentially related
- 0-29: Not relevant
"""

MATCH_RESPONSE_FORMAT = """\
Return your response as a JSON object with this exact format:
{
  "scores": {
    "item-id-1": 95,
    "item-id-2": 82,
    ...
  }
}

Only include the JSON object in your response, no other text."""

ANALYSIS_RESPONSE_FORMAT = """\
Provide a JSON response with:
1. "keywords": array of 10-15 key technical skills/terms from the job description
2. "scores": object mapping each item ID to a relevance score (0-100)
3. "suggested_items": array of item IDs you recommend including (score >= 60)

Focus on:
- Technical skills match
- Domain/industry relevance
- Impact and achievements that align with job requirements
- Keywords and terminology overlap

Return ONLY valid JSON, no other text.

Example format:
{
  "keywords": ["python", "distributed systems", "aws"],
  "scores": {
    "acme-event-driven-transaction-processing": 95,
    "skill-python": 85
  },
  "suggested_items": ["acme-event-driven-transaction-processing", "skill-python"]
}
"""

# Limits keeping the analysis prompt small
MAX_SKILL_TAGS = 5
MAX_EXPERIENCE_BULLETS = 3
MAX_PROJECT_BULLETS = 2
MAX_BULLET_CHARS = 100


def _format_tags(tags: List[str]) -> str:
    return "[" + " ".join(tags) + "]"


def build_matching_prompt(resume: Resume, job_description: str) -> str:
    """
    Build the prompt scoring every bullet and leadership entry.

    Args:
        resume: Loaded resume
        job_description: Job posting text

    Returns:
        Prompt text with rubric, job description, items and response format
    """
    lines = [
        "You are analyzing a resume against a job description. "
        "Score each resume item's relevance to the job on a scale of 0-100, where:",
        SCORING_RUBRIC,
        "Job Description:",
        job_description,
        "",
        "Resume Items:",
        "",
    ]

    for item in resume.get_all_items():
        lines.append(f"ID: {item.id}")
        lines.append(f"Text: {item.text}")
        lines.append(f"Tags: {_format_tags(item.tags)}")
        lines.append("")

    lines.append(MATCH_RESPONSE_FORMAT)
    return "\n".join(lines)


def build_analysis_prompt(
    resume: Resume,
    job_title: str,
    company: str,
    job_description: str,
    item_ids: List[str],
) -> str:
    """
    Build the size-bounded prompt for the full job analysis.

    Skills list at most MAX_SKILL_TAGS tags; experience and projects list their
    first few bullets, each truncated to MAX_BULLET_CHARS characters. The full
    list of known item ids is always included.
    """
    lines = [
        "You are a resume optimization expert. Analyze this job description "
        "and score each resume item for relevance.",
        "",
        f"Job Title: {job_title}",
        f"Company: {company}",
        "",
        "Job Description:",
        job_description,
        "",
        "Relevance scale:",
        SCORING_RUBRIC,
        "Resume Summary:",
        "SKILLS:",
    ]

    for skill in resume.skills.all_items():
        tags = ", ".join(skill.tags[:MAX_SKILL_TAGS])
        lines.append(f"  {skill.item_id}: {skill.name} ({tags})")

    lines.append("")
    lines.append("EXPERIENCE:")
    for exp in resume.experience:
        lines.append(f"  {exp.id}: {exp.title} at {exp.company}")
        for bullet in exp.bullets[:MAX_EXPERIENCE_BULLETS]:
            lines.append(f"    {bullet.id}: {truncate_suffix(bullet.text, MAX_BULLET_CHARS)}")

    lines.append("")
    lines.append("PROJECTS:")
    for proj in resume.projects:
        lines.append(f"  {proj.id}: {proj.title}")
        for bullet in proj.bullets[:MAX_PROJECT_BULLETS]:
            lines.append(f"    {bullet.id}: {truncate_suffix(bullet.text, MAX_BULLET_CHARS)}")

    lines.append("")
    lines.append("Available Item IDs:")
    lines.append(", ".join(item_ids))
    lines.append("")
    lines.append(ANALYSIS_RESPONSE_FORMAT)

    return "\n".join(lines)
