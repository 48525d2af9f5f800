"""Request bodies accepted by the HTTP API.

JSON null is accepted for every field and read as the field's empty value.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class JobAnalysisRequest(BaseModel):
    job_title: Optional[str] = ""
    company: Optional[str] = ""
    description: Optional[str] = ""

    @field_validator("job_title", "company", "description", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value


class GenerateRequest(BaseModel):
    selections: Optional[Dict[str, Optional[List[str]]]] = Field(default_factory=dict)
    template: Optional[str] = ""

    @field_validator("selections", mode="before")
    @classmethod
    def null_selections_as_empty(cls, value):
        return {} if value is None else value

    @field_validator("template", mode="before")
    @classmethod
    def null_template_as_empty(cls, value):
        return "" if value is None else value

    def selected_ids(self) -> List[str]:
        """Flatten per-section selections into one identifier list."""
        return [item_id for ids in self.selections.values() for item_id in ids or []]


class PartialSectionOrderRequest(BaseModel):
    experience: Optional[List[str]] = None
    projects: Optional[List[str]] = None
    leadership: Optional[List[str]] = None
