"""Shared Pydantic models used by the roast engine and the gateway.

Field names follow the JSON contract of the web client (camelCase), exposed
through aliases so Python code keeps snake_case attributes.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class JobMatch(BaseModel):
    """A catalog posting ranked against the candidate's skills."""
    title: str
    company: str
    match: int = Field(..., ge=0, le=100, description="Percentage of posting skills covered")
    skills: list[str] = Field(default_factory=list, description="Capitalised display names")


class AnalysisResult(BaseModel):
    """Structured roast returned by ``roast_engine.analyze_resume``."""
    model_config = ConfigDict(populate_by_name=True)

    category: str
    score: int = Field(..., ge=15, le=95)
    roast_text: list[str] = Field(default_factory=list, alias="roastText")
    overused_skills: list[str] = Field(default_factory=list, alias="overusedSkills", max_length=5)
    missing_skills: list[str] = Field(default_factory=list, alias="missingSkills", max_length=6)
    recommendations: list[str] = Field(default_factory=list, max_length=6)
    extracted_skills: list[str] = Field(default_factory=list, alias="extractedSkills")
    job_matches: list[JobMatch] = Field(default_factory=list, alias="jobMatches")


class ErrorResponse(BaseModel):
    """Error body returned by the gateway."""
    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
