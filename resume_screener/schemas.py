from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =========================
# Schemas
# =========================
class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # presence is checked by the endpoint so a missing field is a 400, not a 422
    resume_text: Optional[str] = Field(default=None, alias="resumeText")
    job_description: Optional[str] = Field(default=None, alias="jobDescription")

class AnalysisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(ge=0, le=100)
    strengths: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list, alias="missingSkills")
    suggestions: List[str] = Field(default_factory=list)

class ParseResponse(BaseModel):
    text: str
