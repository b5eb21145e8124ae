"""
app/schemas/recommendations.py

Schemas for the recommendations endpoint. Project fields serialize under
their spreadsheet column names ("Project Name", "NAICS Sector", ...).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RecommendationRequest(BaseModel):
    preferences: list[str] = Field(default_factory=list)


class RecommendationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    project_name: str = Field(..., serialization_alias="Project Name")
    project_description: str = Field("", serialization_alias="Project Description")
    country: str = Field("", serialization_alias="Country")
    naics_sector: str = Field("", serialization_alias="NAICS Sector")
    committed: float = Field(0.0, serialization_alias="Committed")
    department: str = Field("", serialization_alias="Department")
    project_type: str = Field("", serialization_alias="Project Type")
    region: str = Field("", serialization_alias="Region")
    fiscal_year: str = Field("", serialization_alias="Fiscal Year")
    project_number: str = Field("", serialization_alias="Project Number")
    framework: str = Field("", serialization_alias="Framework")
    project_profile_url: str = Field("", serialization_alias="Project Profile URL")
    tags: list[str] = Field(default_factory=list)
    starred: bool = False
    comment: str = ""
