"""
app/api/routers/recommendations.py

Preference-based project recommendations.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.domain.errors import WorkbookReadError
from app.domain.records import Recommendation
from app.schemas.recommendations import RecommendationRequest, RecommendationResponse
from app.services.recommendation_service import RecommendationService, get_recommendation_service

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


def _to_response(item: Recommendation) -> RecommendationResponse:
    project = item.project
    return RecommendationResponse(
        id=item.id,
        project_name=project.name,
        project_description=project.project_description or "",
        country=project.country or "",
        naics_sector=project.naics_sector or "",
        committed=project.committed or 0.0,
        department=project.department or "",
        project_type=project.project_type or "",
        region=project.region or "",
        fiscal_year=project.fiscal_year or "",
        project_number=project.project_number or "",
        framework=project.framework or "",
        project_profile_url=project.project_profile_url or "",
        tags=list(item.tags),
        starred=item.starred,
        comment=item.comment,
    )


@router.post("", response_model=list[RecommendationResponse])
def recommend_projects(
    payload: RecommendationRequest,
    service: RecommendationService = Depends(get_recommendation_service),
) -> list[RecommendationResponse]:
    try:
        recommended = service.recommend(payload.preferences)
    except WorkbookReadError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    return [_to_response(item) for item in recommended]
