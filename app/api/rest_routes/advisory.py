from fastapi import APIRouter
from pydantic import BaseModel

from app.models.advisory import (
    AnalyzeSoilImageResult,
    SoilAnalysisArgs,
    SoilImageRequest,
    SoilRecommendation,
    YieldPlanArgs,
)
from app.services.advisory_service import (
    analyze_soil_and_recommend,
    analyze_soil_image,
    get_today_demand_summary_result,
    get_yield_and_rotation_plan_result,
)

router = APIRouter(prefix="/advisory", tags=["Advisory"])


class DemandSummaryResponse(BaseModel):
    summary: str
    is_fallback: bool


class YieldPlanResponse(BaseModel):
    plan: str
    is_fallback: bool


@router.get("/demand-summary", response_model=DemandSummaryResponse)
async def demand_summary():
    """Today's demand highlights for rice, wheat, corn and soybean."""
    result = await get_today_demand_summary_result()
    return DemandSummaryResponse(summary=result.value, is_fallback=result.is_fallback)


@router.post("/soil-recommendation", response_model=SoilRecommendation)
async def soil_recommendation(args: SoilAnalysisArgs):
    return await analyze_soil_and_recommend(args)


@router.post("/yield-plan", response_model=YieldPlanResponse)
async def yield_plan(args: YieldPlanArgs):
    result = await get_yield_and_rotation_plan_result(args)
    return YieldPlanResponse(plan=result.value, is_fallback=result.is_fallback)


@router.post("/soil-image", response_model=AnalyzeSoilImageResult)
async def soil_image(request: SoilImageRequest):
    """
    Analyze a soil photograph reference. Only the URI is passed to the model.
    """
    return await analyze_soil_image(request.image_uri)
