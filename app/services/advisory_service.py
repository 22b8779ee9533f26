import logging
import re
from typing import List, Optional

from langchain_core.prompts import ChatPromptTemplate

from app.core.llm_client import CompletionClient, get_completion_client
from app.models.advisory import (
    AdvisoryResult,
    AnalyzeSoilImageResult,
    ChatMessage,
    CompletionRequest,
    Role,
    SoilAnalysisArgs,
    SoilRecommendation,
    YieldPlanArgs,
)
from app.prompts.market_demand_prompt import (
    MARKET_DEMAND_SYSTEM_PROMPT,
    MARKET_DEMAND_USER_PROMPT,
)
from app.prompts.soil_image_prompt import (
    SOIL_IMAGE_SYSTEM_PROMPT,
    SOIL_IMAGE_USER_PROMPT,
)
from app.prompts.soil_recommendation_prompt import (
    SOIL_RECOMMENDATION_SYSTEM_PROMPT,
    SOIL_RECOMMENDATION_USER_PROMPT,
)
from app.prompts.yield_rotation_prompt import (
    YIELD_ROTATION_SYSTEM_PROMPT,
    YIELD_ROTATION_USER_PROMPT,
)
from app.services.section_parser import (
    SOIL_IMAGE_SECTIONS,
    extract_sections,
    split_line_items,
    split_list_items,
)

logger = logging.getLogger(__name__)

DEMAND_SUMMARY_FALLBACK = "Demand data unavailable."
SOIL_ANALYSIS_FALLBACK = "No analysis available."
TOP_RECOMMENDATION_FALLBACK = "See analysis"
YIELD_PLAN_FALLBACK = "No plan generated."
SOIL_IMAGE_FALLBACK = "Visual analysis unavailable."

DEFAULT_CONDITION_LENGTH = 120
DEFAULT_CLIMATE_SNAPSHOT = (
    "Seasonal risks: heat/drought/rain vary by region; monitor forecasts."
)
DEFAULT_RECOMMENDED_CROPS: List[str] = ["Maize (corn)", "Soybean", "Wheat"]
DEFAULT_ROTATION_PLAN: List[str] = [
    "Year 1: Legume (soybean) to build N",
    "Year 2: Cereal (maize/wheat)",
    "Year 3: Oilseed or root (canola/potato)",
]

_BEST_CROP_PATTERN = re.compile(r"Best\s*crop\s*:?\s*(.*)", re.IGNORECASE)

_ROLE_BY_MESSAGE_TYPE = {"system": Role.SYSTEM, "human": Role.USER}


def _build_request(system_prompt: str, user_prompt: str, **variables) -> CompletionRequest:
    prompt = ChatPromptTemplate.from_messages(
        [("system", system_prompt), ("human", user_prompt)]
    )
    messages = prompt.format_messages(**variables)
    return CompletionRequest(
        messages=[
            ChatMessage(role=_ROLE_BY_MESSAGE_TYPE[m.type], content=m.content)
            for m in messages
        ]
    )


async def _complete(
    request: CompletionRequest, client: Optional[CompletionClient], action: str
) -> Optional[str]:
    client = client or get_completion_client()
    try:
        completion = await client.complete(request)
    except Exception:
        logger.exception("Completion call for %s failed", action)
        completion = None
    if not completion:
        logger.warning("No completion for %s, using fallback", action)
    return completion


def _text_result(completion: Optional[str], fallback: str) -> AdvisoryResult[str]:
    if completion:
        return AdvisoryResult[str](value=completion)
    return AdvisoryResult[str](value=fallback, is_fallback=True)


def extract_top_recommendation(text: str) -> str:
    match = _BEST_CROP_PATTERN.search(text)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return TOP_RECOMMENDATION_FALLBACK


def parse_soil_image_response(text: str) -> AnalyzeSoilImageResult:
    """Split a free-text soil image reply into its four sections.

    Sections that cannot be located fall back to fixed defaults, so every
    field of the result is populated.
    """
    sections = extract_sections(text, SOIL_IMAGE_SECTIONS)
    details = text or SOIL_IMAGE_FALLBACK

    condition = sections["condition"]
    climate = sections["climate"]
    crops = split_list_items(sections["recommended"]) if sections["recommended"] is not None else []
    rotation = split_line_items(sections["rotation"]) if sections["rotation"] is not None else []

    return AnalyzeSoilImageResult(
        condition_summary=(
            condition.strip()
            if condition is not None
            else text[:DEFAULT_CONDITION_LENGTH] or details
        ),
        climate_snapshot=climate.strip() if climate is not None else DEFAULT_CLIMATE_SNAPSHOT,
        recommended_crops=crops or list(DEFAULT_RECOMMENDED_CROPS),
        rotation_plan=rotation or list(DEFAULT_ROTATION_PLAN),
        details=details,
    )


async def get_today_demand_summary_result(
    client: Optional[CompletionClient] = None,
) -> AdvisoryResult[str]:
    request = _build_request(MARKET_DEMAND_SYSTEM_PROMPT, MARKET_DEMAND_USER_PROMPT)
    completion = await _complete(request, client, "demand summary")
    return _text_result(completion, DEMAND_SUMMARY_FALLBACK)


async def get_today_demand_summary(client: Optional[CompletionClient] = None) -> str:
    return (await get_today_demand_summary_result(client)).value


async def analyze_soil_and_recommend_result(
    args: SoilAnalysisArgs, client: Optional[CompletionClient] = None
) -> AdvisoryResult[SoilRecommendation]:
    # args.image_uri is intentionally not part of the prompt.
    request = _build_request(
        SOIL_RECOMMENDATION_SYSTEM_PROMPT,
        SOIL_RECOMMENDATION_USER_PROMPT,
        ph=args.ph,
        nitrogen_level=args.nitrogen_level,
        organic_matter=args.organic_matter,
        region=args.climate.region,
        season=args.climate.season,
    )
    completion = await _complete(request, client, "soil recommendation")
    text = _text_result(completion, SOIL_ANALYSIS_FALLBACK)
    return AdvisoryResult[SoilRecommendation](
        value=SoilRecommendation(
            text=text.value,
            top_recommendation=extract_top_recommendation(text.value),
        ),
        is_fallback=text.is_fallback,
    )


async def analyze_soil_and_recommend(
    args: SoilAnalysisArgs, client: Optional[CompletionClient] = None
) -> SoilRecommendation:
    return (await analyze_soil_and_recommend_result(args, client)).value


async def get_yield_and_rotation_plan_result(
    args: YieldPlanArgs, client: Optional[CompletionClient] = None
) -> AdvisoryResult[str]:
    request = _build_request(
        YIELD_ROTATION_SYSTEM_PROMPT,
        YIELD_ROTATION_USER_PROMPT,
        crop=args.crop,
        area_ha=args.area_ha,
        location=args.location,
        history=args.history,
    )
    completion = await _complete(request, client, "yield and rotation plan")
    return _text_result(completion, YIELD_PLAN_FALLBACK)


async def get_yield_and_rotation_plan(
    args: YieldPlanArgs, client: Optional[CompletionClient] = None
) -> str:
    return (await get_yield_and_rotation_plan_result(args, client)).value


async def analyze_soil_image_result(
    image_uri: str, client: Optional[CompletionClient] = None
) -> AdvisoryResult[AnalyzeSoilImageResult]:
    request = _build_request(
        SOIL_IMAGE_SYSTEM_PROMPT, SOIL_IMAGE_USER_PROMPT, image_uri=image_uri
    )
    completion = await _complete(request, client, "soil image analysis")
    return AdvisoryResult[AnalyzeSoilImageResult](
        value=parse_soil_image_response(completion or ""),
        is_fallback=not completion,
    )


async def analyze_soil_image(
    image_uri: str, client: Optional[CompletionClient] = None
) -> AnalyzeSoilImageResult:
    return (await analyze_soil_image_result(image_uri, client)).value
