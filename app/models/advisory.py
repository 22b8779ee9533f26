from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

T = TypeVar("T")


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"


class ChatMessage(BaseModel):
    role: Role
    content: str

    model_config = ConfigDict(frozen=True)


class CompletionRequest(BaseModel):
    """Ordered role-tagged messages sent verbatim to the completion endpoint."""

    messages: List[ChatMessage] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class CompletionResponse(BaseModel):
    completion: Optional[str] = Field(default=None)

    model_config = ConfigDict(extra="ignore")


class AdvisoryResult(BaseModel, Generic[T]):
    """A computed value plus whether it came from a fallback default."""

    value: T
    is_fallback: bool = Field(default=False)


class ClimateContext(BaseModel):
    region: str
    season: str


class SoilAnalysisArgs(BaseModel):
    ph: float = Field(description="Soil pH.")
    nitrogen_level: str = Field(
        description="Nitrogen level: Low, Medium or High.",
        validation_alias=AliasChoices("nitrogen_level", "nitrogenLevel"),
    )
    organic_matter: float = Field(
        description="Organic matter in percent.",
        validation_alias=AliasChoices("organic_matter", "organicMatter"),
    )
    climate: ClimateContext
    image_uri: Optional[str] = Field(
        default=None,
        description="Accepted for parity with the soil image flow, not sent to the model.",
        validation_alias=AliasChoices("image_uri", "imageUri"),
    )

    model_config = ConfigDict(populate_by_name=True)


class SoilRecommendation(BaseModel):
    text: str
    top_recommendation: str = Field(serialization_alias="topRecommendation")


class YieldPlanArgs(BaseModel):
    crop: str
    area_ha: float = Field(validation_alias=AliasChoices("area_ha", "areaHa"))
    location: str
    history: str = Field(description="Recent rotation history, free text.")

    model_config = ConfigDict(populate_by_name=True)


class SoilImageRequest(BaseModel):
    image_uri: str = Field(validation_alias=AliasChoices("image_uri", "imageUri"))


class AnalyzeSoilImageResult(BaseModel):
    condition_summary: str = Field(serialization_alias="conditionSummary")
    climate_snapshot: str = Field(serialization_alias="climateSnapshot")
    recommended_crops: List[str] = Field(
        max_length=3, serialization_alias="recommendedCrops"
    )
    rotation_plan: List[str] = Field(max_length=3, serialization_alias="rotationPlan")
    details: str
