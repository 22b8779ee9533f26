from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

MAX_RECENT_SEARCHES: int = 20


class RecentSearchCreate(BaseModel):
    title: str
    subtitle: Optional[str] = Field(default=None)
    thumbnail_uri: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("thumbnail_uri", "thumbnailUri"),
        serialization_alias="thumbnailUri",
    )

    model_config = ConfigDict(populate_by_name=True)


class RecentSearch(BaseModel):
    id: str
    title: str
    subtitle: Optional[str] = Field(default=None)
    timestamp: int = Field(description="Creation time in epoch milliseconds.")
    thumbnail_uri: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("thumbnail_uri", "thumbnailUri"),
        serialization_alias="thumbnailUri",
    )

    model_config = ConfigDict(populate_by_name=True)
