"""Response models for the moderations endpoint."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ModerationCategories(BaseModel):
    """Per-category flags; wire names use ``/`` and ``-`` separators."""
    model_config = ConfigDict(populate_by_name=True)

    hate: bool
    hate_threatening: bool = Field(alias="hate/threatening")
    harassment: bool
    harassment_threatening: bool = Field(alias="harassment/threatening")
    self_harm: bool = Field(alias="self-harm")
    self_harm_intent: bool = Field(alias="self-harm/intent")
    self_harm_instructions: bool = Field(alias="self-harm/instructions")
    sexual: bool
    sexual_minors: bool = Field(alias="sexual/minors")
    violence: bool
    violence_graphic: bool = Field(alias="violence/graphic")
    illicit: Optional[bool] = None
    illicit_violent: Optional[bool] = Field(default=None, alias="illicit/violent")


class ModerationCategoryScores(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hate: float
    hate_threatening: float = Field(alias="hate/threatening")
    harassment: float
    harassment_threatening: float = Field(alias="harassment/threatening")
    self_harm: float = Field(alias="self-harm")
    self_harm_intent: float = Field(alias="self-harm/intent")
    self_harm_instructions: float = Field(alias="self-harm/instructions")
    sexual: float
    sexual_minors: float = Field(alias="sexual/minors")
    violence: float
    violence_graphic: float = Field(alias="violence/graphic")
    illicit: Optional[float] = None
    illicit_violent: Optional[float] = Field(default=None, alias="illicit/violent")


class ModerationResult(BaseModel):
    flagged: bool
    categories: ModerationCategories
    category_scores: ModerationCategoryScores
    category_applied_input_types: Optional[Dict[str, List[str]]] = None

    def flagged_categories(self) -> List[str]:
        """Names of the categories that were flagged."""
        flags = self.categories.model_dump(exclude_none=True)
        return [name for name, value in flags.items() if value]


class ModerationResponse(BaseModel):
    id: str
    model: str
    results: List[ModerationResult]
