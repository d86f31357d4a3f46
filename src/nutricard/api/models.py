"""Pydantic models for HTTP request and response payloads."""

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    field_validator,
    model_validator,
)

from nutricard.domain.nutriscore import NutritionalData, NutritionalScore, ScoreType


def _or_default(default: Any) -> WrapValidator:
    """Fall back to a zero value when a field fails validation."""

    def validate(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return default

    return WrapValidator(validate)


LenientFloat = Annotated[float, _or_default(0.0)]
LenientBool = Annotated[bool, _or_default(False)]
LenientStr = Annotated[str, _or_default("")]


class _WireModel(BaseModel):
    """Request payload whose keys match field aliases case-insensitively."""

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def match_aliases(cls, data: Any) -> Any:
        """Rename keys that match an alias ignoring case; the last match wins."""
        if not isinstance(data, dict):
            return data
        aliases = {
            (field.alias or name).lower(): field.alias or name
            for name, field in cls.model_fields.items()
        }
        matched: dict[Any, Any] = {}
        for key, value in data.items():
            if isinstance(key, str):
                key = aliases.get(key.lower(), key)  # noqa: PLW2901
            matched[key] = value
        return matched


class CardInfo(_WireModel):
    """Card validation request payload."""

    card_number: LenientStr = Field(default="", alias="cardNumber")


class NutritionalDataRequest(_WireModel):
    """Nutritional data request payload."""

    energy_kj: LenientFloat = Field(default=0.0, alias="energyKj")
    sugar_g: LenientFloat = Field(default=0.0, alias="sugar")
    saturated_fatty_acids_g: LenientFloat = Field(
        default=0.0, alias="saturatedFattyAcids"
    )
    sodium_mg: LenientFloat = Field(default=0.0, alias="sodiumMg")
    fruits_percent: LenientFloat = Field(default=0.0, alias="fruitesPercent")
    fiber_g: LenientFloat = Field(default=0.0, alias="fiberGram")
    protein_g: LenientFloat = Field(default=0.0, alias="proteinGram")
    is_water: LenientBool = Field(default=False, alias="isWater")
    score_type: ScoreType = Field(default=ScoreType.FOOD, alias="foodType")

    @field_validator("score_type", mode="before")
    @classmethod
    def parse_score_type(cls, value: object) -> ScoreType:
        """Accept category numbers or names; reject unknown categories."""
        if isinstance(value, ScoreType):
            return value
        if isinstance(value, str):
            name = value.strip()
            if name.isascii() and name.isdigit():
                return ScoreType(int(name))
            try:
                return ScoreType[name.upper()]
            except KeyError:
                raise ValueError(f"unknown food type: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            return ScoreType(value)
        return ScoreType.FOOD

    def to_domain(self) -> NutritionalData:
        """Convert the payload into domain data."""
        return NutritionalData(
            energy_kj=self.energy_kj,
            sugar_g=self.sugar_g,
            saturated_fatty_acids_g=self.saturated_fatty_acids_g,
            sodium_mg=self.sodium_mg,
            fruits_percent=self.fruits_percent,
            fiber_g=self.fiber_g,
            protein_g=self.protein_g,
            is_water=self.is_water,
            score_type=self.score_type,
        )


class NutritionalScoreResponse(BaseModel):
    """Nutritional score response payload."""

    value: int = Field(serialization_alias="Value")
    grade: str = Field(serialization_alias="Grade")
    positive: int = Field(serialization_alias="Positive")
    negative: int = Field(serialization_alias="Negative")
    score_type: int = Field(serialization_alias="ScoreType")

    @classmethod
    def from_domain(cls, score: NutritionalScore) -> "NutritionalScoreResponse":
        """Build a response from a calculated score."""
        return cls(
            value=score.value,
            grade=score.grade,
            positive=score.positive,
            negative=score.negative,
            score_type=int(score.score_type),
        )
