"""Pydantic models for the HTTP API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from macro_tracker.domain.macros import (
    AlcoholInfo,
    FoodBreakdownItem,
    MacroNutrients,
    MealAnalysis,
)
from macro_tracker.domain.meals import DailyProgress, MacroGoals, MealEntry
from macro_tracker.domain.nutrition import FoodDatabaseItem, FoodSummary


class AlcoholInfoModel(BaseModel):
    """Alcohol grams and their calories."""

    alcohol: float = Field(ge=0)
    total_alcohol_calories: NonNegativeInt | None = None

    def to_domain(self) -> AlcoholInfo:
        if self.total_alcohol_calories is None:
            return AlcoholInfo.from_grams(self.alcohol)
        return AlcoholInfo(
            alcohol=self.alcohol, total_alcohol_calories=self.total_alcohol_calories
        )


class MacroNutrientsModel(BaseModel):
    """Macro totals as exchanged with clients."""

    protein: NonNegativeInt
    carbs: NonNegativeInt
    fat: NonNegativeInt
    calories: NonNegativeInt
    alcohol_info: AlcoholInfoModel | None = None

    @classmethod
    def from_domain(cls, macros: MacroNutrients) -> "MacroNutrientsModel":
        return cls(
            protein=macros.protein,
            carbs=macros.carbs,
            fat=macros.fat,
            calories=macros.calories,
            alcohol_info=(
                AlcoholInfoModel(
                    alcohol=macros.alcohol_info.alcohol,
                    total_alcohol_calories=macros.alcohol_info.total_alcohol_calories,
                )
                if macros.alcohol_info
                else None
            ),
        )

    def to_domain(self) -> MacroNutrients:
        return MacroNutrients(
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            calories=self.calories,
            alcohol_info=self.alcohol_info.to_domain() if self.alcohol_info else None,
        )


class BreakdownItemModel(BaseModel):
    """One food line of an analysis."""

    model_config = ConfigDict(populate_by_name=True)

    food: str
    estimated_amount: str = Field(default="", alias="estimatedAmount")
    protein: NonNegativeInt
    carbs: NonNegativeInt
    fat: NonNegativeInt
    calories: NonNegativeInt
    source: str | None = None
    alcohol: float | None = Field(default=None, ge=0)

    @classmethod
    def from_domain(cls, item: FoodBreakdownItem) -> "BreakdownItemModel":
        return cls(
            food=item.food,
            estimated_amount=item.estimated_amount,
            protein=item.protein,
            carbs=item.carbs,
            fat=item.fat,
            calories=item.calories,
            source=item.source,
            alcohol=item.alcohol,
        )

    def to_domain(self) -> FoodBreakdownItem:
        return FoodBreakdownItem(
            food=self.food,
            estimated_amount=self.estimated_amount,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            calories=self.calories,
            source=self.source,
            alcohol=self.alcohol,
        )


class AnalyzeMealRequest(BaseModel):
    """Body of POST /api/analyze-meal."""

    model_config = ConfigDict(populate_by_name=True)

    meal_description: str = Field(alias="mealDescription", min_length=1)
    is_recalculation: bool = Field(default=False, alias="isRecalculation")
    previous_result: MacroNutrientsModel | None = Field(
        default=None, alias="previousResult"
    )


class MealAnalysisResponse(MacroNutrientsModel):
    """Macro totals with breakdown, reasoning and validation notes."""

    model_config = ConfigDict(populate_by_name=True)

    breakdown: list[BreakdownItemModel] = Field(default_factory=list)
    reasoning: str = ""
    validation: str = ""
    reused_from: UUID | None = Field(default=None, alias="reusedFrom")

    @classmethod
    def from_analysis(cls, analysis: MealAnalysis) -> "MealAnalysisResponse":
        macros = MacroNutrientsModel.from_domain(analysis.macros)
        return cls(
            **macros.model_dump(exclude={"alcohol_info"}),
            alcohol_info=macros.alcohol_info,
            breakdown=[BreakdownItemModel.from_domain(i) for i in analysis.breakdown],
            reasoning=analysis.reasoning,
            validation=analysis.validation,
            reused_from=analysis.reused_from,
        )


class SaveMealRequest(BaseModel):
    """Body of POST /api/meals."""

    model_config = ConfigDict(populate_by_name=True)

    original_text: str = Field(alias="originalText", min_length=1)
    macros: MacroNutrientsModel
    breakdown: list[BreakdownItemModel] = Field(default_factory=list)
    reasoning: str = ""
    validation: str = ""
    timestamp: datetime | None = None

    def to_analysis(self) -> MealAnalysis:
        return MealAnalysis(
            macros=self.macros.to_domain(),
            breakdown=[item.to_domain() for item in self.breakdown],
            reasoning=self.reasoning,
            validation=self.validation,
        )


class UpdateMealRequest(BaseModel):
    """Body of PATCH /api/meals/{id}; omitted fields are left unchanged."""

    macros: MacroNutrientsModel | None = None
    breakdown: list[BreakdownItemModel] | None = None


class MealEntryResponse(BaseModel):
    """A stored meal."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    timestamp: datetime
    date: date
    original_text: str = Field(alias="originalText")
    macros: MacroNutrientsModel
    breakdown: list[BreakdownItemModel]
    reasoning: str
    validation: str

    @classmethod
    def from_domain(cls, meal: MealEntry) -> "MealEntryResponse":
        return cls(
            id=meal.id,
            timestamp=meal.timestamp,
            date=meal.date,
            original_text=meal.original_text,
            macros=MacroNutrientsModel.from_domain(meal.macros),
            breakdown=[BreakdownItemModel.from_domain(i) for i in meal.breakdown],
            reasoning=meal.reasoning,
            validation=meal.validation,
        )


class MacroGoalsModel(BaseModel):
    """Daily macro targets."""

    protein: NonNegativeInt
    carbs: NonNegativeInt
    fat: NonNegativeInt
    calories: NonNegativeInt

    @classmethod
    def from_domain(cls, goals: MacroGoals) -> "MacroGoalsModel":
        return cls(
            protein=goals.protein,
            carbs=goals.carbs,
            fat=goals.fat,
            calories=goals.calories,
        )

    def to_domain(self) -> MacroGoals:
        return MacroGoals(
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            calories=self.calories,
        )


class DailyProgressResponse(BaseModel):
    """A day's totals against goals."""

    model_config = ConfigDict(populate_by_name=True)

    date: date
    total_macros: MacroNutrientsModel = Field(alias="totalMacros")
    goals: MacroGoalsModel
    meals: list[MealEntryResponse]

    @classmethod
    def from_domain(cls, progress: DailyProgress) -> "DailyProgressResponse":
        return cls(
            date=progress.date,
            total_macros=MacroNutrientsModel.from_domain(progress.total_macros),
            goals=MacroGoalsModel.from_domain(progress.goals),
            meals=[MealEntryResponse.from_domain(m) for m in progress.meals],
        )


class FoodSearchResult(BaseModel):
    """A USDA food search hit."""

    fdc_id: int
    description: str
    brand_owner: str | None = None
    brand_name: str | None = None
    data_type: str | None = None

    @classmethod
    def from_domain(cls, food: FoodSummary) -> "FoodSearchResult":
        return cls(
            fdc_id=food.fdc_id,
            description=food.description,
            brand_owner=food.brand_owner,
            brand_name=food.brand_name,
            data_type=food.data_type,
        )


class CatalogFoodModel(BaseModel):
    """A reference food from the built-in catalog, macros per serving."""

    id: str
    name: str
    category: str
    serving: str
    protein: float
    carbs: float
    fat: float
    calories: float
    verified: bool
    source: str

    @classmethod
    def from_domain(cls, item: FoodDatabaseItem) -> "CatalogFoodModel":
        return cls(
            id=item.id,
            name=item.name,
            category=item.category,
            serving=item.serving.description,
            protein=item.macros.protein_g,
            carbs=item.macros.carbs_g,
            fat=item.macros.fat_g,
            calories=item.macros.calories,
            verified=item.verified,
            source=item.source,
        )


class FoodSearchResponse(BaseModel):
    """Catalog and USDA matches for a food query."""

    catalog: list[CatalogFoodModel]
    usda: list[FoodSearchResult]
