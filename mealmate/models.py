from typing import List, Optional, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


CuisineType = Literal[
    # South Indian
    "karnataka", "tamil", "kerala", "andhra", "telangana",
    # North Indian
    "punjabi", "rajasthani", "gujarati", "maharashtrian", "mughlai",
    "bengali", "kashmiri", "lucknowi",
    # Indo-Fusion
    "indo-chinese", "indo-french", "indo-spanish", "indo-italian",
    # Asian
    "thai", "japanese", "korean", "vietnamese", "chinese", "indonesian", "malaysian",
    # World
    "italian", "mexican", "mediterranean", "american", "middle-eastern", "continental",
]
MealType = Literal["breakfast", "lunch", "dinner", "snack"]
DietType = Literal["veg", "egg", "non-veg"]
DifficultyLevel = Literal["easy", "medium", "hard"]
IngredientCategory = Literal[
    "vegetable", "fruit", "protein", "grain", "dairy", "spice",
    "oil", "legume", "nut", "condiment", "other",
]


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    quantity: str = ""  # numeric, kept as text
    unit: str = ""
    category: IngredientCategory = "other"
    is_optional: bool = False
    notes: Optional[str] = None


class CookingStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    step_number: int
    instruction: str
    duration: Optional[int] = None  # minutes
    tip: Optional[str] = None


class NutritionInfo(BaseModel):
    calories: float = 0
    protein: float = 0
    carbohydrates: float = 0
    fat: float = 0
    fiber: float = 0
    sugar: float = 0
    sodium: float = 0
    cholesterol: Optional[float] = None


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    name_local: Optional[str] = None
    description: str = ""
    cuisine: CuisineType
    meal_types: List[MealType]
    diet_type: DietType
    prep_time: int = Field(0, ge=0)
    cook_time: int = Field(0, ge=0)
    difficulty: DifficultyLevel = "easy"
    servings: int = Field(1, ge=1)
    spice_level: int = Field(1, ge=1, le=5)
    is_quick_meal: bool = False
    is_meal_prep: bool = False
    is_one_pot: bool = False
    ingredients: List[Ingredient] = Field(default_factory=list)
    steps: List[CookingStep] = Field(default_factory=list)
    nutrition: NutritionInfo = Field(default_factory=NutritionInfo)
    tags: List[str] = Field(default_factory=list)

    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time


class FilterCriteria(BaseModel):
    """Hard constraints from the filter controls. Every field is optional."""
    meal_type: Optional[Union[MealType, Literal["all"]]] = None
    diet_type: Optional[Union[DietType, Literal["all"]]] = None
    cuisines: List[CuisineType] = Field(default_factory=list)
    max_cook_time: Optional[int] = None
    spice_level_max: Optional[int] = None
    search_query: Optional[str] = None


class SuggestionContext(BaseModel):
    """Soft preferences for a single recommendation request."""
    meal_type: Optional[MealType] = None
    recent_meal_ids: List[str] = Field(default_factory=list)  # most recent first
    preferred_cuisines: List[CuisineType] = Field(default_factory=list)  # highest priority first
    diet_type: Optional[DietType] = None
    spice_level_max: Optional[int] = None
    max_cook_time: Optional[int] = None
    prefer_quick_meals: bool = False


class ScoredRecipe(BaseModel):
    recipe: Recipe
    score: float
    reasons: List[str] = Field(default_factory=list)


class IngredientMatchResult(BaseModel):
    match_percentage: float
    matched_ingredients: List[str] = Field(default_factory=list)
    missing_ingredients: List[str] = Field(default_factory=list)


class BrowseResult(BaseModel):
    recipes: List[Recipe]
    ingredient_filter_has_matches: bool
    suggestions: List[ScoredRecipe] = Field(default_factory=list)


# --- Meal plan ---

class MealSlot(BaseModel):
    id: str
    meal_type: MealType
    recipe_id: str
    recipe: Recipe
    servings: float
    notes: Optional[str] = None
    is_locked: bool = False


class DayPlan(BaseModel):
    date: str  # YYYY-MM-DD
    day_of_week: str
    breakfast: Optional[MealSlot] = None
    lunch: Optional[MealSlot] = None
    dinner: Optional[MealSlot] = None
    snacks: List[MealSlot] = Field(default_factory=list)

    def slots(self) -> List[MealSlot]:
        main = [self.breakfast, self.lunch, self.dinner]
        return [s for s in main if s is not None] + list(self.snacks)


class WeeklyPlan(BaseModel):
    id: str
    week_start: str  # Monday
    week_end: str  # Sunday
    days: List[DayPlan]
    created_at: str
    updated_at: str


class ShoppingItem(BaseModel):
    id: str
    name: str
    quantity: str
    unit: str
    category: str
    recipes: List[str] = Field(default_factory=list)
    checked: bool = False


# --- Nutrition ---

class NutritionGoals(BaseModel):
    daily_calories: float
    daily_protein: float
    daily_carbs: float
    daily_fat: float
    daily_fiber: Optional[float] = None
    daily_sodium: Optional[float] = None
    daily_sugar: Optional[float] = None


class MealEntry(BaseModel):
    id: str
    recipe_id: str
    recipe_name: str
    meal_type: MealType
    servings: float
    nutrition: NutritionInfo
    timestamp: str


class NutritionProgress(BaseModel):
    consumed: float
    goal: float
    percentage: float
    remaining: float
    status: Literal["under", "on-track", "over"]


class DailyProgress(BaseModel):
    date: str
    calories: NutritionProgress
    protein: NutritionProgress
    carbs: NutritionProgress
    fat: NutritionProgress
    fiber: Optional[NutritionProgress] = None
