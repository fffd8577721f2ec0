import json
import os
from typing import Any, Dict, List, Optional
from pydantic import ValidationError
from mealmate.services.sources.base import RecipeSource
from mealmate.models import CookingStep, Ingredient, NutritionInfo, Recipe
from mealmate.core.logging_config import get_logger

logger = get_logger(__name__)


class LocalSource(RecipeSource):
    name = "Local"

    def __init__(self, path: str):
        """
        Args:
            path: A JSON catalog file, or a directory of them read in file-name order.
                Each file holds {"recipes": [...]} or a bare list of recipes.
        """
        self.path = path

    def get_recipes(self) -> List[Recipe]:
        recipes: List[Recipe] = []
        for file_path in self._catalog_files():
            for raw in self._load_data(file_path):
                recipe = self._adapt(raw, file_path)
                if recipe:
                    recipes.append(recipe)
        logger.info(f"Loaded {len(recipes)} recipes from {self.path}")
        return recipes

    def _catalog_files(self) -> List[str]:
        if os.path.isdir(self.path):
            return [
                os.path.join(self.path, name)
                for name in sorted(os.listdir(self.path))
                if name.endswith(".json")
            ]
        if os.path.exists(self.path):
            return [self.path]
        logger.warning(f"{self.path} not found.")
        return []

    def _load_data(self, file_path: str) -> List[Dict[str, Any]]:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.error(f"Error decoding {file_path}")
            return []
        if isinstance(data, dict):
            data = data.get("recipes", [])
        if not isinstance(data, list):
            logger.error(f"Unexpected catalog layout in {file_path}")
            return []
        return data

    def _adapt(self, data: Dict[str, Any], file_path: str) -> Optional[Recipe]:
        """
        Maps a catalog record (camelCase keys, as bundled) onto the canonical Recipe model.
        Records that do not validate are skipped.
        """
        if not isinstance(data, dict):
            logger.warning(f"Skipping non-object recipe record in {file_path}: {type(data).__name__}")
            return None
        try:
            nutrition = data.get("nutrition") or {}
            return Recipe(
                id=str(data.get("id")),
                name=data.get("name"),
                name_local=data.get("nameLocal"),
                description=data.get("description", ""),
                cuisine=data.get("cuisine"),
                meal_types=data.get("mealType", []),
                diet_type=data.get("dietType"),
                prep_time=data.get("prepTime", 0),
                cook_time=data.get("cookTime", 0),
                difficulty=data.get("difficulty", "easy"),
                servings=data.get("servings", 1),
                spice_level=data.get("spiceLevel", 1),
                is_quick_meal=data.get("isQuickMeal", False),
                is_meal_prep=data.get("isMealPrep", False),
                is_one_pot=data.get("isOnePot", False),
                ingredients=[
                    Ingredient(
                        name=i.get("name"),
                        quantity=str(i.get("quantity", "")),
                        unit=i.get("unit", ""),
                        category=i.get("category", "other"),
                        is_optional=i.get("isOptional", False),
                        notes=i.get("notes")
                    )
                    for i in data.get("ingredients", [])
                ],
                steps=[
                    CookingStep(
                        step_number=s.get("stepNumber", n),
                        instruction=s.get("instruction", ""),
                        duration=s.get("duration"),
                        tip=s.get("tip")
                    )
                    for n, s in enumerate(data.get("steps", []), 1)
                ],
                nutrition=NutritionInfo(
                    calories=nutrition.get("calories", 0),
                    protein=nutrition.get("protein", 0),
                    carbohydrates=nutrition.get("carbohydrates", 0),
                    fat=nutrition.get("fat", 0),
                    fiber=nutrition.get("fiber", 0),
                    sugar=nutrition.get("sugar", 0),
                    sodium=nutrition.get("sodium", 0),
                    cholesterol=nutrition.get("cholesterol")
                ),
                tags=data.get("tags", [])
            )
        except ValidationError as exc:
            logger.warning(f"Skipping invalid recipe {data.get('id')!r} in {file_path}: {exc.error_count()} errors")
            return None
