from typing import Dict, List, Optional
import time
from mealmate.services.sources.base import RecipeSource
from mealmate.services.sources.local import LocalSource
from mealmate.services.recipe_filter import matches_search
from mealmate.models import Recipe
from mealmate.core.settings import load_settings
from mealmate.core.logging_config import get_logger

logger = get_logger(__name__)


class RecipeSourceError(Exception):
    def __init__(self, sources: List[str], errors: List[str]):
        super().__init__("Failed to load recipes from sources")
        self.sources = sources
        self.errors = errors


class RecipeService:
    """Read-only recipe catalog aggregated from the registered sources."""

    def __init__(self, sources: Optional[List[RecipeSource]] = None, cache_ttl_seconds: Optional[int] = None):
        settings = load_settings()
        self.sources: List[RecipeSource] = (
            sources if sources is not None else [LocalSource(settings.catalog_dir)]
        )
        self.cache = {}
        self.cache_ttl_seconds = (
            cache_ttl_seconds if cache_ttl_seconds is not None else settings.catalog_cache_ttl_seconds
        )

    def get_recipes(self, sources: Optional[List[str]] = None) -> List[Recipe]:
        """
        Aggregates recipes from the registered sources, in registration order.
        Raises RecipeSourceError only when every source failed.
        """
        all_recipes = []
        errors = []
        active_source_names = sources if sources else [s.name for s in self.sources]

        now = time.time()
        for source in self.sources:
            if source.name not in active_source_names:
                continue
            try:
                cached = self.cache.get(source.name)
                if cached and (now - cached["timestamp"] < self.cache_ttl_seconds):
                    logger.debug(f"Cache hit for source {source.name}")
                    recipes = cached["recipes"]
                else:
                    recipes = source.get_recipes()
                    self.cache[source.name] = {
                        "timestamp": now,
                        "recipes": recipes
                    }
                all_recipes.extend(recipes)
            except Exception as e:
                logger.error(f"Error loading from source {source.name}: {e}")
                errors.append(f"{source.name}: {e}")

        if not all_recipes and errors:
            raise RecipeSourceError(active_source_names, errors)

        return all_recipes

    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        return next((r for r in self.get_recipes() if r.id == recipe_id), None)

    def get_recipes_by_cuisine(self, cuisine: str) -> List[Recipe]:
        return [r for r in self.get_recipes() if r.cuisine == cuisine]

    def get_recipes_by_meal_type(self, meal_type: str) -> List[Recipe]:
        return [r for r in self.get_recipes() if meal_type in r.meal_types]

    def get_recipes_by_diet_type(self, diet_type: str) -> List[Recipe]:
        return [r for r in self.get_recipes() if r.diet_type == diet_type]

    def search_recipes(self, query: str) -> List[Recipe]:
        return [r for r in self.get_recipes() if matches_search(r, query)]

    def get_quick_meals(self) -> List[Recipe]:
        return [r for r in self.get_recipes() if r.is_quick_meal]

    def get_meal_prep_recipes(self) -> List[Recipe]:
        return [r for r in self.get_recipes() if r.is_meal_prep]

    def stats(self) -> Dict[str, int]:
        recipes = self.get_recipes()
        return {
            "total": len(recipes),
            "veg": sum(1 for r in recipes if r.diet_type == "veg"),
            "non_veg": sum(1 for r in recipes if r.diet_type == "non-veg"),
            "egg": sum(1 for r in recipes if r.diet_type == "egg"),
            "quick_meals": sum(1 for r in recipes if r.is_quick_meal),
            "cuisines": len({r.cuisine for r in recipes}),
        }


recipe_service = RecipeService()
