from abc import ABC, abstractmethod
from typing import List
from mealmate.models import Recipe


class RecipeSource(ABC):
    name: str = "Unknown"

    @abstractmethod
    def get_recipes(self) -> List[Recipe]:
        """
        Load the recipes this source provides.
        Must return a list of canonical `Recipe` objects, in catalog order.
        """
        pass
