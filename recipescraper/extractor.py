"""Recipe extraction from parsed documents."""

from __future__ import annotations

import logging
from typing import List, Optional

from lxml.html import HtmlElement

from .document import Document
from .dom import find_all, find_first, text_content
from .exceptions import MissingElementError
from .models import Ingredient, Recipe, RecipeSchema

logger = logging.getLogger(__name__)


class RecipeExtractor:
    """Pull the title, ingredients and directions out of a recipe page.

    Only the content root is mandatory. Any other missing element leaves
    an empty string or suppresses its section.
    """

    def __init__(self, schema: RecipeSchema | None = None) -> None:
        self.schema = schema or RecipeSchema()

    def extract(self, document: Document) -> Recipe:
        content_root = find_first(document, self.schema.content_root)
        if content_root is None:
            raise MissingElementError(self.schema.content_root)

        title = text_content(find_first(document, self.schema.title))
        return Recipe(
            title=title,
            ingredients=self._extract_ingredients(content_root),
            directions=self._extract_directions(content_root),
        )

    def _extract_ingredients(self, content_root: HtmlElement) -> Optional[List[Ingredient]]:
        ingredient_list = find_first(content_root, self.schema.ingredient_list)
        if ingredient_list is None:
            return None
        ingredients: List[Ingredient] = []
        for row in find_all(ingredient_list, self.schema.ingredient):
            ingredients.append(
                Ingredient(
                    quantity=text_content(find_first(row, self.schema.ingredient_quantity)),
                    label=text_content(find_first(row, self.schema.ingredient_label)),
                )
            )
        logger.debug("extracted %d ingredients", len(ingredients))
        return ingredients

    def _extract_directions(self, content_root: HtmlElement) -> Optional[List[str]]:
        directions_list = find_first(content_root, self.schema.directions_list)
        if directions_list is None:
            return None
        directions = [text_content(node) for node in find_all(directions_list, self.schema.direction_text)]
        logger.debug("extracted %d directions", len(directions))
        return directions
