"""Shared dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class FetchResult:
    """A fully downloaded HTTP response body."""

    url: str
    status_code: int
    body: bytes
    encoding: Optional[str] = None


@dataclass
class Ingredient:
    quantity: str
    label: str


@dataclass
class Recipe:
    title: str
    # None when the list root is missing from the page.
    ingredients: Optional[List[Ingredient]] = None
    directions: Optional[List[str]] = None


@dataclass(frozen=True)
class RecipeSchema:
    """CSS class names locating each part of a recipe page."""

    title: str = "recipe-header__title"
    content_root: str = "recipe__text__content"
    ingredient_list: str = "ingredients-list"
    ingredient: str = "ingredient"
    ingredient_quantity: str = "ingredient__quantity"
    ingredient_label: str = "ingredient__label"
    directions_list: str = "recipe__directions__list"
    direction_text: str = "recipe__direction__text"
