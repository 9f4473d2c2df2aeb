"""Rendering of extracted recipes and output writers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from .exceptions import OutputIOError
from .models import Recipe

logger = logging.getLogger(__name__)


def render_recipe(recipe: Recipe, source_url: str) -> str:
    """Serialize ``recipe`` into a minimal standalone HTML document.

    Extracted text is inserted verbatim, without escaping.
    """
    parts: List[str] = [
        "<html><head><meta charset=utf-8><title>",
        recipe.title,
        "</title></head><body><h1>",
        recipe.title,
        "</h1><h2>Ingredients</h2>",
    ]

    if recipe.ingredients is not None:
        parts.append("<table>")
        for ingredient in recipe.ingredients:
            parts.append(f"<tr><td>{ingredient.quantity}</td><td>{ingredient.label}</td></tr>")
        parts.append("</table>")

    parts.append("<h2>Directions</h2>")
    if recipe.directions is not None:
        parts.append("<ol>")
        for direction in recipe.directions:
            parts.append(f"<li>{direction}</li>")
        parts.append("</ol>")

    parts.append(f"<p><i>Extracted from {source_url}</i></p></body></html>")
    return "".join(parts)


class ResultWriter(ABC):
    """Base interface for output adapters."""

    @abstractmethod
    def write(self, recipe: Recipe, source_url: str) -> None:
        """Persist the recipe to the desired sink."""


class HtmlWriter(ResultWriter):
    def __init__(self, path: str) -> None:
        self.path = Path(path)

    def write(self, recipe: Recipe, source_url: str) -> None:
        content = render_recipe(recipe, source_url)
        logger.info("writing output to %s", self.path)
        try:
            with self.path.open("w", encoding="utf-8") as handle:
                handle.write(content)
        except OSError as exc:
            raise OutputIOError(str(self.path), exc.errno, exc.strerror) from exc
