"""recipescraper package exports."""

from .models import FetchResult, Ingredient, Recipe, RecipeSchema
from .exceptions import (
    ScraperError,
    TransportError,
    HTTPStatusError,
    ParseError,
    MissingElementError,
    OutputIOError,
    DocumentClosedError,
)
from .fetcher import Fetcher
from .document import Document, ElementCollection, parse_document
from .dom import find_all, find_first, text_content
from .extractor import RecipeExtractor
from .output import ResultWriter, HtmlWriter, render_recipe

__all__ = [
    "FetchResult",
    "Ingredient",
    "Recipe",
    "RecipeSchema",
    "ScraperError",
    "TransportError",
    "HTTPStatusError",
    "ParseError",
    "MissingElementError",
    "OutputIOError",
    "DocumentClosedError",
    "Fetcher",
    "Document",
    "ElementCollection",
    "parse_document",
    "find_all",
    "find_first",
    "text_content",
    "RecipeExtractor",
    "ResultWriter",
    "HtmlWriter",
    "render_recipe",
]
