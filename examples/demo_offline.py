"""Minimal demo extracting a recipe from inline HTML."""

from recipescraper import RecipeExtractor, parse_document, render_recipe


def main() -> None:
    url = "http://example.com/soup"
    html = b"""
    <html><body>
      <h1 class="recipe-header__title">Tomato soup</h1>
      <div class="recipe__text__content">
        <ul class="ingredients-list">
          <li class="ingredient"><span class="ingredient__quantity">6</span> <span class="ingredient__label">tomatoes</span></li>
          <li class="ingredient"><span class="ingredient__quantity">1 l</span> <span class="ingredient__label">stock</span></li>
        </ul>
        <ol class="recipe__directions__list">
          <li class="recipe__direction__text">Chop the tomatoes.</li>
          <li class="recipe__direction__text">Simmer in the stock for 20 minutes.</li>
        </ol>
      </div>
    </body></html>
    """

    with parse_document(html) as document:
        recipe = RecipeExtractor().extract(document)

    print(render_recipe(recipe, url))


if __name__ == "__main__":
    main()
