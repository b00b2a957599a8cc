"""Volume to weight conversions (grams per decilitre)."""

import logging

_logger = logging.getLogger(__name__)

DEFAULT_GRAMS_PER_DL = 60

_CATEGORIES: dict[str, dict[str, int]] = {
    "Grains & Cereals": {
        "havregryn": 35,
        "oats": 35,
        "cornflakes": 25,
        "müsli": 45,
        "granola": 50,
        "quinoa": 75,
        "bulgur": 70,
        "couscous": 65,
        "ris": 80,
        "rice": 80,
        "kokt ris": 150,
        "cooked rice": 150,
        "pasta": 70,
        "makaroner": 70,
        "kokt pasta": 140,
        "cooked pasta": 140,
    },
    "Flours & Powders": {
        "mjöl": 60,
        "flour": 60,
        "vetemjöl": 60,
        "wheat flour": 60,
        "mandelmjöl": 45,
        "almond flour": 45,
        "kokosmjöl": 50,
        "coconut flour": 50,
        "bakpulver": 110,
        "baking powder": 110,
        "bikarbonat": 110,
        "baking soda": 110,
        "kakao": 40,
        "cocoa powder": 40,
        "proteinpulver": 50,
        "protein powder": 50,
    },
    "Sugars & Sweeteners": {
        "socker": 85,
        "sugar": 85,
        "strösocker": 85,
        "granulated sugar": 85,
        "florsocker": 60,
        "powdered sugar": 60,
        "farinsocker": 80,
        "brown sugar": 80,
        "honung": 140,
        "honey": 140,
        "sirap": 140,
        "syrup": 140,
        "lönnsirap": 130,
        "maple syrup": 130,
    },
    "Nuts & Seeds": {
        "mandel": 65,
        "almonds": 65,
        "valnötter": 50,
        "walnuts": 50,
        "hasselnötter": 60,
        "hazelnuts": 60,
        "cashewnötter": 60,
        "cashews": 60,
        "jordnötter": 70,
        "peanuts": 70,
        "solrosfrön": 60,
        "sunflower seeds": 60,
        "pumpafrön": 55,
        "pumpkin seeds": 55,
        "chiafrön": 70,
        "chia seeds": 70,
        "linfrön": 65,
        "flax seeds": 65,
        "sesamfrön": 65,
        "sesame seeds": 65,
    },
    "Legumes": {
        "linser": 85,
        "lentils": 85,
        "kokta linser": 110,
        "cooked lentils": 110,
        "kikärtor": 75,
        "chickpeas": 75,
        "kokta kikärtor": 120,
        "cooked chickpeas": 120,
        "svarta bönor": 80,
        "black beans": 80,
        "vita bönor": 80,
        "white beans": 80,
        "kokta bönor": 120,
        "cooked beans": 120,
    },
    "Berries & Dried Fruits": {
        "blåbär": 65,
        "blueberries": 65,
        "hallon": 55,
        "raspberries": 55,
        "jordgubbar": 60,
        "strawberries": 60,
        "björnbär": 60,
        "blackberries": 60,
        "tranbär": 50,
        "cranberries": 50,
        "russin": 65,
        "raisins": 65,
        "dadlar": 85,
        "dates": 85,
        "fikon": 75,
        "figs": 75,
    },
    "Vegetables": {
        "lök": 60,
        "onion": 60,
        "vitlök": 70,
        "garlic": 70,
        "morötter": 55,
        "carrots": 55,
        "potatis": 65,
        "potatoes": 65,
        "tomat": 60,
        "tomatoes": 60,
        "gurka": 55,
        "cucumber": 55,
        "paprika": 50,
        "bell pepper": 50,
        "broccoli": 35,
        "blomkål": 40,
        "cauliflower": 40,
        "zucchini": 50,
    },
    "Liquids & Fats": {
        "vatten": 100,
        "water": 100,
        "mjölk": 103,
        "milk": 103,
        "grädde": 100,
        "cream": 100,
        "filmjölk": 103,
        "buttermilk": 103,
        "yoghurt": 110,
        "greek yogurt": 120,
        "turkisk yoghurt": 120,
        "olja": 92,
        "oil": 92,
        "olivolja": 92,
        "olive oil": 92,
        "smör": 95,
        "butter": 95,
    },
    "Spreads": {
        "jordnötssmör": 110,
        "peanut butter": 110,
        "mandelsmör": 105,
        "almond butter": 105,
        "nutella": 120,
        "marmelad": 130,
        "jam": 130,
    },
    "Spices": {
        "salt": 120,
        "peppar": 50,
        "pepper": 50,
        "kanel": 45,
        "cinnamon": 45,
        "vanilj": 45,
        "vanilla": 45,
        "kardemumma": 50,
        "cardamom": 50,
    },
}

VOLUME_WEIGHT_CONVERSIONS: dict[str, int] = {
    name: grams for group in _CATEGORIES.values() for name, grams in group.items()
}


def weight_from_volume(ingredient: str, volume_dl: float) -> float:
    """Return grams for ``volume_dl`` decilitres of an ingredient.

    Exact names win over partial matches; unknown ingredients use a
    conservative default density.
    """
    name = ingredient.lower().strip()
    if name in VOLUME_WEIGHT_CONVERSIONS:
        return VOLUME_WEIGHT_CONVERSIONS[name] * volume_dl
    for key, grams in VOLUME_WEIGHT_CONVERSIONS.items():
        if key in name or (name and name in key):
            return grams * volume_dl
    _logger.warning("No volume conversion for ingredient: %s", ingredient)
    return DEFAULT_GRAMS_PER_DL * volume_dl


def conversions_for_prompt() -> str:
    """Conversion table grouped by category for the estimator prompt."""
    sections = []
    for category, entries in _CATEGORIES.items():
        lines = [f"- 1 dl {name} = {grams}g" for name, grams in entries.items()]
        sections.append(f"{category}:\n" + "\n".join(lines))
    return "\n\n".join(sections)
