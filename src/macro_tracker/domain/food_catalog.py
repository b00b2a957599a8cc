"""Static food catalog used to give the estimator reference values."""

from macro_tracker.domain.nutrition import FoodDatabaseItem, MacroProfile, Serving

# (amount, unit, description)
_ServingRow = tuple[float, str, str]
# (protein, carbs, fat, calories)
_MacroRow = tuple[float, float, float, float]
# (id, name, category, serving, macros, source)
_Row = tuple[str, str, str, _ServingRow, _MacroRow, str]

_ROWS: tuple[_Row, ...] = (
    (
        "chicken-breast-raw",
        "Chicken Breast, Raw",
        "Meat & Poultry",
        (100, "g", "100g raw"),
        (23, 0, 3.6, 165),
        "USDA",
    ),
    (
        "chicken-breast-grilled",
        "Chicken Breast, Grilled",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (31, 0, 3.6, 165),
        "USDA",
    ),
    (
        "chicken-thigh-skinless",
        "Chicken Thigh, Skinless",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (26, 0, 5.7, 109),
        "USDA",
    ),
    (
        "ground-beef-lean-93-7",
        "Ground Beef, 93% Lean",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (22, 0, 7, 152),
        "USDA",
    ),
    (
        "ground-beef-85-15",
        "Ground Beef, 85% Lean",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (25, 0, 15, 250),
        "USDA",
    ),
    (
        "pork-tenderloin",
        "Pork Tenderloin, Lean",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (26, 1, 3.5, 143),
        "USDA",
    ),
    (
        "turkey-breast-sliced",
        "Turkey Breast, Sliced",
        "Meat & Poultry",
        (100, "g", "100g deli meat"),
        (29, 1, 1, 135),
        "USDA",
    ),
    (
        "beef-sirloin-steak",
        "Beef Sirloin Steak, Lean",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (26, 0, 6, 158),
        "USDA",
    ),
    (
        "salmon-atlantic-farmed",
        "Salmon, Atlantic, Farmed",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (25, 0, 12, 206),
        "USDA",
    ),
    (
        "salmon-wild-coho",
        "Salmon, Wild Coho",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (28, 0, 6, 146),
        "USDA",
    ),
    (
        "tuna-yellowfin",
        "Tuna, Yellowfin",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (25, 0, 1, 109),
        "USDA",
    ),
    (
        "tuna-canned-water",
        "Tuna, Canned in Water",
        "Fish & Seafood",
        (100, "g", "100g drained"),
        (25, 0, 1, 116),
        "USDA",
    ),
    (
        "cod-atlantic",
        "Cod, Atlantic",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (23, 0, 1, 105),
        "USDA",
    ),
    (
        "shrimp-cooked",
        "Shrimp, Cooked",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (24, 0, 1, 99),
        "USDA",
    ),
    (
        "tilapia-cooked",
        "Tilapia, Cooked",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (26, 0, 3, 129),
        "USDA",
    ),
    (
        "eggs-whole-large",
        "Eggs, Whole, Large",
        "Dairy & Eggs",
        (50, "g", "1 large egg"),
        (6, 1, 5, 70),
        "USDA",
    ),
    (
        "egg-whites",
        "Egg Whites",
        "Dairy & Eggs",
        (100, "g", "100g (~3 egg whites)"),
        (11, 1, 0, 52),
        "USDA",
    ),
    (
        "greek-yogurt-nonfat",
        "Greek Yogurt, Non-fat",
        "Dairy & Eggs",
        (100, "g", "100g"),
        (10, 4, 0, 59),
        "USDA",
    ),
    (
        "greek-yogurt-whole-milk",
        "Greek Yogurt, Whole Milk",
        "Dairy & Eggs",
        (100, "g", "100g"),
        (9, 4, 5, 97),
        "USDA",
    ),
    (
        "cottage-cheese-lowfat",
        "Cottage Cheese, Low-fat",
        "Dairy & Eggs",
        (100, "g", "100g"),
        (11, 3, 1, 72),
        "USDA",
    ),
    (
        "milk-whole",
        "Milk, Whole",
        "Dairy & Eggs",
        (240, "ml", "1 cup"),
        (8, 12, 8, 149),
        "USDA",
    ),
    (
        "milk-skim",
        "Milk, Skim",
        "Dairy & Eggs",
        (240, "ml", "1 cup"),
        (8, 12, 0, 83),
        "USDA",
    ),
    (
        "cheese-cheddar",
        "Cheese, Cheddar",
        "Dairy & Eggs",
        (28, "g", "1 oz slice"),
        (7, 1, 9, 113),
        "USDA",
    ),
    (
        "cheese-mozzarella-part-skim",
        "Mozzarella, Part-skim",
        "Dairy & Eggs",
        (28, "g", "1 oz"),
        (7, 1, 5, 72),
        "USDA",
    ),
    (
        "rice-white-cooked",
        "Rice, White, Long-grain, Cooked",
        "Grains",
        (100, "g", "100g cooked"),
        (4, 28, 0, 130),
        "USDA",
    ),
    (
        "rice-brown-cooked",
        "Rice, Brown, Cooked",
        "Grains",
        (100, "g", "100g cooked"),
        (3, 23, 1, 112),
        "USDA",
    ),
    (
        "quinoa-cooked",
        "Quinoa, Cooked",
        "Grains",
        (100, "g", "100g cooked"),
        (4, 22, 2, 120),
        "USDA",
    ),
    (
        "oats-rolled-dry",
        "Oats, Rolled, Dry",
        "Grains",
        (40, "g", "1/2 cup dry"),
        (5, 27, 3, 150),
        "USDA",
    ),
    (
        "pasta-cooked",
        "Pasta, Enriched, Cooked",
        "Grains",
        (100, "g", "100g cooked"),
        (5, 25, 1, 131),
        "USDA",
    ),
    (
        "bread-whole-wheat",
        "Bread, Whole Wheat",
        "Grains",
        (28, "g", "1 slice"),
        (4, 12, 2, 81),
        "USDA",
    ),
    (
        "bread-white",
        "Bread, White",
        "Grains",
        (28, "g", "1 slice"),
        (3, 14, 1, 75),
        "USDA",
    ),
    (
        "sweet-potato-baked",
        "Sweet Potato, Baked",
        "Vegetables",
        (100, "g", "100g with skin"),
        (2, 20, 0, 90),
        "USDA",
    ),
    (
        "potato-russet-baked",
        "Potato, Russet, Baked",
        "Vegetables",
        (100, "g", "100g with skin"),
        (2, 21, 0, 93),
        "USDA",
    ),
    (
        "broccoli-cooked",
        "Broccoli, Cooked",
        "Vegetables",
        (100, "g", "100g steamed"),
        (3, 7, 0, 34),
        "USDA",
    ),
    (
        "spinach-cooked",
        "Spinach, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (3, 4, 0, 23),
        "USDA",
    ),
    (
        "asparagus-cooked",
        "Asparagus, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (2, 4, 0, 22),
        "USDA",
    ),
    (
        "bell-pepper-red",
        "Bell Pepper, Red",
        "Vegetables",
        (100, "g", "100g raw"),
        (1, 7, 0, 31),
        "USDA",
    ),
    (
        "carrots-cooked",
        "Carrots, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (1, 8, 0, 35),
        "USDA",
    ),
    (
        "green-beans-cooked",
        "Green Beans, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (2, 7, 0, 35),
        "USDA",
    ),
    (
        "olive-oil",
        "Olive Oil",
        "Fats & Oils",
        (14, "g", "1 tablespoon"),
        (0, 0, 14, 119),
        "USDA",
    ),
    (
        "coconut-oil",
        "Coconut Oil",
        "Fats & Oils",
        (14, "g", "1 tablespoon"),
        (0, 0, 14, 121),
        "USDA",
    ),
    (
        "butter",
        "Butter",
        "Fats & Oils",
        (14, "g", "1 tablespoon"),
        (0, 0, 11, 102),
        "USDA",
    ),
    (
        "avocado",
        "Avocado",
        "Fats & Oils",
        (100, "g", "100g (~1/2 medium)"),
        (2, 9, 15, 160),
        "USDA",
    ),
    (
        "almonds",
        "Almonds",
        "Nuts & Seeds",
        (28, "g", "1 oz (~23 nuts)"),
        (6, 6, 14, 164),
        "USDA",
    ),
    (
        "walnuts",
        "Walnuts",
        "Nuts & Seeds",
        (28, "g", "1 oz (~14 halves)"),
        (4, 4, 18, 185),
        "USDA",
    ),
    (
        "peanut-butter",
        "Peanut Butter, Natural",
        "Nuts & Seeds",
        (32, "g", "2 tablespoons"),
        (8, 8, 16, 190),
        "USDA",
    ),
    (
        "banana-medium",
        "Banana, Medium",
        "Fruits",
        (118, "g", "1 medium banana"),
        (1, 27, 0, 105),
        "USDA",
    ),
    (
        "apple-medium",
        "Apple, Medium",
        "Fruits",
        (182, "g", "1 medium apple"),
        (0, 25, 0, 95),
        "USDA",
    ),
    (
        "berries-blueberry",
        "Blueberries",
        "Fruits",
        (148, "g", "1 cup"),
        (1, 21, 0, 84),
        "USDA",
    ),
    (
        "berries-strawberry",
        "Strawberries",
        "Fruits",
        (152, "g", "1 cup sliced"),
        (1, 11, 0, 49),
        "USDA",
    ),
    (
        "orange-medium",
        "Orange, Medium",
        "Fruits",
        (154, "g", "1 medium orange"),
        (1, 15, 0, 62),
        "USDA",
    ),
    (
        "black-beans-cooked",
        "Black Beans, Cooked",
        "Legumes",
        (100, "g", "100g cooked"),
        (9, 23, 0, 132),
        "USDA",
    ),
    (
        "chickpeas-cooked",
        "Chickpeas, Cooked",
        "Legumes",
        (100, "g", "100g cooked"),
        (8, 27, 3, 164),
        "USDA",
    ),
    (
        "lentils-cooked",
        "Lentils, Cooked",
        "Legumes",
        (100, "g", "100g cooked"),
        (9, 20, 0, 116),
        "USDA",
    ),
    (
        "water",
        "Water",
        "Beverages",
        (240, "ml", "1 cup"),
        (0, 0, 0, 0),
        "USDA",
    ),
    (
        "coffee-black",
        "Coffee, Black",
        "Beverages",
        (240, "ml", "1 cup"),
        (0, 0, 0, 2),
        "USDA",
    ),
    (
        "tea-green",
        "Tea, Green",
        "Beverages",
        (240, "ml", "1 cup"),
        (0, 0, 0, 2),
        "USDA",
    ),
    (
        "orange-juice",
        "Orange Juice",
        "Beverages",
        (240, "ml", "1 cup"),
        (2, 26, 0, 112),
        "USDA",
    ),
    (
        "coca-cola",
        "Coca-Cola",
        "Beverages",
        (355, "ml", "1 can (12 oz)"),
        (0, 39, 0, 140),
        "Coca-Cola Company",
    ),
    (
        "diet-coke",
        "Diet Coke",
        "Beverages",
        (355, "ml", "1 can (12 oz)"),
        (0, 0, 0, 0),
        "Coca-Cola Company",
    ),
    (
        "beer-regular-355ml",
        "Beer, Regular (5% ABV)",
        "Alcoholic Beverages",
        (355, "ml", "1 can/bottle (12 oz)"),
        (2, 13, 0, 153),
        "USDA",
    ),
    (
        "beer-regular-500ml",
        "Beer, Regular (5% ABV)",
        "Alcoholic Beverages",
        (500, "ml", "500ml bottle/can"),
        (3, 18, 0, 215),
        "Calculated from USDA",
    ),
    (
        "beer-strong-500ml",
        "Beer, Strong (5.2% ABV)",
        "Alcoholic Beverages",
        (500, "ml", "500ml bottle/can"),
        (3, 18, 0, 225),
        "Calculated (5.2% = ~21g alcohol = ~147 kcal + 18g carbs = 72 kcal)",
    ),
    (
        "beer-light-355ml",
        "Beer, Light (4% ABV)",
        "Alcoholic Beverages",
        (355, "ml", "1 can/bottle (12 oz)"),
        (1, 5, 0, 103),
        "USDA",
    ),
    (
        "beer-light-500ml",
        "Beer, Light (4% ABV)",
        "Alcoholic Beverages",
        (500, "ml", "500ml bottle/can"),
        (1, 7, 0, 145),
        "Calculated (4% = ~16g alcohol = ~112 kcal + 7g carbs = 28 kcal)",
    ),
    (
        "beer-ipa-500ml",
        "Beer, IPA (6-7% ABV)",
        "Alcoholic Beverages",
        (500, "ml", "500ml bottle/can"),
        (3, 20, 0, 270),
        "Calculated (6.5% = ~26g alcohol = ~182 kcal + 20g carbs = 80 kcal)",
    ),
    (
        "wine-red-150ml",
        "Wine, Red (12-13% ABV)",
        "Alcoholic Beverages",
        (150, "ml", "1 glass (standard)"),
        (0, 4, 0, 125),
        "USDA",
    ),
    (
        "wine-white-150ml",
        "Wine, White (12-13% ABV)",
        "Alcoholic Beverages",
        (150, "ml", "1 glass (standard)"),
        (0, 4, 0, 121),
        "USDA",
    ),
    (
        "wine-bottle-750ml",
        "Wine, Bottle (12-13% ABV)",
        "Alcoholic Beverages",
        (750, "ml", "1 bottle (750ml)"),
        (1, 20, 0, 625),
        "Calculated (12.5% = ~75g alcohol = ~525 kcal + 20g carbs = 80 kcal)",
    ),
    (
        "vodka-shot-44ml",
        "Vodka, 40% ABV",
        "Alcoholic Beverages",
        (44, "ml", "1 shot (1.5 oz)"),
        (0, 0, 0, 97),
        "USDA (40% = ~14g alcohol = ~97 kcal)",
    ),
    (
        "vodka-100ml",
        "Vodka, 40% ABV",
        "Alcoholic Beverages",
        (100, "ml", "100ml (10 cl)"),
        (0, 0, 0, 220),
        "Calculated (40% = ~32g alcohol = ~224 kcal)",
    ),
    (
        "vodka-200ml",
        "Vodka, 40% ABV",
        "Alcoholic Beverages",
        (200, "ml", "200ml (20 cl)"),
        (0, 0, 0, 441),
        "Calculated (40% = ~63g alcohol = ~441 kcal)",
    ),
    (
        "vodka-250ml",
        "Vodka, 40% ABV",
        "Alcoholic Beverages",
        (250, "ml", "250ml (25 cl)"),
        (0, 0, 0, 551),
        "Calculated (40% = ~79g alcohol = ~551 kcal)",
    ),
    (
        "vodka-500ml",
        "Vodka, 40% ABV",
        "Alcoholic Beverages",
        (500, "ml", "500ml (50 cl)"),
        (0, 0, 0, 1102),
        "Calculated (40% = ~158g alcohol = ~1102 kcal)",
    ),
    (
        "whiskey-shot-44ml",
        "Whiskey, 40% ABV",
        "Alcoholic Beverages",
        (44, "ml", "1 shot (1.5 oz)"),
        (0, 0, 0, 97),
        "Calculated (40% = ~14g alcohol = ~97 kcal)",
    ),
    (
        "whiskey-100ml",
        "Whiskey, 40% ABV",
        "Alcoholic Beverages",
        (100, "ml", "100ml (10 cl)"),
        (0, 0, 0, 220),
        "Calculated (40% = ~32g alcohol = ~224 kcal)",
    ),
    (
        "rum-shot-44ml",
        "Rum, 40% ABV",
        "Alcoholic Beverages",
        (44, "ml", "1 shot (1.5 oz)"),
        (0, 0, 0, 97),
        "Calculated (40% = ~14g alcohol = ~97 kcal)",
    ),
    (
        "rum-100ml",
        "Rum, 40% ABV",
        "Alcoholic Beverages",
        (100, "ml", "100ml (10 cl)"),
        (0, 0, 0, 220),
        "Calculated (40% = ~32g alcohol = ~224 kcal)",
    ),
    (
        "gin-shot-44ml",
        "Gin, 40% ABV",
        "Alcoholic Beverages",
        (44, "ml", "1 shot (1.5 oz)"),
        (0, 0, 0, 97),
        "Calculated (40% = ~14g alcohol = ~97 kcal)",
    ),
    (
        "gin-100ml",
        "Gin, 40% ABV",
        "Alcoholic Beverages",
        (100, "ml", "100ml (10 cl)"),
        (0, 0, 0, 220),
        "Calculated (40% = ~32g alcohol = ~224 kcal)",
    ),
    (
        "cocktail-mojito",
        "Mojito (Rum, Sugar, Lime)",
        "Alcoholic Beverages",
        (240, "ml", "1 cocktail"),
        (0, 24, 0, 193),
        "Calculated (40ml rum = ~97 kcal + 24g sugar = 96 kcal)",
    ),
    (
        "cocktail-margarita",
        "Margarita (Tequila, Triple Sec, Lime)",
        "Alcoholic Beverages",
        (240, "ml", "1 cocktail"),
        (0, 18, 0, 242),
        "Calculated (60ml spirits = ~170 kcal + 18g carbs = 72 kcal)",
    ),
    (
        "champagne-150ml",
        "Champagne (12% ABV)",
        "Alcoholic Beverages",
        (150, "ml", "1 glass (flute)"),
        (0, 3, 0, 95),
        "Calculated (12% = ~15g alcohol = ~105 kcal + 3g carbs = 12 kcal)",
    ),
    (
        "tequila-40-44ml",
        "Tequila, 40% ABV",
        "Alcoholic Beverages",
        (44, "ml", "1 shot (1.5 oz)"),
        (0, 0, 0, 97),
        "Calculated (44ml × 40% × 0.789 × 7 = 97 kcal)",
    ),
    (
        "tequila-40-100ml",
        "Tequila, 40% ABV",
        "Alcoholic Beverages",
        (100, "ml", "100ml"),
        (0, 0, 0, 220),
        "Calculated (100ml × 40% × 0.789 × 7 = 220 kcal)",
    ),
    (
        "tequila-40-200ml",
        "Tequila, 40% ABV",
        "Alcoholic Beverages",
        (200, "ml", "200ml"),
        (0, 0, 0, 441),
        "Calculated (200ml × 40% × 0.789 × 7 = 441 kcal)",
    ),
    (
        "cheeseburger-generic",
        "Cheeseburger, Generic",
        "Fast Food",
        (1, "item", "1 cheeseburger"),
        (20, 35, 18, 365),
        "USDA Generic Fast Food Cheeseburger",
    ),
    (
        "hamburger-generic",
        "Hamburger, Generic",
        "Fast Food",
        (1, "item", "1 hamburger"),
        (18, 35, 14, 320),
        "USDA Generic Fast Food Hamburger",
    ),
    (
        "pizza-pepperoni-slice",
        "Pizza, Pepperoni, Regular Crust",
        "Fast Food",
        (1, "slice", "1 slice (1/8 of 14\" pizza)"),
        (12, 26, 10, 230),
        "Generic Chain Pizza",
    ),
    (
        "pizza-cheese-slice",
        "Pizza, Cheese, Regular Crust",
        "Fast Food",
        (1, "slice", "1 slice (1/8 of 14\" pizza)"),
        (10, 27, 8, 200),
        "Generic Chain Pizza",
    ),
    (
        "protein-powder-whey",
        "Protein Powder, Whey",
        "Supplements",
        (30, "g", "1 scoop"),
        (24, 3, 1, 120),
        "Generic Whey Protein",
    ),
    (
        "tofu-firm",
        "Tofu, Firm",
        "Plant Proteins",
        (100, "g", "100g"),
        (15, 4, 8, 144),
        "USDA",
    ),
    (
        "tempeh",
        "Tempeh",
        "Plant Proteins",
        (100, "g", "100g"),
        (19, 9, 11, 192),
        "USDA",
    ),
    (
        "ketchup",
        "Ketchup",
        "Condiments",
        (17, "g", "1 tablespoon"),
        (0, 4, 0, 17),
        "USDA",
    ),
    (
        "mustard-yellow",
        "Mustard, Yellow",
        "Condiments",
        (5, "g", "1 teaspoon"),
        (0, 0, 0, 3),
        "USDA",
    ),
    (
        "mayo-regular",
        "Mayonnaise, Regular",
        "Condiments",
        (14, "g", "1 tablespoon"),
        (0, 0, 11, 94),
        "USDA",
    ),
    (
        "ranch-dressing",
        "Ranch Dressing",
        "Condiments",
        (15, "g", "1 tablespoon"),
        (0, 1, 7, 73),
        "Generic Brand",
    ),
    (
        "chips-potato-regular",
        "Potato Chips, Regular",
        "Snacks",
        (28, "g", "1 oz (~15 chips)"),
        (2, 15, 10, 152),
        "USDA",
    ),
    (
        "crackers-saltine",
        "Crackers, Saltine",
        "Snacks",
        (12, "g", "4 crackers"),
        (1, 9, 1, 52),
        "USDA",
    ),
    (
        "popcorn-air-popped",
        "Popcorn, Air-popped",
        "Snacks",
        (8, "g", "1 cup popped"),
        (1, 6, 0, 31),
        "USDA",
    ),
    (
        "ice-cream-vanilla",
        "Ice Cream, Vanilla",
        "Desserts",
        (66, "g", "1/2 cup"),
        (2, 16, 7, 137),
        "USDA",
    ),
    (
        "chocolate-dark-70",
        "Dark Chocolate, 70% Cacao",
        "Desserts",
        (28, "g", "1 oz"),
        (3, 13, 12, 170),
        "USDA",
    ),
    (
        "cookies-chocolate-chip",
        "Cookies, Chocolate Chip",
        "Desserts",
        (16, "g", "1 medium cookie"),
        (1, 10, 4, 78),
        "USDA",
    ),
    (
        "pancakes-plain",
        "Pancakes, Plain",
        "Breakfast",
        (1, "item", "1 medium pancake (4\" dia)"),
        (2, 14, 2, 86),
        "USDA",
    ),
    (
        "waffle-plain",
        "Waffle, Plain",
        "Breakfast",
        (1, "item", "1 round waffle (7\" dia)"),
        (6, 25, 8, 218),
        "USDA",
    ),
    (
        "bacon-cooked",
        "Bacon, Cooked",
        "Breakfast",
        (8, "g", "1 slice"),
        (3, 0, 3, 43),
        "USDA",
    ),
    (
        "sausage-breakfast",
        "Breakfast Sausage",
        "Breakfast",
        (13, "g", "1 link"),
        (5, 0, 8, 92),
        "USDA",
    ),
    (
        "cereal-cheerios",
        "Cheerios",
        "Breakfast",
        (28, "g", "1 cup"),
        (3, 20, 2, 100),
        "General Mills",
    ),
    (
        "soup-chicken-noodle",
        "Chicken Noodle Soup",
        "Soups",
        (240, "ml", "1 cup"),
        (3, 9, 2, 62),
        "USDA",
    ),
    (
        "soup-tomato",
        "Tomato Soup",
        "Soups",
        (240, "ml", "1 cup"),
        (2, 17, 2, 90),
        "USDA",
    ),
    (
        "redbull-regular",
        "Red Bull Energy Drink",
        "Beverages",
        (250, "ml", "1 can (8.4 oz)"),
        (1, 27, 0, 110),
        "Red Bull",
    ),
    (
        "monster-energy",
        "Monster Energy Drink",
        "Beverages",
        (473, "ml", "1 can (16 oz)"),
        (0, 54, 0, 210),
        "Monster Energy",
    ),
    (
        "ramen-instant-prepared",
        "Instant Ramen, Prepared",
        "Prepared Foods",
        (1, "package", "1 package prepared"),
        (5, 26, 7, 188),
        "Generic Brand",
    ),
    (
        "mac-cheese-boxed",
        "Macaroni and Cheese, Boxed",
        "Prepared Foods",
        (70, "g", "1 cup prepared"),
        (11, 48, 13, 320),
        "Generic Brand",
    ),
    (
        "lamb-leg-roasted",
        "Lamb, Leg, Roasted",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (29, 0, 9, 191),
        "USDA",
    ),
    (
        "duck-breast-roasted",
        "Duck Breast, Roasted",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (23, 0, 11, 201),
        "USDA",
    ),
    (
        "venison-ground",
        "Venison, Ground",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (30, 0, 7, 187),
        "USDA",
    ),
    (
        "turkey-ground-93-7",
        "Turkey, Ground, 93% Lean",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (29, 0, 5, 168),
        "USDA",
    ),
    (
        "chicken-drumstick",
        "Chicken Drumstick, with Skin",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (28, 0, 7, 172),
        "USDA",
    ),
    (
        "chicken-wing",
        "Chicken Wing, with Skin",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (30, 0, 20, 290),
        "USDA",
    ),
    (
        "ham-sliced-lean",
        "Ham, Sliced, Lean",
        "Meat & Poultry",
        (100, "g", "100g deli meat"),
        (22, 1, 5, 145),
        "USDA",
    ),
    (
        "pork-chop-center-cut",
        "Pork Chop, Center Cut",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (28, 0, 8, 186),
        "USDA",
    ),
    (
        "ribeye-steak",
        "Ribeye Steak",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (25, 0, 17, 250),
        "USDA",
    ),
    (
        "filet-mignon",
        "Filet Mignon",
        "Meat & Poultry",
        (100, "g", "100g cooked"),
        (29, 0, 8, 186),
        "USDA",
    ),
    (
        "halibut-cooked",
        "Halibut, Cooked",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (27, 0, 3, 140),
        "USDA",
    ),
    (
        "mahi-mahi-cooked",
        "Mahi-Mahi, Cooked",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (24, 0, 1, 109),
        "USDA",
    ),
    (
        "sea-bass-cooked",
        "Sea Bass, Cooked",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (24, 0, 3, 124),
        "USDA",
    ),
    (
        "sardines-canned",
        "Sardines, Canned in Oil",
        "Fish & Seafood",
        (100, "g", "100g drained"),
        (25, 0, 11, 208),
        "USDA",
    ),
    (
        "mackerel-cooked",
        "Mackerel, Cooked",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (26, 0, 17, 262),
        "USDA",
    ),
    (
        "crab-cooked",
        "Crab, Cooked",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (20, 0, 2, 97),
        "USDA",
    ),
    (
        "lobster-cooked",
        "Lobster, Cooked",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (26, 0, 1, 112),
        "USDA",
    ),
    (
        "scallops-cooked",
        "Scallops, Cooked",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (24, 5, 1, 137),
        "USDA",
    ),
    (
        "mussels-cooked",
        "Mussels, Cooked",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (18, 4, 2, 111),
        "USDA",
    ),
    (
        "oysters-cooked",
        "Oysters, Cooked",
        "Fish & Seafood",
        (100, "g", "100g cooked"),
        (9, 5, 2, 79),
        "USDA",
    ),
    (
        "ricotta-part-skim",
        "Ricotta Cheese, Part-skim",
        "Dairy & Eggs",
        (100, "g", "100g"),
        (11, 3, 8, 138),
        "USDA",
    ),
    (
        "feta-cheese",
        "Feta Cheese",
        "Dairy & Eggs",
        (28, "g", "1 oz"),
        (4, 1, 6, 75),
        "USDA",
    ),
    (
        "goat-cheese",
        "Goat Cheese",
        "Dairy & Eggs",
        (28, "g", "1 oz"),
        (5, 0, 6, 75),
        "USDA",
    ),
    (
        "swiss-cheese",
        "Swiss Cheese",
        "Dairy & Eggs",
        (28, "g", "1 oz slice"),
        (8, 1, 8, 106),
        "USDA",
    ),
    (
        "parmesan-cheese",
        "Parmesan Cheese, Grated",
        "Dairy & Eggs",
        (15, "g", "1 tablespoon"),
        (4, 0, 2, 32),
        "USDA",
    ),
    (
        "cream-cheese",
        "Cream Cheese",
        "Dairy & Eggs",
        (28, "g", "1 oz"),
        (2, 1, 10, 99),
        "USDA",
    ),
    (
        "sour-cream",
        "Sour Cream",
        "Dairy & Eggs",
        (30, "g", "2 tablespoons"),
        (1, 1, 5, 52),
        "USDA",
    ),
    (
        "heavy-cream",
        "Heavy Cream",
        "Dairy & Eggs",
        (15, "ml", "1 tablespoon"),
        (0, 0, 6, 52),
        "USDA",
    ),
    (
        "almond-milk-unsweetened",
        "Almond Milk, Unsweetened",
        "Dairy & Eggs",
        (240, "ml", "1 cup"),
        (1, 1, 3, 37),
        "Generic Brand",
    ),
    (
        "oat-milk",
        "Oat Milk",
        "Dairy & Eggs",
        (240, "ml", "1 cup"),
        (3, 16, 5, 120),
        "Generic Brand",
    ),
    (
        "barley-cooked",
        "Barley, Pearl, Cooked",
        "Grains",
        (100, "g", "100g cooked"),
        (2, 22, 0, 123),
        "USDA",
    ),
    (
        "bulgur-cooked",
        "Bulgur, Cooked",
        "Grains",
        (100, "g", "100g cooked"),
        (3, 19, 0, 83),
        "USDA",
    ),
    (
        "couscous-cooked",
        "Couscous, Cooked",
        "Grains",
        (100, "g", "100g cooked"),
        (4, 23, 0, 112),
        "USDA",
    ),
    (
        "farro-cooked",
        "Farro, Cooked",
        "Grains",
        (100, "g", "100g cooked"),
        (5, 26, 1, 130),
        "USDA",
    ),
    (
        "millet-cooked",
        "Millet, Cooked",
        "Grains",
        (100, "g", "100g cooked"),
        (3, 23, 1, 119),
        "USDA",
    ),
    (
        "buckwheat-cooked",
        "Buckwheat, Cooked",
        "Grains",
        (100, "g", "100g cooked"),
        (3, 20, 1, 92),
        "USDA",
    ),
    (
        "wild-rice-cooked",
        "Wild Rice, Cooked",
        "Grains",
        (100, "g", "100g cooked"),
        (4, 21, 0, 101),
        "USDA",
    ),
    (
        "bagel-plain",
        "Bagel, Plain",
        "Grains",
        (89, "g", "1 medium bagel"),
        (11, 55, 2, 277),
        "USDA",
    ),
    (
        "english-muffin",
        "English Muffin, Plain",
        "Grains",
        (57, "g", "1 muffin"),
        (5, 26, 1, 134),
        "USDA",
    ),
    (
        "tortilla-flour-8inch",
        "Tortilla, Flour, 8 inch",
        "Grains",
        (32, "g", "1 tortilla"),
        (3, 18, 3, 104),
        "USDA",
    ),
    (
        "brussels-sprouts-cooked",
        "Brussels Sprouts, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (3, 9, 0, 36),
        "USDA",
    ),
    (
        "cauliflower-cooked",
        "Cauliflower, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (2, 4, 0, 23),
        "USDA",
    ),
    (
        "cabbage-cooked",
        "Cabbage, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (1, 6, 0, 23),
        "USDA",
    ),
    (
        "kale-cooked",
        "Kale, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (2, 7, 1, 28),
        "USDA",
    ),
    (
        "collard-greens-cooked",
        "Collard Greens, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (2, 5, 0, 26),
        "USDA",
    ),
    (
        "artichoke-cooked",
        "Artichoke, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (3, 11, 0, 45),
        "USDA",
    ),
    (
        "eggplant-cooked",
        "Eggplant, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (1, 9, 0, 35),
        "USDA",
    ),
    (
        "zucchini-cooked",
        "Zucchini, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (1, 4, 0, 20),
        "USDA",
    ),
    (
        "mushrooms-cooked",
        "Mushrooms, Cooked",
        "Vegetables",
        (100, "g", "100g sautéed"),
        (3, 5, 0, 28),
        "USDA",
    ),
    (
        "corn-yellow-cooked",
        "Corn, Yellow, Cooked",
        "Vegetables",
        (100, "g", "100g boiled"),
        (3, 21, 1, 96),
        "USDA",
    ),
    (
        "mango-fresh",
        "Mango, Fresh",
        "Fruits",
        (165, "g", "1 cup sliced"),
        (1, 25, 0, 99),
        "USDA",
    ),
    (
        "pineapple-fresh",
        "Pineapple, Fresh",
        "Fruits",
        (165, "g", "1 cup chunks"),
        (1, 22, 0, 82),
        "USDA",
    ),
    (
        "kiwi-fresh",
        "Kiwi, Fresh",
        "Fruits",
        (69, "g", "1 medium kiwi"),
        (1, 11, 0, 42),
        "USDA",
    ),
    (
        "peach-fresh",
        "Peach, Fresh",
        "Fruits",
        (150, "g", "1 medium peach"),
        (1, 14, 0, 58),
        "USDA",
    ),
    (
        "pear-fresh",
        "Pear, Fresh",
        "Fruits",
        (178, "g", "1 medium pear"),
        (1, 25, 0, 101),
        "USDA",
    ),
    (
        "grapes-red",
        "Grapes, Red",
        "Fruits",
        (151, "g", "1 cup"),
        (1, 16, 0, 62),
        "USDA",
    ),
    (
        "watermelon-fresh",
        "Watermelon, Fresh",
        "Fruits",
        (152, "g", "1 cup diced"),
        (1, 12, 0, 46),
        "USDA",
    ),
    (
        "cantaloupe-fresh",
        "Cantaloupe, Fresh",
        "Fruits",
        (177, "g", "1 cup diced"),
        (1, 13, 0, 54),
        "USDA",
    ),
    (
        "plum-fresh",
        "Plum, Fresh",
        "Fruits",
        (66, "g", "1 medium plum"),
        (0, 8, 0, 30),
        "USDA",
    ),
    (
        "cherries-sweet",
        "Cherries, Sweet",
        "Fruits",
        (154, "g", "1 cup with pits"),
        (2, 19, 0, 87),
        "USDA",
    ),
    (
        "cashews",
        "Cashews",
        "Nuts & Seeds",
        (28, "g", "1 oz (~18 nuts)"),
        (5, 9, 12, 157),
        "USDA",
    ),
    (
        "pistachios",
        "Pistachios",
        "Nuts & Seeds",
        (28, "g", "1 oz (~49 nuts)"),
        (6, 8, 13, 159),
        "USDA",
    ),
    (
        "brazil-nuts",
        "Brazil Nuts",
        "Nuts & Seeds",
        (28, "g", "1 oz (~6 nuts)"),
        (4, 3, 19, 186),
        "USDA",
    ),
    (
        "pecans",
        "Pecans",
        "Nuts & Seeds",
        (28, "g", "1 oz (~19 halves)"),
        (3, 4, 20, 196),
        "USDA",
    ),
    (
        "macadamia-nuts",
        "Macadamia Nuts",
        "Nuts & Seeds",
        (28, "g", "1 oz (~10-12 nuts)"),
        (2, 4, 21, 204),
        "USDA",
    ),
    (
        "hazelnuts",
        "Hazelnuts",
        "Nuts & Seeds",
        (28, "g", "1 oz (~21 nuts)"),
        (4, 5, 17, 178),
        "USDA",
    ),
    (
        "pine-nuts",
        "Pine Nuts",
        "Nuts & Seeds",
        (28, "g", "1 oz"),
        (4, 4, 19, 191),
        "USDA",
    ),
    (
        "sunflower-seeds",
        "Sunflower Seeds",
        "Nuts & Seeds",
        (28, "g", "1 oz (~1/4 cup)"),
        (6, 6, 14, 164),
        "USDA",
    ),
    (
        "pumpkin-seeds",
        "Pumpkin Seeds",
        "Nuts & Seeds",
        (28, "g", "1 oz (~85 seeds)"),
        (5, 5, 12, 151),
        "USDA",
    ),
    (
        "chia-seeds",
        "Chia Seeds",
        "Nuts & Seeds",
        (28, "g", "1 oz (~2 tbsp)"),
        (5, 12, 9, 138),
        "USDA",
    ),
    (
        "flax-seeds",
        "Flax Seeds, Ground",
        "Nuts & Seeds",
        (10, "g", "1 tablespoon"),
        (2, 3, 4, 55),
        "USDA",
    ),
    (
        "sesame-seeds",
        "Sesame Seeds",
        "Nuts & Seeds",
        (9, "g", "1 tablespoon"),
        (2, 2, 4, 52),
        "USDA",
    ),
    (
        "oreo-cookies",
        "Oreo Cookies",
        "Snacks",
        (3, "cookies", "3 cookies (34g)"),
        (2, 25, 7, 160),
        "Nabisco",
    ),
    (
        "kit-kat-bar",
        "Kit Kat Bar",
        "Snacks",
        (1, "bar", "1 bar (42g)"),
        (3, 27, 11, 210),
        "Hershey",
    ),
    (
        "snickers-bar",
        "Snickers Bar",
        "Snacks",
        (1, "bar", "1 bar (52g)"),
        (4, 33, 12, 250),
        "Mars",
    ),
    (
        "pringles-chips",
        "Pringles Original",
        "Snacks",
        (15, "chips", "15 chips (30g)"),
        (2, 15, 10, 150),
        "Pringles",
    ),
    (
        "doritos-nacho",
        "Doritos Nacho Cheese",
        "Snacks",
        (28, "g", "1 oz (~12 chips)"),
        (2, 16, 8, 140),
        "Frito-Lay",
    ),
    (
        "cheetos-crunchy",
        "Cheetos Crunchy",
        "Snacks",
        (28, "g", "1 oz (~21 pieces)"),
        (2, 15, 10, 150),
        "Frito-Lay",
    ),
    (
        "granola-bar-nature-valley",
        "Nature Valley Granola Bar",
        "Snacks",
        (2, "bars", "2 bars (42g)"),
        (4, 29, 6, 190),
        "General Mills",
    ),
    (
        "protein-bar-clif",
        "Clif Protein Bar",
        "Snacks",
        (1, "bar", "1 bar (68g)"),
        (20, 23, 5, 250),
        "Clif Bar",
    ),
    (
        "trail-mix-basic",
        "Trail Mix (Nuts, Raisins)",
        "Snacks",
        (30, "g", "1 oz (~1/4 cup)"),
        (4, 13, 8, 131),
        "Generic",
    ),
    (
        "beef-jerky",
        "Beef Jerky",
        "Snacks",
        (28, "g", "1 oz"),
        (14, 3, 1, 80),
        "Generic Brand",
    ),
    (
        "string-cheese",
        "String Cheese",
        "Snacks",
        (1, "stick", "1 stick (28g)"),
        (8, 1, 6, 80),
        "Generic Brand",
    ),
    (
        "goldfish-crackers",
        "Goldfish Crackers",
        "Snacks",
        (30, "g", "55 crackers"),
        (3, 20, 5, 140),
        "Pepperidge Farm",
    ),
    (
        "animal-crackers",
        "Animal Crackers",
        "Snacks",
        (30, "g", "16 crackers"),
        (2, 22, 4, 130),
        "Generic Brand",
    ),
    (
        "rice-cakes-plain",
        "Rice Cakes, Plain",
        "Snacks",
        (1, "cake", "1 rice cake (9g)"),
        (1, 7, 0, 35),
        "Generic Brand",
    ),
    (
        "flour-all-purpose",
        "Flour, All-purpose",
        "Cooking Staples",
        (125, "g", "1 cup"),
        (13, 95, 1, 455),
        "USDA",
    ),
    (
        "sugar-granulated",
        "Sugar, Granulated",
        "Cooking Staples",
        (12, "g", "1 tablespoon"),
        (0, 12, 0, 48),
        "USDA",
    ),
    (
        "brown-sugar",
        "Brown Sugar, Packed",
        "Cooking Staples",
        (15, "g", "1 tablespoon"),
        (0, 15, 0, 52),
        "USDA",
    ),
    (
        "honey",
        "Honey",
        "Cooking Staples",
        (21, "g", "1 tablespoon"),
        (0, 17, 0, 64),
        "USDA",
    ),
    (
        "maple-syrup-pure",
        "Maple Syrup, Pure",
        "Cooking Staples",
        (20, "ml", "1 tablespoon"),
        (0, 13, 0, 52),
        "USDA",
    ),
    (
        "salt",
        "Salt",
        "Cooking Staples",
        (6, "g", "1 teaspoon"),
        (0, 0, 0, 0),
        "USDA",
    ),
    (
        "black-pepper",
        "Black Pepper",
        "Cooking Staples",
        (2, "g", "1 teaspoon"),
        (0, 1, 0, 5),
        "USDA",
    ),
    (
        "garlic-fresh",
        "Garlic, Fresh",
        "Cooking Staples",
        (3, "g", "1 clove"),
        (0, 1, 0, 4),
        "USDA",
    ),
    (
        "onion-yellow",
        "Onion, Yellow",
        "Vegetables",
        (110, "g", "1 medium onion"),
        (1, 10, 0, 44),
        "USDA",
    ),
    (
        "tomato-fresh",
        "Tomato, Fresh",
        "Vegetables",
        (123, "g", "1 medium tomato"),
        (1, 5, 0, 22),
        "USDA",
    ),
    (
        "coconut-water",
        "Coconut Water",
        "Beverages",
        (240, "ml", "1 cup"),
        (2, 9, 0, 46),
        "USDA",
    ),
    (
        "kombucha",
        "Kombucha",
        "Beverages",
        (240, "ml", "1 cup"),
        (0, 7, 0, 30),
        "Generic Brand",
    ),
    (
        "sports-drink",
        "Sports Drink (Gatorade)",
        "Beverages",
        (240, "ml", "1 cup"),
        (0, 14, 0, 50),
        "Gatorade",
    ),
    (
        "chocolate-milk",
        "Chocolate Milk, Low-fat",
        "Beverages",
        (240, "ml", "1 cup"),
        (8, 26, 3, 158),
        "USDA",
    ),
    (
        "protein-shake-whey",
        "Protein Shake, Whey with Water",
        "Beverages",
        (1, "scoop", "1 scoop in water"),
        (24, 3, 1, 120),
        "Generic Brand",
    ),
    (
        "smoothie-green",
        "Green Smoothie (Spinach, Banana, Apple)",
        "Beverages",
        (240, "ml", "1 cup"),
        (2, 25, 0, 100),
        "Typical Recipe",
    ),
    (
        "tea-black",
        "Tea, Black",
        "Beverages",
        (240, "ml", "1 cup"),
        (0, 1, 0, 2),
        "USDA",
    ),
    (
        "tea-herbal",
        "Herbal Tea",
        "Beverages",
        (240, "ml", "1 cup"),
        (0, 0, 0, 2),
        "USDA",
    ),
    (
        "lemonade",
        "Lemonade",
        "Beverages",
        (240, "ml", "1 cup"),
        (0, 28, 0, 112),
        "Generic Recipe",
    ),
    (
        "iced-tea-sweet",
        "Iced Tea, Sweet",
        "Beverages",
        (240, "ml", "1 cup"),
        (0, 22, 0, 88),
        "Generic Recipe",
    ),
    (
        "mcdonalds-big-mac",
        "McDonald's Big Mac",
        "Fast Food",
        (1, "item", "1 sandwich"),
        (25, 46, 33, 563),
        "McDonald's Nutrition",
    ),
    (
        "mcdonalds-quarter-pounder",
        "McDonald's Quarter Pounder with Cheese",
        "Fast Food",
        (1, "item", "1 sandwich"),
        (30, 43, 28, 520),
        "McDonald's Nutrition",
    ),
    (
        "mcdonalds-fries-medium",
        "McDonald's French Fries",
        "Fast Food",
        (1, "medium", "Medium order"),
        (4, 43, 16, 320),
        "McDonald's Nutrition",
    ),
    (
        "mcdonalds-chicken-mcnuggets-10pc",
        "McDonald's Chicken McNuggets",
        "Fast Food",
        (10, "pieces", "10 pieces"),
        (23, 16, 20, 320),
        "McDonald's Nutrition",
    ),
    (
        "cereal-corn-flakes",
        "Corn Flakes",
        "Breakfast",
        (28, "g", "1 cup"),
        (2, 24, 0, 100),
        "Kellogg's",
    ),
)


def _build(row: _Row) -> FoodDatabaseItem:
    food_id, name, category, serving, macros, source = row
    amount, unit, description = serving
    protein, carbs, fat, calories = macros
    return FoodDatabaseItem(
        id=food_id,
        name=name,
        category=category,
        serving=Serving(amount=amount, unit=unit, description=description),
        macros=MacroProfile(
            calories=calories, protein_g=protein, fat_g=fat, carbs_g=carbs
        ),
        verified=True,
        source=source,
    )


FOOD_DATABASE: tuple[FoodDatabaseItem, ...] = tuple(_build(row) for row in _ROWS)
