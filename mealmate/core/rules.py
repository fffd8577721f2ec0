from typing import Dict, FrozenSet, List

# --- Diet Policy ---
# Recipe diet types admitted by each requested diet. Not a hierarchy:
# "egg" admits veg recipes, but "non-veg" admits only non-veg recipes.
DIET_ACCEPTANCE: Dict[str, FrozenSet[str]] = {
    "veg": frozenset({"veg"}),
    "egg": frozenset({"veg", "egg"}),
    "non-veg": frozenset({"non-veg"}),
}

# Sentinel used by filter controls for "no constraint"
ALL = "all"

SPICE_LEVEL_MAX = 5

# Used when the user has not picked any cuisines in the filter controls
DEFAULT_PREFERRED_CUISINES: List[str] = ["karnataka", "tamil", "punjabi"]

# --- Ingredient Variants ---
# Canonical ingredient name -> aliases and regional-language transliterations
# (Hindi, Kannada, Tamil, Telugu, Malayalam, Bengali, Marathi, Gujarati,
# Punjabi, Urdu). Matched by plain substring containment in both directions.
INGREDIENT_VARIANTS: Dict[str, List[str]] = {
    "chicken": [
        "chicken breast", "chicken thigh", "chicken wings", "chicken pieces", "poultry",
        "murgh", "murgi", "koli", "kozhi", "kodi", "kombdi",
    ],
    "potato": ["potatoes", "aloo", "batata", "urulaikizhangu", "bangaladumpa"],
    "tomato": ["tomatoes", "tamatar", "thakkali", "tameta"],
    "onion": ["onions", "pyaaz", "eerulli", "vengayam", "ullipaya", "dungri"],
    "garlic": ["garlic cloves", "lahsun", "bellulli", "poondu", "vellulli", "rasun", "lasan"],
    "ginger": ["adrak", "shunti", "inji", "allam"],
    "paneer": ["cottage cheese", "indian cheese", "chhena"],
    "curd": ["yogurt", "dahi", "yoghurt", "curd", "mosaru", "thayir", "perugu"],
    "rice": ["basmati", "chawal", "basmati rice", "akki", "arisi", "biyyam", "bhaat"],
    "spinach": ["palak", "spinach leaves", "pasalai keerai", "palakura", "palak soppu"],
    "beans": [
        "green beans", "french beans", "string beans", "rajma", "kidney beans", "mixed vegetables",
    ],
    "carrot": ["carrots", "gajar", "gajjari"],
    "peas": ["green peas", "matar", "frozen peas", "batani", "vatana"],
    "capsicum": [
        "bell pepper", "shimla mirch", "green pepper", "red pepper",
        "donne menasinakai", "kudai milagai",
    ],
    "cabbage": ["patta gobhi", "bandh gobhi", "bandhakopi", "elekosu"],
    "cauliflower": ["gobi", "phool gobhi", "phulkopi", "hookosu"],
    "corn": ["sweet corn", "makai", "baby corn", "mekke jola", "bhutta"],
    "mushroom": ["mushrooms", "button mushroom", "khumb", "anabe"],
    "methi (fenugreek)": [
        "methi", "fenugreek", "methi leaves", "kasuri methi", "menthya", "vendhayam", "menthulu",
    ],
    "bottle gourd (lauki)": ["lauki", "bottle gourd", "dudhi", "ghiya", "sorekai", "suraikai", "sorakaya"],
    "brinjal (eggplant)": [
        "brinjal", "eggplant", "baingan", "aubergine", "badanekai", "kathirikai", "vankaya", "vangi", "begun",
    ],
    "okra (ladies finger)": ["okra", "ladies finger", "bhindi", "bendekai", "vendakkai", "bendakaya", "dherosh"],
    "bitter gourd": ["karela", "hagalakai", "pavakkai", "kakarakaya", "uchhe"],
    "egg": ["eggs", "egg", "anda", "motte", "muttai", "mutta", "guddu"],
    "fish": [
        "pomfret", "salmon", "tuna", "mackerel", "rohu", "fish fillet",
        "machli", "machhi", "meen", "chepa", "maach", "bangude",
    ],
    "prawns": ["shrimp", "jhinga", "prawn", "chingri", "royyalu", "sungta"],
    "mutton": ["lamb", "goat meat", "goat", "gosht", "bakra"],
    "dal": [
        "toor dal", "chana dal", "moong dal", "urad dal", "masoor dal", "lentils", "daal",
        "paruppu", "pappu", "bele",
    ],
    "flour": ["wheat flour", "atta", "maida", "all-purpose flour", "godhi hittu"],
    "noodles": ["hakka noodles", "chow mein", "instant noodles"],
    "tofu": ["bean curd", "soy paneer"],
    "soy": ["soy sauce", "soya"],
    "coconut": ["nariyal", "thengai", "tenginakai", "kobbari", "thenga", "narkel"],
    "tamarind": ["imli", "puli", "hunase", "chintapandu", "chinch"],
    "coriander": ["cilantro", "dhania", "dhaniya", "kothamalli", "kothimbir", "kottambari"],
    "curry leaves": ["curry leaf", "kadi patta", "karivepaku", "karibevu", "kariveppilai"],
    "cumin": ["jeera", "jeerige", "seeragam", "jilakara"],
    "mustard seeds": ["sarson", "sasive", "kadugu", "mohari"],
    "green chilli": ["green chili", "hari mirch", "hasi menasinakai", "pachai milagai", "pachimirchi"],
    "jaggery": ["bella", "vellam", "bellam"],
    "lemon": ["lime", "nimbu", "limbu", "nimbehannu", "elumichai", "nimmakaya"],
    "milk": ["doodh", "haalu", "paal"],
    "ghee": ["clarified butter", "tuppa", "neyyi"],
    "semolina": ["rava", "sooji", "suji", "bombay rava", "chiroti rava"],
    "poha": ["flattened rice", "beaten rice", "avalakki", "aval", "atukulu", "chivda"],
    "besan": ["gram flour", "chickpea flour", "kadalai maavu", "kadale hittu", "senaga pindi"],
    "chickpeas": ["chana", "kabuli chana", "chole", "kadale", "kondakadalai", "senagalu"],
}

# --- Nutrition ---
# Progress status bands, as a percentage of the daily goal
NUTRITION_UNDER_BELOW_PERCENT = 80
NUTRITION_ON_TRACK_UP_TO_PERCENT = 110

NUTRITION_PRESETS: Dict[str, Dict[str, float]] = {
    "balanced": {
        "daily_calories": 2000, "daily_protein": 50, "daily_carbs": 250,
        "daily_fat": 65, "daily_fiber": 25, "daily_sodium": 2300,
    },
    "weight-loss": {
        "daily_calories": 1500, "daily_protein": 75, "daily_carbs": 150,
        "daily_fat": 50, "daily_fiber": 30, "daily_sodium": 2000,
    },
    "muscle-gain": {
        "daily_calories": 2500, "daily_protein": 150, "daily_carbs": 300,
        "daily_fat": 70, "daily_fiber": 30, "daily_sodium": 2500,
    },
    "low-carb": {
        "daily_calories": 1800, "daily_protein": 100, "daily_carbs": 100,
        "daily_fat": 100, "daily_fiber": 25, "daily_sodium": 2300,
    },
    "high-protein": {
        "daily_calories": 2200, "daily_protein": 165, "daily_carbs": 200,
        "daily_fat": 70, "daily_fiber": 30, "daily_sodium": 2500,
    },
    "vegetarian-balanced": {
        "daily_calories": 2000, "daily_protein": 60, "daily_carbs": 275,
        "daily_fat": 60, "daily_fiber": 35, "daily_sodium": 2300,
    },
}
