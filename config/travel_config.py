# travel_config.py
"""
Complete rule tables for the trip packing and outfit system.
Every item bundle, threshold and outfit template lives here so the rule engine
stays free of literal data.
"""

# Weather thresholds (Celsius)
COLD_THRESHOLD_C = 15
WARM_THRESHOLD_C = 25
RAIN_KEYWORD = "rain"

# Synthetic per-day weather variation limits
WEATHER_VARIATION = {
    "step_c": 2,
    "max_temp_c": 35,
    "min_temp_c": 0,
    "rain_description": "rainy",
}

# Item tuples are (name, quantity, purpose, volume); volume set means liquid.
ESSENTIAL_ITEMS = [
    ("Wallet", 1, "Essential item", None),
    ("Phone", 1, "Essential item", None),
    ("Phone charger", 1, "Essential item", None),
    ("Medications", 1, "Essential item", None),
    ("Travel insurance info", 1, "Essential item", None),
]

GENDER_TOILETRIES = {
    "female": [
        ("Feminine hygiene products", 1, "Personal care", None),
        ("Makeup", 1, "Personal care", None),
        ("Makeup remover", 1, "Personal care", "100ml"),
    ],
    "male": [
        ("Razor/shaving cream", 1, "Personal care", "100ml"),
        ("Aftershave", 1, "Personal care", "100ml"),
    ],
}

WEATHER_CLOTHING = {
    "cold": [
        ("Sweater/hoodie", 2, "For cold weather", None),
        ("Jacket", 1, "For cold weather", None),
    ],
    "warm": [
        ("Shorts", 2, "For warm weather", None),
        ("Sunglasses", 1, "For sunny days", None),
        ("Hat/cap", 1, "Sun protection", None),
    ],
    "rain": [
        ("Rain jacket/umbrella", 1, "For rainy weather", None),
        ("Waterproof shoes", 1, "For rainy weather", None),
    ],
}

# Fixed-quantity purpose bundles, keyed by purpose then category.
# Duration-dependent items (formal shirts) are added by the generator.
PURPOSE_BUNDLES = {
    "beach": {
        "activities": [
            ("Swimwear", 2, "For beach activities", None),
            ("Beach towel", 1, "For beach activities", None),
            ("Flip flops", 1, "For beach activities", None),
            ("Sunscreen", 1, "Sun protection", "200ml"),
        ],
    },
    "business": {
        "clothing": [
            ("Formal pants/skirts", 2, "For business meetings", None),
            ("Business shoes", 1, "For business meetings", None),
            ("Ties/accessories", 2, "For business meetings", None),
        ],
        "activities": [
            ("Business cards", 1, "For networking", None),
            ("Notebook/planner", 1, "For business meetings", None),
        ],
    },
    "outdoor": {
        "activities": [
            ("Hiking boots", 1, "For outdoor activities", None),
            ("Quick-dry shirts", 3, "For outdoor activities", None),
            ("Hiking pants", 2, "For outdoor activities", None),
            ("Daypack", 1, "For day trips", None),
            ("Water bottle", 1, "For hydration", None),
            ("First aid kit", 1, "For emergencies", None),
        ],
    },
    "city": {
        "activities": [
            ("Comfortable walking shoes", 1, "For city exploration", None),
            ("Day bag/backpack", 1, "For carrying essentials", None),
            ("City map/guidebook", 1, "For navigation", None),
            ("Camera", 1, "For sightseeing", None),
        ],
    },
}

TOILETRY_ITEMS = [
    ("Toothbrush", 1, "Basic hygiene", None),
    ("Toothpaste", 1, "Basic hygiene", "75ml"),
    ("Deodorant", 1, "Basic hygiene", "50ml"),
    ("Shampoo", 1, "Basic hygiene", "100ml"),
    ("Conditioner", 1, "Basic hygiene", "100ml"),
    ("Body wash", 1, "Basic hygiene", "100ml"),
    ("Hairbrush/comb", 1, "Basic hygiene", None),
    ("Face wash", 1, "Basic hygiene", "50ml"),
    ("Moisturizer", 1, "Basic hygiene", "50ml"),
]

# Shared-sleeping accommodations get these; purpose is "For <accommodation>".
SHARED_SLEEPING_ACCOMMODATIONS = {"hostel", "camping"}
SHARED_SLEEPING_ITEMS = ["Travel towel", "Earplugs", "Eye mask"]

CAMPING_ITEMS = [
    ("Sleeping bag", 1, "For camping", None),
    ("Flashlight", 1, "For camping", None),
    ("Multi-tool", 1, "For camping", None),
]

ELECTRONICS_ITEMS = [
    ("Camera", 1, "For photos", None),
    ("Power adapter", 1, "For charging devices", None),
    ("Portable charger", 1, "For charging on the go", None),
]

DOCUMENT_ITEMS = [
    ("Passport/ID", 1, "Required for travel", None),
    ("Flight tickets", 1, "Required for travel", None),
    ("Hotel reservation", 1, "Required for check-in", None),
    ("Cash/credit cards", 1, "For purchases", None),
]

# Known input vocabularies
TRIP_PURPOSES = ["city", "beach", "outdoor", "business", "other"]
ACCOMMODATION_TYPES = ["hotel", "hostel", "rental", "camping", "yurt", "homestay", "other"]

ACCOMMODATION_LABELS = {
    "hotel": "Hotel",
    "hostel": "Hostel",
    "rental": "Vacation Rental",
    "camping": "Camping",
    "yurt": "Yurt",
    "homestay": "Homestay",
}

LUGGAGE_LABELS = {
    "carry-on": "Carry-on Suitcase",
    "checked": "Checked Suitcase",
    "backpack-small": "Small Backpack (20-35L)",
    "backpack-medium": "Medium Backpack (36-50L)",
    "backpack-large": "Large Backpack (50L+)",
    "duffel": "Duffel Bag",
    "osprey-fairview": "Osprey Fairview/Farpoint",
}

# Custom item liquid detection
LIQUID_KEYWORDS = ["liquid", "shampoo", "conditioner", "lotion", "sunscreen", "gel"]
DEFAULT_LIQUID_VOLUME = "100ml"
CARRY_ON_LIQUID_LIMIT_ML = 100

# Daily outfit activity detection
DEFAULT_ACTIVITY = "Free day / Exploration"

ACTIVITY_KEYWORDS = {
    "beach": ["beach", "swim", "ocean", "sea"],
    "business": ["meeting", "conference", "business", "presentation"],
    "outdoor": ["hike", "trek", "outdoor", "mountain", "trail"],
}

# Purpose-driven fallback when the itinerary says nothing: (purpose, day modulus, remainder)
ACTIVITY_DAY_FALLBACK = {
    "beach": ("beach", 2, 0),
    "business": ("business", 3, 0),
    "outdoor": ("outdoor", 2, 1),
}

# Daytime outfit templates keyed by context then gender.
# "warm_top"/"warm_bottom" replace top/bottom when the day is above WARM_THRESHOLD_C.
DAYTIME_OUTFITS = {
    "beach": {
        "female": {
            "top": "T-shirt",
            "warm_top": "Light tank top or t-shirt",
            "bottom": "Swimsuit with shorts/skirt/cover-up",
            "shoes": "Sandals or flip-flops",
            "accessories": ["Sunglasses", "Sun hat", "Beach bag", "Sunscreen", "Hair tie"],
        },
        "male": {
            "top": "T-shirt",
            "warm_top": "Light t-shirt or tank top",
            "bottom": "Swim shorts",
            "shoes": "Sandals or flip-flops",
            "accessories": ["Sunglasses", "Sun hat", "Beach bag", "Sunscreen"],
        },
        "neutral": {
            "top": "T-shirt",
            "warm_top": "Light t-shirt or tank top",
            "bottom": "Swimwear with shorts/cover-up",
            "shoes": "Sandals or flip-flops",
            "accessories": ["Sunglasses", "Sun hat", "Beach bag", "Sunscreen"],
        },
    },
    "business": {
        "female": {
            "top": "Blouse or business shirt",
            "bottom": "Skirt, dress, or formal pants",
            "shoes": "Formal shoes or heels",
            "accessories": ["Watch", "Professional bag/briefcase", "Minimal jewelry"],
        },
        "male": {
            "top": "Business shirt",
            "bottom": "Formal pants",
            "shoes": "Formal shoes",
            "accessories": ["Watch", "Professional bag/briefcase", "Tie"],
        },
        "neutral": {
            "top": "Business shirt or blouse",
            "bottom": "Formal pants or skirt",
            "shoes": "Formal shoes",
            "accessories": ["Watch", "Professional bag/briefcase"],
        },
    },
    "outdoor": {
        "female": {
            "top": "Quick-dry shirt or hiking top",
            "bottom": "Hiking pants or shorts",
            "shoes": "Hiking boots or trail shoes",
            "accessories": ["Hat", "Sunglasses", "Daypack", "Water bottle", "Hair tie/bandana"],
        },
        "male": {
            "top": "Quick-dry shirt or hiking top",
            "bottom": "Hiking pants or shorts",
            "shoes": "Hiking boots or trail shoes",
            "accessories": ["Hat", "Sunglasses", "Daypack", "Water bottle"],
        },
        "neutral": {
            "top": "Quick-dry shirt or hiking top",
            "bottom": "Hiking pants or shorts",
            "shoes": "Hiking boots or trail shoes",
            "accessories": ["Hat", "Sunglasses", "Daypack", "Water bottle"],
        },
    },
    "casual": {
        "female": {
            "top": "T-shirt",
            "warm_top": "Light t-shirt or tank top",
            "bottom": "Jeans or pants",
            "warm_bottom": "Shorts or skirt",
            "shoes": "Comfortable walking shoes",
            "accessories": ["Sunglasses", "Small bag"],
        },
        "male": {
            "top": "T-shirt",
            "warm_top": "Light t-shirt",
            "bottom": "Jeans or pants",
            "warm_bottom": "Shorts",
            "shoes": "Comfortable walking shoes",
            "accessories": ["Sunglasses", "Small bag"],
        },
        "neutral": {
            "top": "T-shirt",
            "warm_top": "Light t-shirt",
            "bottom": "Jeans or pants",
            "warm_bottom": "Shorts",
            "shoes": "Comfortable walking shoes",
            "accessories": ["Sunglasses", "Small bag"],
        },
    },
}

EVENING_OUTFITS = {
    "female": {
        "top": "Nice blouse or dressy top",
        "bottom": "Dress pants or skirt",
        "shoes": "Dress shoes or heels",
        "accessories": ["Evening bag", "Jewelry"],
    },
    "male": {
        "top": "Dress shirt",
        "bottom": "Dress pants",
        "shoes": "Dress shoes",
        "accessories": ["Watch"],
    },
    "neutral": {
        "top": "Dress shirt or blouse",
        "bottom": "Dress pants or skirt",
        "shoes": "Dress shoes",
        "accessories": ["Watch", "Evening bag"],
    },
}

# Outerwear injected per context: (rain outerwear, cold outerwear). None means no injection.
OUTERWEAR_RULES = {
    "beach": (None, None),
    "business": (None, "Blazer or suit jacket"),
    "outdoor": ("Waterproof jacket", "Light jacket or fleece"),
    "casual": ("Rain jacket or umbrella", "Light jacket or sweater"),
    "evening": ("Rain jacket or umbrella", "Light jacket or sweater"),
}

# Luggage-specific packing guidance; "intro" is an optional lead-in line per section
PACKING_STRATEGIES = {
    "carry-on": {
        "title": "Packing Strategy for Carry-on Suitcase",
        "sections": [
            {
                "heading": "Rolling Method",
                "intro": "Roll clothes instead of folding to save space and reduce wrinkles.",
                "tips": [
                    "T-shirts, underwear, and socks are ideal for rolling",
                    "Place rolled items at the bottom of your suitcase",
                ],
            },
            {
                "heading": "Layer Strategy (Bottom to Top)",
                "tips": [
                    "Bottom layer: Heavy items like shoes (in shoe bags), jeans, and bulky items",
                    "Middle layer: Rolled clothes and medium-weight items",
                    "Top layer: Light items like shirts and items you'll need first",
                ],
            },
            {
                "heading": "Liquids and Toiletries",
                "intro": "Remember the 3-1-1 rule for carry-ons:",
                "tips": [
                    "3.4 ounces (100ml) or less per container",
                    "1 quart-sized, clear, plastic, zip-top bag",
                    "1 bag per passenger",
                ],
            },
        ],
    },
    "checked": {
        "title": "Packing Strategy for Checked Suitcase",
        "sections": [
            {
                "heading": "Weight Distribution",
                "intro": "Place heavier items at the bottom (wheel end) of the suitcase for better balance.",
                "tips": [],
            },
            {
                "heading": "Layer Strategy",
                "tips": [
                    "Bottom layer: Heavy items like shoes, toiletry bags, and bulky clothing",
                    "Middle layer: Folded clothes using the bundle method to reduce wrinkles",
                    "Top layer: Light items and things you'll need immediately upon arrival",
                ],
            },
            {
                "heading": "Utilize All Space",
                "tips": [
                    "Fill shoes with socks or small items",
                    "Use packing cubes to organize and compress clothing",
                    "Use the outer pockets for items you may need to access during travel",
                ],
            },
        ],
    },
    "backpack": {
        "title": "Packing Strategy for {size} Backpack",
        "sections": [
            {
                "heading": "Weight Distribution",
                "intro": "Proper weight distribution is crucial for comfort when carrying a backpack:",
                "tips": [
                    "Bottom: Heavy items (sleeping bag, extra shoes)",
                    "Middle: Medium-weight items (clothes, food)",
                    "Top: Light, frequently used items (jacket, map, snacks)",
                    "External pockets: Items needed on the go (water bottle, sunscreen)",
                ],
            },
            {
                "heading": "Space-Saving Techniques",
                "tips": [
                    "Use compression sacks for clothing and sleeping bags",
                    "Roll clothes instead of folding",
                    "Use packing cubes to organize and maximize space",
                    "Wear your bulkiest items during transit",
                ],
            },
            {
                "heading": "Accessibility Tips",
                "tips": [
                    "Pack items you'll need during the day near the top or in external pockets",
                    "Keep valuables in internal, hard-to-reach pockets",
                    "Use a rain cover to protect your backpack in wet conditions",
                ],
            },
        ],
    },
    "duffel": {
        "title": "Packing Strategy for Duffel Bag",
        "sections": [
            {
                "heading": "Organization Strategy",
                "intro": "Duffel bags lack structure, so organization is key:",
                "tips": [
                    "Use packing cubes to create structure and organization",
                    "Color-code packing cubes by category (clothes, toiletries, electronics)",
                    "Place shoes at the ends of the bag, wrapped in shoe bags",
                ],
            },
            {
                "heading": "Layering Approach",
                "tips": [
                    "Bottom: Heavy items and items not needed immediately",
                    "Middle: Clothing and medium-weight items",
                    "Top: Items needed first upon arrival",
                ],
            },
            {
                "heading": "Accessibility Tips",
                "tips": [
                    "Use external or end pockets for frequently accessed items",
                    "Keep a small pouch with essentials at the top of your bag",
                    "Consider using a shoulder strap for easier carrying",
                ],
            },
        ],
    },
    "osprey-fairview": {
        "title": "Packing Strategy for Osprey Fairview/Farpoint Travel Pack",
        "sections": [
            {
                "heading": "Main Compartment (Bottom-to-Top Packing)",
                "tips": [
                    "Bottom: Less frequently used items (extra clothes, sleeping bag liner)",
                    "Middle: Medium-weight essentials (clothes in packing cubes, toiletries)",
                    "Top: Frequently used items (jacket, snacks, water bottle)",
                ],
            },
            {
                "heading": "Daypack (Detachable 15L)",
                "intro": "Pack daily essentials in the detachable daypack:",
                "tips": [
                    "Passport, cash, cards in secure inner pocket",
                    "Electronics (phone, camera, chargers)",
                    "Water bottle, snacks",
                    "Light rain jacket or sweater",
                    "Sunglasses, sunscreen",
                ],
            },
            {
                "heading": "Compression System",
                "intro": "Use the built-in compression straps to:",
                "tips": [
                    "Secure and stabilize the load",
                    "Reduce the pack's profile for easier handling",
                    "Prevent items from shifting during transit",
                ],
            },
            {
                "heading": "Laptop Sleeve",
                "intro": "The dedicated laptop sleeve can hold:",
                "tips": [
                    "Laptop (up to 15\")",
                    "Tablet",
                    "Travel documents in a folder",
                    "Books or magazines",
                ],
            },
        ],
    },
}

# Used for luggage types without a dedicated strategy
GENERAL_PACKING_STRATEGY = {
    "title": "Packing Strategy for {luggage}",
    "sections": [
        {
            "heading": "General Packing Principles",
            "tips": [
                "Weight distribution: Heavier items at the bottom/back",
                "Accessibility: Frequently used items should be easily accessible",
                "Organization: Use packing cubes or bags to group similar items",
                "Protection: Wrap fragile items in soft clothing",
            ],
        },
        {
            "heading": "Space-Saving Techniques",
            "tips": [
                "Roll clothes instead of folding to save space",
                "Use compression bags for bulky items",
                "Fill empty spaces (like shoes) with small items",
                "Wear your bulkiest items during transit",
            ],
        },
        {
            "heading": "Packing Order",
            "tips": [
                "First layer: Heavy items (shoes, toiletry bags)",
                "Middle layer: Clothing and medium-weight items",
                "Top layer: Light items and things needed first",
            ],
        },
    ],
}

BACKPACK_SIZES = {
    "backpack-small": "Small",
    "backpack-medium": "Medium",
    "backpack-large": "Large",
}
