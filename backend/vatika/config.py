"""
Central configuration module for the Vatika.AI backend.

Loads environment variables and defines the static business tables:
budget tiers, railing and medium-piece breakpoints, plant cycles,
delivery tiers, and the space-type prompt fragments.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY", "")
DESIGNS_TABLE = os.getenv("DESIGNS_TABLE", "vatika_designs")

CF_ACCOUNT_ID = os.getenv("CF_ACCOUNT_ID", "")
R2_ACCESS_KEY = os.getenv("R2_ACCESS_KEY", "")
R2_SECRET_KEY = os.getenv("R2_SECRET_KEY", "")
R2_BUCKET = os.getenv("R2_BUCKET", "vatika-images")
R2_PUBLIC_URL = os.getenv("R2_PUBLIC_URL", "")

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_IMAGE_MODEL = os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image")

# Depth-conditioned fallback when Gemini is unavailable or no planter
# reference photo could be loaded.
REPLICATE_API_TOKEN = os.getenv("REPLICATE_API_TOKEN", "")
REPLICATE_DEPTH_MODEL = os.getenv("REPLICATE_DEPTH_MODEL", "black-forest-labs/flux-depth-dev")
REPLICATE_POLL_INTERVAL = 3.0  # seconds
REPLICATE_TIMEOUT = 180.0  # seconds

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# ---------------------------------------------------------------------------
# Budget slider (whole rupees)
# ---------------------------------------------------------------------------
MIN_BUDGET = 20_000
MAX_BUDGET = 100_000
BUDGET_STEP = 5_000

# ---------------------------------------------------------------------------
# Budget tiers  (upper bound inclusive; None = open-ended)
# ---------------------------------------------------------------------------
BUDGET_TIERS: list[dict] = [
    {
        "tier": "starter",
        "max_budget": 30_000,
        "label": "Starter",
        "description": "Cheerful woven and ceramic basics for a fresh look.",
    },
    {
        "tier": "classic",
        "max_budget": 60_000,
        "label": "Classic",
        "description": "Curated mid-range designer pieces with variety in sizes.",
    },
    {
        "tier": "premium",
        "max_budget": None,
        "label": "Premium",
        "description": "Statement floor planters and luxury finishes.",
    },
]

# ---------------------------------------------------------------------------
# Recommendation breakpoints
# ---------------------------------------------------------------------------
# (max budget inclusive, railing hanger quantity)
RAILING_QTY_BREAKPOINTS: list[tuple[int, int]] = [
    (25_000, 3),
    (50_000, 4),
    (75_000, 5),
]
RAILING_QTY_MAX = 6

# (max budget inclusive, distinct medium planters)
MEDIUM_TYPES_BREAKPOINTS: list[tuple[int, int]] = [
    (30_000, 2),
    (50_000, 3),
    (75_000, 4),
]
MEDIUM_TYPES_MAX = 5

# Budgets at or above this get two anchor pieces instead of one
TWO_BIGS_MIN_BUDGET = 50_000

# A single anchor may take at most this share of what is left
ANCHOR_MAX_SHARE = 0.5

SMALL_ACCENT_MIN_REMAINING = 500
FILL_MIN_REMAINING = 3_000

# ---------------------------------------------------------------------------
# Plant cycling  (companion plant ids per planter size)
# ---------------------------------------------------------------------------
PLANT_CYCLES: dict[str, tuple[str, ...]] = {
    "big": ("areca-palm", "rubber-plant", "bougainvillea"),
    "medium": ("snake-plant", "peace-lily", "fern-boston", "croton", "rubber-plant"),
    "small": ("golden-pothos", "money-plant", "jade-plant", "spider-plant"),
}

RAILING_PLANT_ID = "petunia-mix"

# ---------------------------------------------------------------------------
# Delivery tiers
# Longer wait = direct from manufacturer = less waste = lower price
# ---------------------------------------------------------------------------
DELIVERY_TIERS: list[dict] = [
    {
        "days": 2,
        "label": "Express Delivery",
        "discount_percent": 0,
        "description": "Ready stock, shipped immediately",
    },
    {
        "days": 7,
        "label": "Standard - Direct from Supplier",
        "discount_percent": 15,
        "description": "Ships direct from supplier warehouse, no middlemen",
    },
    {
        "days": 15,
        "label": "Made to Order",
        "discount_percent": 20,
        "description": "Freshly manufactured for your order",
    },
    {
        "days": 30,
        "label": "Factory Direct, Zero Waste",
        "discount_percent": 30,
        "description": "Manufactured on demand, zero inventory waste",
    },
    {
        "days": 45,
        "label": "Manufacturer Direct, Maximum Savings",
        "discount_percent": 50,
        "description": "Direct from factory floor, maximum savings passed to you",
    },
]

# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------
ALLOWED_IMAGE_TYPES: list[str] = ["image/jpeg", "image/png", "image/webp"]
MAX_FILE_SIZE: int = 10 * 1024 * 1024  # 10 MB

# ---------------------------------------------------------------------------
# Prompt fragments
# ---------------------------------------------------------------------------
PLANT_PLACEMENT: dict[str, str] = {
    "big": "on the floor as a statement piece",
    "medium": "on the floor or a low stand",
    "small": "on a shelf, table, or grouped near larger planters",
}

LIVING_ROOM_PLACEMENT: dict[str, str] = {
    "big": "in a corner or beside the sofa as a statement piece",
    "medium": "beside a window, on a side table, or near a bookshelf",
    "small": "on a shelf, coffee table, or windowsill",
}

PLANT_SUGGESTIONS: dict[str, str] = {
    "Areca Palm": "a tall areca palm",
    "Snake Plant": "a healthy snake plant with upright leaves",
    "Golden Pothos": "trailing golden pothos with cascading vines",
    "Boston Fern": "a lush Boston fern",
    "Peace Lily": "a peace lily with white flowers",
    "Rubber Plant": "a rubber plant with dark glossy leaves",
    "Money Plant": "a money plant",
    "Jade Plant": "a jade plant",
    "Spider Plant": "a spider plant with arching leaves",
    "Croton": "a colorful croton",
    "Tulsi": "a tulsi plant",
    "Bougainvillea": "bougainvillea with pink flowers",
    "Petunia Mix": "colorful flowering petunias, marigolds, and trailing ivy",
}

SPACE_PROMPT_CONFIG: dict[str, dict[str, str]] = {
    "balcony": {
        "scene_desc": "a balcony or verandah",
        "floor_treatment": (
            "Add artificial green turf grass mat on the floor if the floor "
            "is bare tiles or concrete."
        ),
        "lighting": "Add warm string lights along the ceiling or railing if appropriate.",
        "preserve_elements": (
            "Keep the walls, railing, skyline, and architectural elements "
            "exactly as they are."
        ),
        "railing_note": (
            "IMPORTANT: The railing hook planters are the highlight. They "
            "should be clearly visible, hooked over the railing with colorful "
            "flowers cascading down. This is the signature look of the design."
        ),
    },
    "living-room": {
        "scene_desc": "an indoor living room or interior space",
        "floor_treatment": "",
        "lighting": (
            "Ensure warm, cozy ambient lighting. Add subtle accent lighting "
            "near the planters if appropriate."
        ),
        "preserve_elements": (
            "Keep the walls, furniture, windows, and architectural elements "
            "exactly as they are."
        ),
        "railing_note": "",
    },
    "terrace": {
        "scene_desc": "an open terrace, rooftop, or garden area",
        "floor_treatment": (
            "Add artificial green turf grass mat covering the floor if the "
            "floor is bare tiles or concrete."
        ),
        "lighting": (
            "Add warm string lights or hanging lanterns along the edges if "
            "appropriate."
        ),
        "preserve_elements": (
            "Keep the walls, skyline, pergola, and architectural elements "
            "exactly as they are."
        ),
        "railing_note": "",
    },
}

CAMERA_RULE_PROMPT = """\
MOST IMPORTANT RULE -- CAMERA & FRAMING: You MUST generate a WIDE-ANGLE \
full-room shot that shows the ENTIRE space from wall to wall, floor to \
ceiling. Match the EXACT same camera position, distance, angle, and field of \
view as Image 1. Do NOT zoom in. Do NOT crop tighter. Do NOT reframe. The \
output must show the same amount of the space as the input photo."""

STYLE_PROMPT = """\
Warm golden hour afternoon sunlight. Professional interior design magazine \
photography. Photorealistic. The planters must look exactly like the \
reference images -- same shape, same material, same finish, same proportions."""
