"""
Static planter and plant catalog.

Two partner catalogs are merged here: the proprietary line (rendered from
trained reference images, highest fidelity) and the marketplace line
(rendered by matching reference photos at inference time). Everything is
built once at import and exposed read-only.
"""

from types import MappingProxyType

from vatika.models.catalog import Plant, Planter


class UnknownCatalogItemError(KeyError):
    """Raised when a planter or plant id is not in the catalog."""


def _planter(
    id: str,
    name: str,
    image: str,
    price: int,
    size: str,
    prompt_desc: str,
    source: str,
    category: str,
    material: str,
    color: str,
) -> Planter:
    return Planter(
        id=id,
        name=name,
        image=image,
        price=price,
        size=size,
        prompt_desc=prompt_desc,
        source=source,
        category=category,
        material=material,
        color=color,
    )


# ---------------------------------------------------------------------------
# Proprietary planters
# ---------------------------------------------------------------------------
_PROPRIETARY_PLANTERS: list[Planter] = [
    _planter("chevron", "Chevron", "planters/chevron.png", 7500, "big", "a large egg-shaped matte grey fiberglass floor planter", "proprietary", "Fiberglass", "fiberglass", "grey"),
    _planter("willow", "Willow", "planters/willow.png", 7500, "big", "a tall smooth rounded matte floor planter", "proprietary", "Fiberglass", "fiberglass", "grey"),
    _planter("allegra", "Allegra", "planters/allegra.png", 7500, "big", "a tall marble-finish floor planter with copper veining", "proprietary", "Fiberglass", "fiberglass", "marble"),
    _planter("amalfi", "Amalfi", "planters/amalfi.png", 7500, "big", "a dark grey urn-shaped floor planter", "proprietary", "Fiberglass", "fiberglass", "dark grey"),
    _planter("quebec-rect", "Quebec Rectangle", "planters/quebec-rectangle.png", 7500, "big", "a grey rectangular concrete-look planter box", "proprietary", "Concrete", "concrete-look", "grey"),
    _planter("quebec-sq", "Quebec Square", "planters/quebec-square.png", 7500, "big", "a grey cube-shaped concrete-look planter", "proprietary", "Concrete", "concrete-look", "grey"),
    _planter("go-hooked", "GoHooked Rectangular", "planters/go-hooked-recta.png", 7500, "big", "a dark rectangular planter box with flowering plants", "proprietary", "Fiberglass", "fiberglass", "dark"),
    _planter("pine-skirting", "Pine Skirting Module", "planters/pine-skirting.jpeg", 7500, "big", "a wooden wall-base skirting panel with integrated planter boxes and warm hanging lantern lights", "proprietary", "Wood", "pine wood", "natural wood"),
    _planter("tokyo-tall", "Tokyo Tall", "planters/tokyo-tall.png", 4000, "medium", "a tall ribbed cylindrical grey planter", "proprietary", "Lightweight", "lightweight composite", "grey"),
    _planter("azziano", "Azziano", "planters/azziano.png", 4000, "medium", "a textured dark green round planter with swirl pattern", "proprietary", "Ceramic", "ceramic", "dark green"),
    _planter("fox-bowl", "Fox Bowl", "planters/fox-bowl.png", 4000, "medium", "a dark grey low wide bowl planter", "proprietary", "Fiberglass", "fiberglass", "dark grey"),
    _planter("ribbed-set", "Ribbed Planter", "planters/ribbed-set.png", 4000, "medium", "a ribbed cylindrical tan/brown planter with vertical grooves", "proprietary", "Ceramic", "ceramic", "tan"),
    _planter("wrought-iron", "Wrought Iron Stand", "planters/wrought-iron-stand.jpeg", 4000, "medium", "a black wrought iron plant stand with a small wooden shelter roof", "proprietary", "Metal", "wrought iron", "black"),
    _planter("b2-fabric", "B2 Fabric Box", "planters/b2-fabric.jpg", 1500, "small", "a modular wooden planter box with green fabric grass mat top", "proprietary", "Wood", "wood + fabric", "green"),
    _planter("balcony-hanger", "Balcony Hanger", "planters/balcony-hanger.jpeg", 1500, "small", "a small metal hook planter clipped onto the railing", "proprietary", "Metal", "metal", "black"),
]

# ---------------------------------------------------------------------------
# Marketplace planters
# ---------------------------------------------------------------------------
_MARKETPLACE_PLANTERS: list[Planter] = [
    _planter("ug-crown", "Crown Planter", "planters/ugaoo/Crown Planter_649_3D Printed.jpg", 649, "small", "a small 3D printed crown-shaped pot with geometric ridges", "marketplace", "3D Printed", "3D printed PLA", "terracotta"),
    _planter("ug-erika", "Erika Planter", "planters/ugaoo/Erika Planter_849_3D Printed.jpg", 849, "small", "a small 3D printed planter with layered wave texture", "marketplace", "3D Printed", "3D printed PLA", "beige"),
    _planter("ug-faceted-3d", "Faceted Prism Pot", "planters/ugaoo/Faceted prism Pot_1499_3D Printed.jpg", 1499, "small", "a geometric faceted prism-shaped 3D printed pot with diamond pattern", "marketplace", "3D Printed", "3D printed PLA", "beige"),
    _planter("ug-imperia", "Imperia Planter", "planters/ugaoo/Imperia Planter_1199_3D Printed.jpg", 1199, "small", "a 3D printed planter with interlocking geometric surface pattern", "marketplace", "3D Printed", "3D printed PLA", "white"),
    _planter("ug-interlace-3d", "Interlace Charm Pot", "planters/ugaoo/Interlace Charm Pot_1499_3D Printed.jpg", 1499, "small", "a 3D printed pot with interlaced woven-look surface texture", "marketplace", "3D Printed", "3D printed PLA", "white"),
    _planter("ug-oblique-3d", "Oblique Elegance Pot", "planters/ugaoo/Oblique Elegance Pot_1499_3D Printed.jpg", 1499, "small", "a 3D printed pot with diagonal oblique ridge pattern", "marketplace", "3D Printed", "3D printed PLA", "grey"),
    _planter("ug-ridged-3d", "Ridged Waves Pot", "planters/ugaoo/Ridged Waves Pot_1499_3D Printed.jpg", 1499, "small", "a 3D printed pot with horizontal ridged wave texture", "marketplace", "3D Printed", "3D printed PLA", "beige"),
    _planter("ug-belly-dance", "Belly Dance Cotton", "planters/ugaoo/Belly Dance Cotton Planter_1499_Cotton.jpg", 1499, "medium", "a woven cotton basket planter with belly dance pattern and tassels", "marketplace", "Basket", "cotton", "natural"),
    _planter("ug-ex-cotton", "Ex Cotton Planter", "planters/ugaoo/Ex Cotton Planter_999_Cotton.jpg", 999, "small", "a simple woven cotton basket planter", "marketplace", "Basket", "cotton", "natural"),
    _planter("ug-rays-cotton", "Rays Cotton Planter", "planters/ugaoo/Rays Cotton Planter_1299_Cotton.jpg", 1299, "medium", "a woven cotton basket planter with radiating ray pattern", "marketplace", "Basket", "cotton", "natural"),
    _planter("ug-seagrass", "Seagrass Planter", "planters/ugaoo/Seagrass Planter_1299_Seagrass.jpg", 1299, "medium", "a natural seagrass woven basket planter", "marketplace", "Basket", "seagrass", "natural"),
    _planter("ug-skyie", "Skyie Cotton Planter", "planters/ugaoo/Skyie Cotton Planter_1299_Cotton.jpg", 1299, "medium", "a woven cotton basket planter with sky blue accent pattern", "marketplace", "Basket", "cotton", "blue + natural"),
    _planter("ug-square-cane", "Square Cane Planter", "planters/ugaoo/Square Cane Planter_999_Cane.jpg", 999, "small", "a square-shaped woven cane basket planter", "marketplace", "Basket", "cane", "natural"),
    _planter("ug-tassel", "Tassel Cotton Planter", "planters/ugaoo/Tassel Cotton Planter_1499_Cotton.jpg", 1499, "medium", "a cotton basket planter with decorative tassels", "marketplace", "Basket", "cotton", "natural"),
    _planter("ug-trinket", "Trinket Cotton Planter", "planters/ugaoo/Trinket Cotton Planter_999_Cotton.jpg", 999, "small", "a small woven cotton trinket basket planter", "marketplace", "Basket", "cotton", "natural"),
    _planter("ug-aurelius-prism", "Aurelius Prism Ceramic", "planters/ugaoo/Aurelius Prism Ceramic Pot_999_Glossy.jpg", 999, "small", "a glossy ceramic pot with geometric prism facets and metallic gold rim", "marketplace", "Ceramic", "ceramic", "beige + gold"),
    _planter("ug-aurelius-round", "Aurelius Round Ceramic", "planters/ugaoo/Aurelius Round Ceramic Pot_999_Glossy.jpg", 999, "small", "a glossy round ceramic pot with vertical ribbed texture and gold rim", "marketplace", "Ceramic", "ceramic", "beige + gold"),
    _planter("ug-fleeting-bliss", "Fleeting Bliss Ceramic", "planters/ugaoo/Fleeting Bliss Ceramic Planter_5349_Glossy.jpg", 5349, "big", "a large premium glossy ceramic planter with artistic flowing pattern", "marketplace", "Ceramic", "ceramic", "white + blue"),
    _planter("ug-sunflower", "Sunflower Ceramic", "planters/ugaoo/Flower Sunflower Ceramic Planter_3999_Glossy.jpg", 3999, "medium", "a glossy ceramic planter with embossed sunflower design", "marketplace", "Ceramic", "ceramic", "yellow + green"),
    _planter("ug-fluted", "Fluted Ceramic Pot", "planters/ugaoo/Fluted ceramic pot 5 inch_999_Glossy.jpg", 999, "small", "a small glossy fluted ceramic pot with vertical grooves", "marketplace", "Ceramic", "ceramic", "white"),
    _planter("ug-grail", "Grail Ceramic Pot", "planters/ugaoo/Grail Ceramic Pot_799_Glossy.jpg", 799, "small", "a small glossy ceramic grail-shaped pot", "marketplace", "Ceramic", "ceramic", "white"),
    _planter("ug-peacock", "Peacock Ceramic Pot", "planters/ugaoo/Peacock ceramic pot 5 inch_799_Glossy.jpg", 799, "small", "a small ceramic pot with peacock feather design", "marketplace", "Ceramic", "ceramic", "blue + green"),
    _planter("ug-phoenix", "Phoenix Ceramic", "planters/ugaoo/Phoenix ceramic Planter_2699_Glossy.jpg", 2699, "medium", "a medium glossy ceramic planter with phoenix motif", "marketplace", "Ceramic", "ceramic", "multi"),
    _planter("ug-cosmic-hang", "Cosmic Stone Hanging", "planters/ugaoo/Ceramic Hanging Pot Cosmic Stone_1449_Ceramic.jpg", 1449, "small", "a ceramic hanging pot with cosmic stone speckled finish", "marketplace", "Hanging", "ceramic", "grey speckle"),
    _planter("ug-petrichor", "Petrichor Smite Hanging", "planters/ugaoo/Hanging Ceramic Planters Petrichor Smite_1999_Ceramic.jpg", 1999, "medium", "a ceramic hanging planter with rustic petrichor-style glaze finish", "marketplace", "Hanging", "ceramic", "brown"),
    _planter("ug-macrame-1", "Macrame Single Hanger", "planters/ugaoo/Macrame Single Layer Hanger_599_Macrame.jpg", 599, "small", "a single-layer macrame rope plant hanger", "marketplace", "Hanging", "macrame rope", "white"),
    _planter("ug-macrame-3", "Macrame Three Layer Hanger", "planters/ugaoo/Macrame Three Layer Hanger_699_Macrame.jpg", 699, "medium", "a three-tier macrame rope plant hanger with multiple pot holders", "marketplace", "Hanging", "macrame rope", "white"),
    _planter("ug-macrame-2", "Macrame Two Layer Hanger", "planters/ugaoo/Macrame Two Layer Hanger_599_Macrame.jpg", 599, "small", "a two-tier macrame rope plant hanger", "marketplace", "Hanging", "macrame rope", "white"),
    _planter("ug-aurelian", "Aurelian Cylindrical", "planters/ugaoo/Aurelian Cylindrical Planter_2999_Metal.jpg", 2999, "medium", "a cylindrical metal planter with brushed antique brass finish", "marketplace", "Metal", "metal", "brass"),
    _planter("ug-elegance", "Elegance Planter", "planters/ugaoo/Elegance Planter_3249_Metal.jpg", 3249, "medium", "a tall elegant metal planter with sleek tapered shape", "marketplace", "Metal", "metal", "black"),
    _planter("ug-golden-opulence", "Golden Opulence", "planters/ugaoo/Golden Opulence Planter_2499_Gold.jpg", 2499, "medium", "a polished gold metal planter with goblet shape", "marketplace", "Metal", "metal", "gold"),
    _planter("ug-gunmetal", "Gunmetal Goblet", "planters/ugaoo/Gunmetal Goblet Planter_4499_Gunmetal.jpg", 4499, "big", "a large gunmetal grey goblet-shaped metal planter", "marketplace", "Metal", "metal", "gunmetal"),
    _planter("ug-pastel-ridge", "Pastel Ridge Heritage", "planters/ugaoo/Pastel Ridge Heritage Planter_4499_Pastel.jpg", 4499, "big", "a large heritage-style metal planter with ridged surface in pastel finish", "marketplace", "Metal", "metal", "pastel green"),
    _planter("ug-ridgecraft", "RidgeCraft Cylindrical", "planters/ugaoo/RidgeCraft Cylindrical Planter_3249_Metal.jpg", 3249, "medium", "a cylindrical metal planter with ridged craft texture", "marketplace", "Metal", "metal", "black"),
    _planter("ug-barca-round", "Barca Round", "planters/ugaoo/Barca Round Planter_799_Plastic.jpg", 799, "small", "a round plastic planter with stone-finish texture", "marketplace", "Plastic", "plastic stone-finish", "grey stone"),
    _planter("ug-barca-square", "Barca Square", "planters/ugaoo/Barca Square Planter_999_Plastic.jpg", 999, "small", "a square plastic planter with stone-finish texture", "marketplace", "Plastic", "plastic stone-finish", "grey stone"),
    _planter("ug-milano", "Milano Short", "planters/ugaoo/Milano Short Planter_1499_Lightweight.jpg", 1499, "medium", "a short wide lightweight composite planter with ribbed texture", "marketplace", "Lightweight", "lightweight composite", "grey"),
    _planter("ug-paris", "Paris Planter", "planters/ugaoo/Paris Planter_3499_Plastic.jpg", 3499, "big", "a large Paris-style premium plastic planter", "marketplace", "Plastic", "premium plastic", "grey"),
    _planter("ug-pebble", "Pebble Shaped", "planters/ugaoo/Pebble Shaped Planter_799_Pebble.jpg", 799, "small", "a rounded pebble-shaped planter with smooth organic form", "marketplace", "Plastic", "plastic", "grey"),
    _planter("ug-tokyo-high", "Tokyo High", "planters/ugaoo/Tokyo High Planter_4999_Lightweight.jpg", 4999, "big", "a tall high ribbed cylindrical lightweight planter", "marketplace", "Lightweight", "lightweight composite", "grey"),
    _planter("ug-tokyo-round", "Tokyo Round", "planters/ugaoo/Tokyo Round Planter_1799_Lightweight.jpg", 1799, "medium", "a round ribbed lightweight composite planter", "marketplace", "Lightweight", "lightweight composite", "grey"),
    _planter("ug-tulsi", "Tulsi Pot", "planters/ugaoo/Tulsi Pot for Home_3999_Plastic.jpg", 3999, "medium", "a traditional tulsi pot for home with pedestal base", "marketplace", "Plastic", "premium plastic", "stone"),
    _planter("ug-faceted-wood", "Faceted Prism Wooden", "planters/ugaoo/Faceted prism Wooden Pot_1499_Wooden.jpg", 1499, "small", "a geometric faceted prism-shaped wooden pot", "marketplace", "Wooden", "wood", "natural wood"),
    _planter("ug-interlace-wood", "Interlace Charm Wooden", "planters/ugaoo/Interlace Charm Wooden Pot_1499_Wooden.jpg", 1499, "small", "a wooden pot with interlaced woven-look surface", "marketplace", "Wooden", "wood", "natural wood"),
    _planter("ug-oblique-wood", "Oblique Elegance Wooden", "planters/ugaoo/Oblique Elegance Wooden Pot_1499_Wooden.jpg", 1499, "small", "a wooden pot with diagonal oblique ridge pattern", "marketplace", "Wooden", "wood", "natural wood"),
    _planter("ug-ridged-wood", "Ridged Waves Wooden", "planters/ugaoo/Ridged Waves Wooden Pot_1499_Wooden.jpg", 1499, "small", "a wooden pot with horizontal ridged wave texture", "marketplace", "Wooden", "wood", "natural wood"),
]

PLANTERS: tuple[Planter, ...] = tuple(_PROPRIETARY_PLANTERS + _MARKETPLACE_PLANTERS)

# The one planter usable in every budget tier; balconies only.
RAILING_HANGER_ID = "balcony-hanger"

# ---------------------------------------------------------------------------
# Plants
# ---------------------------------------------------------------------------
PLANTS: tuple[Plant, ...] = (
    Plant(id="areca-palm", name="Areca Palm", price=800),
    Plant(id="bougainvillea", name="Bougainvillea", price=600),
    Plant(id="snake-plant", name="Snake Plant", price=400),
    Plant(id="golden-pothos", name="Golden Pothos", price=250),
    Plant(id="fern-boston", name="Boston Fern", price=300),
    Plant(id="peace-lily", name="Peace Lily", price=350),
    Plant(id="rubber-plant", name="Rubber Plant", price=600),
    Plant(id="money-plant", name="Money Plant", price=200),
    Plant(id="jade-plant", name="Jade Plant", price=350),
    Plant(id="spider-plant", name="Spider Plant", price=250),
    Plant(id="tulsi", name="Tulsi", price=150),
    Plant(id="croton", name="Croton", price=400),
    Plant(id="petunia-mix", name="Petunia Mix", price=200),
)

# ---------------------------------------------------------------------------
# Read-only lookups
# ---------------------------------------------------------------------------
PLANTERS_BY_ID: MappingProxyType = MappingProxyType({p.id: p for p in PLANTERS})
PLANTS_BY_ID: MappingProxyType = MappingProxyType({p.id: p for p in PLANTS})

assert len(PLANTERS_BY_ID) == len(PLANTERS), "duplicate planter id in catalog"
assert len(PLANTS_BY_ID) == len(PLANTS), "duplicate plant id in catalog"


def get_planter(planter_id: str) -> Planter:
    """Return the planter with *planter_id* or raise ``UnknownCatalogItemError``."""
    try:
        return PLANTERS_BY_ID[planter_id]
    except KeyError:
        raise UnknownCatalogItemError(planter_id) from None


def get_plant(plant_id: str) -> Plant:
    """Return the plant with *plant_id* or raise ``UnknownCatalogItemError``."""
    try:
        return PLANTS_BY_ID[plant_id]
    except KeyError:
        raise UnknownCatalogItemError(plant_id) from None


def filter_planters(
    source: str | None = None,
    size: str | None = None,
    category: str | None = None,
) -> list[Planter]:
    """Return planters matching every given filter, in catalog order."""
    result: list[Planter] = []
    for planter in PLANTERS:
        if source is not None and planter.source != source:
            continue
        if size is not None and planter.size != size:
            continue
        if category is not None and planter.category != category:
            continue
        result.append(planter)
    return result


def get_categories() -> list[str]:
    """Distinct planter categories in first-seen order."""
    seen: dict[str, None] = {}
    for planter in PLANTERS:
        if planter.category:
            seen.setdefault(planter.category, None)
    return list(seen)
