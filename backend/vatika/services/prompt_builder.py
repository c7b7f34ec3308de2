"""
Scene prompt builder for the multi-image render request.

Image 1 is the customer's photo; images 2, 3, ... are the reference photos of
the recommended planters, in recommendation order.
"""

from vatika.catalog import RAILING_HANGER_ID
from vatika.config import (
    CAMERA_RULE_PROMPT,
    LIVING_ROOM_PLACEMENT,
    PLANT_PLACEMENT,
    PLANT_SUGGESTIONS,
    SPACE_PROMPT_CONFIG,
    STYLE_PROMPT,
)
from vatika.models.catalog import SpaceType
from vatika.models.recommendation import SelectedItem


def _placement_line(item: SelectedItem, image_number: int, space_type: SpaceType) -> str:
    planter, plant = item.planter, item.plant
    plant_desc = PLANT_SUGGESTIONS.get(plant.name, plant.name.lower())

    if planter.id == RAILING_HANGER_ID:
        return (
            f"- Image {image_number} ({planter.name}): Hook {item.quantity} of these "
            f"along the entire balcony railing, evenly spaced. Fill each with "
            f"{plant_desc}. They must be hooked over the top of the railing "
            f"exactly like in the reference image."
        )

    placement_map = LIVING_ROOM_PLACEMENT if space_type == "living-room" else PLANT_PLACEMENT
    location = placement_map.get(planter.size, "on the floor")
    qty_text = f"Place {item.quantity} of these" if item.quantity > 1 else "Place 1"

    return f"- Image {image_number} ({planter.name}): {qty_text} {location}. Fill with {plant_desc}."


def build_scene_prompt(
    items: list[SelectedItem] | tuple[SelectedItem, ...],
    space_type: SpaceType = "balcony",
) -> str:
    """Build the render instruction for *items* placed in a *space_type* photo."""
    config = SPACE_PROMPT_CONFIG[space_type]
    placements = [
        _placement_line(item, idx + 2, space_type) for idx, item in enumerate(items)
    ]

    sections = [
        CAMERA_RULE_PROMPT,
        (
            f"Image 1 is a photograph of {config['scene_desc']}. Transform this "
            f"space into a premium biophilic garden using ONLY the exact planter "
            f"designs shown in the reference images."
        ),
        config["floor_treatment"],
        "Place the planters as follows:\n" + "\n".join(placements),
        config["railing_note"],
        (
            f"Remove all existing mismatched pots, clutter, and random "
            f"containers. {config['preserve_elements']}"
        ),
        config["lighting"],
        STYLE_PROMPT,
    ]
    return "\n\n".join(section for section in sections if section)


def build_iteration_prompt(
    items: list[SelectedItem] | tuple[SelectedItem, ...],
    feedback: str,
    space_type: SpaceType = "balcony",
) -> str:
    """Scene prompt plus the customer's requested changes."""
    return f"{build_scene_prompt(items, space_type)}\n\nAdditional changes: {feedback.strip()}"
