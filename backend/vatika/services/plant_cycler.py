"""Round-robin companion plant selection, one cursor per planter size."""

from vatika.catalog import get_plant
from vatika.config import PLANT_CYCLES
from vatika.models.catalog import Plant, PlanterSize


class PlantCycler:
    """Hands out companion plants so neighbouring same-size planters differ.

    Build a new instance for every recommendation; cursors must never be
    shared between calls or results would depend on call order.
    """

    def __init__(self, cycles: dict[str, tuple[str, ...]] = PLANT_CYCLES):
        self._cycles = cycles
        self._cursors: dict[str, int] = {size: 0 for size in cycles}

    def next(self, size: PlanterSize) -> Plant:
        cycle = self._cycles[size]
        plant_id = cycle[self._cursors[size] % len(cycle)]
        self._cursors[size] += 1
        return get_plant(plant_id)
