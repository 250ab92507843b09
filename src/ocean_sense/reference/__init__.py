"""Static constants for the Ocean Sense feeds.

Reference data that doesn't change with API calls: field alias tables,
cyclone season names, geographic bounds.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from ocean_sense.reference.geography import NORTH_INDIAN_OCEAN as NORTH_INDIAN_OCEAN
from ocean_sense.reference.geography import BoundingBox as BoundingBox
from ocean_sense.reference.seasons import SEASONS as SEASONS
from ocean_sense.reference.seasons import canonical_season as canonical_season
