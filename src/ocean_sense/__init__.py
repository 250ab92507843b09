"""Ocean Sense - fisheries, cyclone and ocean-parameter explorer for the North Indian Ocean.

Architecture::

    datasources/   External feeds (OBIS occurrences, IMD tables, cyclone tracks, ocean grids)
    store.py       Tiered cache with TTL (reference → historical → live → derived)
    analysis/      Normalizer, aggregator, correlator (pure functions over CanonicalRecord)
    snapshot.py    Sequence-tagged per-feed snapshots of normalized records
    renderers/     Pure data → HTML/CSV (series charts, cluster map, export)
    flows/         Prefect orchestration (fetch checks freshness, build renders site)
    services/      Shared utilities (HTTP client with retry, CSV parsing, assistant)

Data flow: datasources → store (cache) → normalizer → snapshot board →
aggregator/correlator → renderers → derived/site/

Extension points — see each package's docstring for step-by-step guides:
  - New data source:   datasources/__init__.py
  - New analysis:      analysis/__init__.py
  - New UI module:     renderers/__init__.py
"""

__version__ = "0.1.0"

from ocean_sense.config import Settings
from ocean_sense.schemas import CanonicalRecord, FilterState, SourceKind

__all__ = ["CanonicalRecord", "FilterState", "Settings", "SourceKind", "__version__"]
