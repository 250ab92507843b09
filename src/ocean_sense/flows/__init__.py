"""
Prefect flows for the data pipeline.

Flows:
- fetch: Download raw rows for every feed (OBIS fisheries, species registry,
  IMD seasonal tables, cyclone tracks, ocean parameters) into the store
- build: Normalize, aggregate and correlate the cached rows, then render the
  static site and the CSV export

Usage (local):
    python -m ocean_sense.flows.fetch
    python -m ocean_sense.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'fetch-data/default'
"""
