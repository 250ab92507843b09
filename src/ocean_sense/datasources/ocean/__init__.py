"""Gridded ocean-parameter data source.

Public API:
  - client: PARAMETERS (sst, chl, salinity with units)
  - parameters: fetch_parameters, flatten_parameters
"""

from ocean_sense.datasources.ocean.client import PARAMETERS
from ocean_sense.datasources.ocean.parameters import fetch_parameters, flatten_parameters

__all__ = ["PARAMETERS", "fetch_parameters", "flatten_parameters"]
