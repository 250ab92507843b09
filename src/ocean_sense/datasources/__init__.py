"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, pagination
    └── {feature}.py      # Fetch/flatten functions (one per endpoint/concept)

Datasources return *raw rows* (dicts as the source shaped them, flattened to
one row per observation). They never normalize; that happens in
``analysis.normalizer`` so every feed shares one set of field rules.

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``ocean/`` for a minimal example, ``fisheries/`` for a richer one.

2. Write fetch functions on the shared helpers::

       from ocean_sense.services.http import get_json

       def fetch_something(url) -> list[dict[str, Any]]:
           return unwrap_records(get_json(url))

   Failures surface as ``SourceUnavailableError``.

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into the pipeline (see ``flows/fetch.py``):
   - Add a ``@task`` that calls your fetch function
   - Pick a store tier + path (e.g. ``live/mydata.json``)
   - Add a ``Feed`` member and load it in ``flows/build.py``

5. Add tests in ``tests/test_{name}.py``.
"""
