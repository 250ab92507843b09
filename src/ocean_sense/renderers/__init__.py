"""Pure rendering functions: structured data -> HTML strings / CSV text.

All renderers follow the same pattern:
  - Input: series, clusters, samples or records (from analysis/)
  - Output: str (HTML fragment, not a full page; or CSV text)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which orchestrates the rendering pipeline, and by the
CLI ``export`` command.

Public API:
  - series_chart: build_series_chart_html, build_scatter_html
  - cluster_map: build_cluster_map_html
  - panels: build_top_labels_html, build_feed_status_html
  - export_csv: EXPORT_COLUMNS, build_export_csv

Adding a renderer (UI module)
-----------------------------
1. Create ``renderers/{name}.py`` with a build function that returns
   ``render_template("{name}.html.j2", ...)``.
2. Create the Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments (no <html>/<body> tags).
3. Wire into ``flows/build.py`` and add the placeholder in
   ``templates/base.html.j2``.
4. Add tests asserting the returned HTML contains expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
