"""Pure rendering functions: forecast data + UI selections -> HTML strings.

All renderers follow the same pattern:
  - Input: models from ``weather_dashboard.schemas`` plus the active
    selections (day index, unit)
  - Output: str (HTML fragment, a full region, never a patch)
  - No side effects, no I/O; identical inputs give identical output

Used by ``viewmodel.WeatherViewModel`` which re-renders every region after
each user action.

Public API:
  - conditions: build_conditions_html
  - day_strip: build_day_strip_html
  - page: build_page_html
  - weather_utils: format_temp, format_number, yes_no
  - date_utils: long_date_label, short_weekday, hour_label
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
