"""Full dashboard page: search form, content regions, tabs and canvases.

Chart configs are embedded as JSON; the page script hands each one to
Chart.js for its canvas.
"""

from __future__ import annotations

import json
from typing import Any

from weather_dashboard.config import DashboardLayout
from weather_dashboard.renderers import render_template
from weather_dashboard.schemas import Metric

CHART_JS_URL = "https://cdn.jsdelivr.net/npm/chart.js"


def _charts_json(charts: dict[str, dict[str, Any]]) -> str:
    # "</" would close the <script> element early
    return json.dumps(charts, ensure_ascii=False).replace("</", "<\\/")


def build_page_html(
    *,
    app_name: str,
    layout: DashboardLayout,
    canvas_ids: list[str],
    charts: dict[str, dict[str, Any]],
    active_metric: Metric,
    weather_info_html: str = "",
    forecast_html: str = "",
    content_visible: bool = False,
    notifications: list[str] | None = None,
    location_query: str = "",
) -> str:
    """Assemble the complete HTML document.

    Args:
        app_name: Page title.
        layout: Tabs (one shared canvas) or panels (one canvas per metric).
        canvas_ids: Canvas elements to emit, in page order.
        charts: Live chart config per canvas id.
        active_metric: Tab marked active in the tabs layout.
        weather_info_html: Rendered conditions panel.
        forecast_html: Rendered day strip.
        content_visible: False until the first successful search.
        notifications: Messages shown once at the top of the page.
        location_query: Prefill for the search box.
    """
    tabs = [
        {"value": m.value, "label": m.label, "active": m is active_metric}
        for m in Metric
    ]
    return render_template(
        "base.html.j2",
        app_name=app_name,
        show_tabs=layout is DashboardLayout.TABS,
        tabs=tabs,
        canvas_ids=canvas_ids,
        charts_json=_charts_json(charts),
        chart_js_url=CHART_JS_URL,
        weather_info=weather_info_html,
        forecast=forecast_html,
        content_visible=content_visible,
        notifications=notifications or [],
        location_query=location_query,
    )
