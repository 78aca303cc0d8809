"""Speed Insights tools."""

from typing import List

from .endpoint import Endpoint, body_param, register_endpoints

ENDPOINTS = [
    Endpoint(
        name="send_web_vitals",
        description="Send web vitals metrics to Vercel Speed Insights",
        method="POST",
        path="/v1/vitals",
        team_scoped=False,
        params=[
            body_param("dsn", "Speed Insights DSN", required=True),
            body_param("event_name", "Metric name (FCP, LCP, CLS, FID, TTFB, INP)", required=True),
            body_param("href", "Page URL", required=True),
            body_param("id", "Metric ID", required=True),
            body_param("page", "Page route", required=True),
            body_param("speed", "Connection speed", required=True),
            body_param("value", "Metric value", type="number", required=True),
        ],
    ),
]


def register_speed_insights_tools(host, client) -> List[str]:
    """Register Speed Insights tools."""
    return register_endpoints(host, client, ENDPOINTS)
