"""Remote cache artifact tools."""

from typing import List

from .endpoint import Endpoint, body_param, path_param, register_endpoints

HASH = path_param("hash", "The artifact hash")

ENDPOINTS = [
    Endpoint(
        name="check_artifact",
        description="Check that a cache artifact exists",
        method="HEAD",
        path="/v8/artifacts/{hash}",
        params=[HASH],
    ),
    Endpoint(
        name="download_artifact",
        description="Download a cache artifact",
        path="/v8/artifacts/{hash}",
        params=[HASH],
    ),
    Endpoint(
        name="get_artifact_status",
        description="Check the status of remote caching for the team",
        path="/v8/artifacts/status",
    ),
    Endpoint(
        name="query_artifacts",
        description="Query information about a list of artifacts",
        method="POST",
        path="/v8/artifacts",
        params=[
            body_param("hashes", "Artifact hashes to query", type="array",
                       items={"type": "string"}, required=True),
        ],
    ),
    Endpoint(
        name="record_artifact_events",
        description="Record cache usage events (HIT/MISS)",
        method="POST",
        path="/v8/artifacts/events",
        params=[
            body_param("events", "Cache events ({sessionId, source, event, hash, duration})",
                       type="array", items={"type": "object"}, required=True),
        ],
    ),
    Endpoint(
        name="upload_artifact",
        description="Upload a cache artifact",
        method="PUT",
        path="/v8/artifacts/{hash}",
        params=[
            HASH,
            body_param("content", "Artifact content", required=True),
            body_param("duration", "Time taken to generate the artifact in ms", type="integer"),
            body_param("tag", "Signature of the artifact"),
        ],
    ),
]


def register_artifact_tools(host, client) -> List[str]:
    """Register artifact tools."""
    return register_endpoints(host, client, ENDPOINTS)
