from __future__ import annotations

from functools import lru_cache
from typing import Any

from google.cloud import compute_v1, iam_admin_v1, resourcemanager_v3

# Shared Client Registry (Lazy-loaded and cached)


@lru_cache(maxsize=1)
def get_projects_client() -> Any:
    return resourcemanager_v3.ProjectsClient()


@lru_cache(maxsize=1)
def get_zones_client() -> Any:
    return compute_v1.ZonesClient()


@lru_cache(maxsize=1)
def get_machine_types_client() -> Any:
    return compute_v1.MachineTypesClient()


@lru_cache(maxsize=1)
def get_iam_client() -> Any:
    return iam_admin_v1.IAMClient()
