from google.cloud import compute_v1

from ..clients import get_machine_types_client, get_zones_client
from ..exceptions import ProviderQueryError
from ..logger import logger
from ._errors import QUERY_FAILURES


def list_zones(project_id: str) -> list[str]:
    """
    Lists the compute zones that are currently UP for a project.
    """
    request = compute_v1.ListZonesRequest(project=project_id)

    zones = []
    try:
        client = get_zones_client()
        # The client library handles pagination automatically when iterating
        for zone in client.list(request=request):
            if zone.status == "UP":
                zones.append(zone.name)
    except QUERY_FAILURES as e:
        raise ProviderQueryError(f"Failed to list zones for {project_id}: {e}") from e

    if not zones:
        raise ProviderQueryError(f"No available zones reported for {project_id}")

    logger.debug(f"Found {len(zones)} zones for {project_id}")
    return sorted(zones)


def list_machine_types(project_id: str, zone: str) -> list[str]:
    """
    Lists the machine type names offered in a zone, e.g. n1-standard-2.
    """
    request = compute_v1.ListMachineTypesRequest(project=project_id, zone=zone)

    machine_types = []
    try:
        client = get_machine_types_client()
        for machine_type in client.list(request=request):
            machine_types.append(machine_type.name)
    except QUERY_FAILURES as e:
        raise ProviderQueryError(
            f"Failed to list machine types in {zone} for {project_id}: {e}"
        ) from e

    if not machine_types:
        raise ProviderQueryError(f"No machine types reported in {zone}")

    logger.debug(f"Found {len(machine_types)} machine types in {zone}")
    return sorted(machine_types)
