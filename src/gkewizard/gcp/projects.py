from google.cloud import resourcemanager_v3
from google.iam.v1 import iam_policy_pb2

from ..clients import get_projects_client
from ..exceptions import ProviderQueryError
from ..logger import logger
from ._errors import QUERY_FAILURES


def list_projects() -> list[str]:
    """
    Lists all ACTIVE projects that the current user has access to.
    Returns a sorted list of project_id strings.
    """
    projects = []
    try:
        client = get_projects_client()

        # No parent given, so every project the caller can see is searched
        request = resourcemanager_v3.SearchProjectsRequest(query="state:ACTIVE")

        for project in client.search_projects(request=request):
            projects.append(project.project_id)
    except QUERY_FAILURES as e:
        raise ProviderQueryError(f"Failed to list Google Cloud projects: {e}") from e

    logger.debug(f"Found {len(projects)} active projects")
    return sorted(projects)


def caller_has_permission(project_id: str, permission: str) -> bool:
    """
    Asks IAM whether the current caller holds `permission` on the project.
    """
    try:
        client = get_projects_client()
        request = iam_policy_pb2.TestIamPermissionsRequest(
            resource=f"projects/{project_id}", permissions=[permission]
        )
        response = client.test_iam_permissions(request=request)
    except QUERY_FAILURES as e:
        raise ProviderQueryError(
            f"Failed to test permission {permission} on {project_id}: {e}"
        ) from e

    return permission in response.permissions
