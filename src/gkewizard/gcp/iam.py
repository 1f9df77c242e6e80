from google.cloud import iam_admin_v1

from ..clients import get_iam_client
from ..exceptions import ProviderQueryError
from ._errors import QUERY_FAILURES


def count_service_accounts(project_id: str, account_id: str) -> int:
    """
    Counts the service accounts of a project whose email belongs to `account_id`.
    """
    request = iam_admin_v1.ListServiceAccountsRequest(name=f"projects/{project_id}")
    prefix = f"{account_id}@"

    try:
        client = get_iam_client()
        return sum(
            1
            for sa in client.list_service_accounts(request=request)
            if sa.email.startswith(prefix)
        )
    except QUERY_FAILURES as e:
        raise ProviderQueryError(
            f"Failed to list service accounts for {project_id}: {e}"
        ) from e
