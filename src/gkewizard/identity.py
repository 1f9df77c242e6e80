from collections.abc import Sequence

from rich.console import Console

from .commands import CommandRunner
from .core import (
    REQUIRED_SERVICE_ACCOUNT_ROLES,
    SERVICE_ACCOUNT_PREFIX,
    SET_IAM_POLICY_PERMISSION,
)
from .exceptions import InsufficientPermissionError
from .gcp import iam, projects
from .logger import logger
from .schemas.identity import ServiceAccountState


def service_account_id(cluster_name: str) -> str:
    return f"{SERVICE_ACCOUNT_PREFIX}{cluster_name}"


class IdentityBootstrap:
    """
    Makes sure the cluster's service account exists and carries the roles
    the provisioner needs.

    Role bindings are applied one by one; the first failure propagates and
    roles already bound stay bound.
    """

    def __init__(
        self,
        runner: CommandRunner,
        console: Console,
        roles: Sequence[str] = REQUIRED_SERVICE_ACCOUNT_ROLES,
        permission: str = SET_IAM_POLICY_PERMISSION,
    ) -> None:
        self.runner = runner
        self.console = console
        self.roles = tuple(roles)
        self.permission = permission

    def lookup(self, cluster_name: str, project_id: str) -> ServiceAccountState:
        account_id = service_account_id(cluster_name)
        count = iam.count_service_accounts(project_id, account_id)
        logger.debug(f"{count} service accounts match {account_id} in {project_id}")
        return ServiceAccountState(
            account_id=account_id, project_id=project_id, exists=count > 0
        )

    def ensure_service_account(
        self, cluster_name: str, project_id: str
    ) -> ServiceAccountState:
        self.console.print(
            f"Checking for service account {service_account_id(cluster_name)}"
        )
        account = self.lookup(cluster_name, project_id)

        if account.exists:
            self.console.print("Service Account exists")
            return account

        self.console.print(
            f"Unable to find service account {account.account_id}, "
            "checking if we have enough permission to create"
        )
        if not projects.caller_has_permission(project_id, self.permission):
            raise InsufficientPermissionError(
                f"User does not have the required permission '{self.permission}' "
                "to configure a service account"
            )

        self.console.print(f"Creating service account {account.account_id}")
        self.runner.run(
            "gcloud",
            "iam",
            "service-accounts",
            "create",
            account.account_id,
            "--project",
            project_id,
        )

        for role in self.roles:
            self.console.print(f"Assigning role {role}")
            self.runner.run(
                "gcloud",
                "projects",
                "add-iam-policy-binding",
                project_id,
                "--member",
                account.member,
                "--role",
                role,
            )

        return account.model_copy(update={"exists": True})
