from unittest.mock import MagicMock, call

import pytest

from gkewizard.commands import CommandRunner
from gkewizard.core import REQUIRED_SERVICE_ACCOUNT_ROLES
from gkewizard.exceptions import ExternalCommandError, InsufficientPermissionError
from gkewizard.identity import IdentityBootstrap, service_account_id

EMAIL = "jx-pinkcougar@my-project.iam.gserviceaccount.com"


@pytest.fixture
def runner():
    return MagicMock(spec=CommandRunner)


def test_service_account_id():
    assert service_account_id("pinkcougar") == "jx-pinkcougar"


def test_existing_account_is_left_alone(mocker, runner):
    mocker.patch("gkewizard.identity.iam.count_service_accounts", return_value=1)
    mock_perm = mocker.patch("gkewizard.identity.projects.caller_has_permission")

    account = IdentityBootstrap(runner, MagicMock()).ensure_service_account(
        "pinkcougar", "my-project"
    )

    assert account.exists
    assert account.email == EMAIL
    runner.run.assert_not_called()
    mock_perm.assert_not_called()


def test_missing_account_without_permission(mocker, runner):
    mocker.patch("gkewizard.identity.iam.count_service_accounts", return_value=0)
    mocker.patch(
        "gkewizard.identity.projects.caller_has_permission", return_value=False
    )

    with pytest.raises(InsufficientPermissionError):
        IdentityBootstrap(runner, MagicMock()).ensure_service_account(
            "pinkcougar", "my-project"
        )

    runner.run.assert_not_called()


def test_missing_account_created_and_roles_bound(mocker, runner):
    mocker.patch("gkewizard.identity.iam.count_service_accounts", return_value=0)
    mock_perm = mocker.patch(
        "gkewizard.identity.projects.caller_has_permission", return_value=True
    )

    account = IdentityBootstrap(runner, MagicMock()).ensure_service_account(
        "pinkcougar", "my-project"
    )

    assert account.exists
    mock_perm.assert_called_once_with(
        "my-project", "resourcemanager.projects.setIamPolicy"
    )

    expected = [
        call(
            "gcloud", "iam", "service-accounts", "create", "jx-pinkcougar",
            "--project", "my-project",
        )
    ] + [
        call(
            "gcloud", "projects", "add-iam-policy-binding", "my-project",
            "--member", f"serviceAccount:{EMAIL}", "--role", role,
        )
        for role in REQUIRED_SERVICE_ACCOUNT_ROLES
    ]
    assert runner.run.call_args_list == expected


def test_injected_roles(mocker, runner):
    mocker.patch("gkewizard.identity.iam.count_service_accounts", return_value=0)
    mocker.patch("gkewizard.identity.projects.caller_has_permission", return_value=True)

    IdentityBootstrap(
        runner, MagicMock(), roles=["roles/viewer"]
    ).ensure_service_account("pinkcougar", "my-project")

    assert runner.run.call_count == 2
    assert runner.run.call_args_list[-1].args[-1] == "roles/viewer"


def test_role_binding_failure_stops_immediately(mocker, runner):
    mocker.patch("gkewizard.identity.iam.count_service_accounts", return_value=0)
    mocker.patch("gkewizard.identity.projects.caller_has_permission", return_value=True)

    # creation works, first binding fails
    runner.run.side_effect = [None, ExternalCommandError(["gcloud"], 1)]

    with pytest.raises(ExternalCommandError):
        IdentityBootstrap(runner, MagicMock()).ensure_service_account(
            "pinkcougar", "my-project"
        )

    assert runner.run.call_count == 2
