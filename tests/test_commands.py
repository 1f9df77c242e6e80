import pytest

from gkewizard.commands import CommandRunner, require_binaries
from gkewizard.exceptions import ExternalCommandError


def test_run_success(mocker):
    mock_run = mocker.patch("subprocess.run")
    mock_run.return_value.returncode = 0

    CommandRunner().run("gcloud", "config", "set", "project", "p1")

    cmd = mock_run.call_args[0][0]
    assert cmd == ["gcloud", "config", "set", "project", "p1"]


def test_run_non_zero_exit(mocker):
    mock_run = mocker.patch("subprocess.run")
    mock_run.return_value.returncode = 2

    with pytest.raises(ExternalCommandError) as exc:
        CommandRunner().run("terraform", "apply")

    assert exc.value.returncode == 2
    assert "terraform apply" in str(exc.value)


def test_run_missing_binary(mocker):
    mocker.patch("subprocess.run", side_effect=FileNotFoundError("kubectl"))

    with pytest.raises(ExternalCommandError):
        CommandRunner().run("kubectl", "get", "ingress")


def test_output_captures_stdout(mocker, tmp_path):
    mock_run = mocker.patch("subprocess.run")
    mock_run.return_value.returncode = 0
    mock_run.return_value.stdout = "gke_p1_us-west1-b_pinkcougar\n"

    result = CommandRunner().output("kubectl", "config", "current-context", cwd=tmp_path)

    assert result == "gke_p1_us-west1-b_pinkcougar"
    assert mock_run.call_args.kwargs["capture_output"] is True
    assert mock_run.call_args.kwargs["cwd"] == tmp_path


def test_output_failure_reports_last_stderr_line(mocker):
    mock_run = mocker.patch("subprocess.run")
    mock_run.return_value.returncode = 1
    mock_run.return_value.stderr = "WARNING: something\nERROR: no current context\n"

    with pytest.raises(ExternalCommandError) as exc:
        CommandRunner().output("kubectl", "config", "current-context")

    assert exc.value.detail == "ERROR: no current context"


def test_require_binaries(mocker):
    mocker.patch(
        "gkewizard.commands.shutil.which",
        side_effect=lambda name: None if name == "terraform" else f"/usr/bin/{name}",
    )

    require_binaries("gcloud", "kubectl")
    with pytest.raises(ExternalCommandError) as exc:
        require_binaries("gcloud", "terraform")
    assert exc.value.command == ["terraform"]


def test_output_tolerates_undecodable_bytes(mocker):
    mock_run = mocker.patch("subprocess.run")
    mock_run.return_value.returncode = 0
    mock_run.return_value.stdout = "ctx-�\n"

    assert CommandRunner().output("kubectl", "config", "current-context") == "ctx-�"
    assert mock_run.call_args.kwargs["errors"] == "replace"
