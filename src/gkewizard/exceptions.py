class WizardError(Exception):
    """Base class for every failure that aborts the wizard."""


class ProviderQueryError(WizardError):
    """A listing call against Google Cloud failed or returned nothing usable."""


class InsufficientPermissionError(WizardError):
    """The caller cannot grant IAM roles on the project."""


class NoProjectError(WizardError):
    """No Google Cloud project could be resolved to create the cluster in."""


class InvalidParameterError(WizardError):
    """A resolved cluster parameter is malformed."""


class ExternalCommandError(WizardError):
    """An external command (gcloud, terraform, kubectl) failed."""

    def __init__(self, command: list[str], returncode: int | None, detail: str = ""):
        self.command = command
        self.returncode = returncode
        self.detail = detail
        message = f"'{' '.join(command)}' failed"
        if returncode is not None:
            message += f" with exit code {returncode}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
