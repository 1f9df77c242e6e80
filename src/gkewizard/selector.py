from collections.abc import Callable

from rich.console import Console

from .exceptions import NoProjectError
from .gcp import projects
from .resolver import ParameterResolver, PromptKind, Question

CREATE_PROJECT = Question(
    PromptKind.CONFIRM,
    "No existing Google Projects exist, create one now?",
    default=True,
)

SELECT_PROJECT = Question(
    PromptKind.SELECT,
    "Google Cloud Project:",
    help="Select a Google Project to create the cluster in",
)


def select_project(
    resolver: ParameterResolver,
    console: Console,
    fetch_projects: Callable[[], list[str]] | None = None,
) -> str:
    """
    Asks to choose from the existing projects.
    A single project is picked without asking.
    """
    existing = (fetch_projects or projects.list_projects)()

    project_id = ""
    if not existing:
        if not resolver.confirm(CREATE_PROJECT):
            raise NoProjectError(
                "No Google Cloud Project to create cluster in, "
                "please manually create one and rerun this wizard"
            )
        raise NotImplementedError(
            "Auto creating projects is not yet implemented, "
            "please manually create one and rerun the wizard"
        )
    elif len(existing) == 1:
        project_id = existing[0]
        console.print(
            f"Using the only Google Cloud Project [cyan]{project_id}[/cyan] "
            "to create the cluster"
        )
    else:
        project_id = resolver.resolve_select("", SELECT_PROJECT, lambda: existing)

    if not project_id:
        raise NoProjectError(
            "No Google Cloud Project to create cluster in, "
            "please manually create one and rerun this wizard"
        )
    return project_id
