from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from .commands import CommandRunner, require_binaries
from .core import (
    CLUSTERS_DIR,
    DEFAULT_MACHINE_TYPE,
    DEFAULT_MAX_NODES,
    DEFAULT_MIN_NODES,
)
from .exceptions import InvalidParameterError
from .gcp import compute
from .identity import IdentityBootstrap
from .labels import build_labels
from .logger import logger
from .naming import generate_cluster_name
from .prompts import ConsolePrompter
from .provisioner import Provisioner, TerraformProvisioner
from .resolver import ParameterResolver, PromptKind, Question
from .schemas.cluster import ClusterFlags, ClusterRequest
from .selector import select_project

EXPERIMENTAL_CONFIRM = Question(
    PromptKind.CONFIRM,
    "Creating a GKE cluster with this wizard is an experimental feature. "
    "Would you like to continue?",
    default=False,
)

ZONE_QUESTION = Question(
    PromptKind.SELECT,
    "Google Cloud Zone:",
    help="The compute zone (e.g. us-central1-a) for the cluster",
)

MACHINE_TYPE_QUESTION = Question(
    PromptKind.SELECT,
    "Google Cloud Machine Type:",
    default=DEFAULT_MACHINE_TYPE,
    help=(
        f"We recommend a minimum of {DEFAULT_MACHINE_TYPE}, a table of machine "
        "descriptions can be found here "
        "https://cloud.google.com/kubernetes-engine/docs/concepts/cluster-architecture"
    ),
)

MIN_NODES_QUESTION = Question(
    PromptKind.INPUT,
    "Minimum number of Nodes",
    default=DEFAULT_MIN_NODES,
    help=(
        f"We recommend a minimum of {DEFAULT_MIN_NODES}, the minimum number of "
        "nodes to be created in each of the cluster's zones"
    ),
)

MAX_NODES_QUESTION = Question(
    PromptKind.INPUT,
    "Maximum number of Nodes",
    default=DEFAULT_MAX_NODES,
    help=(
        f"We recommend at least {DEFAULT_MAX_NODES}, the maximum number of "
        "nodes to be created in each of the cluster's zones"
    ),
)


class ClusterWizard:
    """
    Walks through creating a GKE cluster: resolves every parameter from flags
    or prompts, bootstraps the cluster service account, then hands over to a
    provisioner.
    """

    def __init__(
        self,
        flags: ClusterFlags,
        console: Console | None = None,
        runner: CommandRunner | None = None,
        resolver: ParameterResolver | None = None,
        identity: IdentityBootstrap | None = None,
        provisioner: Provisioner | None = None,
        clusters_dir: Path = CLUSTERS_DIR,
    ) -> None:
        self.flags = flags
        self.console = console or Console(stderr=True)
        self.runner = runner or CommandRunner()
        self.resolver = resolver or ParameterResolver(ConsolePrompter(self.console))
        self.identity = identity or IdentityBootstrap(self.runner, self.console)
        self.provisioner = provisioner or TerraformProvisioner(
            self.runner, self.console, clusters_dir
        )

    def run(self) -> ClusterRequest | None:
        """
        Returns the resolved request once the cluster is provisioned,
        or None when the user backs out at the experimental warning.
        """
        require_binaries(*self.provisioner.binaries)

        if not self.resolver.confirm(EXPERIMENTAL_CONFIRM):
            logger.debug("Experimental cluster creation declined")
            return None

        if not self.flags.skip_login:
            self.runner.run("gcloud", "auth", "login", "--brief", "--update-adc")

        project_id = self.flags.project_id or select_project(
            self.resolver, self.console
        )
        self.runner.run("gcloud", "config", "set", "project", project_id)

        request = self.resolve_request(project_id)

        account = self.identity.ensure_service_account(request.name, project_id)
        self.provisioner.provision(request, account)
        return request

    def resolve_request(self, project_id: str) -> ClusterRequest:
        flags = self.flags
        # a bad --labels value fails before any question is asked
        labels = build_labels(flags.labels)

        name = flags.cluster_name
        if not name:
            name = generate_cluster_name()
            self.console.print(
                f"No cluster name provided so using a generated one: [cyan]{name}[/cyan]"
            )

        zone = self.resolver.resolve_select(
            flags.zone, ZONE_QUESTION, lambda: compute.list_zones(project_id)
        )
        machine_type = self.resolver.resolve_select(
            flags.machine_type,
            MACHINE_TYPE_QUESTION,
            lambda: compute.list_machine_types(project_id, zone),
        )
        min_num_nodes = self.resolver.resolve(flags.min_num_nodes, MIN_NODES_QUESTION)
        max_num_nodes = self.resolver.resolve(flags.max_num_nodes, MAX_NODES_QUESTION)

        values = {
            "name": name,
            "project_id": project_id,
            "zone": zone,
            "machine_type": machine_type,
            "min_num_nodes": min_num_nodes,
            "max_num_nodes": max_num_nodes,
            "image_type": flags.image_type,
            "kubernetes_version": flags.kubernetes_version,
            "cluster_ipv4_cidr": flags.cluster_ipv4_cidr,
            "auto_upgrade": flags.enable_autoupgrade,
            "labels": labels,
        }
        # unset optional flags fall back to the model defaults
        if flags.disk_size:
            values["disk_size_gb"] = flags.disk_size
        if flags.namespace:
            values["namespace"] = flags.namespace

        try:
            request = ClusterRequest(**values)
        except ValidationError as e:
            raise InvalidParameterError(f"Invalid cluster parameters: {e}") from e

        if request.min_num_nodes > request.max_num_nodes:
            logger.warning(
                f"Minimum number of nodes ({request.min_num_nodes}) is greater than "
                f"the maximum ({request.max_num_nodes})"
            )
        return request
