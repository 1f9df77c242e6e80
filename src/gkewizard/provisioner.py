from abc import ABC, abstractmethod
from pathlib import Path

import jinja2
from rich.console import Console

from .commands import CommandRunner
from .labels import format_labels_argument
from .logger import logger
from .schemas.cluster import ClusterRequest
from .schemas.identity import ServiceAccountState

TERRAFORM_TEMPLATES = ("main.tf", "variables.tf", "outputs.tf", "terraform.tfvars")


class Provisioner(ABC):
    """
    Hands a resolved ClusterRequest to an external tool and points kubectl
    at the new cluster.

    Local layout per cluster:
      <clusters_dir>/<name>/jx-<name>.key.json
      <clusters_dir>/<name>/<name>.tfstate
      <clusters_dir>/<name>/terraform/{main,variables,outputs}.tf, terraform.tfvars
    """

    binaries: tuple[str, ...] = ("gcloud", "kubectl")

    def __init__(
        self, runner: CommandRunner, console: Console, clusters_dir: Path
    ) -> None:
        self.runner = runner
        self.console = console
        self.clusters_dir = Path(clusters_dir)

    def cluster_dir(self, request: ClusterRequest) -> Path:
        return self.clusters_dir / request.name

    @abstractmethod
    def provision(self, request: ClusterRequest, account: ServiceAccountState) -> None:
        """Creates the cluster described by `request` as `account`."""

    def connect(self, request: ClusterRequest) -> None:
        """Fetches credentials and sets the namespace of the new kube context."""
        self.console.print("Initialising cluster ...")
        self.runner.run(
            "gcloud",
            "container",
            "clusters",
            "get-credentials",
            request.name,
            "--zone",
            request.zone,
            "--project",
            request.project_id,
        )

        context = self.runner.output("kubectl", "config", "current-context")
        self.runner.run(
            "kubectl", "config", "set-context", context, "--namespace", request.namespace
        )
        self.console.print(
            f"[green]Cluster {request.name} is ready, kube context "
            f"{context} uses namespace {request.namespace}[/green]"
        )


class GcloudProvisioner(Provisioner):
    """Creates the cluster with a single gcloud container clusters create."""

    def create_args(self, request: ClusterRequest) -> list[str]:
        args = [
            "gcloud",
            "container",
            "clusters",
            "create",
            request.name,
            "--zone",
            request.zone,
            "--project",
            request.project_id,
            "--num-nodes",
            str(request.min_num_nodes),
            "--machine-type",
            request.machine_type,
            "--enable-autoscaling",
            "--min-nodes",
            str(request.min_num_nodes),
            "--max-nodes",
            str(request.max_num_nodes),
            "--disk-size",
            str(request.disk_size_gb),
        ]
        if request.image_type:
            args += ["--image-type", request.image_type]
        if request.kubernetes_version:
            args += ["--cluster-version", request.kubernetes_version]
        if request.cluster_ipv4_cidr:
            args += ["--cluster-ipv4-cidr", request.cluster_ipv4_cidr]
        if request.auto_upgrade:
            args.append("--enable-autoupgrade")
        if request.labels:
            args.append(format_labels_argument(request.labels))
        return args

    def provision(self, request: ClusterRequest, account: ServiceAccountState) -> None:
        self.console.print(f"Creating cluster {request.name} ...")
        self.runner.run(*self.create_args(request))
        self.connect(request)


class TerraformProvisioner(Provisioner):
    """Renders a terraform configuration for the cluster, then plans and applies it."""

    binaries = ("gcloud", "kubectl", "terraform")

    def __init__(
        self,
        runner: CommandRunner,
        console: Console,
        clusters_dir: Path,
        template_dir: Path | None = None,
    ) -> None:
        super().__init__(runner, console, clusters_dir)
        template_dir = template_dir or Path(__file__).parent / "templates" / "terraform"
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
        )

    def key_path(self, request: ClusterRequest, account: ServiceAccountState) -> Path:
        return self.cluster_dir(request) / f"{account.account_id}.key.json"

    def state_path(self, request: ClusterRequest) -> Path:
        return self.cluster_dir(request) / f"{request.name}.tfstate"

    def terraform_dir(self, request: ClusterRequest) -> Path:
        return self.cluster_dir(request) / "terraform"

    def ensure_key(self, request: ClusterRequest, account: ServiceAccountState) -> Path:
        """Downloads a key for the service account unless one is already on disk."""
        key_path = self.key_path(request, account)
        if key_path.exists():
            logger.debug(f"Reusing service account key {key_path}")
            return key_path

        key_path.parent.mkdir(parents=True, exist_ok=True)
        self.console.print(f"Downloading service account key to {key_path}")
        self.runner.run(
            "gcloud",
            "iam",
            "service-accounts",
            "keys",
            "create",
            str(key_path),
            "--iam-account",
            account.email,
        )
        return key_path

    def render(self, request: ClusterRequest, key_path: Path) -> Path:
        tf_dir = self.terraform_dir(request)
        tf_dir.mkdir(parents=True, exist_ok=True)

        context = {
            "request": request,
            "key_path": str(key_path),
            "state_path": str(self.state_path(request)),
        }
        for name in TERRAFORM_TEMPLATES:
            template = self.env.get_template(f"{name}.j2")
            (tf_dir / name).write_text(template.render(**context))
            logger.debug(f"Wrote {tf_dir / name}")
        return tf_dir

    def provision(self, request: ClusterRequest, account: ServiceAccountState) -> None:
        key_path = self.ensure_key(request, account)
        tf_dir = self.render(request, key_path)
        plan_file = f"{request.name}.tfplan"

        self.console.print(f"Creating cluster {request.name} with terraform ...")
        self.runner.run("terraform", "init", "-input=false", cwd=tf_dir)
        self.runner.run(
            "terraform", "plan", "-input=false", f"-out={plan_file}", cwd=tf_dir
        )
        self.runner.run("terraform", "apply", "-input=false", plan_file, cwd=tf_dir)
        self.connect(request)


PROVISIONER_CLASSES: dict[str, type[Provisioner]] = {
    "terraform": TerraformProvisioner,
    "gcloud": GcloudProvisioner,
}


def get_provisioner(
    kind: str, runner: CommandRunner, console: Console, clusters_dir: Path
) -> Provisioner:
    return PROVISIONER_CLASSES[kind](runner, console, clusters_dir)
