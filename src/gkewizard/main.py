import argparse
import logging
import sys
from importlib.metadata import version
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .commands import CommandRunner
from .core import CLUSTERS_DIR, PROVISIONERS
from .exceptions import WizardError
from .logger import logger
from .provisioner import get_provisioner
from .schemas.cluster import ClusterFlags
from .wizard import ClusterWizard


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose (debug) logging"
    )


def _add_create_cluster_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--provisioner",
        choices=PROVISIONERS,
        default="terraform",
        help="Tool used to create the cluster (default: terraform)",
    )
    parser.add_argument(
        "--clusters-dir",
        type=Path,
        default=CLUSTERS_DIR,
        help=f"Where keys, terraform config and state are kept (default: {CLUSTERS_DIR})",
    )


def _add_cluster_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-n",
        "--cluster-name",
        default="",
        help="The name of this cluster, default is a random generated name",
    )
    parser.add_argument(
        "--cluster-ipv4-cidr",
        default="",
        help="The IP address range for the pods in this cluster in CIDR notation "
        "(e.g. 10.0.0.0/14)",
    )
    parser.add_argument(
        "-v",
        "--kubernetes-version",
        default="",
        help="The Kubernetes version to use for the master and nodes. "
        "Defaults to server-specified",
    )
    parser.add_argument(
        "-d",
        "--disk-size",
        default="",
        help="Size in GB for node VM boot disks. Defaults to 100GB",
    )
    parser.add_argument(
        "--enable-autoupgrade",
        action="store_true",
        help="Sets autoupgrade feature for a cluster's default node-pool(s)",
    )
    parser.add_argument(
        "--image-type", default="", help="The image type to use for the cluster nodes"
    )
    parser.add_argument(
        "-m", "--machine-type", default="", help="The type of machine to use for nodes"
    )
    parser.add_argument(
        "--min-num-nodes",
        default="",
        help="The minimum number of nodes to be created in each of the cluster's zones",
    )
    parser.add_argument(
        "--max-num-nodes",
        default="",
        help="The maximum number of nodes to be created in each of the cluster's zones",
    )
    parser.add_argument(
        "-p", "--project-id", default="", help="Google Project ID to create cluster in"
    )
    parser.add_argument(
        "-z",
        "--zone",
        default="",
        help="The compute zone (e.g. us-central1-a) for the cluster",
    )
    parser.add_argument(
        "--namespace",
        default="",
        help="The namespace the kube context of the new cluster points at "
        "(default: jx)",
    )
    parser.add_argument(
        "--skip-login",
        action="store_true",
        help="Skip Google auth if already logged in via gcloud auth",
    )
    parser.add_argument(
        "--labels",
        default="",
        help="The labels to add to the cluster being created such as "
        "'foo=bar,whatnot=123'. Label names must begin with a lowercase "
        "character ([a-z]), end with a lowercase alphanumeric ([a-z0-9]) with "
        "dashes (-), and lowercase alphanumeric ([a-z0-9]) between.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="gkewizard: create a GKE cluster interactively",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Answer every question interactively
  gkewizard create

  # Skip the prompts that flags already answer
  gkewizard create --project-id my-project --zone us-central1-a -n mycluster

  # Create the cluster with gcloud instead of terraform
  gkewizard create --provisioner gcloud --labels team=platform
""",
    )
    try:
        ver = version("gkewizard")
    except Exception:
        ver = "unknown"
    parser.add_argument("--version", action="version", version=f"gkewizard v{ver}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    create = subparsers.add_parser(
        "create",
        help="Create a new Kubernetes cluster on GKE",
        description="Creates a new Kubernetes cluster on Google Kubernetes Engine, "
        "setting up the service account it runs as.",
    )
    _add_cluster_flags(create)
    _add_create_cluster_flags(create)
    _add_common_flags(create)
    return parser


def flags_from_args(args: argparse.Namespace) -> ClusterFlags:
    return ClusterFlags(
        **{name: getattr(args, name) for name in ClusterFlags.model_fields}
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    console = Console(stderr=True)
    runner = CommandRunner()
    provisioner = get_provisioner(args.provisioner, runner, console, args.clusters_dir)
    wizard = ClusterWizard(
        flags_from_args(args),
        console=console,
        runner=runner,
        provisioner=provisioner,
    )

    try:
        request = wizard.run()
    except (WizardError, NotImplementedError) as e:
        logger.error(f"error creating cluster: {escape(str(e))}")
        sys.exit(1)

    if request is None:
        console.print("[yellow]Aborted.[/yellow]")


def cli() -> None:
    try:
        main()
    except KeyboardInterrupt:
        console = Console(stderr=True)
        console.print("\n[bold red]Operation cancelled by user.[/bold red]")
        sys.exit(130)


if __name__ == "__main__":
    cli()
