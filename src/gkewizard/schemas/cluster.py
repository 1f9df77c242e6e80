from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from ..core import DEFAULT_DISK_SIZE_GB, DEFAULT_NAMESPACE


class ClusterFlags(BaseModel):
    """Raw command line values; an empty string means "not given"."""

    cluster_name: str = ""
    zone: str = ""
    machine_type: str = ""
    min_num_nodes: str = ""
    max_num_nodes: str = ""
    project_id: str = ""
    disk_size: str = ""
    image_type: str = ""
    kubernetes_version: str = ""
    cluster_ipv4_cidr: str = ""
    namespace: str = ""
    labels: str = ""
    enable_autoupgrade: bool = False
    skip_login: bool = False


class ClusterRequest(BaseModel):
    """The fully resolved parameter set handed to a provisioner."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    project_id: str = Field(min_length=1)
    zone: str = Field(min_length=1)
    machine_type: str = Field(min_length=1)
    min_num_nodes: PositiveInt
    max_num_nodes: PositiveInt
    disk_size_gb: PositiveInt = DEFAULT_DISK_SIZE_GB
    image_type: str = ""
    kubernetes_version: str = ""
    cluster_ipv4_cidr: str = ""
    namespace: str = DEFAULT_NAMESPACE
    auto_upgrade: bool = False
    labels: dict[str, str] = Field(default_factory=dict)
