import os
from pathlib import Path

# Defaults offered when prompting for cluster parameters
DEFAULT_MACHINE_TYPE = "n1-standard-2"
DEFAULT_MIN_NODES = "3"
DEFAULT_MAX_NODES = "5"
DEFAULT_DISK_SIZE_GB = 100
DEFAULT_NAMESPACE = "jx"

# Service accounts are named after the cluster they serve
# e.g. cluster "pinkcougar" -> jx-pinkcougar
SERVICE_ACCOUNT_PREFIX = "jx-"

# Roles bound to a freshly created cluster service account
REQUIRED_SERVICE_ACCOUNT_ROLES = (
    "roles/compute.instanceAdmin.v1",
    "roles/iam.serviceAccountActor",
    "roles/container.clusterAdmin",
)

# Permission the caller needs to grant the roles above
SET_IAM_POLICY_PERMISSION = "resourcemanager.projects.setIamPolicy"

# Label names must begin with a lowercase letter, end with a lowercase
# alphanumeric and contain only lowercase alphanumerics and dashes between.
LABEL_KEY_PATTERN = r"^[a-z]([-a-z0-9]*[a-z0-9])?$"
CREATED_BY_LABEL = "created-by"

# Local working area for keys, terraform config and state
# ~/.jx/clusters/<name>/{jx-<name>.key.json, <name>.tfstate, terraform/}
CLUSTERS_DIR = Path(
    os.environ.get("GKEWIZARD_CLUSTERS_DIR", Path.home() / ".jx" / "clusters")
)

PROVISIONERS = ("terraform", "gcloud")
