from colprov.provisioning.provisioner import ColumnProvisioner, provision_or_fail
from colprov.provisioning.types import ColumnRequest, ColumnType, ProvisionResult, resolve_storage_type
from colprov.provisioning.validation import validate_column_name

__all__ = [
    "ColumnProvisioner",
    "ColumnRequest",
    "ColumnType",
    "ProvisionResult",
    "provision_or_fail",
    "resolve_storage_type",
    "validate_column_name",
]
