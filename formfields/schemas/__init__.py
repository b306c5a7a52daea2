from .dropdown import DropdownFieldConfig, DropdownOption, default_options
from .subfields import SubfieldFieldConfig, SubfieldSettings
from .table import ColumnDefinition, TableFieldConfig

__all__ = [
    "ColumnDefinition",
    "DropdownFieldConfig",
    "DropdownOption",
    "SubfieldFieldConfig",
    "SubfieldSettings",
    "TableFieldConfig",
    "default_options",
]
