"""
Form field types

Public API:
    FieldMeta           — field type metadata dataclass
    FieldBase           — abstract base class for all field types
    TableField          — rows of typed cells
    DropdownField       — single or multiple choice
    SingleLineTextField — one line of text
    SubfieldField       — composite of named subfields
    FieldTypeRegistry   — slug -> field class lookup
    field_registry      — global registry holding the built-in types
"""

from .base import FieldBase, FieldMeta
from .dropdown import DropdownField
from .registry import FieldTypeRegistry, field_registry
from .subfields import DateAmPmDropdown, NameFirst, Subfield, SubfieldField
from .table import AddRowControl, TableField
from .text import SingleLineTextField

__all__ = [
    "AddRowControl",
    "DateAmPmDropdown",
    "DropdownField",
    "FieldBase",
    "FieldMeta",
    "FieldTypeRegistry",
    "NameFirst",
    "SingleLineTextField",
    "Subfield",
    "SubfieldField",
    "TableField",
    "field_registry",
]
