"""
bindgen: naming and caching helpers for data-binding code generation
====================================================================

Examples:
    from bindgen import LayoutNames, to_camel_case, to_camel_case_as_var

    to_camel_case("activity_main")         # "ActivityMain"
    to_camel_case_as_var("user_name")      # "userName"

    names = LayoutNames()
    names.binding_class_name("activity_main")   # "ActivityMainBinding"
    names.field_name("@+id/user_name")          # "userName"
"""

from bindgen.errors import BindgenError, ConfigError, MalformedIdentifierError, ProcessingError
from bindgen.layout import LayoutNames
from bindgen.memo import KeyedLazy, keyed_property, lazy
from bindgen.naming import (
    android_id,
    capitalize,
    join_to_camel_case,
    join_to_camel_case_as_var,
    to_camel_case,
    to_camel_case_as_var,
    to_java_code,
)
from bindgen.processing import BindingProcessor, BuildInfo, ProcessingStep, Round

__version__ = "0.1.0"

__all__ = [
    "BindgenError",
    "BindingProcessor",
    "BuildInfo",
    "ConfigError",
    "KeyedLazy",
    "LayoutNames",
    "MalformedIdentifierError",
    "ProcessingError",
    "ProcessingStep",
    "Round",
    "android_id",
    "capitalize",
    "join_to_camel_case",
    "join_to_camel_case_as_var",
    "keyed_property",
    "lazy",
    "to_camel_case",
    "to_camel_case_as_var",
    "to_java_code",
]
