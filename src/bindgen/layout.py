"""Names of generated binding classes and their view fields."""

from __future__ import annotations

import logging

from bindgen.memo import KeyedLazy
from bindgen.naming import android_id, to_camel_case, to_camel_case_as_var

logger = logging.getLogger(__name__)

BINDING_PACKAGE = "databinding"


class LayoutNames:
    """Derive and memoize the names emitted for layouts and views.

    A generator pass asks for the same names over and over while rendering a
    binding class. Each mapping is computed once per distinct input.

    Args:
        class_suffix: Appended to the camel-cased layout name.
    """

    def __init__(self, class_suffix: str = "Binding") -> None:
        self.class_suffix = class_suffix
        self._class_names: KeyedLazy[str, str] = KeyedLazy(self._compute_class_name)
        self._field_names: KeyedLazy[str, str] = KeyedLazy(self._compute_field_name)

    def binding_class_name(self, layout_name: str) -> str:
        """Return the binding class for `layout_name` (``activity_main`` -> ``ActivityMainBinding``)."""
        return self._class_names.get(layout_name)

    def field_name(self, view_id: str) -> str:
        """Return the field for `view_id` (``@+id/user_name`` -> ``userName``).

        Raises:
            MalformedIdentifierError: If `view_id` has no `/`.
        """
        return self._field_names.get(view_id)

    def qualified_class_name(self, package: str, layout_name: str) -> str:
        """Return the fully qualified binding class name under `package`."""
        class_name = self.binding_class_name(layout_name)
        if not package:
            return class_name
        return f"{package}.{BINDING_PACKAGE}.{class_name}"

    def _compute_class_name(self, layout_name: str) -> str:
        return to_camel_case(layout_name) + self.class_suffix

    def _compute_field_name(self, view_id: str) -> str:
        name = to_camel_case_as_var(android_id(view_id))
        logger.debug("View %s bound to field %s", view_id, name)
        return name


__all__ = ["BINDING_PACKAGE", "LayoutNames"]
