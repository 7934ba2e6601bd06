#!/usr/bin/env python3

"""Structural signals left behind by the Babel obfuscator.

Two independent checks:

- Marker attribute: Babel tags its output with an assembly-level
  ``BabelObfuscatorAttribute``.
- Synthetic initializer: Babel injects a module initializer named ``@!``
  into the ``<Module>`` type to run decryption and other setup code before
  anything else in the module.
"""

from ...infrastructure.logging import get_logger
from ..catalog import MemberCatalog
from ..models import BABEL_OBFUSCATOR_ATTRIBUTE, MODULE_INITIALIZER_NAME

logger = get_logger(__name__)


class StructuralSignalDetector:
    """Checks a catalog for obfuscator marker attributes and initializers.

    All methods are static as they only read the catalog.
    """

    @staticmethod
    def has_marker_attribute(
        catalog: MemberCatalog, attribute_name: str = BABEL_OBFUSCATOR_ATTRIBUTE
    ) -> bool:
        """Check for the obfuscator marker among the assembly attributes.

        Args:
            catalog: Catalog to inspect
            attribute_name: Exact attribute type name to look for

        Returns:
            True if an assembly-level attribute has exactly that type name
        """
        return attribute_name in catalog.custom_attributes()

    @staticmethod
    def has_synthetic_initializer(
        catalog: MemberCatalog, method_name: str = MODULE_INITIALIZER_NAME
    ) -> bool:
        """Check whether ``<Module>`` declares the generated initializer.

        Args:
            catalog: Catalog to inspect
            method_name: Initializer method name to look for

        Returns:
            True if the container type declares the method; False when
            there is no container type
        """
        module_type = catalog.find_synthetic_container_type()
        if module_type is None:
            logger.debug("No <Module> type found")
            return False

        return catalog.find_method_by_name(module_type, method_name) is not None
