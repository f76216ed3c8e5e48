"""Hook Implementations collected from the :mod:`vault_relay.services` sub-package.

Each service package may supply a ``blueprints`` module containing functions
decorated with :class:`HookimplMarker("vault_relay")`. Packages whose name
starts with ``_`` or ``utils`` are not services and are skipped.
"""
import importlib
import pkgutil
from types import ModuleType
from typing import List

import structlog

from vault_relay import services as services_subpackage

log = structlog.get_logger(__name__)


def load_hook_modules() -> List[ModuleType]:
    """Import the blueprints module of every service and return them."""
    modules = []
    for sub_module in pkgutil.iter_modules(path=services_subpackage.__path__):
        sub_module_name = sub_module.name

        if sub_module_name.startswith(("_", "utils")):
            continue

        blueprints_module_path = f"{services_subpackage.__name__}.{sub_module_name}.blueprints"

        try:
            module = importlib.import_module(blueprints_module_path)
        except ModuleNotFoundError:
            log.error("Skipped service - no blueprints module found!", service=sub_module_name)
            continue

        log.debug("Loaded service blueprints", service=sub_module_name)
        modules.append(module)
    return modules
