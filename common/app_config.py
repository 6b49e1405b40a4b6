import logging
from importlib import import_module

from django.apps import AppConfig

logger = logging.getLogger(__file__)


IMPORT_PARSER_NAME = "import_parsers"
IMPORT_HANDLER_NAME = "import_handlers"


class CommonConfig(AppConfig):
    """
    Extends the default Django AppConfig to load importer parser and handler
    modules for the app.

    Each app that defines installable models may also provide parser and
    handler modules to be used by the importer when reading the XML manifests
    that describe those models. Loading a handler module registers its
    installation plugin with the importer. This class encapsulates the
    loading of those modules, so that we do not have to write the same code in
    each app's AppConfig.ready method.
    """

    def load_importer_modules(self):
        """Load importer parser and handler modules, if they exist."""
        modules_to_import = [
            f"{self.name}.{IMPORT_PARSER_NAME}",
            f"{self.name}.{IMPORT_HANDLER_NAME}",
        ]
        for module in modules_to_import:
            try:
                import_module(module)
            except ModuleNotFoundError as e:
                if e.name != module:
                    raise
                logger.debug(f"Failed to import {module}")

    def ready(self):
        self.load_importer_modules()
