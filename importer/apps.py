from common.app_config import CommonConfig


class ImporterConfig(CommonConfig):
    name = "importer"
