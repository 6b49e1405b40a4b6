from common.app_config import CommonConfig


class PackagesConfig(CommonConfig):
    name = "packages"
