from common.app_config import CommonConfig


class BoxesConfig(CommonConfig):
    name = "boxes"
