from common.app_config import CommonConfig


class PagesConfig(CommonConfig):
    name = "pages"
