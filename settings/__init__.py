from settings.common import *
