from .loader import CONFIG_FILENAME, load_config, save_config
from .models import DataFormatXConfig, LLMSettings

__all__ = [
    "CONFIG_FILENAME",
    "DataFormatXConfig",
    "LLMSettings",
    "load_config",
    "save_config",
]
