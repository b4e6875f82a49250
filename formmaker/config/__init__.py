from .settings import (
    FormMakerSettings,
    configure_django,
    get_settings,
    reload_settings,
    get_env_list,
    get_env_bool,
)
from .logging_config import setup_logging
