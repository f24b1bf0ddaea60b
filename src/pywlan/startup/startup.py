# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import os

from pywlan.config.log_config import LoggerConfigurator
from pywlan.config.system_config_settings import SystemConfigSettings


class StartUp:
    """
    Prepares the runtime environment of the PyWLAN service: directories
    from the system configuration and the root logger.
    """
    _initialized: bool = False

    @classmethod
    def initialize(cls) -> None:
        """
        Create the configured directories and set up logging once per process.
        """
        if cls._initialized:
            return
        SystemConfigSettings.initialize_directories()

        # Console logging in containers, where log files are not collected
        in_docker = os.path.exists('/.dockerenv') or bool(os.environ.get('DOCKER_CONTAINER'))

        LoggerConfigurator(SystemConfigSettings.log_dir(),
                           SystemConfigSettings.log_filename(),
                           SystemConfigSettings.log_level(),
                           to_console=in_docker,
                           rotate=SystemConfigSettings.log_rotate(),
                           logger_levels=SystemConfigSettings.logger_levels())
        cls._initialized = True
