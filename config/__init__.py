# config/__init__.py
"""
Configuration package
"""

from .base import Config, DevelopmentConfig, ProductionConfig, TestingConfig
from .monitoring import (
    DevelopmentMonitoringConfig,
    MonitoringConfig,
    ProductionMonitoringConfig,
    TestingMonitoringConfig,
)

CONFIG_BY_ENV = {
    "development": (DevelopmentConfig, DevelopmentMonitoringConfig),
    "testing": (TestingConfig, TestingMonitoringConfig),
    "production": (ProductionConfig, ProductionMonitoringConfig),
}


def get_config_objects(flask_env):
    """Return the (app config, monitoring config) pair for an environment name."""
    return CONFIG_BY_ENV.get(flask_env, CONFIG_BY_ENV["development"])


__all__ = [
    "CONFIG_BY_ENV",
    "Config",
    "DevelopmentConfig",
    "TestingConfig",
    "ProductionConfig",
    "MonitoringConfig",
    "DevelopmentMonitoringConfig",
    "TestingMonitoringConfig",
    "ProductionMonitoringConfig",
    "get_config_objects",
]
