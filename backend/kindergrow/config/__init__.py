from .settings import config, Config, DevelopmentConfig, ProductionConfig, TestingConfig
from .activity_config import ActivityConfig, activity_config

__all__ = [
    'config',
    'Config',
    'DevelopmentConfig',
    'ProductionConfig',
    'TestingConfig',
    'ActivityConfig',
    'activity_config'
]
