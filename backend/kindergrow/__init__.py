import logging

from kindergrow.config.settings import config

# Library logging stays silent until an application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())


def configure_logging(config_name='development'):
    """Apply the configured log level to the package logger"""
    settings = config[config_name]
    package_logger = logging.getLogger(__name__)
    package_logger.setLevel(settings.LOG_LEVEL)

    if not any(not isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
        package_logger.addHandler(handler)

    return package_logger


def create_chart_service(config_name='development'):
    """Chart service factory"""
    settings = config[config_name]

    from kindergrow.config.activity_config import activity_config
    from kindergrow.services.activity_chart_service import ActivityChartService

    return ActivityChartService(settings=settings, schemas=activity_config)
