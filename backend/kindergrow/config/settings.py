import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    # Records are bucketed on the calendar day of this fixed offset,
    # regardless of the device locale that produced them
    TARGET_UTC_OFFSET_HOURS = int(os.environ.get('TARGET_UTC_OFFSET_HOURS', 3))

    # Trend analysis
    TREND_MIN_POPULATED = int(os.environ.get('TREND_MIN_POPULATED', 2))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    DEBUG = False
    TESTING = False

class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')

class ProductionConfig(Config):
    DEBUG = False

class TestingConfig(Config):
    TESTING = True
    TARGET_UTC_OFFSET_HOURS = 3
    TREND_MIN_POPULATED = 2

config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
