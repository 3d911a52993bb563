class StatsdClientError(Exception):
    """statsdclient error"""


class ConfigError(StatsdClientError):
    """Invalid or missing configuration"""
