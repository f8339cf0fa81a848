from .config import config, Config, ConfigError, is_positive_int, is_depth_limit

__all__ = ['config', 'Config', 'ConfigError', 'is_positive_int', 'is_depth_limit']
