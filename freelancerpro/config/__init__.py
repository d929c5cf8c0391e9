"""
Configuration module for FreelancerPro.
"""
from .settings import (
    FreelancerProConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'FreelancerProConfig',
    'get_config',
    'load_config',
    'reload_config'
]
