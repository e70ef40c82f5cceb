"""
Utility modules for API virtualization
"""
from .config_loader import load_virtualization_config, VirtualizationConfig
from .timestamps import epoch_millis, isoformat_utc, parse_iso8601, utc_now

__all__ = [
    'load_virtualization_config',
    'VirtualizationConfig',
    'epoch_millis',
    'isoformat_utc',
    'parse_iso8601',
    'utc_now',
]
