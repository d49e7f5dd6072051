"""
DHCP Topology Package

Validates DHCP service configuration and builds immutable per-interface
descriptors, with an exact inclusive address range shared by IPv4 and IPv6.
"""

__version__ = "0.1.0"

# Import main components for easy access
from .core.iprange import AddressRange
from .core.errors import DHCPConfigError
from .core.models import Config, InterfaceConfig, IPv4Config, IPv6Config
from .service import ServiceState, create_service
from .validation import validate_config

__all__ = [
    "AddressRange",
    "DHCPConfigError",
    "Config",
    "InterfaceConfig",
    "IPv4Config",
    "IPv6Config",
    "ServiceState",
    "create_service",
    "validate_config",
]
