"""
Configuration for CalItems.

Holds the product identity stamped into every generated VCALENDAR (PRODID)
and the debug switch. Values live in module-level settings so that items
created anywhere in the process pick up the same defaults. They can be set
directly or loaded from a TOML file.
"""

import tomllib
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


DEFAULT_ORG_NAME = "My organization"
DEFAULT_PRODUCT_NAME = "CalItems"

_org_name: str = DEFAULT_ORG_NAME
_product_name: str = DEFAULT_PRODUCT_NAME
_debug: bool = False


def set_org_name(org_name: str):
    """Set the organization name used in the default product id."""
    global _org_name
    _org_name = org_name


def set_product_name(product_name: str):
    """Set the product name used in the default product id."""
    global _product_name
    _product_name = product_name


def get_org_name() -> str:
    return _org_name


def get_product_name() -> str:
    return _product_name


def set_debug(enabled: bool):
    """Enable or disable debug output on stderr."""
    global _debug
    _debug = enabled


def is_debug() -> bool:
    return _debug


def format_prod_id(org_name: str, product_name: str) -> str:
    """
    Build a PRODID value.

    Returns:
        A string of the form ``-//ORG//PRODUCT//EN``.
    """
    return f"-//{org_name}//{product_name}//EN"


def default_prod_id() -> str:
    """The PRODID for items created by this application."""
    return format_prod_id(get_org_name(), get_product_name())


@dataclass
class Config:
    """Configuration container for CalItems."""

    org_name: str = DEFAULT_ORG_NAME
    product_name: str = DEFAULT_PRODUCT_NAME
    debug: bool = False

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'calitems' / 'calitems.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """Load configuration from TOML file."""
        if config_path is None:
            config_path = cls.get_default_config_path()

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)

        general = data.get('General', {})
        return cls(
            org_name=general.get('org_name', DEFAULT_ORG_NAME),
            product_name=general.get('product_name', DEFAULT_PRODUCT_NAME),
            debug=bool(general.get('debug', False)),
        )

    @property
    def prod_id(self) -> str:
        return format_prod_id(self.org_name, self.product_name)

    def apply(self) -> None:
        """Install these values as the process-wide defaults."""
        set_org_name(self.org_name)
        set_product_name(self.product_name)
        set_debug(self.debug)
