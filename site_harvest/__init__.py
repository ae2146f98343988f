# site_harvest/__init__.py
"""
SiteHarvest package initializer.
Defines the package version. The click command lives in
:mod:`site_harvest.cli`; it is not re-exported here so that the
``site_harvest.cli`` attribute stays the module.
"""
__version__ = "0.1.0"
