"""Site name and host lookup with instance-wide defaults."""

from fouroneone.interfaces.site_registry import Site

DEFAULT_SITE_NAME = "411"
DEFAULT_HOST = "fouroneone"


def get_site_name(site: Site | None) -> str:
    """Return the name of the 411 instance, or the default if no site matched."""
    return site.name if site is not None else DEFAULT_SITE_NAME


def get_host(site: Site | None) -> str:
    """Return the displayed host, or the default if no site matched."""
    return site.host if site is not None else DEFAULT_HOST
