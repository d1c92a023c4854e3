"""In-memory SiteRegistry implementation for testing purposes."""

from fouroneone.errors import DuplicateSiteError
from fouroneone.interfaces.site_registry import Site, SiteRegistry, normalize_host


class InMemorySiteRegistry(SiteRegistry):
    """Host-keyed dict of sites."""

    def __init__(self, sites: list[Site] | None = None) -> None:
        self._sites: dict[str, Site] = {}
        for site in sites or []:
            self.add(site)

    def get_current(self, host: str) -> Site | None:
        return self._sites.get(normalize_host(host))

    def add(self, site: Site) -> None:
        if site.host in self._sites:
            raise DuplicateSiteError(site.host)
        self._sites[site.host] = site

    def list_sites(self) -> list[Site]:
        return [self._sites[host] for host in sorted(self._sites)]
