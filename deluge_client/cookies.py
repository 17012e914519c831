"""
Cookie policy that refuses cookies scoped to a public suffix.

The standard library policy only guesses at public suffixes from the shape
of the domain. PublicSuffixCookiePolicy checks the Domain attribute against
the public suffix list, so a host such as seedbox.github.io cannot set a
cookie for every *.github.io site. Host-only cookies, and a Domain attribute
equal to the request host, are always allowed.
"""

import functools
import ipaddress
from http.cookiejar import DefaultCookiePolicy, request_host

from publicsuffixlist import PublicSuffixList

from .logger import logger


@functools.lru_cache(maxsize=1)
def default_suffix_list() -> PublicSuffixList:
    return PublicSuffixList()


def _is_ip(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
        return True
    except ValueError:
        return False


class PublicSuffixCookiePolicy(DefaultCookiePolicy):
    def __init__(self, suffix_list: PublicSuffixList = None, **kwargs):
        super().__init__(**kwargs)
        self.suffix_list = suffix_list or default_suffix_list()

    def is_public_domain(self, cookie, request) -> bool:
        if not cookie.domain_specified:
            return False

        domain = cookie.domain.lstrip(".").lower()
        host = request_host(request).lower()
        if not domain or domain == host or _is_ip(domain):
            return False

        return self.suffix_list.is_public(domain)

    def set_ok_domain(self, cookie, request):
        if self.is_public_domain(cookie, request):
            logger.warning(f"Refusing cookie {cookie.name!r} for public suffix {cookie.domain}")
            return False
        return super().set_ok_domain(cookie, request)

    def return_ok_domain(self, cookie, request):
        if self.is_public_domain(cookie, request):
            return False
        return super().return_ok_domain(cookie, request)
