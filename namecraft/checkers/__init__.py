from .dns_checker import DNSChecker, DNSResolver
from .whois_checker import WhoisProvider
from .registrar_checker import RegistrarAPIProvider
from .availability_service import AvailabilityService, sanitize_domain_name

__all__ = [
    'DNSChecker', 'DNSResolver', 'WhoisProvider', 'RegistrarAPIProvider',
    'AvailabilityService', 'sanitize_domain_name'
]
