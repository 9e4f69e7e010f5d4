"""Vehicle enquiry lookups against the DVLA web service.

Submodules are imported lazily so utility scripts can pull ``dvla.logger``
without loading the HTTP stack. Typical use::

    from dvla import check
    record = check("AB12CDE")
"""

__all__ = [
    "check",
    "Check",
    "negotiate",
    "fetch_details",
    "parse_continuation",
    "parse_vehicle_record",
    "DvlaClient",
    "ClientConfig",
    "SessionTokenSet",
    "VehicleRecord",
    "DvlaError",
    "TransportError",
    "ParseError",
    "ContinuationNotFoundError",
    "DetailsNotFoundError",
    "MalformedItemError",
    "CheckError",
]

_SOURCES = {
    'check': 'dvla.lookup',
    'Check': 'dvla.lookup',
    'negotiate': 'dvla.negotiator',
    'parse_continuation': 'dvla.negotiator',
    'fetch_details': 'dvla.extractor',
    'parse_vehicle_record': 'dvla.extractor',
    'DvlaClient': 'dvla.client',
    'ClientConfig': 'dvla.client',
    'SessionTokenSet': 'dvla.models',
    'VehicleRecord': 'dvla.models',
}
_SOURCES.update({name: 'dvla.errors' for name in __all__ if name.endswith('Error')})


def __getattr__(name: str):
    if name in _SOURCES:
        import importlib
        return getattr(importlib.import_module(_SOURCES[name]), name)
    raise AttributeError(name)
