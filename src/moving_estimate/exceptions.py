"""Error kinds raised while producing an estimate."""


class EstimateError(Exception):
    """Base class for failures that abort an estimate."""


class DataIntegrityError(EstimateError):
    """A reference lookup returned an unexpected number of rows."""


class GeocodingError(EstimateError):
    """An address could not be resolved to coordinates."""


class RoutingError(EstimateError):
    """No driving route could be obtained between two coordinates."""


class PricingLookupError(EstimateError):
    """A pricing table has no row for the requested key."""


class ServiceNotConfiguredError(EstimateError):
    """Settings required to reach a backing service are missing."""


class DatabaseNotConfiguredError(ServiceNotConfiguredError):
    """Supabase settings are missing."""
