"""GetResponse backend handler."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from getresponse.backends.base import BaseBackend
from getresponse.exceptions import GetResponseInvalidBackendError


class GetResponseHandler:
    """GetResponse handler managing the backend instantiation."""

    def __init__(self, backend=None):
        """Initialize the GetResponse handler."""
        # backend is an optional dict of backend definitions
        # (structured like settings.GETRESPONSE).
        self._backend = backend
        self._client = None

    @cached_property
    def backend(self):
        """Put in cache the backend properties from the settings."""
        if self._backend is None:
            try:
                self._backend = settings.GETRESPONSE.copy()
            except AttributeError as e:
                raise ImproperlyConfigured("settings.GETRESPONSE is not configured") from e
        return self._backend

    def __call__(self):
        """Create if not existing the backend and then return it."""
        if self._client is None:
            self._client = self.create_client(self.backend)
        return self._client

    def create_client(self, params):
        """Instantiate and configure the GetResponse backend."""
        params = params.copy()
        try:
            backend = params.pop("BACKEND")
        except KeyError as e:
            raise ImproperlyConfigured("settings.GETRESPONSE must define a BACKEND") from e
        parameters = params.pop("PARAMETERS", None) or {}
        if not isinstance(parameters, dict):
            raise ImproperlyConfigured("settings.GETRESPONSE PARAMETERS must be a dict")
        if params:
            raise ImproperlyConfigured(f"Unknown settings.GETRESPONSE keys: {', '.join(sorted(params))}")

        try:
            klass = import_string(backend)
        except ImportError as e:
            raise GetResponseInvalidBackendError(f"Could not find backend {backend!r}: {e}") from e
        if not isinstance(klass, type) or not issubclass(klass, BaseBackend):
            raise GetResponseInvalidBackendError(f"Backend {backend!r} is not a GetResponse backend")

        try:
            return klass(**parameters)
        except TypeError as e:
            raise ImproperlyConfigured(f"Invalid PARAMETERS for backend {backend!r}: {e}") from e
