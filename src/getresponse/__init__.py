"""GetResponse contacts API client."""

from django.utils.functional import LazyObject

from .handler import GetResponseHandler


class DefaultClient(LazyObject):
    """Lazy object to handle the GetResponse backend."""

    def _setup(self):
        """Configure the GetResponse backend."""
        self._wrapped = client_handler()


client_handler = GetResponseHandler()
client = DefaultClient()
