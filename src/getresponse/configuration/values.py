"""Custom value classes for django-configurations."""

import os

from configurations import values


class ApiKeyValue(values.Value):
    """
    Value holding the GetResponse API key.

    The key is read from (in order of priority):
    * The content of the file referenced by the environment variable
      `{name}_{file_suffix}` if set, so the key can come from a mounted secret.
    * The environment variable `{name}` if set.
    * The default value

    Blank keys are rejected, surrounding whitespace is stripped.
    """

    file_suffix = "FILE"

    def __init__(self, *args, file_suffix=None, **kwargs):
        """Initialize the value."""
        super().__init__(*args, **kwargs)
        if file_suffix is not None:
            self.file_suffix = file_suffix

    def to_python(self, value):
        """Strip the key and refuse empty ones."""
        value = super().to_python(value)
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("The GetResponse API key cannot be blank.")
        return value

    def _read_file(self, filename):
        if not os.path.exists(filename):
            raise ValueError(f"API key file {filename!r} does not exist.")
        try:
            with open(filename) as file:
                return file.read()
        except OSError as err:
            raise ValueError(f"API key file {filename!r} cannot be read: {err!r}") from err

    def setup(self, name):
        """Get the API key from environment variables."""
        value = self.default
        if self.environ:
            full_environ_name = self.full_environ_name(name)
            full_environ_name_file = f"{full_environ_name}_{self.file_suffix}"
            if full_environ_name_file in os.environ:
                value = self.to_python(self._read_file(os.environ[full_environ_name_file]))
            elif full_environ_name in os.environ:
                value = self.to_python(os.environ[full_environ_name])
            elif self.environ_required:
                raise ValueError(
                    f"API key {name!r} is required to be set as the "
                    f"environment variable {full_environ_name_file!r} or {full_environ_name!r}"
                )
        self.value = value
        return value
