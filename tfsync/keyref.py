"""
Key lookups in ConfigMaps and Secrets.

The controller reads tokens and other settings from key/value objects
owned by the cluster store. The store itself is not part of this package;
anything implementing KeyValueSource can be used.
"""

from typing import Mapping, NamedTuple, Protocol


class NamespacedName(NamedTuple):
    namespace: str
    name: str


class KeyNotFound(LookupError):
    """Raised when a key is missing from a ConfigMap or Secret."""

    def __init__(self, key: str, kind: str, nn: NamespacedName):
        self.key = key
        self.kind = kind
        self.nn = nn
        super().__init__(
            f"unable to find key={key!r} in {kind}={nn.name!r} namespace={nn.namespace!r}"
        )


class InvalidSecretValue(ValueError):
    """Raised when a Secret value is not valid UTF-8 text."""

    def __init__(self, key: str, nn: NamespacedName):
        self.key = key
        self.nn = nn
        super().__init__(
            f"value of key={key!r} in secret={nn.name!r} namespace={nn.namespace!r} is not valid UTF-8"
        )


class KeyValueSource(Protocol):
    def get_config_map(self, nn: NamespacedName) -> Mapping[str, str]: ...

    def get_secret(self, nn: NamespacedName) -> Mapping[str, bytes]: ...


def config_map_key_ref(source: KeyValueSource, nn: NamespacedName, key: str) -> str:
    """Fetch a key from a ConfigMap. Errors from the source propagate unchanged."""
    data = source.get_config_map(nn)
    if key in data:
        return data[key]
    raise KeyNotFound(key, "configMap", nn)


def secret_key_ref(source: KeyValueSource, nn: NamespacedName, key: str) -> str:
    """Fetch a key from a Secret, decoded and stripped of surrounding whitespace.

    Raises:
        KeyNotFound: If the key is absent
        InvalidSecretValue: If the value is not valid UTF-8
    """
    data = source.get_secret(nn)
    if key not in data:
        raise KeyNotFound(key, "secret", nn)
    try:
        return data[key].decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise InvalidSecretValue(key, nn) from e
