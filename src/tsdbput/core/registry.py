"""Registry of encoder factories keyed by plugin name."""

from collections.abc import Callable
from typing import Any

from tsdbput.core.models import EncoderConfig

EncoderFactory = Callable[[EncoderConfig], Any]


class EncoderRegistry:
    """Maps plugin names to factories that build encoders from a config."""

    def __init__(self) -> None:
        self._factories: dict[str, EncoderFactory] = {}

    def register(self, name: str, factory: EncoderFactory) -> None:
        """Register a factory under a plugin name.

        Raises:
            TypeError: If factory is not callable.
            ValueError: If the name is already registered.
        """
        if not callable(factory):
            raise TypeError("factory must be callable")
        if name in self._factories:
            raise ValueError(f"encoder {name!r} already registered")
        self._factories[name] = factory

    def lookup(self, name: str) -> EncoderFactory | None:
        return self._factories.get(name)

    def create(self, name: str, config: EncoderConfig | None = None) -> Any:
        """Build an encoder by plugin name.

        Raises:
            KeyError: If no factory is registered under name.
        """
        factory = self.lookup(name)
        if factory is None:
            raise KeyError(f"no encoder registered as {name!r}")
        return factory(config or EncoderConfig())

    def names(self) -> list[str]:
        return sorted(self._factories)
