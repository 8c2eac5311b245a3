"""Registry of quality indicators.

Indicators are registered under a short name together with a factory (usually
the indicator class itself) so that they can be built from configuration files
instead of being hardcoded.

The registry enables:
- **Configuration-driven evaluation**: Pick indicators by name from a config file
- **Discoverability**: List all available indicators programmatically
- **Pluggable indicators**: Register custom Indicator subclasses next to the built-in ones

Basic usage:
    ```python
    from front_gauge.registry import IndicatorRegistry, create_indicator, list_indicators

    # Keyword arguments go to the factory
    gd = IndicatorRegistry.get("gd", p=1)

    # Settings mappings go through Indicator.configure()
    r2 = create_indicator("r2", {"refPoint": "0,0", "H": 10})

    available = list_indicators()  # ["epsilon", "error_ratio", "gd", ...]
    ```

Registering a custom indicator:
    ```python
    class Cardinality(Indicator):
        arity = 1

        def _compute(self) -> float | None:
            return float(len(self.front))

    IndicatorRegistry.register("cardinality", Cardinality)
    ```
"""

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from front_gauge.exceptions import ConfigurationError

if TYPE_CHECKING:
    from front_gauge.indicators.base import Indicator


class IndicatorRegistry:
    """Class-level registry of indicator factories.

    Class Attributes:
        _registry: Dictionary mapping indicator names to factories. A factory
            accepts keyword arguments and returns an Indicator instance.
    """

    _registry: dict[str, Callable[..., "Indicator"]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., "Indicator"]) -> None:
        """Register an indicator factory.

        Args:
            name: Unique name for the indicator. Will overwrite if already exists.
            factory: Callable returning an Indicator, typically an Indicator
                subclass. Should accept keyword arguments for configuration.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> "Indicator":
        """Build an indicator by name.

        Args:
            name: Name of the registered indicator.
            **kwargs: Configuration parameters passed to the factory.

        Returns:
            A new Indicator instance.

        Raises:
            KeyError: If the name is not registered. The message lists the
                available indicators.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Indicator '{name}' not found. Available indicators: {available}")
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return the sorted list of registered indicator names."""
        return sorted(cls._registry.keys())


def list_indicators() -> list[str]:
    """List all registered indicators.

    Convenience function that returns IndicatorRegistry.list().
    """
    return IndicatorRegistry.list()


def create_indicator(name: str, settings: Mapping[str, Any] | None = None) -> "Indicator":
    """Build an indicator by name and apply a settings mapping to it.

    Args:
        name: Name of the registered indicator.
        settings: Optional settings passed to Indicator.configure(), such as
            ``{"p": 1}`` for GD or ``{"refPoint": "0,0", "H": 10}`` for R2.

    Returns:
        A configured Indicator instance.

    Raises:
        ConfigurationError: If the name is not registered or the settings are
            invalid for the indicator.

    Example:
        ```python
        igd = create_indicator("igd", {"second-pareto-front": "zdt1.csv"})
        igd.set_front(approximation)
        value = igd.calculate()
        ```
    """
    try:
        indicator = IndicatorRegistry.get(name)
    except KeyError as exc:
        raise ConfigurationError(
            f"Unknown indicator '{name}'",
            suggestion=f"Available indicators: {', '.join(list_indicators()) or 'none'}",
            details={"name": name},
        ) from exc

    if settings is not None:
        indicator.configure(settings)
    return indicator
