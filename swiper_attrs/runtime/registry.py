"""Registry of bound slider instances, keyed by component element."""

from dataclasses import dataclass
from typing import Any, Iterator

from swiper_attrs.dom import HtmlElement
from swiper_attrs.elements.locator import ElementGraph


@dataclass(frozen=True)
class BoundSlider:
    """A component bound to a slider library instance."""

    component: HtmlElement
    instance: Any
    graph: ElementGraph
    config: dict[str, Any]


class InstanceRegistry:
    """Side table from component element to its bound slider.

    Owned by one controller. Entries are added on bind and removed on destroy,
    so nothing about the instance is stored on the element itself. Iteration
    follows bind order.
    """

    def __init__(self) -> None:
        self._bound: dict[HtmlElement, BoundSlider] = {}

    def add(self, record: BoundSlider) -> None:
        """Register a bound slider.

        Raises:
            ValueError: If the component is already registered.
        """
        if record.component in self._bound:
            raise ValueError("Component is already registered")
        self._bound[record.component] = record

    def remove(self, component: HtmlElement) -> BoundSlider | None:
        """Remove and return the record for a component, if any."""
        return self._bound.pop(component, None)

    def get(self, component: HtmlElement) -> BoundSlider | None:
        return self._bound.get(component)

    def contains(self, component: HtmlElement) -> bool:
        return component in self._bound

    def instances(self) -> list[Any]:
        """Bound library instances in bind order."""
        return [record.instance for record in self._bound.values()]

    def records(self) -> list[BoundSlider]:
        return list(self._bound.values())

    def clear(self) -> None:
        """Drop every entry. Does not destroy instances."""
        self._bound.clear()

    def __len__(self) -> int:
        return len(self._bound)

    def __iter__(self) -> Iterator[BoundSlider]:
        return iter(list(self._bound.values()))

    def __contains__(self, component: object) -> bool:
        return component in self._bound
