"""Locate the structural roles under a component and mark them for the library.

Pagination and navigation may be placed two ways:

    Nested inside the container:
        [data-swiper="component"]
          └── [data-swiper="container"]
                ├── [data-swiper="wrapper"] > [data-swiper="slide"]...
                ├── [data-swiper="pagination"]
                ├── [data-swiper="nav-prev"]
                └── [data-swiper="nav-next"]

    As siblings of the container (CMS collection lists, which cannot take
    static children):
        [data-swiper="component"]
          ├── [data-swiper="container"] > [data-swiper="wrapper"] > slides
          ├── [data-swiper="pagination"]
          ├── [data-swiper="nav-prev"]
          └── [data-swiper="nav-next"]

Optional roles are therefore searched from the component root.
"""

from dataclasses import dataclass, field

from swiper_attrs.constants import (
    ROLE_ATTR,
    ROLE_CONTAINER,
    ROLE_NAV_NEXT,
    ROLE_NAV_PREV,
    ROLE_PAGINATION,
    ROLE_SLIDE,
    ROLE_WRAPPER,
    SWIPER_CLASSES,
)
from swiper_attrs.dom import HtmlElement, add_class, find_all, find_first
from swiper_attrs.errors import StructuralError


@dataclass(frozen=True)
class ElementGraph:
    """Element references for one component, resolved once.

    Attributes:
        container: Root element handed to the slider library.
        wrapper: Direct parent of the slides.
        slides: Slide elements in document order (at least one).
        pagination: Pagination element, if any.
        nav_prev: Previous-slide control, if any.
        nav_next: Next-slide control, if any.
    """

    container: HtmlElement
    wrapper: HtmlElement
    slides: list[HtmlElement] = field(default_factory=list)
    pagination: HtmlElement | None = None
    nav_prev: HtmlElement | None = None
    nav_next: HtmlElement | None = None

    @property
    def slide_count(self) -> int:
        return len(self.slides)

    @property
    def has_navigation(self) -> bool:
        """Navigation is only bound when both controls are present."""
        return self.nav_prev is not None and self.nav_next is not None

    def roles(self) -> list[str]:
        """Role names present in this graph."""
        present = [ROLE_CONTAINER, ROLE_WRAPPER, ROLE_SLIDE]
        for role, element in (
            (ROLE_PAGINATION, self.pagination),
            (ROLE_NAV_PREV, self.nav_prev),
            (ROLE_NAV_NEXT, self.nav_next),
        ):
            if element is not None:
                present.append(role)
        return present


def _missing(role: str, what: str) -> StructuralError:
    return StructuralError(
        role,
        f"{what} not found. Add [{ROLE_ATTR}=\"{role}\"] to your {what.lower()} element.",
    )


def locate_elements(component: HtmlElement) -> ElementGraph:
    """Resolve the element graph of a component and add library class names.

    Args:
        component: The component root element.

    Returns:
        ElementGraph holding live references.

    Raises:
        StructuralError: If the container, wrapper or every slide is missing.
    """
    container = find_first(component, ROLE_CONTAINER)
    if container is None:
        raise _missing(ROLE_CONTAINER, "Container")

    wrapper = find_first(container, ROLE_WRAPPER)
    if wrapper is None:
        raise _missing(ROLE_WRAPPER, "Wrapper")

    slides = find_all(wrapper, ROLE_SLIDE)
    if not slides:
        raise _missing(ROLE_SLIDE, "Slide")

    graph = ElementGraph(
        container=container,
        wrapper=wrapper,
        slides=slides,
        pagination=find_first(component, ROLE_PAGINATION),
        nav_prev=find_first(component, ROLE_NAV_PREV),
        nav_next=find_first(component, ROLE_NAV_NEXT),
    )
    mark_elements(graph)
    return graph


def mark_elements(graph: ElementGraph) -> None:
    """Add the library's structural class names to every located element."""
    add_class(graph.container, SWIPER_CLASSES[ROLE_CONTAINER])
    add_class(graph.wrapper, SWIPER_CLASSES[ROLE_WRAPPER])

    for slide in graph.slides:
        add_class(slide, SWIPER_CLASSES[ROLE_SLIDE])

    if graph.pagination is not None:
        add_class(graph.pagination, SWIPER_CLASSES[ROLE_PAGINATION])
    if graph.nav_prev is not None:
        add_class(graph.nav_prev, SWIPER_CLASSES[ROLE_NAV_PREV])
    if graph.nav_next is not None:
        add_class(graph.nav_next, SWIPER_CLASSES[ROLE_NAV_NEXT])
