"""Pytest configuration and fixtures."""

from typing import Any, Callable

import pytest

from swiper_attrs.config import Settings
from swiper_attrs.dom import parse_document, parse_fragment


class FakeSwiper:
    """Stands in for a slider library instance and records calls."""

    def __init__(self, container: Any, config: dict[str, Any]) -> None:
        self.container = container
        self.config = config
        self.destroy_calls: list[tuple[bool, bool]] = []
        self.handlers: dict[str, list[Callable[..., Any]]] = {}

    @property
    def destroyed(self) -> bool:
        return bool(self.destroy_calls)

    def destroy(self, delete_instance: bool = True, clean_styles: bool = True) -> None:
        self.destroy_calls.append((delete_instance, clean_styles))

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        self.handlers.setdefault(event, []).append(handler)


class FakeSwiperFactory:
    """Callable slider constructor that keeps every instance it builds."""

    def __init__(self, fail_on: Callable[[Any], bool] | None = None) -> None:
        self.created: list[FakeSwiper] = []
        self._fail_on = fail_on

    def __call__(self, container: Any, config: dict[str, Any]) -> FakeSwiper:
        if self._fail_on is not None and self._fail_on(container):
            raise RuntimeError("constructor exploded")
        instance = FakeSwiper(container, config)
        self.created.append(instance)
        return instance


def component_html(
    attrs: str = "",
    slides: int = 3,
    placement: str = "nested",
    pagination: bool = False,
    nav: bool = False,
    component_id: str | None = None,
    container: bool = True,
    wrapper: bool = True,
) -> str:
    """Build component markup.

    Args:
        attrs: Extra attribute text for the component element.
        slides: Number of slide elements.
        placement: "nested" puts pagination/nav inside the container,
            "sibling" puts them next to it.
        pagination: Include a pagination element.
        nav: Include both navigation controls.
        component_id: Optional id for the component element.
        container: Include the container role.
        wrapper: Include the wrapper role.
    """
    slide_markup = "".join(
        f'<div data-swiper="slide">Slide {i + 1}</div>' for i in range(slides)
    )
    inner = (
        f'<div data-swiper="wrapper">{slide_markup}</div>' if wrapper else f"<div>{slide_markup}</div>"
    )

    controls = ""
    if pagination:
        controls += '<div data-swiper="pagination"></div>'
    if nav:
        controls += '<button data-swiper="nav-prev">Prev</button><button data-swiper="nav-next">Next</button>'

    if placement == "nested":
        inner += controls
        controls = ""

    body = f'<div data-swiper="container">{inner}</div>' if container else inner
    id_attr = f' id="{component_id}"' if component_id else ""
    return f'<div data-swiper="component"{id_attr} {attrs}>{body}{controls}</div>'


def document_html(*components: str) -> str:
    return f"<html><body>{''.join(components)}</body></html>"


@pytest.fixture
def make_component() -> Callable[..., Any]:
    """Build a standalone component element."""

    def _make(**kwargs: Any) -> Any:
        return parse_fragment(component_html(**kwargs))

    return _make


@pytest.fixture
def make_document() -> Callable[..., Any]:
    """Build a document from component markup strings."""

    def _make(*components: str) -> Any:
        return parse_document(document_html(*components))

    return _make


@pytest.fixture
def factory() -> FakeSwiperFactory:
    return FakeSwiperFactory()


@pytest.fixture
def settings() -> Settings:
    """Settings detached from the environment."""
    s = Settings()
    s.factory_path = ""
    s.watch_changes = True
    s.log_level = "INFO"
    return s


@pytest.fixture
def failing_factory() -> FakeSwiperFactory:
    """Factory whose constructor raises for containers marked data-fail."""
    return FakeSwiperFactory(fail_on=lambda container: container.get("data-fail") is not None)


@pytest.fixture
def component_markup() -> Callable[..., str]:
    """Component markup builder, for composing documents."""
    return component_html
