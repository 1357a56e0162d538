"""Contract of the consumed slider library and loading of its constructor."""

import importlib
import logging
from typing import Any, Callable, Protocol, runtime_checkable

from swiper_attrs.dom import HtmlElement

logger = logging.getLogger(__name__)


@runtime_checkable
class SliderInstance(Protocol):
    """What the engine needs from a constructed slider."""

    def destroy(self, delete_instance: bool = True, clean_styles: bool = True) -> Any:
        ...

    def on(self, event: str, handler: Callable[..., Any]) -> Any:
        ...


SliderFactory = Callable[[HtmlElement, dict[str, Any]], SliderInstance]


def load_slider_factory(path: str) -> SliderFactory | None:
    """Import a slider factory from a ``package.module:attribute`` path.

    Args:
        path: Dotted module path and attribute name separated by a colon.

    Returns:
        The callable, or None when the path is empty, malformed, cannot be
        imported, or does not name a callable.
    """
    if not path:
        return None

    module_name, _, attribute = path.partition(":")
    if not module_name or not attribute:
        logger.warning(f"Slider factory path {path!r} must look like 'package.module:attribute'")
        return None

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        logger.warning(f"Slider library module {module_name!r} could not be imported: {e}")
        return None

    factory = getattr(module, attribute, None)
    if not callable(factory):
        logger.warning(f"{path!r} does not name a callable slider factory")
        return None

    return factory
