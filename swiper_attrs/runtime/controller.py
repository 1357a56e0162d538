"""Component lifecycle: discovery, binding, teardown and change watching."""

import logging
from typing import Any

from swiper_attrs.config import Settings, get_settings
from swiper_attrs.constants import INITIALIZED_ATTR, INITIALIZED_VALUE
from swiper_attrs.dom import (
    HtmlElement,
    body_of,
    describe,
    find_components,
    is_element,
    resolve_target,
)
from swiper_attrs.elements import build_swiper_config, locate_elements
from swiper_attrs.errors import MissingDependencyError, StructuralError
from swiper_attrs.parser import parse_configuration
from swiper_attrs.runtime.factory import SliderFactory, load_slider_factory
from swiper_attrs.runtime.observer import DocumentMutations, MutationRecord, TreeObserver
from swiper_attrs.runtime.registry import BoundSlider, InstanceRegistry

logger = logging.getLogger(__name__)


class SwiperController:
    """Binds every slider component in a document to the slider library.

    Each component moves from unbound to bound on ``initialize`` and back on
    ``destroy``. The ``data-swiper-initialized`` marker guards against binding
    the same component twice, including across overlapping change
    notifications. A failure on one component never reaches its siblings.
    """

    def __init__(
        self,
        document: HtmlElement,
        factory: SliderFactory | None = None,
        registry: InstanceRegistry | None = None,
        mutations: DocumentMutations | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            document: Document (or subtree) holding the components.
            factory: Slider library constructor. When omitted, the factory
                named by ``SWIPER_ATTR_FACTORY`` is imported on first use.
            registry: Instance registry. A fresh one is created if omitted.
            mutations: Insertion notifier for the document. Without it the
                change watcher cannot be installed.
            settings: Engine settings. Defaults to the cached environment settings.
        """
        self.document = document
        self.registry = registry if registry is not None else InstanceRegistry()
        self.settings = settings or get_settings()
        self._factory = factory
        self._mutations = mutations
        self._observer: TreeObserver | None = None

    # ------------------------------------------------------------------
    # Single component
    # ------------------------------------------------------------------

    def is_bound(self, component: HtmlElement) -> bool:
        return component.get(INITIALIZED_ATTR) is not None or component in self.registry

    def initialize(self, component: HtmlElement) -> Any | None:
        """Bind one component.

        Args:
            component: The component root element.

        Returns:
            The slider instance, or None when the component is already bound
            or cannot be bound. Failures are logged, never raised.
        """
        if self.is_bound(component):
            logger.warning(f"Component {describe(component)} already initialized, skipping")
            return None

        try:
            factory = self._require_factory()

            parsed_config = parse_configuration(component)
            elements = locate_elements(component)
            config = build_swiper_config(parsed_config, elements)

            logger.debug(f"Initializing {describe(component)} with config: {config}")
            if config.get("breakpoints"):
                logger.debug(f"Breakpoints detected: {config['breakpoints']}")
        except (StructuralError, MissingDependencyError) as e:
            logger.error(f"Initialization failed for {describe(component)}: {e}")
            return None
        except Exception as e:
            logger.exception(f"Initialization failed for {describe(component)}: {e}")
            return None

        try:
            instance = factory(elements.container, config)
        except Exception as e:
            logger.exception(f"Slider construction failed for {describe(component)}: {e}")
            return None

        component.set(INITIALIZED_ATTR, INITIALIZED_VALUE)
        self.registry.add(
            BoundSlider(component=component, instance=instance, graph=elements, config=config)
        )

        logger.info(
            f"Slider initialized for {describe(component)} "
            f"({elements.slide_count} slides)"
        )
        return instance

    def destroy(self, component: HtmlElement) -> None:
        """Tear down a bound component. No-op when unbound."""
        record = self.registry.remove(component)
        if record is None:
            return

        try:
            record.instance.destroy(True, True)
        finally:
            component.attrib.pop(INITIALIZED_ATTR, None)
            logger.info(f"Slider instance destroyed for {describe(component)}")

    def reinitialize(self, component: HtmlElement) -> Any | None:
        """Destroy and bind again, picking up changed attributes or slides."""
        self.destroy(component)
        return self.initialize(component)

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    def discover_all(self) -> list[Any]:
        """Bind every component in the document.

        Returns:
            Instances bound during this pass, in document order.
        """
        components = find_components(self.document)
        if not components:
            logger.info("No slider components found")
            return []

        total = len(components)
        logger.info(f"Found {total} slider component(s), initializing...")

        instances = []
        for index, component in enumerate(components, start=1):
            logger.debug(f"Initializing component {index}/{total}")
            instance = self.initialize(component)
            if instance is not None:
                instances.append(instance)

        logger.info(f"Successfully initialized {len(instances)} slider(s)")
        return instances

    def watch_for_changes(self) -> TreeObserver | None:
        """Re-run discovery when unbound components are inserted under <body>.

        Returns:
            The active observer, or None when the document has no insertion
            notifier.
        """
        if self._observer is not None:
            return self._observer

        if self._mutations is None:
            logger.warning("Change observation not supported here. Dynamic content detection disabled.")
            return None

        self._observer = self._mutations.observer(self._on_mutations)
        self._observer.observe(body_of(self.document), subtree=True)
        logger.info("Change watcher enabled for dynamic content detection")
        return self._observer

    def stop_watching(self) -> None:
        if self._observer is not None:
            self._observer.disconnect()
            self._observer = None

    def start(self) -> list[Any]:
        """Bind existing components, then watch for new ones if enabled."""
        logger.info("Initializing attribute-based slider system...")
        instances = self.discover_all()
        if self.settings.watch_changes:
            self.watch_for_changes()
        logger.info("System initialization complete")
        return instances

    def teardown(self) -> None:
        """Destroy every bound component and stop watching.

        A failing instance is logged and skipped; the rest are still destroyed.
        """
        try:
            for record in self.registry:
                try:
                    self.destroy(record.component)
                except Exception as e:
                    logger.exception(f"Destroy failed for {describe(record.component)}: {e}")
        finally:
            self.stop_watching()
            self.registry.clear()

    # ------------------------------------------------------------------
    # Control surface (element or identifier)
    # ------------------------------------------------------------------

    def init_all(self) -> list[Any]:
        return self.discover_all()

    def init_component(self, target: HtmlElement | str) -> Any | None:
        component = self._resolve(target)
        if component is None:
            return None
        return self.initialize(component)

    def destroy_component(self, target: HtmlElement | str) -> None:
        component = self._resolve(target)
        if component is not None:
            self.destroy(component)

    def reinit_component(self, target: HtmlElement | str) -> Any | None:
        component = self._resolve(target)
        if component is None:
            return None
        return self.reinitialize(component)

    def get_instances(self) -> list[Any]:
        """All bound instances, in bind order."""
        return self.registry.instances()

    def get_instance(self, target: HtmlElement | str) -> Any | None:
        component = resolve_target(self.document, target)
        if component is None:
            return None
        record = self.registry.get(component)
        return record.instance if record else None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve(self, target: HtmlElement | str) -> HtmlElement | None:
        component = resolve_target(self.document, target)
        if component is None:
            logger.error(f"Component not found: {target!r}")
        return component

    def _require_factory(self) -> SliderFactory:
        if self._factory is None and self.settings.has_factory_path:
            self._factory = load_slider_factory(self.settings.factory_path)
        if self._factory is None:
            raise MissingDependencyError(
                "Slider library not found. Pass a factory or set SWIPER_ATTR_FACTORY."
            )
        return self._factory

    def _on_mutations(self, records: list[MutationRecord]) -> None:
        has_new_components = any(
            component.get(INITIALIZED_ATTR) is None
            for record in records
            for node in record.added_nodes
            if is_element(node)
            for component in find_components(node)
        )
        if has_new_components:
            logger.info("New slider components detected, initializing...")
            self.discover_all()
