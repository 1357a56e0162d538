"""Runtime module - lifecycle controller, instance registry and change watching."""

from swiper_attrs.runtime.controller import SwiperController
from swiper_attrs.runtime.factory import SliderFactory, SliderInstance, load_slider_factory
from swiper_attrs.runtime.observer import DocumentMutations, MutationRecord, TreeObserver
from swiper_attrs.runtime.registry import BoundSlider, InstanceRegistry

__all__ = [
    "BoundSlider",
    "DocumentMutations",
    "InstanceRegistry",
    "MutationRecord",
    "SliderFactory",
    "SliderInstance",
    "SwiperController",
    "TreeObserver",
    "load_slider_factory",
]
