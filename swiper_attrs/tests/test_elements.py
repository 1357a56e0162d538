"""Tests for element graph location and final configuration assembly."""

import pytest

from swiper_attrs.elements import build_swiper_config, locate_elements
from swiper_attrs.errors import StructuralError
from swiper_attrs.parser import parse_configuration


class TestLocateElements:
    """Tests for locate_elements."""

    def test_required_roles(self, make_component) -> None:
        """Test container, wrapper and slides are resolved."""
        component = make_component(slides=3)
        graph = locate_elements(component)

        assert graph.container.get("data-swiper") == "container"
        assert graph.wrapper.get("data-swiper") == "wrapper"
        assert graph.slide_count == 3
        assert graph.pagination is None
        assert graph.nav_prev is None
        assert graph.nav_next is None

    @pytest.mark.parametrize("placement", ["nested", "sibling"])
    def test_optional_roles_in_either_placement(self, make_component, placement: str) -> None:
        """Test pagination and nav resolve nested in or beside the container."""
        component = make_component(placement=placement, pagination=True, nav=True)
        graph = locate_elements(component)

        assert graph.pagination is not None
        assert graph.nav_prev is not None
        assert graph.nav_next is not None
        in_container = graph.pagination.getparent() is graph.container
        assert in_container is (placement == "nested")

    def test_classes_added(self, make_component) -> None:
        """Test library class names are added to every role."""
        component = make_component(pagination=True, nav=True)
        graph = locate_elements(component)

        assert "swiper" in graph.container.classes
        assert "swiper-wrapper" in graph.wrapper.classes
        assert all("swiper-slide" in slide.classes for slide in graph.slides)
        assert "swiper-pagination" in graph.pagination.classes
        assert "swiper-button-prev" in graph.nav_prev.classes
        assert "swiper-button-next" in graph.nav_next.classes

    def test_class_marking_idempotent(self, make_component) -> None:
        """Test locating twice does not duplicate class names."""
        component = make_component()
        locate_elements(component)
        graph = locate_elements(component)
        assert graph.container.get("class") == "swiper"

    def test_existing_classes_kept(self, make_component) -> None:
        """Test author classes survive class marking."""
        component = make_component()
        container = component.xpath('.//*[@data-swiper="container"]')[0]
        container.set("class", "hero-slider")
        locate_elements(component)
        assert set(container.classes) == {"hero-slider", "swiper"}

    def test_missing_container(self, make_component) -> None:
        """Test a missing container is a structural error."""
        with pytest.raises(StructuralError) as exc_info:
            locate_elements(make_component(container=False))
        assert exc_info.value.role == "container"

    def test_missing_wrapper(self, make_component) -> None:
        """Test a missing wrapper is a structural error."""
        with pytest.raises(StructuralError) as exc_info:
            locate_elements(make_component(wrapper=False))
        assert exc_info.value.role == "wrapper"
        assert 'data-swiper="wrapper"' in str(exc_info.value)

    def test_missing_slides(self, make_component) -> None:
        """Test a wrapper without slides is a structural error."""
        with pytest.raises(StructuralError) as exc_info:
            locate_elements(make_component(slides=0))
        assert exc_info.value.role == "slide"

    def test_no_classes_on_failure(self, make_component) -> None:
        """Test nothing is marked when a required role is missing."""
        component = make_component(slides=0)
        with pytest.raises(StructuralError):
            locate_elements(component)
        container = component.xpath('.//*[@data-swiper="container"]')[0]
        assert container.get("class") is None

    def test_roles(self, make_component) -> None:
        """Test the present role list."""
        graph = locate_elements(make_component(pagination=True))
        assert graph.roles() == ["container", "wrapper", "slide", "pagination"]


class TestBuildSwiperConfig:
    """Tests for build_swiper_config."""

    def test_autoplay_shorthand_expanded(self, make_component) -> None:
        """Test autoplay=true expands to the default object."""
        component = make_component(attrs='data-swiper-autoplay="true"')
        config = build_swiper_config(parse_configuration(component), locate_elements(component))
        assert config["autoplay"] == {"delay": 3000, "disableOnInteraction": False}

    def test_autoplay_object_passes_through(self, make_component) -> None:
        """Test an autoplay object is left unchanged."""
        component = make_component(attrs='data-swiper-autoplay=\'{"delay":1000}\'')
        parsed = parse_configuration(component)
        config = build_swiper_config(parsed, locate_elements(component))
        assert config["autoplay"] == {"delay": 1000}
        assert config["autoplay"] is parsed["autoplay"]

    def test_autoplay_false_untouched(self, make_component) -> None:
        """Test autoplay=false is not expanded."""
        component = make_component(attrs='data-swiper-autoplay="false"')
        config = build_swiper_config(parse_configuration(component), locate_elements(component))
        assert config["autoplay"] is False

    def test_pagination_bound_by_identity(self, make_component) -> None:
        """Test the pagination binding holds the located node itself."""
        component = make_component(placement="sibling", pagination=True)
        graph = locate_elements(component)
        config = build_swiper_config(parse_configuration(component), graph)

        assert config["pagination"]["el"] is graph.pagination
        assert config["pagination"]["clickable"] is True

    def test_pagination_attribute_options_win(self, make_component) -> None:
        """Test attribute sub-options override and extend the binding."""
        component = make_component(
            pagination=True,
            attrs='data-swiper-pagination=\'{"clickable": false, "type": "fraction"}\'',
        )
        graph = locate_elements(component)
        config = build_swiper_config(parse_configuration(component), graph)

        assert config["pagination"]["el"] is graph.pagination
        assert config["pagination"]["clickable"] is False
        assert config["pagination"]["type"] == "fraction"

    def test_no_pagination_without_element(self, make_component) -> None:
        """Test pagination options are left alone when no element exists."""
        component = make_component(attrs='data-swiper-pagination=\'{"type": "fraction"}\'')
        config = build_swiper_config(parse_configuration(component), locate_elements(component))
        assert config["pagination"] == {"type": "fraction"}

    def test_navigation_needs_both_controls(self, make_component) -> None:
        """Test a lone nav control is not bound."""
        component = make_component(nav=True)
        component.xpath('.//*[@data-swiper="nav-next"]')[0].drop_tree()
        graph = locate_elements(component)
        config = build_swiper_config(parse_configuration(component), graph)

        assert graph.nav_prev is not None
        assert "navigation" not in config

    def test_navigation_bound_by_identity(self, make_component) -> None:
        """Test both controls are bound by reference."""
        component = make_component(placement="sibling", nav=True)
        graph = locate_elements(component)
        config = build_swiper_config(parse_configuration(component), graph)

        assert config["navigation"]["prevEl"] is graph.nav_prev
        assert config["navigation"]["nextEl"] is graph.nav_next

    def test_parsed_config_not_mutated(self, make_component) -> None:
        """Test the input configuration is left as it was."""
        component = make_component(pagination=True, attrs='data-swiper-autoplay="true"')
        parsed = parse_configuration(component)
        snapshot = dict(parsed)
        build_swiper_config(parsed, locate_elements(component))
        assert parsed == snapshot
