"""Tests for style map declaration, responsive expansion and extension."""

import pytest

from responsive_ui.errors import ConfigError
from responsive_ui.styles import StyleMapRegistry, deep_merge, responsive_expand

BREAKPOINTS = ("sm", "md")


# ---------------------------------------------------------------------------
# deep_merge
# ---------------------------------------------------------------------------


class TestDeepMerge:
    def test_keys_are_unioned(self):
        merged = deep_merge({"a": {"x": (1,)}}, {"a": {"y": (2,)}, "b": {}})
        assert merged == {"a": {"x": (1,), "y": (2,)}, "b": {}}

    def test_leaf_is_replaced_not_concatenated(self):
        merged = deep_merge({"a": {"x": ("one",)}}, {"a": {"x": ("two",)}})
        assert merged == {"a": {"x": ("two",)}}

    def test_inputs_are_not_mutated(self):
        base = {"a": {"x": (1,)}}
        deep_merge(base, {"a": {"y": (2,)}})
        assert base == {"a": {"x": (1,)}}


# ---------------------------------------------------------------------------
# responsive_expand
# ---------------------------------------------------------------------------


class TestResponsiveExpand:
    def test_keeps_initial_by_default(self):
        layered = responsive_expand({"size": {"large": ["size-lg"]}}, BREAKPOINTS)
        assert list(layered) == [None, "sm", "md"]
        assert layered[None] == {"size": {"large": ("size-lg",)}}
        assert layered["sm"] == {"size": {"large": ("size-lg",)}}

    def test_remove_initial(self):
        layered = responsive_expand(
            {"size": {"large": ["size-lg"]}}, BREAKPOINTS, remove_initial=True
        )
        assert None not in layered
        assert list(layered) == ["sm", "md"]

    def test_class_format(self):
        layered = responsive_expand(
            {"size": {"large": "size-lg bold"}},
            BREAKPOINTS,
            class_format="{breakpoint}:{token}",
        )
        assert layered["md"]["size"]["large"] == ("md:size-lg", "md:bold")
        assert layered[None]["size"]["large"] == ("size-lg", "bold")

    def test_empty_table(self):
        assert responsive_expand({}, BREAKPOINTS) == {}
        assert responsive_expand(None, BREAKPOINTS) == {}


# ---------------------------------------------------------------------------
# define
# ---------------------------------------------------------------------------


class TestDefine:
    def test_general_and_responsive_example(self):
        registry = StyleMapRegistry.define(
            general={"variant": {"primary": ["btn-primary"]}},
            responsive={"size": {"large": ["size-lg"]}},
            breakpoints=BREAKPOINTS,
        )
        assert registry.lookup("variant", "primary") == ("btn-primary",)
        assert registry.lookup("size", "large", breakpoint="sm") == ("size-lg",)
        assert registry.lookup("size", "large", breakpoint="md") == ("size-lg",)
        assert registry.lookup("size", "large") is None
        assert "size" not in registry.style_map[None]

    def test_responsive_key_survives_when_also_general(self):
        registry = StyleMapRegistry.define(
            general={"size": {"large": ["size-lg"]}},
            responsive={"size": {"large": ["size-lg"]}},
            breakpoints=BREAKPOINTS,
        )
        assert registry.lookup("size", "large") == ("size-lg",)

    def test_with_responsive_keeps_initial(self):
        registry = StyleMapRegistry.define(
            with_responsive={"direction": {"row": "dir-row"}},
            breakpoints=BREAKPOINTS,
        )
        assert registry.lookup("direction", "row") == ("dir-row",)
        assert registry.lookup("direction", "row", breakpoint="md") == ("dir-row",)

    def test_with_responsive_overrides_general_leaf(self):
        registry = StyleMapRegistry.define(
            general={"gap": {"none": "gap-0", "wide": "gap-8"}},
            with_responsive={"gap": {"wide": "gap-10"}},
            breakpoints=BREAKPOINTS,
        )
        assert registry.lookup("gap", "none") == ("gap-0",)
        assert registry.lookup("gap", "wide") == ("gap-10",)

    def test_empty_class_list_is_allowed(self):
        registry = StyleMapRegistry.define(general={"scheme": {"default": ""}})
        assert registry.lookup("scheme", "default") == ()

    def test_style_map_is_frozen(self):
        registry = StyleMapRegistry.define(general={"scheme": {"primary": "p"}})
        with pytest.raises(TypeError):
            registry.style_map[None]["scheme"]["danger"] = ("d",)  # type: ignore[index]

    def test_declaration_input_is_copied(self):
        general = {"scheme": {"primary": ["p"]}}
        registry = StyleMapRegistry.define(general=general)
        general["scheme"]["primary"].append("q")
        assert registry.lookup("scheme", "primary") == ("p",)

    def test_invalid_leaf_is_config_error(self):
        with pytest.raises(ConfigError, match="string or a list"):
            StyleMapRegistry.define(general={"scheme": {"primary": 3}})

    def test_invalid_token_is_config_error(self):
        with pytest.raises(ConfigError, match="invalid token"):
            StyleMapRegistry.define(general={"scheme": {"primary": ["p", ""]}})

    def test_non_mapping_entry_is_config_error(self):
        with pytest.raises(ConfigError, match="must map values"):
            StyleMapRegistry.define(general={"scheme": ["primary"]})

    def test_property_named_like_breakpoint_is_config_error(self):
        with pytest.raises(ConfigError, match="collides"):
            StyleMapRegistry.define(general={"sm": {"x": "y"}}, breakpoints=BREAKPOINTS)

    def test_invalid_class_format_is_config_error(self):
        with pytest.raises(ConfigError, match="class_format"):
            StyleMapRegistry.define(class_format="{size}")

    def test_entries_in_declaration_order(self):
        registry = StyleMapRegistry.define(
            general={"variant": {"primary": "p"}},
            responsive={"size": {"large": "l"}},
            breakpoints=BREAKPOINTS,
        )
        assert list(registry.entries()) == [
            (None, "variant", "primary", ("p",)),
            ("sm", "size", "large", ("l",)),
            ("md", "size", "large", ("l",)),
        ]

    def test_to_dict(self):
        registry = StyleMapRegistry.define(
            general={"variant": {"primary": "p"}},
            responsive={"size": {"large": "l"}},
            breakpoints=("sm",),
        )
        assert registry.to_dict() == {
            "*": {"variant": {"primary": ["p"]}},
            "sm": {"size": {"large": ["l"]}},
        }


# ---------------------------------------------------------------------------
# extend
# ---------------------------------------------------------------------------


class TestExtend:
    def _parent(self) -> StyleMapRegistry:
        return StyleMapRegistry.define(
            general={"scheme": {"primary": "p", "danger": "d"}, "variant": {"large": "lg"}},
            responsive={"size": {"small": "s"}},
            breakpoints=BREAKPOINTS,
        )

    def test_child_adds_properties(self):
        child = self._parent().extend(general={"block": {True: "d-block"}})
        assert child.lookup("block", True) == ("d-block",)
        assert child.lookup("scheme", "primary") == ("p",)
        assert child.lookup("size", "small", breakpoint="sm") == ("s",)

    def test_child_property_replaces_parent_table(self):
        child = self._parent().extend(general={"scheme": {"primary": "child-p"}})
        assert child.lookup("scheme", "primary") == ("child-p",)
        assert child.lookup("scheme", "danger") is None
        assert child.lookup("variant", "large") == ("lg",)

    def test_child_responsive_entries(self):
        child = self._parent().extend(responsive={"size": {"large": "l"}})
        assert child.lookup("size", "large", breakpoint="md") == ("l",)
        assert child.lookup("size", "small", breakpoint="md") is None

    def test_parent_is_untouched(self):
        parent = self._parent()
        parent.extend(general={"scheme": {"primary": "child-p"}})
        assert parent.lookup("scheme", "primary") == ("p",)

    def test_extend_keeps_class_format(self):
        parent = StyleMapRegistry.define(breakpoints=("md",), class_format="{token}-{breakpoint}")
        child = parent.extend(responsive={"gap": {"wide": "gap-8"}})
        assert child.lookup("gap", "wide", breakpoint="md") == ("gap-8-md",)
