"""Tests for ContextVar-based layout configuration."""

from threading import Thread

import pytest

from pressmark.config import (
    DEFAULT_KERN_CHARSET,
    LayoutConfig,
    get_layout_config,
    layout_config_context,
    load_config_file,
    reset_layout_config,
    set_layout_config,
)


class TestLayoutConfigDataclass:
    """Frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LayoutConfig()
        assert (config.page_width, config.page_height) == (612, 792)
        assert (config.vertical_margin, config.horizontal_margin) == (72, 72)
        assert (config.body_size, config.head_size) == (12, 13)
        assert config.profile == "standard"
        assert config.font_name == "GoRegular"
        assert config.kern_charset == DEFAULT_KERN_CHARSET

    def test_default_charset_is_printable_ascii(self) -> None:
        assert len(DEFAULT_KERN_CHARSET) == 94
        assert " " not in DEFAULT_KERN_CHARSET

    def test_immutability(self) -> None:
        config = LayoutConfig()
        with pytest.raises(AttributeError):
            config.body_size = 10  # type: ignore[misc]

    @pytest.mark.parametrize(("profile", "ratio"), [("standard", 1.5), ("loose", 1.75)])
    def test_profiles(self, profile: str, ratio: float) -> None:
        assert LayoutConfig(profile=profile).body_pad_ratio == ratio

    def test_unknown_profile(self) -> None:
        with pytest.raises(ValueError, match="unknown profile 'tight'"):
            LayoutConfig(profile="tight")


class TestValidation:
    """Values are checked when the config is built."""

    @pytest.mark.parametrize(
        "font_name",
        ["Times Roman", "Times\tRoman", "\u660e\u671d", "Go\ufffdSans", "a/b", "(x)", "50%", ""],
    )
    def test_font_name_must_be_postscript_name(self, font_name: str) -> None:
        with pytest.raises(ValueError, match="not a PostScript name"):
            LayoutConfig(font_name=font_name)

    @pytest.mark.parametrize("font_name", ["Times-Roman", "Helvetica", "Go_Mono.Bold"])
    def test_valid_font_names(self, font_name: str) -> None:
        assert LayoutConfig(font_name=font_name).font_name == font_name

    @pytest.mark.parametrize(
        ("key", "value"),
        [("body_size", "12"), ("page_width", None), ("head_size", True), ("vertical_margin", [1])],
    )
    def test_numbers_must_be_numbers(self, key: str, value: object) -> None:
        with pytest.raises(TypeError, match=f"{key} must be a number"):
            LayoutConfig.from_dict({key: value})

    @pytest.mark.parametrize("key", ["profile", "font_name", "kern_charset"])
    def test_text_must_be_strings(self, key: str) -> None:
        with pytest.raises(TypeError, match=f"{key} must be a string"):
            LayoutConfig.from_dict({key: 3})

    @pytest.mark.parametrize("key", ["body_size", "page_height"])
    def test_sizes_must_be_positive(self, key: str) -> None:
        with pytest.raises(ValueError, match=f"{key} must be positive"):
            LayoutConfig.from_dict({key: 0})

    def test_margins_may_be_zero(self) -> None:
        assert LayoutConfig(vertical_margin=0, horizontal_margin=0).horizontal_margin == 0

    def test_negative_margin(self) -> None:
        with pytest.raises(ValueError, match="horizontal_margin must not be negative"):
            LayoutConfig(horizontal_margin=-1)

    def test_float_sizes(self) -> None:
        assert LayoutConfig(body_size=10.5).body_size == 10.5


class TestFromDict:
    """LayoutConfig.from_dict()."""

    def test_basic(self) -> None:
        config = LayoutConfig.from_dict({"body_size": 10, "profile": "loose"})
        assert config.body_size == 10
        assert config.profile == "loose"
        assert config.head_size == 13

    def test_ignores_unknown_keys(self) -> None:
        config = LayoutConfig.from_dict({"body_size": 11, "colour": "red"})
        assert config.body_size == 11

    def test_empty(self) -> None:
        assert LayoutConfig.from_dict({}) == LayoutConfig()


class TestConfigFile:
    """TOML loading."""

    def test_layout_table(self, tmp_path) -> None:
        path = tmp_path / "pressmark.toml"
        path.write_text('[layout]\nbody_size = 10\nfont_name = "Times-Roman"\n')
        config = load_config_file(path)
        assert config.body_size == 10
        assert config.font_name == "Times-Roman"

    def test_top_level(self, tmp_path) -> None:
        path = tmp_path / "pressmark.toml"
        path.write_text('profile = "loose"\n')
        assert load_config_file(path).profile == "loose"

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(OSError):
            load_config_file(tmp_path / "nope.toml")


class TestContextVarFunctions:
    """get/set/reset and the context manager."""

    def test_default(self) -> None:
        assert get_layout_config() == LayoutConfig()

    def test_set_and_reset(self) -> None:
        set_layout_config(LayoutConfig(body_size=9))
        assert get_layout_config().body_size == 9
        reset_layout_config()
        assert get_layout_config().body_size == 12

    def test_context_restores(self) -> None:
        with layout_config_context(LayoutConfig(body_size=9)):
            assert get_layout_config().body_size == 9
        assert get_layout_config().body_size == 12

    def test_context_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with layout_config_context(LayoutConfig(body_size=9)):
                raise RuntimeError("boom")
        assert get_layout_config().body_size == 12

    def test_thread_isolation(self) -> None:
        """A config set in another thread does not leak here."""
        seen = []

        def worker() -> None:
            set_layout_config(LayoutConfig(body_size=7))
            seen.append(get_layout_config().body_size)

        t = Thread(target=worker)
        t.start()
        t.join()
        assert seen == [7]
        assert get_layout_config().body_size == 12
