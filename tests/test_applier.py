from silversettings.presets.applier import apply_preset
from silversettings.presets.models import Preset
from silversettings.settings.decoration import DecorationSettings


def test_apply_overlays_only_preset_keys() -> None:
    settings = DecorationSettings(icon_size=12, button_spacing=9)
    preset = Preset("Test", {"icon_size": "30", "button_shape": "square"})

    apply_preset(preset, settings)

    assert settings.icon_size == 30
    assert settings.button_shape == "square"
    assert settings.button_spacing == 9


def test_apply_converts_store_strings() -> None:
    settings = DecorationSettings()
    apply_preset(Preset("Test", {"draw_titlebar_separator": "false", "window_corner_radius": "7.5"}), settings)

    assert settings.draw_titlebar_separator is False
    assert settings.window_corner_radius == 7.5


def test_apply_skips_catalog_metadata() -> None:
    settings = DecorationSettings()
    apply_preset(Preset("Test", {"BundledPreset": "true", "icon_size": "20"}, bundled=True), settings)

    assert settings.icon_size == 20
    assert "BundledPreset" not in settings.to_store()


def test_apply_twice_is_idempotent() -> None:
    preset = Preset("Test", {"titlebar_opacity": "60", "active_titlebar_color": "#112233"})
    settings = DecorationSettings()

    apply_preset(preset, settings)
    first = settings.model_dump()
    apply_preset(preset, settings)

    assert settings.model_dump() == first


def test_apply_skips_entries_the_schema_rejects(caplog) -> None:
    settings = DecorationSettings(button_spacing=9)
    preset = Preset("Old", {"icon_size": "20", "removed_option": "1", "button_spacing": "999"})

    apply_preset(preset, settings)

    assert settings.icon_size == 20
    assert settings.button_spacing == 9
    assert "removed_option" in caplog.text
    assert "button_spacing" in caplog.text
