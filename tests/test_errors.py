from pathlib import Path

from silversettings.errors import ConfigStoreError, PresetNotFoundError, SilverSettingsError


def test_config_store_error_str_and_fields() -> None:
    cause = OSError("disk full")
    err = ConfigStoreError(Path("/tmp/store.yaml"), "unable to write store", cause)
    assert str(err) == "/tmp/store.yaml: unable to write store"
    assert err.original_error is cause
    assert isinstance(err, SilverSettingsError)


def test_preset_not_found_error() -> None:
    err = PresetNotFoundError("Ocean")
    assert err.name == "Ocean"
    assert "Ocean" in str(err)
