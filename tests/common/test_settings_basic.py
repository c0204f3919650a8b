import pytest

from storageperms.common import settings as s
from storageperms.common.settings import Settings, get_settings


@pytest.fixture()
def fresh_settings():
    # ensure a clean cache per test
    s.get_settings.cache_clear()
    yield
    s.get_settings.cache_clear()


def test_settings_data_root_created(tmp_path, monkeypatch, fresh_settings):
    root = tmp_path / "data"
    monkeypatch.setenv("APP_ENV", "development")
    monkeypatch.setenv("DATA_ROOT", str(root))

    cfg = get_settings()
    assert cfg.data_root == root
    assert root.exists()

    # derived store URLs live under data_root unless overridden
    assert cfg.media_index_url == f"sqlite:///{root / 'media_index.db'}"
    assert cfg.preferences_url == f"sqlite:///{root / 'settings.db'}"

    # spot-check a couple defaults
    assert cfg.library.query_limit == 500
    assert cfg.library.content_uri == "content://media/external/file"
    assert cfg.permissions.granular_requires_target_sdk is True


def test_settings_nested_env_overrides(tmp_path, monkeypatch, fresh_settings):
    monkeypatch.setenv("DATA_ROOT", str(tmp_path))
    monkeypatch.setenv("DEVICE__SDK_INT", "29")
    monkeypatch.setenv("DEVICE__RELEASE", "10")
    monkeypatch.setenv("LIBRARY__QUERY_LIMIT", "250")
    monkeypatch.setenv("MEDIA_INDEX__URL", "sqlite:///:memory:")

    cfg = get_settings()
    assert cfg.device.sdk_int == 29
    assert cfg.device.release == "10"
    assert cfg.device.target_sdk == 33
    assert cfg.library.query_limit == 250
    assert cfg.media_index_url == "sqlite:///:memory:"


def test_settings_csv_lists_are_normalized():
    cfg = Settings(
        video_exts=".MP4, mov",
        permissions={"auto_grant": "android.permission.READ_MEDIA_IMAGES, android.permission.READ_MEDIA_VIDEO"},
    )
    assert cfg.video_exts == ["mp4", "mov"]
    assert cfg.permissions.auto_grant == [
        "android.permission.READ_MEDIA_IMAGES",
        "android.permission.READ_MEDIA_VIDEO",
    ]


def test_settings_rejects_out_of_range_query_limit():
    with pytest.raises(ValueError):
        Settings(library={"query_limit": 0})
