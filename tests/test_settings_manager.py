"""
SettingsManager 测试
"""
from lifebalance.config.settings_manager import SettingsManager, settings


class TestSettingsManager:

    def test_singleton(self):
        assert SettingsManager() is settings

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LIFEBALANCE_USER_ID", "alice")
        assert settings.user_id == "alice"

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LIFEBALANCE_USER_ID", raising=False)
        assert settings.get("daily_target_minutes") == 480
        assert settings.history_days == 7
        assert settings.user_id == "local-user"

    def test_yaml_value_wins_over_default(self):
        settings.set("history_days", 14, save=False)
        try:
            assert settings.history_days == 14
        finally:
            settings.reload()
        assert settings.history_days == 7

    def test_get_all_includes_db_path(self):
        result = settings.get_all()
        assert result["db_path"] == settings.db_path
        assert result["local_timezone"] == "UTC"
