from http_req.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.follow_redirects is True
        assert settings.panel_host == "127.0.0.1"
        assert settings.panel_port == 8765
        assert settings.open_browser is True
        assert settings.log_level == "WARNING"

    def test_custom_values(self):
        settings = Settings(panel_port=9000, open_browser=False)
        assert settings.panel_port == 9000
        assert settings.open_browser is False

    def test_verbose_preset(self):
        settings = Settings.verbose()
        assert settings.log_level == "DEBUG"
        assert settings.panel_port == 8765

    def test_verbose_preset_with_overrides(self):
        settings = Settings.verbose(follow_redirects=False)
        assert settings.log_level == "DEBUG"
        assert settings.follow_redirects is False
