"""Tests for configuration."""

import pytest

from mcp_starter.config import Config, ConfigManager


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("ENVIRONMENT", "LOG_LEVEL", "STARTER_TRANSPORT", "HOST", "PORT", "CORS_ORIGIN", "MODULES_ROOT"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.mark.asyncio
class TestConfigManager:
    """Test ConfigManager."""
    
    async def test_defaults(self, clean_env):
        manager = ConfigManager()
        await manager.load()
        config = manager.get()
        
        assert config.transport == "stdio"
        assert config.http_port == 3000
        assert config.cors_origin == "*"
        assert config.log_level == "DEBUG"
        assert config.modules_root is None
        assert not config.is_http
    
    async def test_from_environment(self, clean_env, tmp_path):
        clean_env.setenv("ENVIRONMENT", "production")
        clean_env.setenv("STARTER_TRANSPORT", "HTTP")
        clean_env.setenv("PORT", "8123")
        clean_env.setenv("CORS_ORIGIN", "https://example.com")
        clean_env.setenv("MODULES_ROOT", str(tmp_path))
        
        manager = ConfigManager()
        await manager.load()
        config = manager.get()
        
        assert config.is_production
        assert config.log_level == "INFO"
        assert config.is_http
        assert config.http_port == 8123
        assert config.cors_origin == "https://example.com"
        assert config.modules_root == str(tmp_path)
    
    async def test_unknown_transport(self, clean_env):
        clean_env.setenv("STARTER_TRANSPORT", "carrier-pigeon")
        
        with pytest.raises(ValueError, match="Unknown transport"):
            await ConfigManager().load()


class TestConfigOverride:
    """Test ConfigManager.override."""
    
    def test_get_without_load_returns_defaults(self):
        assert ConfigManager().get() == Config()
    
    def test_override_skips_none(self):
        manager = ConfigManager()
        
        config = manager.override(transport="http", http_port=None)
        
        assert config.transport == "http"
        assert config.http_port == 3000
    
    def test_override_unknown_field(self):
        with pytest.raises(AttributeError):
            ConfigManager().override(nonsense=1)
    
    def test_singleton(self):
        assert ConfigManager.get_instance() is ConfigManager.get_instance()
