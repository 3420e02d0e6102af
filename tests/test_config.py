"""
Tests for configuration management
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from clean_catalog.infrastructure.configuration.config import (
    Settings,
    get_config,
    reset_config,
)


class TestSettings:
    """Test Settings model"""

    def test_settings_default_values(self):
        """Test settings with default values"""
        settings = Settings()
        assert settings.environment == 'test'  # from mock_env
        assert settings.log_level == 'DEBUG'  # from mock_env
        assert settings.log_dir == 'logs'
        assert settings.log_to_file is False
        assert settings.default_format == 'json'
        assert settings.xml_root_tag == 'category'

    def test_settings_custom_values(self):
        """Test settings with custom values"""
        with patch.dict(os.environ, {
            'CATALOG_ENVIRONMENT': 'production',
            'CATALOG_LOG_LEVEL': 'error',
            'CATALOG_LOG_TO_FILE': 'true',
            'CATALOG_DEFAULT_FORMAT': 'xml',
            'CATALOG_XML_ROOT_TAG': 'Category',
        }):
            settings = Settings()
            assert settings.environment == 'production'
            assert settings.log_level == 'ERROR'
            assert settings.log_to_file is True
            assert settings.default_format == 'xml'
            assert settings.xml_root_tag == 'Category'

    def test_settings_validation_error(self):
        """Test invalid values are rejected"""
        with pytest.raises(ValidationError):
            Settings(default_format='yaml')

        with pytest.raises(ValidationError):
            Settings(log_level='LOUD')

        with pytest.raises(ValidationError):
            Settings(xml_root_tag='')


class TestGetConfig:
    """Test the global settings accessor"""

    def test_get_config_singleton(self):
        """Test get_config returns the same instance"""
        assert get_config() is get_config()

    def test_reset_config(self):
        """Test reset_config re-reads the environment"""
        first = get_config()
        with patch.dict(os.environ, {'CATALOG_ENVIRONMENT': 'staging'}):
            reset_config()
            second = get_config()
        assert second is not first
        assert second.environment == 'staging'
