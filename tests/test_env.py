"""Tests for environment lookup."""

import os
from unittest.mock import patch

from leaseweb_provider.config import MappingEnvironmentReader, OsEnvironmentReader
from leaseweb_provider.config.env import get_env_flag


def test_os_reader_reads_live_environment():
    reader = OsEnvironmentReader()
    with patch.dict(os.environ, {"LEASEWEB_HOST": "api.example.com"}):
        assert reader.get("LEASEWEB_HOST") == "api.example.com"
    with patch.dict(os.environ, {}, clear=True):
        assert reader.get("LEASEWEB_HOST") == ""


def test_mapping_reader():
    reader = MappingEnvironmentReader({"LEASEWEB_TOKEN": "abc"})
    assert reader.get("LEASEWEB_TOKEN") == "abc"
    assert reader.get("LEASEWEB_HOST") == ""
    assert MappingEnvironmentReader().get("LEASEWEB_TOKEN") == ""


def test_get_env_flag():
    with patch.dict(os.environ, {"LEASEWEB_PROVIDER_DEBUG": "yes"}):
        assert get_env_flag("LEASEWEB_PROVIDER_DEBUG")
    with patch.dict(os.environ, {"LEASEWEB_PROVIDER_DEBUG": "0"}):
        assert not get_env_flag("LEASEWEB_PROVIDER_DEBUG", default=True)
    with patch.dict(os.environ, {}, clear=True):
        assert get_env_flag("LEASEWEB_PROVIDER_DEBUG", default=True)


def test_get_env_flag_reads_given_environment():
    env = MappingEnvironmentReader({"LEASEWEB_PROVIDER_DEBUG": "TRUE"})
    with patch.dict(os.environ, {}, clear=True):
        assert get_env_flag("LEASEWEB_PROVIDER_DEBUG", env=env)
    assert not get_env_flag("LEASEWEB_PROVIDER_DEBUG", env=MappingEnvironmentReader())
