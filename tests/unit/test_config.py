"""
Unit tests for cluster configuration loading
"""
import pytest

from core.config import DEFAULT_SUBMIT_TIMEOUT, load_cluster_config
from core.exceptions import ConfigurationError

FULL_ENV = {
    "OSHINKO_CLUSTER_NAMESPACE": "spark",
    "OSHINKO_KUBE_CONFIG": "/etc/kube/config",
    "OSHINKO_CLUSTER_IMAGE": "spark:latest",
}


class TestLoadClusterConfig:
    """Tests for load_cluster_config"""

    def test_complete(self):
        config = load_cluster_config(FULL_ENV)
        assert config.namespace == "spark"
        assert config.kube_config == "/etc/kube/config"
        assert config.image == "spark:latest"
        assert config.submit_timeout == DEFAULT_SUBMIT_TIMEOUT

    def test_all_missing(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_cluster_config({})
        assert exc_info.value.missing == [
            "OSHINKO_CLUSTER_NAMESPACE",
            "OSHINKO_KUBE_CONFIG",
            "OSHINKO_CLUSTER_IMAGE",
        ]

    @pytest.mark.parametrize("key", sorted(FULL_ENV))
    def test_one_missing(self, key):
        env = {k: v for k, v in FULL_ENV.items() if k != key}
        with pytest.raises(ConfigurationError) as exc_info:
            load_cluster_config(env)
        assert exc_info.value.missing == [key]
        assert key in exc_info.value.details

    def test_empty_value_counts_as_missing(self):
        env = dict(FULL_ENV, OSHINKO_CLUSTER_IMAGE="")
        with pytest.raises(ConfigurationError):
            load_cluster_config(env)

    def test_submit_timeout(self):
        config = load_cluster_config(dict(FULL_ENV, OSHINKO_SUBMIT_TIMEOUT="2.5"))
        assert config.submit_timeout == 2.5

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_invalid_submit_timeout(self, value):
        with pytest.raises(ConfigurationError):
            load_cluster_config(dict(FULL_ENV, OSHINKO_SUBMIT_TIMEOUT=value))

    def test_reads_process_environment(self, cluster_env):
        config = load_cluster_config()
        assert config.namespace == cluster_env["OSHINKO_CLUSTER_NAMESPACE"]
