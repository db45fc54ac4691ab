"""
Pytest configuration and fixtures
"""
import os
import sys
import pytest
from typing import Generator, AsyncGenerator
from unittest.mock import patch

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from core.config import ClusterConfig


# ============================================
# Fake Kubernetes API
# ============================================

class RecordingApi:
    """CoreV1Api/AppsV1Api 대역 - 제출된 오브젝트를 순서대로 기록

    fail_on에 지정된 이름의 오브젝트는 error를 발생시킨다.
    """

    def __init__(self):
        self.calls = []
        self.fail_on = {}

    def fail(self, name: str, error: Exception):
        self.fail_on[name] = error

    def _record(self, kind, namespace, body, kwargs):
        name = body.metadata.name
        if name in self.fail_on:
            raise self.fail_on[name]
        self.calls.append({
            "kind": kind,
            "namespace": namespace,
            "name": name,
            "body": body,
            "kwargs": kwargs,
        })
        return body

    def create_namespaced_deployment(self, namespace, body, **kwargs):
        return self._record("Deployment", namespace, body, kwargs)

    def create_namespaced_service(self, namespace, body, **kwargs):
        return self._record("Service", namespace, body, kwargs)

    def list_namespaced_service(self, namespace, **kwargs):
        return []

    def names(self, kind=None):
        return [c["name"] for c in self.calls if kind is None or c["kind"] == kind]

    def body(self, name, kind=None):
        for c in self.calls:
            if c["name"] == name and (kind is None or c["kind"] == kind):
                return c["body"]
        raise KeyError(name)


# ============================================
# App Fixtures
# ============================================

@pytest.fixture(scope="session")
def app():
    """Create FastAPI app for testing"""
    from main import app as fastapi_app
    return fastapi_app


@pytest.fixture
def client(app) -> Generator:
    """Synchronous test client"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def async_client(app) -> AsyncGenerator:
    """Asynchronous test client"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ============================================
# Config Fixtures
# ============================================

@pytest.fixture
def cluster_env(monkeypatch):
    """필수 환경변수 설정"""
    env = {
        "OSHINKO_CLUSTER_NAMESPACE": "spark",
        "OSHINKO_KUBE_CONFIG": "/tmp/kubeconfig",
        "OSHINKO_CLUSTER_IMAGE": "radanalyticsio/openshift-spark",
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("OSHINKO_SUBMIT_TIMEOUT", raising=False)
    return env


@pytest.fixture
def missing_env(monkeypatch):
    """필수 환경변수 제거"""
    for key in ("OSHINKO_CLUSTER_NAMESPACE", "OSHINKO_KUBE_CONFIG", "OSHINKO_CLUSTER_IMAGE"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def cluster_config() -> ClusterConfig:
    return ClusterConfig(
        namespace="spark",
        kube_config="/tmp/kubeconfig",
        image="radanalyticsio/openshift-spark",
        submit_timeout=5,
    )


# ============================================
# Mock Fixtures
# ============================================

@pytest.fixture
def fake_k8s() -> RecordingApi:
    return RecordingApi()


@pytest.fixture
def mock_k8s_clients(fake_k8s):
    """Mock Kubernetes clients (오케스트레이터가 사용하는 get_k8s_clients 대체)"""
    with patch("services.cluster.get_k8s_clients") as mock:
        mock.return_value = (fake_k8s, fake_k8s)
        yield {
            "api": fake_k8s,
            "mock": mock,
        }
