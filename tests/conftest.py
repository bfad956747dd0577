import pytest
from fastapi.testclient import TestClient

from fleet_collector.main import create_app


def _host_payload(**overrides):
    payload = {
        "hostname": "test-host",
        "ip": "127.0.0.1",
        "uptime": 123.45,
        "cpu_usage": 50.0,
        "cpu_frequency": 2.5,
        "cpu_temperature": 60.0,
        "memory_usage": 4.0,
        "memory_max": 16.0,
        "disks": [],
        "processes": [],
        "os_name": "TestOS",
        "os_version": "1.0",
        "os_kernel": "6.0",
        "os_architecture": "x86_64",
        "cpu_model": "TestCPU",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def host_payload():
    """Factory for a valid report body without GPU fields."""
    return _host_payload


@pytest.fixture
def client():
    """TestClient around a fresh app, so every test starts with an empty registry."""
    return TestClient(create_app())
