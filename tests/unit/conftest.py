"""Unit test fixtures.

Most helpers are in tests/conftest.py.
"""

# Re-export commonly used helpers from root conftest
from tests.conftest import (
    FakeResponse,
    FakeSession,
    read_json,
    remote_server_payload,
    run_cmd,
    stdio_server_payload,
    write_json,
)

__all__ = [
    "FakeResponse",
    "FakeSession",
    "read_json",
    "remote_server_payload",
    "run_cmd",
    "stdio_server_payload",
    "write_json",
]
