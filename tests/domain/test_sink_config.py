from __future__ import annotations

import dataclasses
import socket

import pytest

from lib_log_syslog.domain.config import (
    ConfigurationError,
    SinkConfig,
    TransportProtocol,
    UnsupportedProtocolError,
    default_sender,
)
from lib_log_syslog.domain.syslog import SyslogFacility
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_defaults_match_documented_values() -> None:
    config = SinkConfig(host="logs.example", port=514)
    assert config.facility is SyslogFacility.LOCAL1
    assert config.protocol is TransportProtocol.UDP
    assert config.use_tls is False
    assert config.split_newlines is True
    assert config.batch_size == 10
    assert config.flush_interval == 1.0
    assert config.send_timeout is None
    assert config.machine_name == socket.gethostname()
    assert config.sender == default_sender()
    assert config.endpoint == ("logs.example", 514)


def test_values_are_coerced() -> None:
    config = SinkConfig(host="  logs  ", port=514, facility="local4", protocol="TCP", flush_interval=2)
    assert config.host == "logs"
    assert config.facility is SyslogFacility.LOCAL4
    assert config.protocol is TransportProtocol.TCP
    assert config.flush_interval == 2.0


def test_unknown_protocol_is_accepted_at_configuration_time() -> None:
    config = SinkConfig(host="logs", port=514, protocol="sctp")
    assert config.protocol == "sctp"


@pytest.mark.parametrize(
    "overrides, match",
    [
        ({"host": ""}, "host"),
        ({"host": "   "}, "host"),
        ({"port": 0}, "port"),
        ({"port": 65536}, "port"),
        ({"port": True}, "port"),
        ({"batch_size": 0}, "batch_size"),
        ({"flush_interval": 0}, "flush_interval"),
        ({"send_timeout": -1.0}, "send_timeout"),
        ({"facility": "local42"}, "facility"),
    ],
)
def test_invalid_values_are_rejected_once(overrides: dict[str, object], match: str) -> None:
    values: dict[str, object] = {"host": "logs", "port": 514}
    values.update(overrides)
    with pytest.raises(ValueError, match=match):
        SinkConfig(**values)  # type: ignore[arg-type]


def test_configuration_errors_are_value_errors() -> None:
    assert issubclass(ConfigurationError, ValueError)
    assert issubclass(UnsupportedProtocolError, ConfigurationError)


def test_config_is_frozen() -> None:
    config = SinkConfig(host="logs", port=514)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.port = 1514  # type: ignore[misc]


def test_default_sender_uses_script_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", ["/opt/app/billing-worker.py"])
    assert default_sender() == "billing-worker"
    monkeypatch.setattr("sys.argv", [""])
    assert default_sender() == "python"
