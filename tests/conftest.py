"""Pytest configuration and shared fixtures"""
from datetime import datetime, timezone

import pytest

from opentsdb_canary.canary.scope import OpentsdbCanaryScope


@pytest.fixture
def version_scope():
    """Scope 1.0.0 keyed by 'version' in production"""
    return OpentsdbCanaryScope(
        scope="1.0.0",
        scope_key="version",
        extended_scope_params={"env": "production", "_scope_key": "version"},
    )


@pytest.fixture
def windowed_scope():
    """Scope with a one minute analysis window"""
    return OpentsdbCanaryScope(
        scope="control",
        scope_key="scope",
        start=datetime(2018, 6, 1, 12, 0, tzinfo=timezone.utc),
        end=datetime(2018, 6, 1, 12, 1, tzinfo=timezone.utc),
        step=1,
        extended_scope_params={"_scope_key": "scope"},
    )


@pytest.fixture
def config_file(tmp_path):
    """YAML config with two metrics"""
    path = tmp_path / "config.yaml"
    path.write_text(
        "log_level: WARNING\n"
        "metrics:\n"
        "  - name: errors\n"
        "    query:\n"
        "      metric_name: request.count\n"
        "      aggregator: sum\n"
        "      tags:\n"
        "        - {key: app, value: cms}\n"
        "        - {key: response_code, value: '400'}\n"
        "  - name: error_rate\n"
        "    query:\n"
        "      metric_name: request.count\n"
        "      downsample: 1m-sum\n"
        "      rate: true\n"
    )
    return path
