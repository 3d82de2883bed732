from __future__ import annotations

import pytest

from mediatel.config import DispatcherSettings, MetricSettings, TimeSeriesSettings
from mediatel.errors import ConfigurationError

_FULL = {
    "MEDIATEL_INFLUX_ENABLED": "true",
    "MEDIATEL_INFLUX_URL_BASE": "http://influx.local:8086/",
    "MEDIATEL_INFLUX_DATABASE": "jvb",
    "MEDIATEL_INFLUX_USER": "bridge",
    "MEDIATEL_INFLUX_PASS": "secret",
}


def test_timeseries_settings_build_series_url():
    settings = TimeSeriesSettings.from_mapping(_FULL)
    assert settings.enabled is True
    assert settings.require_url() == "http://influx.local:8086/db/jvb/series?u=bridge&p=secret"


def test_missing_setting_names_the_first_absent_property():
    props = dict(_FULL)
    del props["MEDIATEL_INFLUX_DATABASE"]
    del props["MEDIATEL_INFLUX_PASS"]
    settings = TimeSeriesSettings.from_mapping(props)

    with pytest.raises(ConfigurationError) as exc_info:
        settings.require_url()
    assert exc_info.value.setting == "MEDIATEL_INFLUX_DATABASE"
    assert "Required property not set" in str(exc_info.value)


def test_blank_values_count_as_missing():
    settings = TimeSeriesSettings.from_mapping({**_FULL, "MEDIATEL_INFLUX_USER": "   "})
    assert settings.user is None


def test_dispatcher_defaults_and_overrides():
    assert TimeSeriesSettings.from_mapping({}).dispatcher == DispatcherSettings()
    settings = TimeSeriesSettings.from_mapping(
        {
            "MEDIATEL_DISPATCH_MAX_WORKERS": "2",
            "MEDIATEL_DISPATCH_MAX_QUEUE": "16",
            "MEDIATEL_DISPATCH_OVERFLOW": "DROP_NEWEST",
            "MEDIATEL_HTTP_TIMEOUT_S": "1.5",
        }
    )
    assert settings.enabled is False
    assert settings.timeout_s == 1.5
    assert settings.dispatcher.max_workers == 2
    assert settings.dispatcher.max_queue_size == 16
    assert settings.dispatcher.overflow_policy == "drop_newest"


def test_unknown_overflow_policy_is_rejected():
    with pytest.raises(ConfigurationError):
        TimeSeriesSettings.from_mapping({"MEDIATEL_DISPATCH_OVERFLOW": "block"})


def test_metric_publishers_are_ordered_by_key():
    settings = MetricSettings.from_mapping(
        {
            "MEDIATEL_METRICS_ENABLED": "1",
            "MEDIATEL_METRIC_PUBLISHER_B": "prometheus",
            "MEDIATEL_METRIC_PUBLISHER_A": "logging",
            "MEDIATEL_METRIC_PUBLISHER_C": " ",
            "UNRELATED": "inmemory",
        }
    )
    assert settings.enabled is True
    assert settings.publishers == ("logging", "prometheus")


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("MEDIATEL_METRICS_ENABLED", "yes")
    monkeypatch.setenv("MEDIATEL_METRIC_PUBLISHER_1", "inmemory")
    monkeypatch.setenv("MEDIATEL_INFLUX_ENABLED", "false")
    assert MetricSettings.from_env().publishers == ("inmemory",)
    assert TimeSeriesSettings.from_env().enabled is False


@pytest.mark.parametrize(
    "name",
    [
        "MEDIATEL_DISPATCH_MAX_WORKERS",
        "MEDIATEL_DISPATCH_MAX_QUEUE",
        "MEDIATEL_HTTP_TIMEOUT_S",
    ],
)
def test_unparsable_numbers_name_the_setting(name):
    with pytest.raises(ConfigurationError) as exc_info:
        TimeSeriesSettings.from_mapping({name: "many"})
    assert exc_info.value.setting == name
    assert "many" in str(exc_info.value)


def test_dispatcher_bounds_are_validated():
    DispatcherSettings().validate()
    with pytest.raises(ConfigurationError) as exc_info:
        DispatcherSettings(max_workers=0).validate()
    assert exc_info.value.setting == "MEDIATEL_DISPATCH_MAX_WORKERS"
    with pytest.raises(ConfigurationError) as exc_info:
        DispatcherSettings(max_queue_size=0).validate()
    assert exc_info.value.setting == "MEDIATEL_DISPATCH_MAX_QUEUE"
