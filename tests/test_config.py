import pytest

from cargo_tools import (
    Config,
    CoreService,
    ValidationError,
    create_default_config,
    validate_config,
)


def test_default_config():
    config = Config.default()
    assert config.name == "cargo-tools-test"
    assert config.version == "0.1.0"
    assert create_default_config() == config


def test_process_data_with_default_config():
    service = CoreService(Config.default())
    assert service.process_data("x") == "[cargo-tools-test] Processed: x"


def test_core_service_exposes_its_config():
    config = Config(name="test-server", version="1.0.0")
    service = CoreService(config)
    assert service.get_config() is config
    assert service.config.name == "test-server"
    assert service.config.version == "1.0.0"


def test_process_data_keeps_input_verbatim():
    service = CoreService(Config(name="svc", version="1"))
    text = 'name,age\nJohn,30 {"key": "value"}'
    assert service.process_data(text) == f"[svc] Processed: {text}"
    assert service.process_data("") == "[svc] Processed: "


def test_validate_config_accepts_non_empty_fields():
    assert validate_config(Config(name="a", version="1.0")) is None
    validate_config(create_default_config())


def test_validate_config_rejects_empty_name():
    with pytest.raises(ValidationError, match="Config name cannot be empty"):
        validate_config(Config(name="", version="1.0"))


def test_validate_config_rejects_empty_version():
    with pytest.raises(ValidationError, match="Config version cannot be empty"):
        validate_config(Config(name="a", version=""))


def test_validate_config_checks_name_first():
    with pytest.raises(ValidationError, match="name"):
        validate_config(Config(name="", version=""))


def test_validation_error_is_a_value_error():
    assert issubclass(ValidationError, ValueError)


def test_config_is_immutable():
    config = Config.default()
    with pytest.raises(AttributeError):
        config.name = "other"


def test_config_dict_conversion():
    config = Config(name="example-service", version="1.0.0")
    assert config.to_dict() == {"name": "example-service", "version": "1.0.0"}
    assert Config.from_dict(config.to_dict()) == config


def test_config_from_dict_rejects_bad_shapes():
    with pytest.raises(ValueError):
        Config.from_dict({"name": "x"})
    with pytest.raises(ValueError):
        Config.from_dict({"name": "x", "version": 1})
