"""Unit tests for GatewayPolicy initialization and accessors."""

from __future__ import annotations

import logging

import pytest

from pawgate.gateway.errors import ConfigError, InvalidSetting, MissingSecret
from pawgate.gateway.policy import GatewayPolicy
from pawgate.gateway.secrets import InMemorySecretsSource, SecretsSource


def make_policy(**values: str) -> GatewayPolicy:
    return GatewayPolicy.initialize(InMemorySecretsSource(values))


class TestInitialize:
    def test_empty_source_fails_naming_secret_key(self):
        with pytest.raises(MissingSecret) as exc_info:
            GatewayPolicy.initialize(InMemorySecretsSource({}))
        assert exc_info.value.field == "secretKey"
        assert "GATEWAY_SECRET_KEY" in str(exc_info.value)

    def test_blank_secret_key_is_missing(self):
        with pytest.raises(MissingSecret, match="secretKey"):
            make_policy(GATEWAY_SECRET_KEY="  ")

    def test_missing_secret_is_a_config_error(self):
        with pytest.raises(ConfigError):
            make_policy(RUNTIME_ENVIRONMENT="production")

    def test_secondary_secrets_are_not_required_at_startup(self):
        policy = make_policy(GATEWAY_SECRET_KEY="sk_x")
        assert isinstance(policy, GatewayPolicy)

    def test_logs_environment_without_secret(self, caplog):
        caplog.set_level(logging.INFO, logger="pawgate.gateway.policy")
        make_policy(GATEWAY_SECRET_KEY="sk_live_hidden", RUNTIME_ENVIRONMENT="staging")

        records = [r for r in caplog.records if r.name == "pawgate.gateway.policy"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert "staging" in records[0].getMessage()
        assert "sk_live_hidden" not in caplog.text

    @pytest.mark.parametrize("raw", ["abc", "-0.5", "100.01", "250"])
    def test_rejects_unusable_fee_percentage(self, raw):
        with pytest.raises(InvalidSetting) as exc_info:
            make_policy(GATEWAY_SECRET_KEY="sk_x", PLATFORM_FEE_PERCENTAGE=raw)
        assert exc_info.value.field == "feePercentage"

    def test_repr_does_not_leak_secret(self):
        policy = make_policy(GATEWAY_SECRET_KEY="sk_live_hidden")
        assert "sk_live_hidden" not in repr(policy)
        assert "sk_live_hidden" not in repr(policy.credentials)


class TestMode:
    def test_production_is_live(self):
        policy = make_policy(GATEWAY_SECRET_KEY="sk_x", RUNTIME_ENVIRONMENT="production")
        assert policy.is_test_mode() is False
        assert policy.client_descriptor().telemetry_enabled is True

    def test_unset_environment_is_test_mode(self):
        policy = make_policy(GATEWAY_SECRET_KEY="sk_x")
        assert policy.environment == "development"
        assert policy.is_test_mode() is True
        assert policy.application_fee_percentage() == 10

    @pytest.mark.parametrize("env", ["", "development", "staging", "Production", "prod", "test"])
    def test_every_other_environment_is_test_mode(self, env):
        policy = make_policy(GATEWAY_SECRET_KEY="sk_x", RUNTIME_ENVIRONMENT=env)
        assert policy.is_test_mode() is True
        assert policy.client_descriptor().telemetry_enabled is False


class TestDescriptor:
    def test_descriptor_is_same_object_on_every_call(self):
        policy = make_policy(GATEWAY_SECRET_KEY="sk_x")
        first = policy.client_descriptor()
        assert policy.client_descriptor() is first
        assert policy.client_descriptor() == first

    def test_descriptor_carries_client_policy(self):
        descriptor = make_policy(GATEWAY_SECRET_KEY="sk_x").client_descriptor()
        assert descriptor.max_retries == 3
        assert descriptor.timeout_ms == 20000
        assert descriptor.api_version == "2025-05-28.basil"


class TestFeePercentage:
    @pytest.mark.parametrize("raw,expected", [("0", 0.0), ("7.5", 7.5), ("10", 10.0), ("100", 100.0)])
    def test_returns_configured_value(self, raw, expected):
        policy = make_policy(GATEWAY_SECRET_KEY="sk_x", PLATFORM_FEE_PERCENTAGE=raw)
        assert policy.application_fee_percentage() == expected

    def test_numeric_values_are_accepted(self):
        source = InMemorySecretsSource({"GATEWAY_SECRET_KEY": "sk_x", "PLATFORM_FEE_PERCENTAGE": 12})
        assert GatewayPolicy.initialize(source).application_fee_percentage() == 12

    def test_blank_value_uses_default(self):
        policy = make_policy(GATEWAY_SECRET_KEY="sk_x", PLATFORM_FEE_PERCENTAGE="")
        assert policy.application_fee_percentage() == 10


class TestSecondarySecrets:
    def test_publishable_key_is_checked_on_use(self):
        source = InMemorySecretsSource({"GATEWAY_SECRET_KEY": "sk_x"})
        policy = GatewayPolicy.initialize(source)

        with pytest.raises(MissingSecret) as exc_info:
            policy.publishable_key()
        assert exc_info.value.field == "publishableKey"

        source.set("GATEWAY_PUBLISHABLE_KEY", "pk_test_123")
        assert policy.publishable_key() == "pk_test_123"

    def test_webhook_secret_is_checked_on_use(self):
        source = InMemorySecretsSource({"GATEWAY_SECRET_KEY": "sk_x"})
        policy = GatewayPolicy.initialize(source)

        with pytest.raises(MissingSecret, match="webhookSecret"):
            policy.webhook_secret()

        source.set("GATEWAY_WEBHOOK_SECRET", "whsec_abc")
        assert policy.webhook_secret() == "whsec_abc"

    def test_blank_secondary_secret_is_missing(self):
        policy = make_policy(GATEWAY_SECRET_KEY="sk_x", GATEWAY_PUBLISHABLE_KEY="")
        with pytest.raises(MissingSecret, match="publishableKey"):
            policy.publishable_key()

    def test_removed_secondary_secret_fails_again(self):
        source = InMemorySecretsSource({"GATEWAY_SECRET_KEY": "sk_x", "GATEWAY_WEBHOOK_SECRET": "whsec_abc"})
        policy = GatewayPolicy.initialize(source)
        assert policy.webhook_secret() == "whsec_abc"
        source.unset("GATEWAY_WEBHOOK_SECRET")
        with pytest.raises(MissingSecret):
            policy.webhook_secret()


class VanishingSecretsSource(SecretsSource):
    """Returns each key's value on the first read and ``None`` afterwards."""

    def __init__(self, values: dict[str, str]) -> None:
        self._values = dict(values)
        self._reads: dict[str, int] = {}

    def get(self, key: str, default=None):
        count = self._reads.get(key, 0)
        self._reads[key] = count + 1
        if count == 0:
            return self._values.get(key, default)
        return default


class TestSingleRead:
    def test_secret_removed_after_first_read_is_not_stringified(self):
        source = VanishingSecretsSource({"GATEWAY_SECRET_KEY": "sk_x", "GATEWAY_PUBLISHABLE_KEY": "pk_live"})
        policy = GatewayPolicy.initialize(source)

        assert policy.publishable_key() == "pk_live"
        with pytest.raises(MissingSecret, match="publishableKey"):
            policy.publishable_key()

    def test_initialize_reads_secret_key_once(self):
        source = VanishingSecretsSource({"GATEWAY_SECRET_KEY": "sk_x"})
        policy = GatewayPolicy.initialize(source)
        assert policy.credentials.secret_key.get_secret_value() == "sk_x"


class TestFieldNames:
    def test_non_string_environment_is_invalid_setting(self):
        source = InMemorySecretsSource({"GATEWAY_SECRET_KEY": "sk_x", "RUNTIME_ENVIRONMENT": 42})
        with pytest.raises(InvalidSetting) as exc_info:
            GatewayPolicy.initialize(source)
        assert exc_info.value.field == "environment"

    @pytest.mark.parametrize("raw", ["abc", "150"])
    def test_fee_errors_use_camel_case_field(self, raw):
        with pytest.raises(InvalidSetting) as exc_info:
            make_policy(GATEWAY_SECRET_KEY="sk_x", PLATFORM_FEE_PERCENTAGE=raw)
        assert exc_info.value.field == "feePercentage"
