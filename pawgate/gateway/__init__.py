"""Gateway policy package."""

from .client import build_provider_client
from .errors import ConfigError, InvalidSetting, MissingSecret
from .models import ClientDescriptor, Environment, GatewayCredentials
from .policy import GatewayPolicy
from .secrets import EnvSecretsSource, InMemorySecretsSource, SecretsSource

__all__ = [
    "build_provider_client",
    "ClientDescriptor",
    "ConfigError",
    "EnvSecretsSource",
    "Environment",
    "GatewayCredentials",
    "GatewayPolicy",
    "InMemorySecretsSource",
    "InvalidSetting",
    "MissingSecret",
    "SecretsSource",
]
