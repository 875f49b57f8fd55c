import pytest
from pydantic import ValidationError

from storefront.core.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.gst_rate == 18.0
    assert settings.currency == "INR"
    assert not settings.is_production


def test_production_requires_secret_key() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, app_env="production")

    settings = Settings(_env_file=None, app_env="production", app_secret_key="s3cret")
    assert settings.is_production
