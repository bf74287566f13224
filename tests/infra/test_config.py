"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from parts_catalog.infra import config
from parts_catalog.infra.db import config as db_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PRODUCTS_DEFAULT_LIMIT",
        "PRODUCTS_PUBLIC_MAX_LIMIT",
        "PRODUCTS_ADMIN_MAX_LIMIT",
        "ADMIN_JWT_SECRET",
        "LOG_LEVEL",
        "RATE_LIMIT_PER_MINUTE",
        "DATABASE_URL",
        "DB_POOL_SIZE",
        "DB_MAX_OVERFLOW",
        "DB_POOL_RECYCLE_SECONDS",
        "DB_POOL_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)


# ==============================================================================
# int_env()
# ==============================================================================


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, 7), ("", 7), ("  ", 7), ("abc", 7), ("0", 7), ("-1", 7), ("12", 12)],
)
def test_int_env_falls_back_to_default(
    monkeypatch: pytest.MonkeyPatch, raw: str | None, expected: int
) -> None:
    if raw is not None:
        monkeypatch.setenv("SOME_SETTING", raw)

    assert config.int_env("SOME_SETTING", 7) == expected


def test_int_env_minimum_zero_allows_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SOME_SETTING", "0")

    assert config.int_env("SOME_SETTING", 7, minimum=0) == 0


# ==============================================================================
# Listing settings
# ==============================================================================


def test_listing_defaults() -> None:
    assert config.default_page_limit() == 10
    assert config.public_max_limit() == 100
    assert config.admin_max_limit() == 10_000
    assert config.admin_jwt_secret() is None


def test_listing_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRODUCTS_DEFAULT_LIMIT", "25")
    monkeypatch.setenv("PRODUCTS_PUBLIC_MAX_LIMIT", "200")
    monkeypatch.setenv("PRODUCTS_ADMIN_MAX_LIMIT", "5000")
    monkeypatch.setenv("ADMIN_JWT_SECRET", "s3cret")

    assert config.default_page_limit() == 25
    assert config.public_max_limit() == 200
    assert config.admin_max_limit() == 5000
    assert config.admin_jwt_secret() == "s3cret"


def test_empty_admin_secret_is_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADMIN_JWT_SECRET", "")

    assert config.admin_jwt_secret() is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, "INFO"), ("debug", "DEBUG"), (" warning ", "WARNING"), ("verbose", "INFO")],
)
def test_log_level(monkeypatch: pytest.MonkeyPatch, raw: str | None, expected: str) -> None:
    if raw is not None:
        monkeypatch.setenv("LOG_LEVEL", raw)

    assert config.log_level() == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, 100), ("30", 30), ("0", 0), ("-5", 100), ("many", 100)],
)
def test_rate_limit_per_minute(
    monkeypatch: pytest.MonkeyPatch, raw: str | None, expected: int
) -> None:
    if raw is not None:
        monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", raw)

    assert config.rate_limit_per_minute() == expected


# ==============================================================================
# Database settings
# ==============================================================================


def test_database_url_required() -> None:
    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        db_config.database_url()


def test_database_url_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://u:p@db/catalog")

    assert db_config.database_url() == "postgresql+psycopg://u:p@db/catalog"


def test_pool_defaults() -> None:
    assert db_config.pool_size() == 10
    assert db_config.max_overflow() == 20
    assert db_config.pool_recycle_seconds() == 3600
    assert db_config.pool_timeout_seconds() == 30


def test_pool_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_POOL_SIZE", "5")
    monkeypatch.setenv("DB_MAX_OVERFLOW", "0")
    monkeypatch.setenv("DB_POOL_RECYCLE_SECONDS", "60")
    monkeypatch.setenv("DB_POOL_TIMEOUT_SECONDS", "3")

    assert db_config.pool_size() == 5
    assert db_config.max_overflow() == 0
    assert db_config.pool_recycle_seconds() == 60
    assert db_config.pool_timeout_seconds() == 3
