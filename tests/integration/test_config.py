# [TESTER] v1

from __future__ import annotations

import pytest

from src.core.pool import DEFAULT_CONFIG, PoolConfig, ShareAnchor
from src.integration.config import config_to_dict, configure_logging, load_pool_config


def test_defaults_without_file_or_env() -> None:
    assert load_pool_config(environ={}) == DEFAULT_CONFIG


def test_yaml_file(tmp_path) -> None:
    path = tmp_path / "pool.yaml"
    path.write_text("fee_bps: 5\nshare_anchor: geometric_mean\namount_bits: 128\n", encoding="utf-8")
    cfg = load_pool_config(path, environ={})
    assert cfg == PoolConfig(fee_bps=5, share_anchor=ShareAnchor.GEOMETRIC_MEAN, amount_bits=128)


def test_empty_yaml_file_uses_defaults(tmp_path) -> None:
    path = tmp_path / "pool.yaml"
    path.write_text("", encoding="utf-8")
    assert load_pool_config(path, environ={}) == DEFAULT_CONFIG


def test_env_overrides_yaml(tmp_path) -> None:
    path = tmp_path / "pool.yaml"
    path.write_text("fee_bps: 5\n", encoding="utf-8")
    env = {"PAIRSWAP_FEE_BPS": "0", "PAIRSWAP_SHARE_ANCHOR": "SUM", "PAIRSWAP_AMOUNT_BITS": " 32 "}
    cfg = load_pool_config(path, environ=env)
    assert cfg == PoolConfig(fee_bps=0, share_anchor=ShareAnchor.SUM, amount_bits=32)


def test_blank_env_is_ignored() -> None:
    assert load_pool_config(environ={"PAIRSWAP_FEE_BPS": "  "}) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "env,match",
    [
        ({"PAIRSWAP_FEE_BPS": "abc"}, "must be an integer"),
        ({"PAIRSWAP_FEE_BPS": "10000"}, "must be in"),
        ({"PAIRSWAP_AMOUNT_BITS": "4"}, "must be in"),
        ({"PAIRSWAP_SHARE_ANCHOR": "median"}, "unsupported share_anchor"),
    ],
)
def test_invalid_env_fails_loudly(env, match) -> None:
    with pytest.raises(ValueError, match=match):
        load_pool_config(environ=env)


def test_unknown_yaml_key_rejected(tmp_path) -> None:
    path = tmp_path / "pool.yaml"
    path.write_text("fee: 5\n", encoding="utf-8")
    with pytest.raises(ValueError, match="unknown config keys: fee"):
        load_pool_config(path, environ={})


def test_non_mapping_yaml_rejected(tmp_path) -> None:
    path = tmp_path / "pool.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="must be a mapping"):
        load_pool_config(path, environ={})


def test_yaml_fee_must_be_int(tmp_path) -> None:
    path = tmp_path / "pool.yaml"
    path.write_text("fee_bps: 0.3\n", encoding="utf-8")
    with pytest.raises(ValueError, match="fee_bps must be an int"):
        load_pool_config(path, environ={})


def test_yaml_fee_out_of_range(tmp_path) -> None:
    path = tmp_path / "pool.yaml"
    path.write_text("fee_bps: 10000\n", encoding="utf-8")
    with pytest.raises(ValueError, match="fee_bps"):
        load_pool_config(path, environ={})


def test_config_to_dict() -> None:
    assert config_to_dict(DEFAULT_CONFIG) == {"amount_bits": 64, "fee_bps": 30, "share_anchor": "ASSET_A"}


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="unknown log level"):
        configure_logging("LOUD")
