# [TESTER] v1

from __future__ import annotations

import pytest

from src.state.canonical import canonical_json_bytes, domain_sep_bytes, sha256_hex


def test_canonical_json_sorts_keys_without_whitespace() -> None:
    assert canonical_json_bytes({"b": 1, "a": [2, {"d": 3, "c": 4}]}) == b'{"a":[2,{"c":4,"d":3}],"b":1}'


def test_canonical_json_keeps_wide_integers_exact() -> None:
    value = 2**128 - 1
    assert canonical_json_bytes({"x": value}) == ('{"x":%d}' % value).encode("ascii")


@pytest.mark.parametrize("bad", [1.5, {"x": 0.0}, [1, 2.0]])
def test_canonical_json_rejects_floats(bad) -> None:
    with pytest.raises(TypeError, match="floats"):
        canonical_json_bytes(bad)


def test_canonical_json_rejects_non_str_keys() -> None:
    with pytest.raises(TypeError):
        canonical_json_bytes({1: "x"})


def test_canonical_json_rejects_surrogates() -> None:
    with pytest.raises(TypeError, match="surrogate"):
        canonical_json_bytes({"k": "\ud800"})


def test_sha256_hex_prefix() -> None:
    h = sha256_hex(b"")
    assert h == "0xe3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_domain_sep_bytes_shape() -> None:
    assert domain_sep_bytes("pool_snapshot", 1) == b"pairswap:pool_snapshot:v1\x00"


@pytest.mark.parametrize("label,version", [("", 1), ("a\x00b", 1), ("café", 1), ("ok", 0)])
def test_domain_sep_bytes_rejects_bad_input(label, version) -> None:
    with pytest.raises((TypeError, ValueError)):
        domain_sep_bytes(label, version)


def test_canonical_json_names_offending_path() -> None:
    with pytest.raises(TypeError, match=r"\$\.pool\.reserve_a"):
        canonical_json_bytes({"pool": {"reserve_a": 1.0}})


def test_canonical_json_rejects_unknown_types() -> None:
    with pytest.raises(TypeError, match="unsupported type"):
        canonical_json_bytes({"x": b"raw"})
