"""Unit tests for SQL literal masking."""

import pytest

from reqidlog.redaction import mask_literals


def test_mask_literals_replaces_numbers_and_strings() -> None:
    masked = mask_literals("SELECT * FROM users WHERE id = 5 AND name = 'bob'")
    assert "5" not in masked
    assert "'bob'" not in masked
    assert masked.count("?") == 2
    assert masked.startswith("SELECT")


def test_mask_literals_keeps_placeholders_and_identifiers() -> None:
    masked = mask_literals("UPDATE accounts SET balance = 100 WHERE owner = ?")
    assert "accounts" in masked
    assert "balance" in masked
    assert masked.count("?") == 2


def test_mask_literals_with_dialect() -> None:
    masked = mask_literals("SELECT name FROM users WHERE age > 30 LIMIT 10", dialect="sqlite")
    assert "30" not in masked
    assert "10" not in masked


@pytest.mark.parametrize("sql", ["", "   "])
def test_mask_literals_blank_passthrough(sql: str) -> None:
    assert mask_literals(sql) == sql
