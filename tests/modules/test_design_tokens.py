from __future__ import annotations

from collections.abc import Mapping

import pytest

from app.modules.design_tokens import DESIGN_TOKENS, freeze_tokens, token_group


def test_token_table_exposes_expected_categories() -> None:
    assert list(token_group(DESIGN_TOKENS, "colors", "primary"))[:3] == ["50", "100", "200"]
    assert set(token_group(DESIGN_TOKENS, "colors", "glass")) == {"light", "dark"}
    assert set(token_group(DESIGN_TOKENS, "colors", "border")) == {"light", "dark"}
    assert "base" in token_group(DESIGN_TOKENS, "typography", "fontSize")
    assert token_group(DESIGN_TOKENS, "spacing")["4"] == "16px"
    assert "whisper" in token_group(DESIGN_TOKENS, "shadows", "glass")
    assert "normal" in token_group(DESIGN_TOKENS, "animation", "duration")
    assert "glass" in token_group(DESIGN_TOKENS, "animation", "easing")


def test_token_table_cannot_be_mutated() -> None:
    with pytest.raises(TypeError):
        DESIGN_TOKENS["spacing"]["4"] = "17px"  # type: ignore[index]


def test_freeze_tokens_converts_nested_structures() -> None:
    frozen = freeze_tokens({"a": {"b": ["1", {"c": "2"}]}})

    assert isinstance(frozen, Mapping)
    assert frozen["a"]["b"][0] == "1"
    assert isinstance(frozen["a"]["b"], tuple)
    with pytest.raises(TypeError):
        frozen["a"]["b"][1]["c"] = "3"


def test_token_group_returns_empty_mapping_for_missing_paths() -> None:
    assert dict(token_group(DESIGN_TOKENS, "colors", "accent")) == {}
    assert dict(token_group(DESIGN_TOKENS, "spacing", "4", "deeper")) == {}
    assert dict(token_group({}, "spacing")) == {}
    assert dict(token_group(None, "spacing")) == {}
