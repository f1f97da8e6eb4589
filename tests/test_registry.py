"""Tests for the design catalog workflows."""

from typing import List

import pytest

from design_core.registry import (
    DesignStoreError,
    DesignValidationError,
    add_design,
    delete_design,
    edit_design,
    normalize_design_title,
    replace_design,
)
from tests.conftest import InMemoryDesignStore


class RecordingConfirm:
    """Confirm callback that answers from a script and records the questions."""

    def __init__(self, *answers: bool) -> None:
        self.answers = list(answers)
        self.questions: List[str] = []

    def __call__(self, message: str) -> bool:
        self.questions.append(message)
        return self.answers.pop(0)


# ---- Title normalization ----

@pytest.mark.parametrize(
    "title, expected",
    [
        ("rosegold", "ROSEGOLD"),
        ("  Peacock  ", "PEACOCK"),
        ("101", "101"),
    ],
)
def test_normalize_design_title(title: str, expected: str) -> None:
    assert normalize_design_title(title) == expected


@pytest.mark.parametrize("title", ["", "   ", "\t\n"], ids=["empty", "spaces", "whitespace"])
def test_normalize_rejects_blank(title: str) -> None:
    with pytest.raises(DesignValidationError, match="Design name is required"):
        normalize_design_title(title)


# ---- Adding designs ----

def test_add_unique_design_without_prompting(store: InMemoryDesignStore) -> None:
    confirm = RecordingConfirm()
    result = add_design("marigold", store, confirm)

    assert result.status == "added"
    assert result.design.title == "MARIGOLD"
    assert result.prompts == []
    assert confirm.questions == []
    assert "MARIGOLD" in store.list_titles()


def test_add_numeric_duplicate_declined(store: InMemoryDesignStore) -> None:
    confirm = RecordingConfirm(False)
    result = add_design("101", store, confirm)

    assert result.status == "cancelled"
    assert result.design is None
    assert result.verdict.conflicting_numeric_matches == ["101"]
    assert confirm.questions == [
        "A design with number 101 already exists. Do you want to add this design anyway?"
    ]
    assert store.list_titles().count("101") == 1


def test_add_numeric_duplicate_confirmed(store: InMemoryDesignStore) -> None:
    result = add_design("101", store, RecordingConfirm(True))

    assert result.status == "added"
    # Storage keeps both rows; uniqueness is only advisory
    assert store.list_titles().count("101") == 2


def test_add_similar_design_declined(store: InMemoryDesignStore) -> None:
    confirm = RecordingConfirm(False)
    result = add_design("rosgold", store, confirm)

    assert result.status == "cancelled"
    assert result.verdict.similar_matches == ["ROSEGOLD"]
    assert len(confirm.questions) == 1
    assert "ROSEGOLD (87.5%)" in confirm.questions[0]
    assert "ROSGOLD" not in store.list_titles()


def test_add_similar_design_confirmed(store: InMemoryDesignStore) -> None:
    result = add_design("rosgold", store, RecordingConfirm(True))

    assert result.status == "added"
    assert result.design.title == "ROSGOLD"
    assert len(result.prompts) == 1


def test_both_prompts_asked_in_order() -> None:
    store = InMemoryDesignStore(["123A"])
    confirm = RecordingConfirm(True, False)
    result = add_design("123a", store, confirm)

    assert result.status == "cancelled"
    assert confirm.questions[0].startswith("A design with number 123 already exists")
    assert confirm.questions[1].startswith("Similar designs already exist: 123A (100.0%)")
    assert result.prompts == confirm.questions


def test_declining_first_prompt_skips_second() -> None:
    store = InMemoryDesignStore(["123A"])
    confirm = RecordingConfirm(False)
    result = add_design("123a", store, confirm)

    assert result.status == "cancelled"
    assert len(confirm.questions) == 1


def test_add_uses_given_catalog_snapshot(store: InMemoryDesignStore) -> None:
    confirm = RecordingConfirm()
    result = add_design("101", store, confirm, catalog=[])

    assert result.status == "added"
    assert confirm.questions == []


def test_add_blank_title_never_prompts(store: InMemoryDesignStore) -> None:
    confirm = RecordingConfirm()
    with pytest.raises(DesignValidationError):
        add_design("   ", store, confirm)
    assert confirm.questions == []


def test_add_propagates_store_failure() -> None:
    with pytest.raises(DesignStoreError):
        add_design("MARIGOLD", InMemoryDesignStore(fail=True), RecordingConfirm())


# ---- Editing, replacing, deleting ----

def test_edit_design_normalizes_title(store: InMemoryDesignStore) -> None:
    design = edit_design(3, " rose gold ", store)
    assert design.title == "ROSE GOLD"
    assert "ROSEGOLD" not in store.list_titles()


def test_edit_design_rejects_blank(store: InMemoryDesignStore) -> None:
    with pytest.raises(DesignValidationError):
        edit_design(3, "  ", store)


def test_replace_design(store: InMemoryDesignStore) -> None:
    replace_design("ROSEGOLD", "PEACOCK", store)
    assert store.replaced == [("ROSEGOLD", "PEACOCK")]
    assert "ROSEGOLD" not in store.list_titles()


@pytest.mark.parametrize(
    "old_title, new_title",
    [("ROSEGOLD", "ROSEGOLD"), ("", "PEACOCK"), ("ROSEGOLD", " ")],
    ids=["same", "missing_old", "missing_new"]
)
def test_replace_design_requires_two_designs(
    store: InMemoryDesignStore, old_title: str, new_title: str
) -> None:
    with pytest.raises(DesignValidationError):
        replace_design(old_title, new_title, store)
    assert store.replaced == []


def test_delete_design(store: InMemoryDesignStore) -> None:
    delete_design(1, store)
    assert "101" not in store.list_titles()
