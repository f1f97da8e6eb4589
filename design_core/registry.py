"""
Workflows for maintaining the design catalog.

Adding a design runs the similarity check first and asks the user, through a
caller-supplied confirm callback, before inserting a possible duplicate. The
storage layer does not enforce unique titles, so this check plus the user's
answer is the only guard against duplicates.
"""

from typing import Callable, List, Optional, Protocol, Sequence

from design_core.models import AddDesignResult, Design, SimilarityVerdict
from design_core.similarity import evaluate
from src.config import get_settings
from src.logger import info

ConfirmCallback = Callable[[str], bool]


class DesignError(Exception):
    """Base class for design catalog errors."""


class DesignValidationError(DesignError):
    """The caller supplied an unusable design name or combination."""


class DesignStoreError(DesignError):
    """The persistence backend failed."""


class DesignStore(Protocol):
    """Persistence collaborator for design rows."""

    def list_titles(self) -> List[str]:
        ...

    def insert(self, title: str) -> Design:
        ...

    def update_title(self, design_id: int, title: str) -> Design:
        ...

    def delete(self, design_id: int) -> None:
        ...

    def replace(self, old_title: str, new_title: str) -> None:
        ...


def normalize_design_title(title: str) -> str:
    """Trim and upper-case a design name, rejecting blank input."""
    normalized = title.strip().upper()
    if not normalized:
        raise DesignValidationError("Design name is required")
    return normalized


def numeric_duplicate_prompt(verdict: SimilarityVerdict) -> str:
    return (
        f"A design with number {verdict.design_number} already exists. "
        "Do you want to add this design anyway?"
    )


def similar_designs_prompt(verdict: SimilarityVerdict) -> str:
    listed = ", ".join(
        f"{title} ({verdict.similarity_scores.get(title, 0.0):.1f}%)"
        for title in verdict.similar_matches
    )
    return f"Similar designs already exist: {listed}. Do you want to add this design anyway?"


def add_design(
    title: str,
    store: DesignStore,
    confirm: ConfirmCallback,
    catalog: Optional[Sequence[str]] = None,
) -> AddDesignResult:
    """
    Add a design after checking it against the existing catalog.

    The user is asked once for a numeric duplicate and once for similar names;
    declining either prompt cancels the insert.

    Args:
        title: Design name as typed by the user.
        store: Persistence backend.
        confirm: Receives a question and returns the user's yes/no answer.
        catalog: Snapshot of existing names; fetched from the store when omitted.

    Returns:
        AddDesignResult: "added" with the stored design, or "cancelled".

    Raises:
        DesignValidationError: If the name is blank.
        DesignStoreError: If reading the catalog or inserting fails.
    """
    normalized = normalize_design_title(title)
    candidate = title.strip()

    if catalog is None:
        catalog = store.list_titles()

    verdict = evaluate(candidate, catalog, threshold=get_settings().similarity_threshold)

    prompts: List[str] = []
    questions = []
    if verdict.is_numeric_duplicate:
        questions.append(numeric_duplicate_prompt(verdict))
    if verdict.similar_matches:
        questions.append(similar_designs_prompt(verdict))

    for question in questions:
        prompts.append(question)
        if not confirm(question):
            info("Design insert cancelled by user", title=normalized)
            return AddDesignResult(status="cancelled", verdict=verdict, prompts=prompts)

    design = store.insert(normalized)
    info("Design added", title=design.title, design_id=design.id, prompted=len(prompts))
    return AddDesignResult(status="added", design=design, verdict=verdict, prompts=prompts)


def edit_design(design_id: int, title: str, store: DesignStore) -> Design:
    """Rename a design; the new name is normalized like a new design."""
    design = store.update_title(design_id, normalize_design_title(title))
    info("Design updated", design_id=design_id, title=design.title)
    return design


def replace_design(old_title: str, new_title: str, store: DesignStore) -> None:
    """
    Merge one design into another.

    Every record referencing ``old_title`` is moved to ``new_title`` and the old
    design is deleted, by the backend's replace procedure.

    Raises:
        DesignValidationError: If either title is blank or both are the same design.
    """
    if not old_title.strip() or not new_title.strip():
        raise DesignValidationError("Please select exactly two designs")
    if old_title == new_title:
        raise DesignValidationError("Cannot replace a design with itself")

    store.replace(old_title, new_title)
    info("Design replaced", old_title=old_title, new_title=new_title)


def delete_design(design_id: int, store: DesignStore) -> None:
    store.delete(design_id)
    info("Design deleted", design_id=design_id)
