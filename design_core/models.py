"""
Single source of truth (SSoT) for the data models of the design back office.

This module defines the Pydantic models shared by the similarity checker, the
design registry workflows, the API layer and the tests. They should not be
redeclared elsewhere in the codebase.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class SimilarityVerdict(BaseModel):
    """Result of checking one candidate design name against a catalog snapshot."""
    is_numeric_duplicate: bool = False
    conflicting_numeric_matches: List[str] = Field(
        default_factory=list,
        description="Existing designs whose leading integer equals the candidate's number.",
    )
    similar_matches: List[str] = Field(
        default_factory=list,
        description="Existing designs scoring above the similarity threshold, excluding the identical string.",
    )
    design_number: Optional[int] = Field(
        default=None,
        description="Parsed candidate number when the numeric pass was active.",
    )
    similarity_scores: Dict[str, float] = Field(
        default_factory=dict,
        description="Similarity percentage for each entry of similar_matches.",
    )

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicting_numeric_matches or self.similar_matches)


class Design(BaseModel):
    """A row of the designs table."""
    id: Optional[int] = None
    title: str


class DesignCheckRequest(BaseModel):
    """Request body for a dry-run similarity check."""
    candidate: str = Field(..., description="Design name as typed by the user")
    catalog: Optional[List[str]] = Field(
        default=None,
        description="Catalog snapshot to check against; the stored titles are used when omitted.",
    )


class DesignCreateRequest(BaseModel):
    """Request body for adding a design."""
    title: str
    confirm: bool = Field(
        default=False,
        description="Pre-answers the duplicate confirmation prompts with 'yes'.",
    )


class DesignUpdateRequest(BaseModel):
    title: str


class DesignReplaceRequest(BaseModel):
    """Merge request: every reference to old_title moves to new_title and old_title is deleted."""
    old_title: str
    new_title: str


AddStatus = Literal["added", "cancelled"]


class AddDesignResult(BaseModel):
    """Outcome of the add-design workflow."""
    status: AddStatus
    design: Optional[Design] = None
    verdict: SimilarityVerdict
    prompts: List[str] = Field(
        default_factory=list,
        description="Confirmation messages put to the user, in order.",
    )
