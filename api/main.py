"""
FastAPI application for the design catalog.

This module provides HTTP endpoints for checking a new design name against the
existing designs and for adding, renaming, merging and deleting designs.
"""

from typing import List

from fastapi import Depends, FastAPI, HTTPException, Response, status

from design_core import models
from design_core.registry import (
    DesignStore,
    DesignStoreError,
    DesignValidationError,
    add_design,
    delete_design,
    edit_design,
    replace_design,
)
from design_core.similarity import evaluate
from src.config import get_settings
from src.logger import exception

app = FastAPI(
    title="Design Catalog API",
    description="API for duplicate-checked maintenance of textile designs",
    version="1.0.0"
)


def get_design_store() -> DesignStore:
    """Store dependency; overridden in tests."""
    # Imported here so the API can start without Supabase credentials
    from src.db import SupabaseDesignStore

    return SupabaseDesignStore()


def _store_failure(e: DesignStoreError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/designs/check", response_model=models.SimilarityVerdict)
def check_design(
    request: models.DesignCheckRequest,
    store: DesignStore = Depends(get_design_store),
) -> models.SimilarityVerdict:
    """
    Report numeric duplicates and similar names for a candidate without inserting it.
    """
    if not request.candidate.strip():
        raise HTTPException(status_code=422, detail="Design name is required")

    try:
        catalog = request.catalog if request.catalog is not None else store.list_titles()
    except DesignStoreError as e:
        raise _store_failure(e)

    return evaluate(
        request.candidate.strip(),
        catalog,
        threshold=get_settings().similarity_threshold,
    )


@app.get("/designs", response_model=List[str])
def list_designs(store: DesignStore = Depends(get_design_store)) -> List[str]:
    try:
        return store.list_titles()
    except DesignStoreError as e:
        raise _store_failure(e)


@app.post("/designs", response_model=models.AddDesignResult, status_code=status.HTTP_201_CREATED)
def create_design(
    request: models.DesignCreateRequest,
    store: DesignStore = Depends(get_design_store),
) -> models.AddDesignResult:
    """
    Add a design.

    When the name looks like a duplicate and `confirm` is false, nothing is
    inserted and a 409 is returned carrying the verdict and the questions the
    client should put to the user before retrying with `confirm: true`.
    """
    try:
        result = add_design(request.title, store, confirm=lambda _message: request.confirm)
    except DesignValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except DesignStoreError as e:
        raise _store_failure(e)
    except Exception as e:
        exception("Unexpected error adding design", exc=e, title=request.title)
        raise HTTPException(status_code=500, detail=f"Error adding design: {str(e)}")

    if result.status == "cancelled":
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": "Design may already exist; resend with confirm=true to add it anyway",
                "prompts": result.prompts,
                "verdict": result.verdict.model_dump(),
            },
        )
    return result


@app.put("/designs/{design_id}", response_model=models.Design)
def update_design(
    design_id: int,
    request: models.DesignUpdateRequest,
    store: DesignStore = Depends(get_design_store),
) -> models.Design:
    try:
        return edit_design(design_id, request.title, store)
    except DesignValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except DesignStoreError as e:
        raise _store_failure(e)


@app.delete("/designs/{design_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_design(design_id: int, store: DesignStore = Depends(get_design_store)) -> Response:
    try:
        delete_design(design_id, store)
    except DesignStoreError as e:
        raise _store_failure(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.post("/designs/replace")
def merge_designs(
    request: models.DesignReplaceRequest,
    store: DesignStore = Depends(get_design_store),
):
    """Replace every use of old_title with new_title and delete old_title."""
    try:
        replace_design(request.old_title, request.new_title, store)
    except DesignValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except DesignStoreError as e:
        raise _store_failure(e)
    return {
        "status": "replaced",
        "old_title": request.old_title,
        "new_title": request.new_title,
    }
