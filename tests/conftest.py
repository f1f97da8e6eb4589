"""Shared fixtures: an in-memory design store standing in for Supabase."""

from typing import List, Optional

import pytest

from design_core.models import Design
from design_core.registry import DesignStoreError


class InMemoryDesignStore:
    """Keeps design rows in a list; no uniqueness is enforced, like the real table."""

    def __init__(self, titles: Optional[List[str]] = None, fail: bool = False) -> None:
        self.rows: List[Design] = []
        self.replaced: List[tuple] = []
        self.fail = fail
        for title in titles or []:
            self.rows.append(Design(id=len(self.rows) + 1, title=title))

    def _check(self) -> None:
        if self.fail:
            raise DesignStoreError("Failed to reach design store")

    def list_titles(self) -> List[str]:
        self._check()
        return sorted(row.title for row in self.rows)

    def insert(self, title: str) -> Design:
        self._check()
        design = Design(id=max((row.id for row in self.rows), default=0) + 1, title=title)
        self.rows.append(design)
        return design

    def update_title(self, design_id: int, title: str) -> Design:
        self._check()
        for index, row in enumerate(self.rows):
            if row.id == design_id:
                self.rows[index] = Design(id=design_id, title=title)
                return self.rows[index]
        raise DesignStoreError("Failed to edit design: no row returned")

    def delete(self, design_id: int) -> None:
        self._check()
        self.rows = [row for row in self.rows if row.id != design_id]

    def replace(self, old_title: str, new_title: str) -> None:
        self._check()
        self.replaced.append((old_title, new_title))
        self.rows = [row for row in self.rows if row.title != old_title]


@pytest.fixture
def store() -> InMemoryDesignStore:
    return InMemoryDesignStore(["101", "205", "ROSEGOLD", "PEACOCK"])
