"""
Supabase connection management and the design store backed by it.

This module provides a reusable Supabase client configured from environment
variables, and `SupabaseDesignStore`, which reads and writes rows of the
designs table and calls the replace-design stored procedure.

Usage:
    from src.db import SupabaseDesignStore

    store = SupabaseDesignStore()
    titles = store.list_titles()
"""

from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError
from supabase import Client, create_client

from design_core.models import Design
from design_core.registry import DesignStoreError
from src.config import get_settings
from src.logger import get_logger, exception

logger = get_logger(__name__)

# Module-level client, reused for the lifetime of the function instance
_supabase: Optional[Client] = None


def get_supabase() -> Client:
    """
    Initializes and returns a Supabase client.

    The client is created only once per process.

    Raises:
        ValueError: If SUPABASE_URL or SUPABASE_KEY is not set.
        DesignStoreError: If the client cannot be created.

    Returns:
        A configured Supabase client instance.
    """
    global _supabase

    if _supabase:
        return _supabase

    settings = get_settings()
    if not all([settings.supabase_url, settings.supabase_key]):
        error_msg = "Missing required Supabase environment variables: SUPABASE_URL, SUPABASE_KEY"
        logger.error(error_msg)
        raise ValueError(error_msg)

    try:
        _supabase = create_client(settings.supabase_url, settings.supabase_key)
        logger.info("Successfully created Supabase client")
        return _supabase
    except Exception as e:
        exception("Failed to create Supabase client", exc=e)
        raise DesignStoreError(f"Failed to create Supabase client: {e}") from e


def _first_row(data: Any, action: str) -> Dict[str, Any]:
    if not data:
        raise DesignStoreError(f"Failed to {action}: no row returned")
    return data[0]


class SupabaseDesignStore:
    """
    Design store over the Supabase `designs` table.

    Args:
        client: Supabase client; the shared module client is used when omitted.
        table: Table name, defaults to the DESIGNS_TABLE setting.
        replace_rpc: Name of the stored procedure that merges two designs.
    """

    def __init__(
        self,
        client: Optional[Client] = None,
        table: Optional[str] = None,
        replace_rpc: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self._client = client
        self.table = table or settings.designs_table
        self.replace_rpc = replace_rpc or settings.replace_design_rpc

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase()
        return self._client

    def list_titles(self) -> List[str]:
        try:
            response = self.client.table(self.table).select("title").order("title").execute()
        except APIError as e:
            exception("Error fetching designs", exc=e)
            raise DesignStoreError("Failed to fetch designs") from e
        return [row["title"] for row in response.data or []]

    def insert(self, title: str) -> Design:
        try:
            response = self.client.table(self.table).insert({"title": title}).execute()
        except APIError as e:
            exception("Error adding design", exc=e, title=title)
            raise DesignStoreError("Failed to add design") from e
        return Design(**_first_row(response.data, "add design"))

    def update_title(self, design_id: int, title: str) -> Design:
        try:
            response = (
                self.client.table(self.table)
                .update({"title": title})
                .eq("id", design_id)
                .execute()
            )
        except APIError as e:
            exception("Error editing design", exc=e, design_id=design_id)
            raise DesignStoreError("Failed to edit design") from e
        return Design(**_first_row(response.data, "edit design"))

    def delete(self, design_id: int) -> None:
        try:
            self.client.table(self.table).delete().eq("id", design_id).execute()
        except APIError as e:
            exception("Error deleting design", exc=e, design_id=design_id)
            raise DesignStoreError("Failed to delete design") from e

    def replace(self, old_title: str, new_title: str) -> None:
        try:
            self.client.rpc(
                self.replace_rpc,
                {"old_design_name": old_title, "new_design_name": new_title},
            ).execute()
        except APIError as e:
            exception("Error replacing design", exc=e, old_title=old_title, new_title=new_title)
            raise DesignStoreError("Failed to replace design") from e
