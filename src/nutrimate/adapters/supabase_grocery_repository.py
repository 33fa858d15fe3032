"""Supabase implementation for grocery lists."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from nutrimate.domain.grocery import GroceryList, Ingredient
from nutrimate.services.grocery import GroceryRepository


@dataclass
class SupabaseGroceryRepository(GroceryRepository):
    """Supabase-backed repository for grocery lists and items."""

    client: Client

    def get_list(self, user_id: UUID) -> GroceryList | None:
        """Return the user's grocery list, if present."""
        response = (
            self.client.table("grocery_lists")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_list(response.data[0])

    def create_list(self, user_id: UUID, name: str) -> GroceryList:
        """Create an empty grocery list."""
        response = (
            self.client.table("grocery_lists")
            .insert({"user_id": str(user_id), "name": name})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create grocery list")
        return _parse_list(response.data[0])

    def list_items(self, list_id: UUID) -> list[Ingredient]:
        """Return the list's items, newest first."""
        response = (
            self.client.table("grocery_list_items")
            .select("*")
            .eq("grocery_list_id", str(list_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def insert_items(self, list_id: UUID, items: list[Ingredient]) -> list[Ingredient]:
        """Insert items and return the stored rows."""
        rows = [
            {
                "id": str(item.id),
                "grocery_list_id": str(list_id),
                "recipe_id": str(item.recipe_id) if item.recipe_id else None,
                "name": item.name,
                "quantity": item.quantity,
                "unit": item.unit,
                "category": item.category,
                "source_recipes": list(item.source_recipes),
                "is_checked": item.checked,
            }
            for item in items
        ]
        response = self.client.table("grocery_list_items").insert(rows).execute()
        if not response.data:
            raise RuntimeError("Failed to insert grocery list items")
        self._touch_list(list_id)
        return [_parse_item(row) for row in response.data]

    def update_item(
        self, item_id: UUID, payload: dict[str, object]
    ) -> Ingredient | None:
        """Update an item and return it."""
        row = dict(payload)
        if "checked" in row:
            row["is_checked"] = row.pop("checked")
        row["updated_at"] = datetime.now(tz=UTC).isoformat()
        response = (
            self.client.table("grocery_list_items")
            .update(row)
            .eq("id", str(item_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def delete_item(self, item_id: UUID) -> None:
        """Delete an item by id."""
        self.client.table("grocery_list_items").delete().eq(
            "id", str(item_id)
        ).execute()

    def delete_checked(self, list_id: UUID) -> int:
        """Delete the list's checked items."""
        response = (
            self.client.table("grocery_list_items")
            .delete()
            .eq("grocery_list_id", str(list_id))
            .eq("is_checked", True)
            .execute()
        )
        return len(response.data or [])

    def _touch_list(self, list_id: UUID) -> None:
        self.client.table("grocery_lists").update(
            {"updated_at": datetime.now(tz=UTC).isoformat()}
        ).eq("id", str(list_id)).execute()


def _parse_list(row: dict[str, object]) -> GroceryList:
    """Parse a grocery list row into a domain model."""
    updated_raw = row.get("updated_at")
    return GroceryList(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        name=str(row.get("name", "")),
        updated_at=(
            datetime.fromisoformat(updated_raw)
            if isinstance(updated_raw, str) and updated_raw
            else None
        ),
    )


def _parse_item(row: dict[str, object]) -> Ingredient:
    """Parse a grocery list item row into a domain model."""
    recipe_raw = row.get("recipe_id")
    return Ingredient(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        quantity=row.get("quantity"),
        unit=row.get("unit"),
        source_recipes=tuple(row.get("source_recipes") or ()),
        checked=bool(row.get("is_checked", False)),
        recipe_id=UUID(recipe_raw) if isinstance(recipe_raw, str) else None,
        category=row.get("category"),
    )
