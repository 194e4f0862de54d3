"""
Restaurant and item lookups used when placing orders.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from foodorder_shared.errors import ItemNotFoundError, RestaurantNotFoundError
from foodorder_shared.models import Item, Restaurant
from foodorder_shared.repositories import ItemRepository, RestaurantRepository
from foodorder_shared.validation import is_blank


def find_restaurant(session: Session, restaurant_uuid: str | None) -> Restaurant:
    """
    Raises:
        RestaurantNotFoundError: RNF-002 empty id, RNF-001 unknown id.
    """
    if is_blank(restaurant_uuid):
        raise RestaurantNotFoundError("RNF-002")
    restaurant = RestaurantRepository(session).get_by_uuid(restaurant_uuid)
    if restaurant is None:
        raise RestaurantNotFoundError("RNF-001")
    return restaurant


def find_item(session: Session, item_uuid: str | None) -> Item:
    item = None if is_blank(item_uuid) else ItemRepository(session).get_by_uuid(item_uuid)
    if item is None:
        raise ItemNotFoundError("INF-001")
    return item
