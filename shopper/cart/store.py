"""Per-session cart container around the reducer"""

from typing import Callable, Iterable

from .reducer import (
    AddItem,
    CartAction,
    CartLineItem,
    CartState,
    ClearCart,
    RemoveItem,
    SetCart,
    UpdateQuantity,
    apply,
    total_price,
)

CartListener = Callable[[CartState], None]


class CartStore:
    """
    Holds one shopper's cart for the lifetime of their session.

    Every operation is a reducer action applied synchronously. Listeners are
    called after each application that produced a new state, which is where
    a UI layer re-renders.
    """

    def __init__(self, items: Iterable[CartLineItem] = ()):
        self._state = CartState(items=tuple(items))
        self._listeners: list[CartListener] = []

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def items(self) -> list[CartLineItem]:
        return list(self._state.items)

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: CartAction) -> CartState:
        """Apply an action and notify listeners if the cart changed"""
        new_state = apply(self._state, action)
        if new_state is not self._state:
            self._state = new_state
            for listener in list(self._listeners):
                listener(new_state)
        return self._state

    def add_item(self, item: CartLineItem, quantity: int = 1) -> None:
        self.dispatch(AddItem(item=item, quantity_to_add=quantity))

    def remove_item(self, item_id: str) -> None:
        self.dispatch(RemoveItem(id=item_id))

    def update_quantity(self, item_id: str, quantity: int) -> None:
        self.dispatch(UpdateQuantity(id=item_id, quantity=quantity))

    def clear_cart(self) -> None:
        self.dispatch(ClearCart())

    def set_cart(self, items: Iterable[CartLineItem]) -> None:
        self.dispatch(SetCart(items=tuple(items)))

    def get_total_price(self) -> float:
        return total_price(self._state)
