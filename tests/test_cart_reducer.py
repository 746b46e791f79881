"""Cart reducer tests."""

from shopper.cart.reducer import (
    AddItem,
    CartLineItem,
    CartState,
    ClearCart,
    RemoveItem,
    SetCart,
    UpdateQuantity,
    apply,
    total_price,
)


def line(item_id: str = "a", price: float = 10.0, stock=None, quantity=None) -> CartLineItem:
    return CartLineItem(id=item_id, name=f"Item {item_id}", price=price, stock=stock, quantity=quantity)


class TestAddItem:
    """AddItem tests."""

    def test_add_new_line(self) -> None:
        """A new id is appended with the requested quantity."""
        state = apply(CartState(), AddItem(line("a", stock=3), 2))

        assert len(state.items) == 1
        assert state.items[0].quantity == 2

    def test_add_existing_line_increments(self) -> None:
        """Adding an existing id adds to its quantity."""
        state = apply(CartState(), AddItem(line("a", stock=10), 2))
        state = apply(state, AddItem(line("a", stock=10), 3))

        assert len(state.items) == 1
        assert state.items[0].quantity == 5

    def test_add_over_stock_is_rejected(self) -> None:
        """2 + 2 > 3 leaves the cart exactly as it was."""
        state = apply(CartState(), AddItem(line("a", stock=3), 2))
        after = apply(state, AddItem(line("a", stock=3), 2))

        assert after is state
        assert after.items[0].quantity == 2

    def test_new_line_over_stock_is_rejected(self) -> None:
        """A first add larger than stock is a no-op."""
        state = CartState()

        assert apply(state, AddItem(line("a", stock=3), 4)) is state

    def test_existing_line_stock_governs(self) -> None:
        """The stored line's stock is checked, not the incoming one."""
        state = apply(CartState(), AddItem(line("a", stock=3), 3))
        after = apply(state, AddItem(line("a", stock=100), 1))

        assert after is state

    def test_zero_stock_means_unlimited(self) -> None:
        """Stock of 0 or None puts no limit on quantity."""
        state = apply(CartState(), AddItem(line("a", stock=0), 50))
        state = apply(state, AddItem(line("b"), 70))

        assert [i.quantity for i in state.items] == [50, 70]

    def test_existing_line_without_quantity(self) -> None:
        """A line with no quantity counts as zero."""
        state = CartState(items=(line("a", stock=2),))
        after = apply(state, AddItem(line("a", stock=2), 2))

        assert after.items[0].quantity == 2

    def test_other_fields_untouched(self) -> None:
        """Incrementing keeps the stored line's name and price."""
        state = apply(CartState(), AddItem(line("a", price=10.0), 1))
        after = apply(state, AddItem(CartLineItem(id="a", name="Renamed", price=99.0), 1))

        assert after.items[0].name == "Item a"
        assert after.items[0].price == 10.0

    def test_quantity_never_exceeds_stock(self) -> None:
        """Any sequence of adds stays within stock."""
        state = CartState()
        for quantity in [1, 2, 1, 3, 1, 1, 2]:
            state = apply(state, AddItem(line("a", stock=4), quantity))
            assert state.items[0].quantity <= 4

        assert state.items[0].quantity == 4

    def test_insertion_order_kept(self) -> None:
        """Lines keep the order they were first added in."""
        state = CartState()
        for item_id in ["c", "a", "b"]:
            state = apply(state, AddItem(line(item_id), 1))
        state = apply(state, AddItem(line("a"), 1))

        assert [i.id for i in state.items] == ["c", "a", "b"]

    def test_zero_quantity_is_rejected(self) -> None:
        """Adding zero units never creates a line."""
        state = CartState()

        assert apply(state, AddItem(line("a", stock=3), 0)) is state

    def test_negative_quantity_is_rejected(self) -> None:
        """A negative add cannot drive an existing line to zero or below."""
        state = apply(CartState(), AddItem(line("a"), 2))

        after = apply(state, AddItem(line("a"), -3))

        assert after is state
        assert after.items[0].quantity == 2


class TestRemoveItem:
    """RemoveItem tests."""

    def test_remove(self) -> None:
        """The matching line is removed."""
        state = CartState(items=(line("a", quantity=1), line("b", quantity=1)))

        assert [i.id for i in apply(state, RemoveItem("a")).items] == ["b"]

    def test_remove_absent(self) -> None:
        """Removing an unknown id leaves the lines as they were."""
        state = CartState(items=(line("a", quantity=1),))

        assert apply(state, RemoveItem("zzz")) == state


class TestUpdateQuantity:
    """UpdateQuantity tests, including the increase rule that does not re-check stock."""

    def test_zero_removes(self) -> None:
        """Setting quantity 0 removes the line whatever its stock."""
        state = CartState(items=(line("a", stock=3, quantity=3),))

        assert apply(state, UpdateQuantity("a", 0)).items == ()

    def test_negative_removes(self) -> None:
        state = CartState(items=(line("a", quantity=2),))

        assert apply(state, UpdateQuantity("a", -1)).items == ()

    def test_decrease_always_allowed(self) -> None:
        """A decrease is applied even when the line is at stock."""
        state = CartState(items=(line("a", stock=3, quantity=3),))

        assert apply(state, UpdateQuantity("a", 1)).items[0].quantity == 1

    def test_increase_below_stock_is_not_capped(self) -> None:
        """Below stock, the requested quantity is set without checking it against stock."""
        state = CartState(items=(line("a", stock=3, quantity=3),))
        state = apply(state, UpdateQuantity("a", 1))
        state = apply(state, UpdateQuantity("a", 5))

        assert state.items[0].quantity == 5

    def test_increase_at_stock_is_rejected(self) -> None:
        """Once a line is at its stock, increases are ignored."""
        state = CartState(items=(line("a", stock=3, quantity=3),))

        assert apply(state, UpdateQuantity("a", 4)) is state

    def test_increase_without_stock_is_rejected(self) -> None:
        """Lines with no stock limit cannot be increased through an update."""
        state = CartState(items=(line("a", quantity=2),))

        assert apply(state, UpdateQuantity("a", 3)) is state

    def test_same_quantity_at_stock_is_noop(self) -> None:
        state = CartState(items=(line("a", stock=2, quantity=2),))

        assert apply(state, UpdateQuantity("a", 2)) is state

    def test_absent_line(self) -> None:
        """Updating an unknown id changes nothing."""
        state = CartState(items=(line("a", stock=3, quantity=1),))

        assert apply(state, UpdateQuantity("b", 2)) is state


class TestClearAndSet:
    """ClearCart and SetCart tests."""

    def test_clear(self) -> None:
        """Clearing always gives an empty cart."""
        state = CartState(items=(line("a", quantity=1), line("b", quantity=2)))

        assert apply(state, ClearCart()) == CartState(items=())
        assert apply(CartState(), ClearCart()) == CartState(items=())

    def test_set_replaces_without_validation(self) -> None:
        """SetCart takes the given lines as they are."""
        state = CartState(items=(line("a", quantity=1),))
        replacement = (line("x", stock=1, quantity=9),)

        assert apply(state, SetCart(replacement)).items == replacement


class TestTotalPrice:
    """Total price tests."""

    def test_total(self) -> None:
        state = CartState(items=(line("a", price=10.0, quantity=2), line("b", price=5.0, quantity=1)))

        assert total_price(state) == 25.0

    def test_total_skips_removed_lines(self) -> None:
        """Zero-quantity lines are never stored, so only the first line counts."""
        state = apply(CartState(), AddItem(line("a", price=10.0), 2))
        state = apply(state, AddItem(line("b", price=5.0), 1))
        state = apply(state, UpdateQuantity("b", 0))

        assert total_price(state) == 20.0

    def test_total_empty(self) -> None:
        assert total_price(CartState()) == 0
