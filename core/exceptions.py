class StorefrontError(Exception):
    """Base class for domain errors raised by the services layer."""


class CartConflictError(StorefrontError):
    """An item from a second restaurant was added to a non-empty cart."""

    def __init__(self, current_restaurant_id: str, incoming_restaurant_id: str):
        self.current_restaurant_id = current_restaurant_id
        self.incoming_restaurant_id = incoming_restaurant_id
        super().__init__(
            "You can only order from one restaurant at a time. "
            "Clear the cart to order from another restaurant."
        )


class BusinessRuleError(StorefrontError):
    """A request is well-formed but breaks a storefront rule."""


class InvalidStatusTransition(StorefrontError):
    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Order cannot move from '{current}' to '{requested}'")


class RatingError(StorefrontError):
    pass
