from laundry.domain.entities.cart import NegativeQuantityError  # noqa: F401


class UnknownCatalogItemError(KeyError):
    """Raised when a cart is asked to hold an item the catalog does not list."""
    pass


class UnknownTimeSlotError(ValueError):
    """Raised when a pickup slot label is not one of the offered slots."""
    pass


class BookingLockedError(RuntimeError):
    """Raised when a booking session is changed while submitting or after submission."""
    pass


class OrderGatewayError(RuntimeError):
    """Raised when the order backend fails (network errors, bad responses)."""
    pass


class OrderNotFoundError(LookupError):
    """Raised when the order backend has no record for an order id."""
    pass
