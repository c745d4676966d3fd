"""Exceptions raised by the optional parts of the cart package."""


class CartError(Exception):
    """Base class for shopcart errors."""


class InvalidItemError(CartError, ValueError):
    """An item failed validation before being added to a cart."""


class CatalogError(CartError, ValueError):
    """The catalog workbook is missing a sheet or a required column."""
