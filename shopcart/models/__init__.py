from shopcart.models.item import Item

__all__ = ["Item"]
