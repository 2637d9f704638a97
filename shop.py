from enum import Enum

from applog import get_logger
from models import Collection

logger = get_logger(__name__)

TOTAL_LABEL = "Cart total: "


class Transfer(Enum):
    MOVED = "moved"
    REMOVED = "removed"  # last unit left the cart, cart entry destroyed
    OUT_OF_STOCK = "out_of_stock"
    NOT_FOUND = "not_found"

    @property
    def moved(self):
        return self in (Transfer.MOVED, Transfer.REMOVED)


class Shop:
    """
    Store and cart for one shopper.

    Every transfer moves exactly one unit and adjusts ``total`` by the unit
    price, so ``total`` always equals the sum of price * quantity over the cart.
    """

    def __init__(self):
        self.store = Collection()
        self.cart = Collection()
        self.total = 0

    def add_item(self, name, price, stock, item_id=None):
        return self.store.add(name, price, stock, item_id)

    def seed(self, products):
        for name, price, stock in products:
            self.add_item(name, price, stock)

    def move_to_cart(self, item_id) -> Transfer:
        store_entry = self.store.find_by_id(item_id)
        if store_entry is None:
            logger.info("Item %s is not in the store", item_id)
            return Transfer.NOT_FOUND
        if store_entry.quantity <= 0:
            logger.info("Item %s is out of stock", item_id)
            return Transfer.OUT_OF_STOCK

        cart_entry = self.cart.find_by_id(item_id)
        if cart_entry is None:
            cart_entry = self.cart.add(store_entry.name, store_entry.price, 0, store_entry.item_id)

        store_entry.quantity -= 1
        cart_entry.quantity += 1
        self.total += store_entry.price

        logger.debug("Moved one %s to cart (cart=%d, store=%d)",
                     store_entry.name, cart_entry.quantity, store_entry.quantity)
        return Transfer.MOVED

    def move_to_store(self, item_id) -> Transfer:
        cart_entry = self.cart.find_by_id(item_id)
        store_entry = self.store.find_by_id(item_id)
        if cart_entry is None or store_entry is None:
            logger.info("Item %s is not in the cart", item_id)
            return Transfer.NOT_FOUND

        # no ceiling on the store side, it only gets back what it gave out
        cart_entry.quantity -= 1
        store_entry.quantity += 1
        self.total -= store_entry.price

        logger.debug("Moved one %s to store (cart=%d, store=%d)",
                     store_entry.name, cart_entry.quantity, store_entry.quantity)

        if cart_entry.quantity == 0:
            self.cart.remove_by_id(item_id)
            return Transfer.REMOVED
        return Transfer.MOVED

    def recompute_total(self):
        return sum(entry.price * entry.quantity for entry in self.cart)

    def total_display(self):
        return TOTAL_LABEL + str(self.total)
