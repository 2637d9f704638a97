import os
from itertools import count

from dotenv import load_dotenv
from flask import Flask, render_template, jsonify

from applog import get_logger
from shop import Shop, Transfer

# Load env vars
load_dotenv()
PORT = int(os.getenv("PORT", "4242"))
DEBUG = os.getenv("FLASK_DEBUG", "0") == "1"

logger = get_logger(__name__)

# Test catalog: (name, price, stock)
PRODUCTS = [
    ("Milk", 200, 3),
    ("Table", 50, 2),
    ("Hammer", 80, 5),
    ("Fancy vase", 1223, 1),
]


class HandleMap:
    """Display handles for one side of the page, kept apart from the entries."""

    def __init__(self, side):
        self.side = side
        self._serial = count()
        self._by_id = {}
        self._by_handle = {}

    def register(self, item_id):
        handle = f"{self.side}-{next(self._serial)}"
        self._by_id[item_id] = handle
        self._by_handle[handle] = item_id
        return handle

    def handle_for(self, item_id):
        return self._by_id.get(item_id)

    def item_id_for(self, handle):
        return self._by_handle.get(handle)

    def release(self, item_id):
        handle = self._by_id.pop(item_id, None)
        if handle is not None:
            del self._by_handle[handle]
        return handle


def _caption(entry, handles):
    return {"handle": handles.handle_for(entry.item_id), "caption": entry.describe()}


def create_app(products=None, config=None):
    app = Flask(__name__, template_folder="Templates")
    if config:
        app.config.update(config)

    shop = Shop()
    shop.seed(PRODUCTS if products is None else products)

    handles = {"store": HandleMap("store"), "cart": HandleMap("cart")}
    for entry in shop.store:
        handles["store"].register(entry.item_id)

    app.extensions["toyshop"] = {"shop": shop, "handles": handles}
    logger.info("Shop ready with %d items", len(shop.store))

    @app.route("/")
    def index():
        return render_template(
            "index.html",
            store=[_caption(e, handles["store"]) for e in shop.store],
            cart=[_caption(e, handles["cart"]) for e in shop.cart],
            total=shop.total_display(),
        )

    @app.route("/state")
    def state():
        return jsonify({
            "store": [_caption(e, handles["store"]) for e in shop.store],
            "cart": [_caption(e, handles["cart"]) for e in shop.cart],
            "total": shop.total,
        })

    @app.route("/store/<handle>", methods=["POST"])
    def store_entry_activated(handle):
        store_entry = shop.store.find_by_handle(handle, handles["store"])
        if store_entry is None:
            return jsonify({"error": f"Unknown store entry {handle}"}), 404

        result = shop.move_to_cart(store_entry.item_id)
        created = []
        cart_entry = shop.cart.find_by_id(store_entry.item_id)
        if cart_entry is not None and handles["cart"].handle_for(cart_entry.item_id) is None:
            handles["cart"].register(cart_entry.item_id)
            created.append(_caption(cart_entry, handles["cart"]))

        updated = [_caption(store_entry, handles["store"])]
        if cart_entry is not None and not created:
            updated.append(_caption(cart_entry, handles["cart"]))

        return jsonify({
            "moved": result.moved,
            "result": result.value,
            "updated": updated,
            "created": created,
            "removed": [],
            "total": shop.total_display(),
        })

    @app.route("/cart/<handle>", methods=["POST"])
    def cart_entry_activated(handle):
        cart_entry = shop.cart.find_by_handle(handle, handles["cart"])
        if cart_entry is None:
            return jsonify({"error": f"Unknown cart entry {handle}"}), 404

        result = shop.move_to_store(cart_entry.item_id)
        if result is Transfer.NOT_FOUND:
            return jsonify({"error": f"Item {cart_entry.item_id} is not in the store"}), 404

        updated, removed = [], []
        store_entry = shop.store.find_by_id(cart_entry.item_id)
        updated.append(_caption(store_entry, handles["store"]))
        if result is Transfer.REMOVED:
            removed.append(handles["cart"].release(cart_entry.item_id))
        else:
            updated.append(_caption(cart_entry, handles["cart"]))

        return jsonify({
            "moved": result.moved,
            "result": result.value,
            "updated": updated,
            "created": [],
            "removed": removed,
            "total": shop.total_display(),
        })

    return app


if __name__ == "__main__":
    # one click is handled completely before the next one
    create_app().run(port=PORT, debug=DEBUG, threaded=False)
