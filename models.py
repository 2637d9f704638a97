from dataclasses import dataclass


class DuplicateEntryError(ValueError):
    pass


@dataclass
class Entry:
    item_id: int
    name: str
    price: float
    quantity: int = 0

    def describe(self):
        return f"{self.name} | {self.price} | {self.quantity}"


class Collection:
    """Ordered entries for one side of the shop, unique by item id."""

    def __init__(self):
        self.entries = []
        self._next_id = 0

    def add(self, name, price, quantity, item_id=None):
        if item_id is None:
            item_id = self._next_id
        elif item_id in self:
            raise DuplicateEntryError(f"Entry {item_id} already exists")

        # ids handed out automatically never repeat, even after removals
        self._next_id = max(self._next_id, item_id + 1)

        entry = Entry(item_id, name, price, quantity)
        self.entries.append(entry)
        return entry

    def find_by_id(self, item_id):
        for entry in self.entries:
            if entry.item_id == item_id:
                return entry
        return None

    def find_by_handle(self, handle, handles):
        item_id = handles.item_id_for(handle)
        if item_id is None:
            return None
        return self.find_by_id(item_id)

    def remove_by_id(self, item_id):
        for index, entry in enumerate(self.entries):
            if entry.item_id == item_id:
                return self.entries.pop(index)
        return None

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __contains__(self, item_id):
        return self.find_by_id(item_id) is not None
