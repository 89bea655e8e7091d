from typing import List

from schemas.product import ORMBase


# One derived stock level for a product in a store
class InventoryItem(ORMBase):
    product_id: int
    product_name: str
    current_quantity: int


class StoreInventory(ORMBase):
    store_id: int
    inventory: List[InventoryItem]
