"""Resource namespaces for the DPD client."""

from .customers import Customers
from .products import Products
from .purchases import Purchases
from .storefronts import Storefronts
from .subscribers import Subscribers

__all__ = [
    "Customers",
    "Products",
    "Purchases",
    "Storefronts",
    "Subscribers",
]
