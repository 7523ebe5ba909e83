"""
Inventory Management Application

Catalog store for the shop: electronics and accessories with tracked stock,
plus the synthetic "Service" products that cyber cafe sales point at.

BUSINESS LOGIC:
Physical items:
  - quantity >= 0, deducted by sales through one conditional UPDATE
  - status: 'IN_STOCK' while quantity > 0, otherwise 'OUT_OF_STOCK'

Services:
  - category = "Service", quantity pinned at 0, always 'IN_STOCK'
  - hidden from the inventory listing

USAGE:
    from inventory.models import Product
    from inventory import services

    mouse = Product.objects.create(name="Mouse", category="Accessories",
                                   quantity=10, unit_price=500)
    services.deduct_stock(mouse, 3)   # quantity -> 7
"""
